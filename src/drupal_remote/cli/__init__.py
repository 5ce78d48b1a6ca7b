"""Command-line interface for drupal_remote."""
