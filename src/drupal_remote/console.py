"""Centralized terminal output for the drupal-remote CLI.

Key principle: stderr for status/progress, stdout for data.
"""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

# stderr console for status messages (success/error)
err_console = Console(stderr=True)

# stdout console for data output (tables, log entries)
out_console = Console()


def success(message: str, *, console: Console | None = None) -> None:
    """Print a success message (green checkmark) to stderr."""
    c = console or err_console
    c.print(f"[green]  ✓ {escape(message)}[/green]")


def error(message: str, *, console: Console | None = None) -> None:
    """Print an error message (red X) to stderr.

    Remote error messages are printed literally, brackets included.
    """
    c = console or err_console
    c.print(f"[red]  ✗ {escape(message)}[/red]")
