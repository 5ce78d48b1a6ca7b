"""Tests for the console output module."""

import io

from rich.console import Console

from drupal_remote.console import error, success


class TestConsoleHelpers:
    """Tests for console helper functions."""

    def test_success_outputs_green_check(self) -> None:
        """Test success prints green checkmark to stderr."""
        buf = io.StringIO()
        test_console = Console(file=buf, stderr=True, no_color=True)
        success("Done", console=test_console)
        output = buf.getvalue()
        assert "Done" in output
        assert "✓" in output

    def test_error_outputs_red_x(self) -> None:
        """Test error prints red X to stderr."""
        buf = io.StringIO()
        test_console = Console(file=buf, stderr=True, no_color=True)
        error("Failed", console=test_console)
        output = buf.getvalue()
        assert "Failed" in output
        assert "✗" in output

    def test_error_prints_brackets_literally(self) -> None:
        """Remote messages containing [tags] are not treated as markup."""
        buf = io.StringIO()
        test_console = Console(file=buf, stderr=True, no_color=True)
        error("Field [title] is invalid", console=test_console)
        assert "Field [title] is invalid" in buf.getvalue()
