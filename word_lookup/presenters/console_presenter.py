"""Console presenter for CLI output."""

from word_lookup.models import LookupResult

from .rendering import render_result


class ConsolePresenter:
    """Present output to console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_result(self, result: LookupResult) -> None:
        """Display a lookup result."""
        print(render_result(result))
