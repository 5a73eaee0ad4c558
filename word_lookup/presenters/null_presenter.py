"""Null presenter for testing (no output)."""

from word_lookup.models import LookupResult


class NullPresenter:
    """Present output to nowhere (testing implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message (no-op)."""
        pass

    def show_error(self, message: str) -> None:
        """Display an error message (no-op)."""
        pass

    def show_result(self, result: LookupResult) -> None:
        """Display a lookup result (no-op)."""
        pass
