"""Presenter protocol for output abstraction."""

from typing import Protocol

from word_lookup.models import LookupResult


class PresenterProtocol(Protocol):
    """Interface for presenting output to user (CLI, GUI, etc).

    Lets the same lookup flow drive different presentation layers.
    """

    def show_info(self, message: str) -> None:
        """Display an informational message.

        Args:
            message: The informational message to display
        """
        ...

    def show_error(self, message: str) -> None:
        """Display an error message.

        Args:
            message: The error message to display
        """
        ...

    def show_result(self, result: LookupResult) -> None:
        """Display a lookup result, whichever variant it is.

        Args:
            result: The result to display
        """
        ...
