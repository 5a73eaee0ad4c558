"""GUI presenter implementation using Qt signals for thread-safe communication."""

from PyQt6.QtCore import QObject, pyqtSignal

from word_lookup.models import LookupResult


class GUIPresenter(QObject):
    """Thread-safe presenter using Qt signals.

    Implements PresenterProtocol through structural subtyping (duck typing).
    This avoids metaclass conflicts between QObject and Protocol metaclasses.

    Lookups finish on worker threads. Calling ``show_result`` from there
    emits a signal that Qt queues for the main GUI thread.
    """

    info_signal = pyqtSignal(str)
    error_signal = pyqtSignal(str)
    result_signal = pyqtSignal(object)  # LookupResult

    def __init__(self, parent=None):
        """Initialize the GUI presenter.

        Args:
            parent: Optional parent QObject
        """
        super().__init__(parent)

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        self.info_signal.emit(message)

    def show_error(self, message: str) -> None:
        """Display an error message."""
        self.error_signal.emit(message)

    def show_result(self, result: LookupResult) -> None:
        """Display a lookup result.

        Args:
            result: The result to display
        """
        self.result_signal.emit(result)
