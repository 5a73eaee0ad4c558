"""Base class for cancellable worker threads."""

import threading

from PyQt6.QtCore import QThread, pyqtSignal


class CancellableWorker(QThread):
    """Base class for worker threads that support cancellation.

    Subclasses call check_cancelled() at checkpoints in run() and stop
    when it returns True. A blocking HTTP request cannot be interrupted,
    so cancellation only suppresses what happens after it.

    Uses threading.Event for thread-safe cancellation flag.
    """

    # Signal emitted when an error occurs during processing
    error = pyqtSignal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._cancel_event = threading.Event()

    def cancel(self) -> None:
        """Request cancellation of the worker."""
        self._cancel_event.set()

    @property
    def is_cancelled(self) -> bool:
        """Check if cancellation has been requested."""
        return self._cancel_event.is_set()

    def check_cancelled(self) -> bool:
        """Check if worker should stop processing.

        Returns:
            True if cancellation was requested
        """
        return self._cancel_event.is_set()
