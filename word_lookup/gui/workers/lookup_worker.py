"""Worker thread for dictionary lookups."""

from word_lookup.controllers import LookupController
from word_lookup.gui.workers.base_worker import CancellableWorker


class LookupWorkerThread(CancellableWorker):
    """Runs one LookupController.submit call off the GUI thread.

    The worker has no result signal of its own: the controller publishes
    the result to its listeners, and only if this lookup is still the
    latest. ``error`` is emitted for unexpected failures.
    """

    def __init__(self, controller: LookupController, word: str, parent=None):
        """Initialize the lookup worker thread.

        Args:
            controller: Controller that performs and classifies the lookup
            word: Raw query text
            parent: Optional parent QObject
        """
        super().__init__(parent)
        self.controller = controller
        self.word = word

    def run(self) -> None:
        """Execute the lookup in background thread."""
        try:
            if self.check_cancelled():
                return

            self.controller.submit(self.word)
        except Exception as e:
            if not self.check_cancelled():
                self.error.emit(f"Error looking up '{self.word}': {e}")
