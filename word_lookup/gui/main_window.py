"""Main window for Word Lookup GUI."""

from PyQt6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QTextBrowser,
    QVBoxLayout,
    QWidget,
)

from word_lookup import __version__
from word_lookup.config import ConfigManager, LookupConfig
from word_lookup.controllers import LookupController, PlaybackController
from word_lookup.gui.presenters import GUIPresenter
from word_lookup.gui.workers import LookupWorkerThread
from word_lookup.interfaces import AudioBackend, LookupClient
from word_lookup.models import EmptyInput, LookupResult, Success
from word_lookup.presenters import render_result_html
from word_lookup.services import DictionaryApiClient

WINDOW_DEFAULT_WIDTH = 760
WINDOW_DEFAULT_HEIGHT = 820
WORKER_SHUTDOWN_TIMEOUT_MS = 2000

# Workers still blocked in a request when their window closed. Holding them
# here keeps the QThread alive until run() returns.
_detached_workers: set[LookupWorkerThread] = set()


def wait_for_detached_workers(timeout_ms: int) -> None:
    """Block until workers orphaned by closed windows have finished.

    Args:
        timeout_ms: Maximum wait per worker in milliseconds
    """
    for worker in list(_detached_workers):
        worker.wait(timeout_ms)


class MainWindow(QMainWindow):
    """Search box, result view and pronunciation button.

    Rendering is driven only by results the LookupController applies, so a
    slow response to an earlier query never overwrites a newer one.
    """

    def __init__(
        self,
        config: LookupConfig | None = None,
        client: LookupClient | None = None,
        audio_backend: AudioBackend | None = None,
        lookup_on_start: bool = True,
    ):
        """Initialize the main window.

        Args:
            config: Configuration (loaded from disk if omitted)
            client: Dictionary client (HTTP client if omitted)
            audio_backend: Audio backend (Qt Multimedia if omitted)
            lookup_on_start: Whether to look up the initial word right away
        """
        super().__init__()

        self.config = config or ConfigManager.load_config()

        if audio_backend is None:
            from word_lookup.audio.qt_backend import QtAudioBackend

            audio_backend = QtAudioBackend(volume=self.config.audio_volume)

        self.presenter = GUIPresenter(self)
        self._connect_presenter_signals()

        self.lookup_controller = LookupController(client or DictionaryApiClient(self.config))
        self.lookup_controller.add_listener(self.presenter.show_result)
        self.playback_controller = PlaybackController(
            audio_backend, on_state_changed=self._on_playback_state_changed
        )

        self._workers: list[LookupWorkerThread] = []
        self._audio_url: str | None = None

        self._setup_ui()

        if lookup_on_start:
            self.search_input.setText(self.config.initial_word)
            self.submit()

    def _connect_presenter_signals(self) -> None:
        """Connect presenter signals to UI update slots."""
        self.presenter.info_signal.connect(self._on_info_message)
        self.presenter.error_signal.connect(self._on_error_message)
        self.presenter.result_signal.connect(self._on_result)

    def _setup_ui(self) -> None:
        """Set up the user interface."""
        self.setWindowTitle(f"Word Lookup {__version__}")
        self.resize(WINDOW_DEFAULT_WIDTH, WINDOW_DEFAULT_HEIGHT)

        central_widget = QWidget()
        layout = QVBoxLayout()

        search_row = QHBoxLayout()
        self.search_input = QLineEdit()
        self.search_input.setPlaceholderText("Search for any word...")
        self.search_input.returnPressed.connect(self.submit)
        search_row.addWidget(self.search_input)

        self.search_button = QPushButton("Search")
        self.search_button.clicked.connect(self.submit)
        search_row.addWidget(self.search_button)

        self.play_button = QPushButton("▶ Play")
        self.play_button.setEnabled(False)
        self.play_button.clicked.connect(self.play_pronunciation)
        search_row.addWidget(self.play_button)
        layout.addLayout(search_row)

        self.hint_label = QLabel()
        self.hint_label.setStyleSheet("color: #e53e3e;")
        self.hint_label.setVisible(False)
        layout.addWidget(self.hint_label)

        self.result_view = QTextBrowser()
        self.result_view.setOpenExternalLinks(True)
        layout.addWidget(self.result_view)

        central_widget.setLayout(layout)
        self.setCentralWidget(central_widget)

    def submit(self) -> None:
        """Start a lookup for the text in the search box."""
        word = self.search_input.text()
        if word.strip():
            self.presenter.show_info(f"Looking up '{word.strip()}'...")

        worker = LookupWorkerThread(self.lookup_controller, word, self)
        worker.error.connect(self.presenter.show_error)
        worker.finished.connect(lambda: self._forget_worker(worker))
        self._workers.append(worker)
        worker.start()

    def play_pronunciation(self) -> None:
        """Play the current entry's recording unless one is already playing."""
        if self._audio_url:
            self.playback_controller.play(self._audio_url)

    def _on_result(self, result: LookupResult) -> None:
        """Render the result the controller just applied."""
        self.statusBar().clearMessage()

        if isinstance(result, EmptyInput):
            self.hint_label.setText(result.hint)
            self.hint_label.setVisible(True)
        else:
            self.hint_label.setVisible(False)

        self._audio_url = result.definition.audio_url if isinstance(result, Success) else None
        self._update_play_button()
        self.result_view.setHtml(render_result_html(result))

    def _on_playback_state_changed(self, busy: bool) -> None:
        self._update_play_button()

    def _update_play_button(self) -> None:
        self.play_button.setEnabled(
            self._audio_url is not None and not self.playback_controller.is_busy
        )

    def _on_info_message(self, message: str) -> None:
        self.statusBar().showMessage(message)

    def _on_error_message(self, message: str) -> None:
        self.statusBar().showMessage(f"Error: {message}")

    def _forget_worker(self, worker: LookupWorkerThread) -> None:
        if worker in self._workers:
            self._workers.remove(worker)
        _detached_workers.discard(worker)
        worker.deleteLater()

    def closeEvent(self, event) -> None:
        """Cancel lookup workers before closing.

        A request can block for up to ``request_timeout``. Workers that do
        not finish within the shutdown timeout are detached from the window
        so that destroying it does not destroy a running thread.

        Args:
            event: Close event
        """
        self.lookup_controller.remove_listener(self.presenter.show_result)
        for worker in list(self._workers):
            if worker.isRunning():
                worker.cancel()
                if not worker.wait(WORKER_SHUTDOWN_TIMEOUT_MS):
                    worker.setParent(None)
                    _detached_workers.add(worker)
        super().closeEvent(event)
