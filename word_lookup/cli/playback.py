"""Blocking pronunciation playback for terminal commands."""

import logging
import sys

from word_lookup.config import LookupConfig
from word_lookup.controllers import PlaybackController

logger = logging.getLogger(__name__)

# Upper bound on how long a terminal command waits for a clip
MAX_PLAYBACK_MS = 30_000


def play_and_wait(config: LookupConfig, audio_url: str) -> bool:
    """Play a clip and return once it has finished or failed.

    Qt delivers playback completion through its event loop, so a
    QCoreApplication is created if none exists and run until the
    playback guard is released.

    Args:
        config: Configuration providing the output volume
        audio_url: URL of the clip

    Returns:
        True if playback started, False otherwise
    """
    from PyQt6.QtCore import QCoreApplication, QTimer

    from word_lookup.audio.qt_backend import QtAudioBackend

    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])

    # Caps the wait; stopped once the clip ends so it cannot quit a later loop
    timeout = QTimer()
    timeout.setSingleShot(True)
    timeout.timeout.connect(app.quit)

    def on_state_changed(busy: bool) -> None:
        if not busy:
            timeout.stop()
            app.quit()

    controller = PlaybackController(
        QtAudioBackend(volume=config.audio_volume),
        on_state_changed=on_state_changed,
    )

    if not controller.play(audio_url):
        return False

    # Playback may already have failed synchronously
    if controller.is_busy:
        timeout.start(MAX_PLAYBACK_MS)
        app.exec()
        timeout.stop()
        if controller.is_busy:
            logger.warning(f"Gave up waiting for {audio_url} after {MAX_PLAYBACK_MS} ms")

    return True
