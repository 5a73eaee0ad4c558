"""Audio backend built on Qt Multimedia."""

import logging

from PyQt6.QtCore import QCoreApplication, QUrl
from PyQt6.QtMultimedia import QAudioOutput, QMediaPlayer

from word_lookup.exceptions import PlaybackError
from word_lookup.interfaces import FinishedCallback

logger = logging.getLogger(__name__)


class QtAudioBackend:
    """Play remote audio URLs through QMediaPlayer.

    Implements AudioBackend protocol. A fresh player is created for every
    clip and disposed of once it reports the end of media or an error.
    Requires a running Qt application; completion is delivered on the Qt
    event loop.
    """

    def __init__(self, volume: float = 1.0):
        """Initialize the backend.

        Args:
            volume: Output volume between 0.0 and 1.0
        """
        self._volume = volume
        # Keeps players alive until they finish
        self._active: dict[int, tuple[QMediaPlayer, QAudioOutput]] = {}
        self._next_id = 0

    def play(self, url: str, on_finished: FinishedCallback) -> None:
        """Start playing an audio URL.

        Args:
            url: Audio resource URL
            on_finished: Called once with None on completion or an error string

        Raises:
            PlaybackError: If there is no Qt application or the URL is invalid
        """
        if QCoreApplication.instance() is None:
            raise PlaybackError("Audio playback requires a running Qt application")

        qurl = QUrl(url)
        if not qurl.isValid():
            raise PlaybackError(f"Invalid audio URL: {url}")

        audio_output = QAudioOutput()
        audio_output.setVolume(self._volume)
        player = QMediaPlayer()
        player.setAudioOutput(audio_output)

        player_id = self._next_id
        self._next_id += 1
        self._active[player_id] = (player, audio_output)

        def finish(error: str | None) -> None:
            # Qt may report both an error and InvalidMedia for the same clip
            if self._active.pop(player_id, None) is None:
                return
            player.stop()
            player.deleteLater()
            audio_output.deleteLater()
            on_finished(error)

        def on_status_changed(status: QMediaPlayer.MediaStatus) -> None:
            if status == QMediaPlayer.MediaStatus.EndOfMedia:
                finish(None)
            elif status == QMediaPlayer.MediaStatus.InvalidMedia:
                finish(f"Invalid media: {url}")

        def on_error(error: QMediaPlayer.Error, error_string: str) -> None:
            if error != QMediaPlayer.Error.NoError:
                finish(error_string or f"Media error {error.name}")

        player.mediaStatusChanged.connect(on_status_changed)
        player.errorOccurred.connect(on_error)

        logger.debug(f"Starting Qt playback of {url}")
        player.setSource(qurl)
        player.play()
