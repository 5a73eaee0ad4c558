"""Mutually exclusive pronunciation playback."""

import logging
import threading
from collections.abc import Callable

from word_lookup.interfaces import AudioBackend

logger = logging.getLogger(__name__)


class PlaybackController:
    """Plays at most one audio clip at a time.

    While a clip is playing, further ``play`` calls are ignored. The busy
    guard is released once the backend reports that the clip ended, whether
    it finished normally or failed. Completion reports from an earlier clip
    can never release the guard of a later one.
    """

    def __init__(
        self,
        backend: AudioBackend,
        on_state_changed: Callable[[bool], None] | None = None,
    ):
        """Initialize the controller.

        Args:
            backend: Audio backend that performs the actual playback
            on_state_changed: Optional callback receiving the new busy flag
        """
        self._backend = backend
        self._on_state_changed = on_state_changed
        self._lock = threading.Lock()
        self._busy = False
        self._current_url: str | None = None
        self._playback_id = 0

    @property
    def is_busy(self) -> bool:
        """True while a clip is playing."""
        with self._lock:
            return self._busy

    @property
    def current_url(self) -> str | None:
        """URL of the clip being played, or None when idle."""
        with self._lock:
            return self._current_url

    def play(self, audio_url: str) -> bool:
        """Start playing a clip unless another one is still playing.

        Playback failures are logged and release the guard; they are never
        raised to the caller.

        Args:
            audio_url: URL of the audio resource

        Returns:
            True if playback was started, False if the call was ignored
        """
        if not audio_url:
            logger.debug("Ignoring play request without an audio URL")
            return False

        with self._lock:
            if self._busy:
                logger.debug(f"Playback in progress, ignoring {audio_url}")
                return False
            self._busy = True
            self._current_url = audio_url
            self._playback_id += 1
            playback_id = self._playback_id

        self._notify(True)
        logger.debug(f"Playing {audio_url}")

        try:
            self._backend.play(audio_url, lambda error: self._finish(playback_id, error))
        except Exception as e:
            self._finish(playback_id, str(e) or type(e).__name__)

        return True

    def _finish(self, playback_id: int, error: str | None) -> None:
        """Release the guard for one playback, at most once."""
        with self._lock:
            if not self._busy or playback_id != self._playback_id:
                return
            url = self._current_url
            self._busy = False
            self._current_url = None

        if error:
            logger.warning(f"Playback of {url} failed: {error}")
        self._notify(False)

    def _notify(self, busy: bool) -> None:
        if self._on_state_changed is not None:
            self._on_state_changed(busy)
