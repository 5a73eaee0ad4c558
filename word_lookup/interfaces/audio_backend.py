"""Protocol for audio playback backends."""

from collections.abc import Callable
from typing import Protocol

# Called exactly once per playback: None on natural completion,
# an error description when loading or playing failed.
FinishedCallback = Callable[[str | None], None]


class AudioBackend(Protocol):
    """Interface for something that can play an audio URL."""

    def play(self, url: str, on_finished: FinishedCallback) -> None:
        """Start playing an audio resource.

        Args:
            url: Opaque audio URL.
            on_finished: Callback invoked once playback ends or fails.

        Raises:
            PlaybackError: If playback cannot be started at all.
        """
        ...
