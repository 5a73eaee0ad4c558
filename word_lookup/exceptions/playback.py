"""Audio playback exceptions."""

from .base import WordLookupException


class PlaybackError(WordLookupException):
    """Raised when an audio backend cannot start playback."""

    pass
