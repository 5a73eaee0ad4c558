"""Custom exceptions for Word Lookup."""

from .base import WordLookupException
from .lookup import (
    InvalidQueryError,
    LookupStatusError,
    LookupTimeoutError,
    LookupTransportError,
    MalformedResponseError,
)
from .playback import PlaybackError

__all__ = [
    "WordLookupException",
    "InvalidQueryError",
    "LookupTransportError",
    "LookupTimeoutError",
    "LookupStatusError",
    "MalformedResponseError",
    "PlaybackError",
]
