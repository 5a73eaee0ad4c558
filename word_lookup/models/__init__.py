"""Data models for Word Lookup."""

from .entry import Definition, Meaning, Phonetic, Sense
from .result import (
    EmptyInput,
    LookupResult,
    LookupState,
    NetworkError,
    NotFound,
    ResultKind,
    Success,
)

__all__ = [
    "Definition",
    "Meaning",
    "Phonetic",
    "Sense",
    "LookupResult",
    "LookupState",
    "ResultKind",
    "EmptyInput",
    "Success",
    "NotFound",
    "NetworkError",
]
