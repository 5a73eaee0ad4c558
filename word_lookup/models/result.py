"""Lookup result variants and controller states.

A lookup always produces exactly one of four result types. Each one is an
immutable value that replaces whatever was shown before.
"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar

from .entry import Definition

EMPTY_INPUT_TITLE = "The search bar must not be empty !!!"
EMPTY_INPUT_MESSAGE = "FILL THAT INPUT BAR!!!"
EMPTY_INPUT_HINT = "Whoops... cannot be empty"

NETWORK_ERROR_TITLE = "No Definitions Found"
NETWORK_ERROR_MESSAGE = "Sorry pal, there was an error."


class ResultKind(Enum):
    """Discriminator for the lookup result variants."""

    EMPTY_INPUT = "empty_input"
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    NETWORK_ERROR = "network_error"


class LookupState(Enum):
    """States of the lookup state machine.

    IDLE is only ever the initial state. Every other state can be left by
    submitting a new query.
    """

    IDLE = "idle"
    LOADING = "loading"
    EMPTY_INPUT = "empty_input"
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    NETWORK_ERROR = "network_error"

    @classmethod
    def for_result(cls, result: "LookupResult") -> "LookupState":
        """Terminal state reached by a given result."""
        return cls(result.kind.value)


@dataclass(frozen=True)
class LookupResult:
    """Base class for the four lookup outcomes."""

    kind: ClassVar[ResultKind]
    emoji: ClassVar[str] = "😕"

    @property
    def is_success(self) -> bool:
        return self.kind is ResultKind.SUCCESS

    @property
    def is_error(self) -> bool:
        return not self.is_success


@dataclass(frozen=True)
class EmptyInput(LookupResult):
    """The query was empty or whitespace; nothing was fetched."""

    kind: ClassVar[ResultKind] = ResultKind.EMPTY_INPUT
    emoji: ClassVar[str] = "😡"

    title: str = EMPTY_INPUT_TITLE
    message: str = EMPTY_INPUT_MESSAGE
    hint: str = EMPTY_INPUT_HINT


@dataclass(frozen=True)
class Success(LookupResult):
    """The service returned an entry for the query."""

    kind: ClassVar[ResultKind] = ResultKind.SUCCESS

    definition: Definition


@dataclass(frozen=True)
class NotFound(LookupResult):
    """The service answered but has no entry for the query."""

    kind: ClassVar[ResultKind] = ResultKind.NOT_FOUND

    title: str
    message: str


@dataclass(frozen=True)
class NetworkError(LookupResult):
    """The lookup failed in transport or returned something unusable.

    The underlying cause is logged, never shown; the text is always the
    same generic message.
    """

    kind: ClassVar[ResultKind] = ResultKind.NETWORK_ERROR

    title: str = NETWORK_ERROR_TITLE
    message: str = NETWORK_ERROR_MESSAGE
