"""Lookup state machine: query, in-flight, and classified outcome."""

import logging
import threading
from collections.abc import Callable
from typing import Any

import requests

from word_lookup.exceptions import (
    LookupStatusError,
    LookupTimeoutError,
    MalformedResponseError,
    WordLookupException,
)
from word_lookup.interfaces import LookupClient
from word_lookup.models import (
    EmptyInput,
    LookupResult,
    LookupState,
    NetworkError,
    NotFound,
    Success,
)
from word_lookup.services import is_not_found_payload, parse_entry, select_primary_entry

logger = logging.getLogger(__name__)

ResultListener = Callable[[LookupResult], None]


class LookupController:
    """Owns the current query and turns every submission into a LookupResult.

    ``submit`` never raises for lookup failures: empty input, unknown words
    and transport problems all come back as result values.

    Each submission is tagged with a sequence number. When lookups overlap
    (for example two GUI worker threads), only the most recently issued one
    may update ``state`` and ``result`` and notify listeners; an older
    lookup that finishes later is returned to its own caller and otherwise
    ignored.
    """

    def __init__(self, client: LookupClient):
        """Initialize the controller.

        Args:
            client: Transport used to fetch raw dictionary payloads
        """
        self._client = client
        self._lock = threading.Lock()
        self._sequence = 0
        self._state = LookupState.IDLE
        self._result: LookupResult | None = None
        self._word = ""
        self._listeners: list[ResultListener] = []

    @property
    def state(self) -> LookupState:
        """Current state of the lookup state machine."""
        with self._lock:
            return self._state

    @property
    def result(self) -> LookupResult | None:
        """Most recently applied result, or None before the first submission."""
        with self._lock:
            return self._result

    @property
    def word(self) -> str:
        """Most recently submitted query, trimmed."""
        with self._lock:
            return self._word

    def add_listener(self, listener: ResultListener) -> None:
        """Register a callback invoked with every applied result.

        Listeners run on the thread that called ``submit``.
        """
        with self._lock:
            self._listeners.append(listener)

    def remove_listener(self, listener: ResultListener) -> None:
        """Unregister a previously added callback."""
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    def submit(self, word: str) -> LookupResult:
        """Look up a word and return the classified outcome.

        Blocks while the dictionary service is queried. Empty or
        whitespace-only input is rejected before any network activity.

        Args:
            word: Raw user input

        Returns:
            EmptyInput, Success, NotFound or NetworkError
        """
        query = word.strip() if word else ""

        with self._lock:
            self._sequence += 1
            ticket = self._sequence
            self._word = query
            if query:
                self._state = LookupState.LOADING

        if not query:
            result: LookupResult = EmptyInput()
        else:
            logger.debug(f"Looking up '{query}' (request #{ticket})")
            result = self._fetch(query)

        self._apply(ticket, result)
        return result

    def _fetch(self, query: str) -> LookupResult:
        """Run one network round trip and classify it."""
        try:
            payload = self._client.fetch_entries(query)
            return self._classify(payload)
        except LookupTimeoutError as e:
            logger.warning(f"Lookup for '{query}' timed out: {e}")
        except LookupStatusError as e:
            logger.warning(f"Lookup for '{query}' failed with HTTP {e.status_code}: {e}")
        except WordLookupException as e:
            logger.warning(f"Lookup for '{query}' failed: {e}")
        except (requests.RequestException, OSError) as e:
            logger.warning(f"Lookup for '{query}' failed in transport: {e}")
        return NetworkError()

    @staticmethod
    def _classify(payload: Any) -> LookupResult:
        """Map a decoded payload onto Success or NotFound by its shape.

        Raises:
            MalformedResponseError: For any shape that is neither
        """
        if isinstance(payload, list):
            return Success(definition=parse_entry(select_primary_entry(payload)))

        if is_not_found_payload(payload):
            return NotFound(title=payload["title"], message=payload["message"])

        raise MalformedResponseError(f"Unexpected payload type: {type(payload).__name__}")

    def _apply(self, ticket: int, result: LookupResult) -> None:
        """Publish a result if it belongs to the latest submission."""
        with self._lock:
            if ticket != self._sequence:
                logger.debug(f"Discarding stale result of request #{ticket}")
                return
            self._state = LookupState.for_result(result)
            self._result = result
            listeners = list(self._listeners)

        for listener in listeners:
            try:
                listener(result)
            except Exception as e:
                logger.error(f"Result listener {listener!r} failed: {e}", exc_info=True)
