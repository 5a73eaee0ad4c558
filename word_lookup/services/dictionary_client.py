"""HTTP client for the Free Dictionary API."""

import logging
from typing import Any
from urllib.parse import quote

import requests

from word_lookup.config import LookupConfig
from word_lookup.exceptions import (
    InvalidQueryError,
    LookupStatusError,
    LookupTimeoutError,
    LookupTransportError,
    MalformedResponseError,
)

logger = logging.getLogger(__name__)


class DictionaryApiClient:
    """Fetch raw entries from api.dictionaryapi.dev.

    Implements LookupClient protocol. The client only deals with transport
    and JSON decoding; deciding what the payload means is left to the
    lookup controller.
    """

    # The service answers unknown words with 404 and a JSON explanation
    NOT_FOUND_STATUS = 404

    def __init__(self, config: LookupConfig, session: requests.Session | None = None):
        """Initialize the client.

        Args:
            config: Configuration holding the endpoint and timeout
            session: Optional requests session (a new one is created if omitted)
        """
        self.config = config
        self._session = session or requests.Session()
        self._session.headers.update(
            {"User-Agent": config.user_agent, "Accept": "application/json"}
        )

    def build_url(self, word: str) -> str:
        """Build the entry URL with the word encoded as one path segment."""
        return f"{self.config.api_url}{quote(word, safe='')}"

    def fetch_entries(self, word: str) -> Any:
        """Fetch the decoded JSON payload for a word.

        Args:
            word: Non-empty, trimmed query word

        Returns:
            Decoded JSON body (list of entries or "not found" object)

        Raises:
            LookupTimeoutError: If the service does not answer in time
            InvalidQueryError: If the word cannot be encoded into a URL
            LookupTransportError: If the request fails at the transport level
            LookupStatusError: If the status is non-2xx and not a "not found" answer
            MalformedResponseError: If the body is not valid JSON
        """
        try:
            url = self.build_url(word)
        except UnicodeEncodeError as e:
            raise InvalidQueryError(f"Cannot encode query {word!r}: {e}") from e
        logger.debug(f"GET {url}")

        try:
            response = self._session.get(url, timeout=self.config.request_timeout)
        except requests.exceptions.Timeout as e:
            raise LookupTimeoutError(f"Timed out after {self.config.request_timeout}s: {url}") from e
        except requests.RequestException as e:
            raise LookupTransportError(f"Request failed for {url}: {e}") from e

        status = response.status_code
        if not (200 <= status < 300) and status != self.NOT_FOUND_STATUS:
            raise LookupStatusError(f"Unexpected status {status} for {url}", status_code=status)

        try:
            payload = response.json()
        except ValueError as e:
            if status == self.NOT_FOUND_STATUS:
                raise LookupStatusError(f"Status 404 without JSON body for {url}", status) from e
            raise MalformedResponseError(f"Invalid JSON from {url}: {e}") from e

        if status == self.NOT_FOUND_STATUS and not isinstance(payload, dict):
            raise LookupStatusError(f"Status 404 with unexpected body for {url}", status)

        return payload

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
