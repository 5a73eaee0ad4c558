"""Protocol for the remote dictionary service client."""

from typing import Any, Protocol


class LookupClient(Protocol):
    """Interface for a transport that fetches raw dictionary payloads.

    The controller depends on this protocol rather than on HTTP directly,
    so tests can substitute a stub that records calls.
    """

    def fetch_entries(self, word: str) -> Any:
        """Fetch the decoded JSON payload for a word.

        Args:
            word: Non-empty, trimmed query word.

        Returns:
            The decoded JSON body: a list of entries, or the service's
            "not found" object.

        Raises:
            LookupTransportError: On connection failures and timeouts.
            LookupStatusError: On a non-2xx status without a "not found" body.
            MalformedResponseError: If the body is not valid JSON.
        """
        ...
