"""Dictionary service related exceptions."""

from .base import WordLookupException


class LookupTransportError(WordLookupException):
    """Raised when the dictionary service cannot be reached."""

    pass


class LookupTimeoutError(LookupTransportError):
    """Raised when the dictionary service does not answer in time."""

    pass


class LookupStatusError(WordLookupException):
    """Raised when the dictionary service answers with a non-2xx status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(WordLookupException):
    """Raised when the response body is not JSON or has an unexpected shape."""

    pass


class InvalidQueryError(WordLookupException):
    """Raised when a query cannot be turned into a request URL."""

    pass
