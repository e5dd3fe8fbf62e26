"""Errors raised while fetching search result pages."""


class FetchError(Exception):
    """Raised when a page fetch cannot produce a usable result."""


class NetworkError(FetchError):
    """The request never produced an HTTP response."""


class ServerError(FetchError):
    """The endpoint answered with a non-success status."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(FetchError):
    """The response body was not JSON or did not match the expected shape."""
