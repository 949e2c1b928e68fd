"""
Exceptions raised by the webring client.

Cancellation is not represented here: a cancelled fetch re-raises
asyncio.CancelledError (or TimeoutError for a caller-imposed deadline) as is.
"""

from typing import Any, Optional


class WebringError(Exception):
    """Base exception for the library."""
    def __init__(self, message: str):
        self.message = message
        super().__init__(self.message)


class RequestConstructionError(WebringError):
    """Raised when a request cannot be built, e.g. for a malformed URL."""
    def __init__(self, message: str, url: str):
        self.url = url
        super().__init__(message)


class FetchError(WebringError):
    """Raised on a transport failure or a response status other than 200."""
    def __init__(self, message: str, url: str, status_code: Optional[int] = None):
        self.url = url
        self.status_code = status_code
        super().__init__(message)


class DecodeError(WebringError):
    """Raised when a document is not valid JSON or does not match the schema."""
    pass


class UnsupportedVersionError(DecodeError):
    """Raised when a document declares a version other than the supported one."""
    def __init__(self, message: str, version: Any):
        self.version = version
        super().__init__(message)


class FetchTimeoutError(FetchError):
    """
    Raised when FetchConfig.timeout expires. This is a transport failure of
    the fetch, unlike a caller's own deadline, which cancels the task.
    """
    pass
