"""
Error Types for the ChatWork Client

Every failure the library detects itself is raised as a subclass of
ChatworkError. Network failures are the ``httpx`` exceptions themselves and
cancellation is asyncio's; neither is wrapped.
"""

from typing import TYPE_CHECKING, Iterable, List, Optional

if TYPE_CHECKING:
    from .transport import Response


class ChatworkError(Exception):
    """Base class for errors raised by the ChatWork client."""


class RequestBuildError(ChatworkError):
    """
    A request could not be built.

    Raised before any network activity when the joined URL cannot be parsed
    or the body cannot be serialized.
    """


class APIError(ChatworkError):
    """
    A non-2xx response from the ChatWork API.

    Attributes:
        method: HTTP method of the original request
        url: URL of the original request
        status_code: HTTP status code of the response
        errors: Error messages returned by the API, in order
        response: Response envelope, when the error came from a dispatch
    """

    def __init__(
        self,
        method: str,
        url: str,
        status_code: int,
        errors: Optional[Iterable[str]] = None,
        response: Optional["Response"] = None,
    ):
        self.method = method
        self.url = str(url)
        self.status_code = status_code
        self.errors: List[str] = list(errors or [])
        self.response = response
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"{self.method} {self.url}: {self.status_code} "
            f"{', '.join(self.errors)}"
        )


class DecodeError(ChatworkError):
    """
    A successful response whose payload could not be used.

    The request succeeded at the protocol level, so ``response`` still
    gives access to the status code and headers.
    """

    def __init__(self, message: str, response: Optional["Response"] = None):
        super().__init__(message)
        self.response = response
