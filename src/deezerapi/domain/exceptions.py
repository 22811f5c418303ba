"""Domain exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import httpx
from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:
    from deezerapi.infrastructure.integrations.response import Response


class DeezerException(Exception):
    """Base exception for everything raised by the client."""

    # Hey future me, message lives on the instance so handlers can read it without parsing str().
    # Never raise this directly - always a subclass, so callers can catch precisely.
    def __init__(self, message: str, *args: Any) -> None:
        super().__init__(message, *args)
        self.message = message


class ConfigurationError(DeezerException):
    """Raised when the client is constructed with an unusable option."""

    pass


class MalformedURLError(DeezerException):
    """Raised when a resource path or base URL cannot be parsed.

    Always raised before any network I/O, so it signals a programming error
    (bad id, bad base URL) rather than something worth retrying.
    """

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"parse {url!r}: {reason}")
        self.url = url
        self.reason = reason


class ContextCancelledError(DeezerException):
    """Raised when a call's Context was cancelled by the caller."""

    def __init__(self, message: str = "context canceled") -> None:
        super().__init__(message)


class DeadlineExceededError(DeezerException):
    """Raised when a call's Context deadline passed."""

    def __init__(self, message: str = "context deadline exceeded") -> None:
        super().__init__(message)


class TransportError(DeezerException):
    """Raised when the exchange failed before any status code existed.

    DNS failures, refused connections, TLS errors, timeouts and Context
    cancellation all end up here. The original exception is kept as ``cause``
    (and chained via ``__cause__``). Callers may retry; the client never does.
    """

    def __init__(self, request: httpx.Request, cause: BaseException) -> None:
        super().__init__(f"{request.method} {request.url}: {cause}")
        self.request = request
        self.cause = cause


class BodyReadError(DeezerException):
    """Raised when the response body could not be fully drained."""

    def __init__(self, response: httpx.Response, cause: BaseException) -> None:
        super().__init__(
            f"{response.request.method} {response.request.url}: "
            f"{response.status_code} reading body: {cause}"
        )
        self.response = response
        self.cause = cause


class APIError(BaseModel):
    """Error object Deezer embeds in a 2xx body.

    See https://developers.deezer.com/api/errors for the code table
    (4 = quota, 800 = no data, ...).
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    type: str = ""
    message: str = ""
    code: int = 0


class ErrorResponse(DeezerException):
    """Single error type for every classified-failure path.

    Catch this to handle HTTP status errors, embedded API errors and decode
    errors in one place; ``api_error`` tells them apart when you need to.
    """

    def __init__(
        self,
        response: httpx.Response,
        message: str = "",
        api_error: APIError | None = None,
        carrier: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        # HTTP response that caused this error
        self.response = response
        self.api_error = api_error
        # Any other error carried up the chain
        self.carrier = carrier

    @property
    def status_code(self) -> int:
        return self.response.status_code

    def __str__(self) -> str:
        request = self.response.request
        text = f"{request.method} {request.url}: {self.response.status_code} {self.message}"
        if self.carrier is not None:
            text = f"{text} {self.carrier}"
        return text


class HTTPStatusError(ErrorResponse):
    """Non-2xx status. ``message`` is the raw body text, ``api_error`` is None."""

    pass


class ApplicationError(ErrorResponse):
    """2xx status, but Deezer reported a logical failure in the body."""

    pass


class DecodeError(ErrorResponse):
    """A successful body did not fit the requested decode target."""

    def __init__(
        self,
        response: httpx.Response,
        message: str = "",
        carrier: BaseException | None = None,
        api_response: Response | None = None,
    ) -> None:
        super().__init__(response, message=message, carrier=carrier)
        self.api_response = api_response


__all__ = [
    "APIError",
    "ApplicationError",
    "BodyReadError",
    "ConfigurationError",
    "ContextCancelledError",
    "DeadlineExceededError",
    "DecodeError",
    "DeezerException",
    "ErrorResponse",
    "HTTPStatusError",
    "MalformedURLError",
    "TransportError",
]
