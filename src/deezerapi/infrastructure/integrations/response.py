"""Response wrapper and the response classifier.

Hey future me - this is the tricky bit of the whole client. Deezer reports a
bunch of logical failures ("no data for this id", quota exceeded) with HTTP 200
and an error object in the JSON body:

    {"error": {"type": "DataException", "message": "no data", "code": 800}}

while real HTTP failures (4xx/5xx) come back with a plain text or HTML body.
So we ALWAYS buffer the whole body first, look at it, and keep the buffer
around so the decoder can read it again untouched.
See https://developers.deezer.com/api/errors
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError

from deezerapi.domain.exceptions import (
    APIError,
    ApplicationError,
    BodyReadError,
    ContextCancelledError,
    DeadlineExceededError,
    HTTPStatusError,
)
from deezerapi.infrastructure.integrations.context import Context

logger = logging.getLogger(__name__)


@dataclass
class Response:
    """A completed, classified exchange.

    Wraps the httpx response (body already buffered) and reserves room for
    pagination and rate-limit metadata. Those fields are not filled in yet.
    """

    http: httpx.Response

    # Pagination
    total: int = 0
    prev_page: str = ""
    next_page: str = ""

    @property
    def status_code(self) -> int:
        return self.http.status_code

    @property
    def headers(self) -> httpx.Headers:
        return self.http.headers

    @property
    def request(self) -> httpx.Request:
        return self.http.request

    @property
    def content(self) -> bytes:
        return self.http.content

    async def aclose(self) -> None:
        """Release the underlying stream. Safe to call more than once."""
        await self.http.aclose()


class _ErrorEnvelope(BaseModel):
    """Shape of a Deezer error body. ``error`` is validated separately."""

    model_config = ConfigDict(extra="ignore")

    message: str = ""
    error: Any = None


async def read_body(ctx: Context, response: httpx.Response) -> bytes:
    """Drain the body into memory; httpx keeps it as ``response.content``.

    Raises:
        BodyReadError: If the stream broke or the Context finished mid-read
    """
    try:
        return await ctx.run(response.aread())
    except (ContextCancelledError, DeadlineExceededError) as e:
        raise BodyReadError(response, e) from e
    except (httpx.HTTPError, httpx.StreamError) as e:
        raise BodyReadError(response, e) from e


def classify(response: httpx.Response) -> None:
    """Raise if a buffered exchange is an HTTP or application failure.

    Raises:
        HTTPStatusError: Status outside 2xx (message is the raw body)
        ApplicationError: 2xx with an ``error`` object in the body
    """
    status = response.status_code
    if 200 <= status <= 299:
        _check_application_error(response)
        return

    logger.debug("Deezer HTTP error: status=%s url=%s", status, response.request.url)
    raise HTTPStatusError(response, message=response.text)


def _check_application_error(response: httpx.Response) -> None:
    body = response.content
    if not body.strip():
        # Some endpoints answer with nothing at all; that's a success.
        return

    try:
        envelope = _ErrorEnvelope.model_validate_json(body)
    except ValidationError:
        # Not a JSON object (array, scalar, garbage). Not an API error -
        # whether it fits the caller's target is the decoder's call.
        return

    if envelope.error is None:
        return

    try:
        api_error = APIError.model_validate(envelope.error)
    except ValidationError as e:
        raise ApplicationError(response, message=response.text, carrier=e) from e

    logger.debug(
        "Deezer API error: type=%s code=%s url=%s",
        api_error.type,
        api_error.code,
        response.request.url,
    )
    raise ApplicationError(
        response,
        message=envelope.message or api_error.message,
        api_error=api_error,
    )


async def check_response(ctx: Context, response: httpx.Response) -> None:
    """Buffer the body and classify the exchange (see classify())."""
    await read_body(ctx, response)
    classify(response)


__all__ = ["Response", "check_response", "classify", "read_body"]
