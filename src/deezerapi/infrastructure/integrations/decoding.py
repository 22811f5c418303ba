"""Decode targets and the decoder.

A caller says up front what it wants from a body: a typed record
(JSONTarget) or the raw bytes copied into a sink (RawTarget). No guessing
from the type of some arbitrary object.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Generic, Protocol, TypeVar

from pydantic import TypeAdapter, ValidationError

from deezerapi.domain.exceptions import DecodeError
from deezerapi.infrastructure.integrations.response import Response

T = TypeVar("T")


class ByteSink(Protocol):
    """Anything with a ``write(bytes)`` method (BytesIO, open files, ...)."""

    def write(self, data: bytes, /) -> Any: ...


@dataclass(frozen=True)
class JSONTarget(Generic[T]):
    """Decode the body as JSON into ``type``.

    ``type`` must be constructible without arguments; that instance is the
    result for an empty body.
    """

    type: type[T]

    def zero(self) -> T:
        return self.type()

    def validate(self, body: bytes) -> T:
        return _adapter(self.type).validate_json(body)


@dataclass(frozen=True)
class RawTarget:
    """Copy the body verbatim into ``sink``."""

    sink: ByteSink


DecodeTarget = JSONTarget[Any] | RawTarget


@lru_cache(maxsize=64)
def _adapter(tp: Any) -> TypeAdapter[Any]:
    return TypeAdapter(tp)


def decode(response: Response, target: DecodeTarget | None) -> Any:
    """Render a classified-successful body into ``target``.

    Returns:
        The decoded record for JSONTarget, the sink for RawTarget,
        None when there is no target

    Raises:
        DecodeError: If the body is not valid JSON for the target type
    """
    if target is None:
        return None

    body = response.content
    if isinstance(target, RawTarget):
        target.sink.write(body)
        return target.sink

    # Hey future me - empty body on a 2xx is NOT an error. Some endpoints
    # legitimately answer with nothing; you get the zero-value record.
    # A bare JSON null means the same thing.
    if body.strip() in (b"", b"null"):
        return target.zero()

    try:
        return target.validate(body)
    except ValidationError as e:
        raise DecodeError(
            response.http,
            message=f"decoding {getattr(target.type, '__name__', target.type)}",
            carrier=e,
            api_response=response,
        ) from e


__all__ = ["ByteSink", "DecodeTarget", "JSONTarget", "RawTarget", "decode"]
