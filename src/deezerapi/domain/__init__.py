"""Domain layer: resource records and the exception taxonomy."""

from deezerapi.domain.entities import (
    Album,
    Artist,
    Contributor,
    Genre,
    GenreList,
    Track,
    TrackList,
)
from deezerapi.domain.exceptions import (
    APIError,
    ApplicationError,
    BodyReadError,
    ConfigurationError,
    ContextCancelledError,
    DeadlineExceededError,
    DecodeError,
    DeezerException,
    ErrorResponse,
    HTTPStatusError,
    MalformedURLError,
    TransportError,
)

__all__ = [
    "APIError",
    "Album",
    "ApplicationError",
    "Artist",
    "BodyReadError",
    "ConfigurationError",
    "ContextCancelledError",
    "Contributor",
    "DeadlineExceededError",
    "DecodeError",
    "DeezerException",
    "ErrorResponse",
    "Genre",
    "GenreList",
    "HTTPStatusError",
    "MalformedURLError",
    "Track",
    "TrackList",
    "TransportError",
]
