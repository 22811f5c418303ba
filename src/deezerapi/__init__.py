"""deezerapi - typed asyncio client for the public Deezer REST API."""

from deezerapi.domain import (
    APIError,
    Album,
    ApplicationError,
    Artist,
    BodyReadError,
    ConfigurationError,
    ContextCancelledError,
    Contributor,
    DeadlineExceededError,
    DecodeError,
    DeezerException,
    ErrorResponse,
    Genre,
    GenreList,
    HTTPStatusError,
    MalformedURLError,
    Track,
    TrackList,
    TransportError,
)
from deezerapi.infrastructure.integrations import (
    ClientConfig,
    ClientOption,
    Context,
    DeezerClient,
    JSONTarget,
    ListOptions,
    LoggingTransport,
    RawTarget,
    Response,
    with_base_url,
    with_http_client,
    with_request_logging,
    with_timeout,
    with_transport,
)

__version__ = "0.1.0"

__all__ = [
    "APIError",
    "Album",
    "ApplicationError",
    "Artist",
    "BodyReadError",
    "ClientConfig",
    "ClientOption",
    "ConfigurationError",
    "Context",
    "ContextCancelledError",
    "Contributor",
    "DeadlineExceededError",
    "DecodeError",
    "DeezerClient",
    "DeezerException",
    "ErrorResponse",
    "Genre",
    "GenreList",
    "HTTPStatusError",
    "JSONTarget",
    "ListOptions",
    "LoggingTransport",
    "MalformedURLError",
    "RawTarget",
    "Response",
    "Track",
    "TrackList",
    "TransportError",
    "with_base_url",
    "with_http_client",
    "with_request_logging",
    "with_timeout",
    "with_transport",
]
