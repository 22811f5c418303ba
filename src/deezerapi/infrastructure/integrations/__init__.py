"""Deezer API client implementation."""

from deezerapi.infrastructure.integrations.albums import AlbumService
from deezerapi.infrastructure.integrations.artists import ArtistService
from deezerapi.infrastructure.integrations.context import Context
from deezerapi.infrastructure.integrations.decoding import (
    DecodeTarget,
    JSONTarget,
    RawTarget,
    decode,
)
from deezerapi.infrastructure.integrations.deezer_client import (
    ClientConfig,
    ClientOption,
    DeezerClient,
    build_http_client,
    with_base_url,
    with_http_client,
    with_request_logging,
    with_timeout,
    with_transport,
)
from deezerapi.infrastructure.integrations.logging_transport import LoggingTransport
from deezerapi.infrastructure.integrations.options import ListOptions, apply_options
from deezerapi.infrastructure.integrations.response import (
    Response,
    check_response,
    classify,
    read_body,
)
from deezerapi.infrastructure.integrations.tracks import TrackService

__all__ = [
    "AlbumService",
    "ArtistService",
    "ClientConfig",
    "ClientOption",
    "Context",
    "DecodeTarget",
    "DeezerClient",
    "JSONTarget",
    "ListOptions",
    "LoggingTransport",
    "RawTarget",
    "Response",
    "TrackService",
    "apply_options",
    "build_http_client",
    "check_response",
    "classify",
    "decode",
    "read_body",
    "with_base_url",
    "with_http_client",
    "with_request_logging",
    "with_timeout",
    "with_transport",
]
