"""Deezer HTTP client: configuration, request building and the request pipeline.

Hey future me - Deezer's public API needs NO authentication, so this client is
just: resolve a path against the base URL, send it, classify the answer,
decode it. The pipeline is

    new_request() -> do_request() [send + read body + classify] -> decode()

and every step raises instead of returning error values. No retries, no rate
limiting, no caching in here - callers own those policies.

Usage:
    async with DeezerClient() as client:
        album, resp = await client.albums.get(Context.background(), "302127")
        print(album.title)

    # Against a local fixture server, with request logging:
    client = DeezerClient(
        None,
        with_base_url("http://127.0.0.1:8080/"),
        with_request_logging(),
    )
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, replace
from types import TracebackType
from typing import Any

import httpx

from deezerapi.config.settings import DEFAULT_BASE_URL, DeezerSettings, get_settings
from deezerapi.domain.exceptions import (
    ConfigurationError,
    ContextCancelledError,
    DeadlineExceededError,
    MalformedURLError,
    TransportError,
)
from deezerapi.infrastructure.integrations.albums import AlbumService
from deezerapi.infrastructure.integrations.artists import ArtistService
from deezerapi.infrastructure.integrations.context import Context
from deezerapi.infrastructure.integrations.decoding import DecodeTarget, decode
from deezerapi.infrastructure.integrations.logging_transport import LoggingTransport
from deezerapi.infrastructure.integrations.response import Response, check_response
from deezerapi.infrastructure.integrations.tracks import TrackService
from deezerapi.infrastructure.integrations.urls import parse_url, resolve_reference

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClientConfig:
    """Everything a DeezerClient is built from. Frozen once the client exists."""

    base_url: str = DEFAULT_BASE_URL
    http_client: httpx.AsyncClient | None = None
    transport: httpx.AsyncBaseTransport | None = None
    timeout_seconds: float = 15.0
    log_requests: bool = False

    @classmethod
    def from_settings(cls, settings: DeezerSettings) -> ClientConfig:
        return cls(
            base_url=settings.base_url,
            timeout_seconds=settings.timeout_seconds,
            log_requests=settings.log_requests,
        )


ClientOption = Callable[[ClientConfig], ClientConfig]


def with_base_url(base_url: str) -> ClientOption:
    """Point the client at another origin (test servers, proxies)."""

    def apply(config: ClientConfig) -> ClientConfig:
        parse_url(base_url)
        return replace(config, base_url=base_url)

    return apply


def with_http_client(http_client: httpx.AsyncClient | None) -> ClientOption:
    """Use a caller-owned httpx.AsyncClient. None keeps the default one."""

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, http_client=http_client)

    return apply


def with_transport(transport: httpx.AsyncBaseTransport) -> ClientOption:
    """Send through ``transport`` instead of httpx's default one."""

    def apply(config: ClientConfig) -> ClientConfig:
        if transport is None:
            raise ConfigurationError("with_transport() requires a transport, got None")
        return replace(config, transport=transport)

    return apply


def with_timeout(seconds: float) -> ClientOption:
    """Timeout for the default httpx client (ignored for injected clients)."""

    def apply(config: ClientConfig) -> ClientConfig:
        if seconds <= 0:
            raise ConfigurationError(f"timeout must be positive, got {seconds}")
        return replace(config, timeout_seconds=seconds)

    return apply


def with_request_logging(enabled: bool = True) -> ClientOption:
    """Wrap the default transport in LoggingTransport.

    Like with_transport() and with_timeout(), this only shapes the client
    DeezerClient builds itself. An injected httpx.AsyncClient is used as is;
    wrap its transport yourself if you want the log lines.
    """

    def apply(config: ClientConfig) -> ClientConfig:
        return replace(config, log_requests=enabled)

    return apply


def build_http_client(config: ClientConfig) -> httpx.AsyncClient:
    """Create the httpx client used when the caller didn't inject one."""
    transport = config.transport
    if config.log_requests:
        transport = LoggingTransport(transport)
    return httpx.AsyncClient(
        transport=transport,
        timeout=httpx.Timeout(config.timeout_seconds),
        follow_redirects=True,
    )


class DeezerClient:
    """Manages communication with the Deezer API.

    Safe for concurrent use: all per-call state is local, the configuration is
    frozen at construction and httpx.AsyncClient handles overlapping requests.
    """

    def __init__(
        self,
        http_client: httpx.AsyncClient | None = None,
        *options: ClientOption,
        settings: DeezerSettings | None = None,
    ) -> None:
        """Build a client from settings, then apply ``options`` in order.

        Args:
            http_client: Optional caller-owned httpx client. The caller closes it.
            *options: ClientOption callables (with_base_url(), ...)
            settings: Defaults to use instead of get_settings()

        Raises:
            MalformedURLError: If a with_base_url() option gets a bad URL
            ConfigurationError: If an option is unusable
        """
        config = ClientConfig.from_settings(settings or get_settings())
        config = replace(config, http_client=http_client)
        for option in options:
            config = option(config)
        self.config = config

        if config.http_client is not None and (config.log_requests or config.transport is not None):
            logger.warning(
                "Injected httpx client is used as is; "
                "transport and request logging options are ignored"
            )

        self._owns_http_client = config.http_client is None
        self._http = config.http_client or build_http_client(config)

        # One service per collection of endpoints.
        self.albums = AlbumService(self)
        self.artists = ArtistService(self)
        self.tracks = TrackService(self)

    @property
    def base_url(self) -> str:
        return self.config.base_url

    async def aclose(self) -> None:
        """Close the httpx client, if this DeezerClient created it."""
        if self._owns_http_client:
            await self._http.aclose()

    async def __aenter__(self) -> DeezerClient:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    def new_request(self, method: str, path: str) -> httpx.Request:
        """Build a request for ``path`` relative to the base URL.

        Only GET-style reads exist, so there is never a body.

        Raises:
            MalformedURLError: If ``path`` or the base URL does not parse
        """
        url = resolve_reference(self.config.base_url, path)
        try:
            request = httpx.Request(method, url)
        except httpx.InvalidURL as e:
            raise MalformedURLError(url, str(e)) from e
        request.headers["Accept"] = "application/json"
        return request

    async def do_request(self, ctx: Context | None, request: httpx.Request) -> Response:
        """Send ``request`` and classify the outcome.

        Raises:
            TransportError: If no response arrived (network, timeout, Context)
            BodyReadError: If the body could not be drained
            ErrorResponse: HTTPStatusError or ApplicationError from classification
        """
        ctx = ctx or Context.background()
        http_response = await self._send(ctx, request)
        try:
            await check_response(ctx, http_response)
        except BaseException:
            # Classifier errors and task cancellation alike: never leak the stream.
            await http_response.aclose()
            raise
        return Response(http_response)

    async def do(
        self,
        ctx: Context | None,
        request: httpx.Request,
        target: DecodeTarget | None = None,
    ) -> tuple[Any, Response]:
        """Make an API request and decode the body into ``target``.

        Returns:
            (decoded value, Response). The value is None without a target.

        Raises:
            Everything do_request() raises, plus DecodeError
        """
        response = await self.do_request(ctx, request)
        try:
            value = decode(response, target)
        finally:
            await response.aclose()
        return value, response

    async def _send(self, ctx: Context, request: httpx.Request) -> httpx.Response:
        try:
            return await ctx.run(self._http.send(request, stream=True))
        except (ContextCancelledError, DeadlineExceededError) as e:
            raise TransportError(request, e) from e
        except httpx.HTTPError as e:
            logger.debug("Deezer transport failure: %s %s: %r", request.method, request.url, e)
            raise TransportError(request, e) from e


__all__ = [
    "ClientConfig",
    "ClientOption",
    "DeezerClient",
    "build_http_client",
    "with_base_url",
    "with_http_client",
    "with_request_logging",
    "with_timeout",
    "with_transport",
]
