"""Shared fixtures for Deezer client tests.

Hey future me - nothing here touches the network. Every client is wired to an
httpx.MockTransport whose handler plays the Deezer server, and every request the
handler sees is recorded so tests can assert on paths, queries and headers.
"""

from collections.abc import Callable

import httpx
import pytest
from fakes import BASE_URL, Handler

from deezerapi.config.settings import DeezerSettings
from deezerapi.infrastructure.integrations.deezer_client import (
    ClientOption,
    DeezerClient,
    with_base_url,
    with_transport,
)


@pytest.fixture
def settings() -> DeezerSettings:
    return DeezerSettings(_env_file=None)


@pytest.fixture
def requests_seen() -> list[httpx.Request]:
    return []


@pytest.fixture
def make_client(
    settings: DeezerSettings, requests_seen: list[httpx.Request]
) -> Callable[..., DeezerClient]:
    """Factory: DeezerClient talking to ``handler`` at BASE_URL."""

    def _make(handler: Handler, *options: ClientOption) -> DeezerClient:
        async def recording_handler(request: httpx.Request) -> httpx.Response:
            requests_seen.append(request)
            result = handler(request)
            if isinstance(result, httpx.Response):
                return result
            return await result

        return DeezerClient(
            None,
            with_transport(httpx.MockTransport(recording_handler)),
            with_base_url(BASE_URL),
            *options,
            settings=settings,
        )

    return _make
