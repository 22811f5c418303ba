"""Shared plumbing for the per-resource services."""

from __future__ import annotations

import io
from typing import TYPE_CHECKING, Any, ClassVar

from deezerapi.infrastructure.integrations.context import Context
from deezerapi.infrastructure.integrations.decoding import DecodeTarget, RawTarget
from deezerapi.infrastructure.integrations.response import Response

if TYPE_CHECKING:
    from deezerapi.infrastructure.integrations.deezer_client import DeezerClient


class ResourceService:
    """Base for AlbumService, ArtistService, TrackService.

    Subclasses only set ``resource`` (the first path segment) and add typed
    methods on top of _get().
    """

    resource: ClassVar[str]

    def __init__(self, client: DeezerClient) -> None:
        self._client = client

    def _path(self, resource_id: int | str) -> str:
        return f"{self.resource}/{resource_id}"

    async def _get(
        self,
        ctx: Context | None,
        path: str,
        target: DecodeTarget | None,
    ) -> tuple[Any, Response]:
        request = self._client.new_request("GET", path)
        return await self._client.do(ctx, request, target)

    async def get_raw(
        self, ctx: Context | None, resource_id: int | str
    ) -> tuple[bytes, Response]:
        """Fetch ``<resource>/<id>`` and return the body bytes untouched."""
        buf = io.BytesIO()
        _, response = await self._get(ctx, self._path(resource_id), RawTarget(buf))
        return buf.getvalue(), response
