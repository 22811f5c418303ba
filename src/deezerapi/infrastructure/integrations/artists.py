"""Artist endpoints."""

from __future__ import annotations

from deezerapi.domain.entities import Artist
from deezerapi.infrastructure.integrations.context import Context
from deezerapi.infrastructure.integrations.decoding import JSONTarget
from deezerapi.infrastructure.integrations.response import Response
from deezerapi.infrastructure.integrations.service import ResourceService


class ArtistService(ResourceService):
    """Talks to the Deezer artist service (``/artist``)."""

    resource = "artist"

    async def get(self, ctx: Context | None, artist_id: int | str) -> tuple[Artist, Response]:
        """Fetch an Artist by id."""
        artist, response = await self._get(ctx, self._path(artist_id), JSONTarget(Artist))
        return artist, response
