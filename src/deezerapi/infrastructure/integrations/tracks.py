"""Track endpoints."""

from __future__ import annotations

from deezerapi.domain.entities import Track
from deezerapi.infrastructure.integrations.context import Context
from deezerapi.infrastructure.integrations.decoding import JSONTarget
from deezerapi.infrastructure.integrations.response import Response
from deezerapi.infrastructure.integrations.service import ResourceService


class TrackService(ResourceService):
    """Talks to the Deezer track service (``/track``)."""

    resource = "track"

    async def get(self, ctx: Context | None, track_id: int | str) -> tuple[Track, Response]:
        """Fetch a Track by id.

        Full tracks carry ``isrc``, ``bpm`` and ``gain``; the ones embedded in
        album tracklists don't.
        """
        track, response = await self._get(ctx, self._path(track_id), JSONTarget(Track))
        return track, response
