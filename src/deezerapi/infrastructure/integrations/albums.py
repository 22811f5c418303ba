"""Album endpoints."""

from __future__ import annotations

from deezerapi.domain.entities import Album, TrackList
from deezerapi.infrastructure.integrations.context import Context
from deezerapi.infrastructure.integrations.decoding import JSONTarget
from deezerapi.infrastructure.integrations.options import ListOptions, apply_options
from deezerapi.infrastructure.integrations.response import Response
from deezerapi.infrastructure.integrations.service import ResourceService


class AlbumService(ResourceService):
    """Talks to the Deezer album service (``/album``)."""

    resource = "album"

    async def get(self, ctx: Context | None, album_id: int | str) -> tuple[Album, Response]:
        """Fetch an Album by id.

        Hey future me - this is the FULL album, including cover_xl (1000x1000),
        the UPC and the first page of tracks in ``tracks``.
        """
        album, response = await self._get(ctx, self._path(album_id), JSONTarget(Album))
        return album, response

    async def list_tracks(
        self,
        ctx: Context | None,
        album_id: int | str,
        options: ListOptions | None = None,
    ) -> tuple[TrackList, Response]:
        """Fetch one page of an album's tracks.

        Raises:
            MalformedURLError: If the id doesn't make a valid path
        """
        path = apply_options(f"{self._path(album_id)}/tracks", options)
        tracks, response = await self._get(ctx, path, JSONTarget(TrackList))
        return tracks, response
