"""Deezer resource records.

Hey future me - these are plain decode targets, nothing more. Every field has a
zero-value default so a key missing from the JSON (or a totally empty body) still
gives you a valid object. Unknown keys are ignored because Deezer adds fields
without warning.

Ids, durations and counters are ints everywhere. Older payloads sometimes sent
them as strings; pydantic's lax mode coerces "123" -> 123 so we don't care.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")


class Genre(_Record):
    """Genre entry inside an album's ``genres.data``."""

    id: int = 0
    name: str = ""
    picture: str = ""
    type: str = ""


class GenreList(_Record):
    data: list[Genre] = Field(default_factory=list)


class Artist(_Record):
    """Deezer artist (``/artist/{id}`` or embedded in albums/tracks)."""

    id: int = 0
    name: str = ""
    link: str = ""
    share: str = ""
    picture: str = ""
    picture_small: str = ""  # 56x56
    picture_medium: str = ""  # 250x250
    picture_big: str = ""  # 500x500
    picture_xl: str = ""  # 1000x1000
    nb_album: int = 0
    nb_fan: int = 0
    radio: bool = False
    tracklist: str = ""
    type: str = ""


class Contributor(Artist):
    """Artist credited on an album or track, with its role."""

    role: str = ""


class Track(_Record):
    """Deezer track.

    Embedded tracks (album tracklists) only carry a subset of these fields;
    the rest stay at their zero value.
    """

    id: int = 0
    readable: bool = False
    title: str = ""
    title_short: str = ""
    title_version: str = ""
    isrc: str = ""
    link: str = ""
    share: str = ""
    duration: int = 0  # seconds
    track_position: int = 0
    disk_number: int = 0
    rank: int = 0
    release_date: str = ""
    explicit_lyrics: bool = False
    explicit_content_lyrics: int = 0
    explicit_content_cover: int = 0
    preview: str = ""  # 30 second mp3
    bpm: float = 0.0
    gain: float = 0.0
    available_countries: list[str] = Field(default_factory=list)
    contributors: list[Contributor] = Field(default_factory=list)
    md5_image: str = ""
    artist: Artist | None = None
    album: Album | None = None
    type: str = ""


class TrackList(_Record):
    """A page of tracks: ``album.tracks`` and ``/album/{id}/tracks``."""

    data: list[Track] = Field(default_factory=list)
    total: int = 0
    prev: str = ""
    next: str = ""


class Album(_Record):
    """Deezer album (``/album/{id}``)."""

    id: int = 0
    title: str = ""
    upc: str = ""
    link: str = ""
    share: str = ""
    cover: str = ""
    cover_small: str = ""  # 56x56
    cover_medium: str = ""  # 250x250
    cover_big: str = ""  # 500x500
    cover_xl: str = ""  # 1000x1000
    md5_image: str = ""
    genre_id: int = 0
    genres: GenreList = Field(default_factory=GenreList)
    label: str = ""
    nb_tracks: int = 0
    duration: int = 0  # seconds
    fans: int = 0
    rating: int = 0
    release_date: str = ""
    record_type: str = ""  # album, ep, single, compile
    available: bool = False
    tracklist: str = ""
    explicit_lyrics: bool = False
    explicit_content_lyrics: int = 0
    explicit_content_cover: int = 0
    contributors: list[Contributor] = Field(default_factory=list)
    artist: Artist | None = None
    type: str = ""
    tracks: TrackList = Field(default_factory=TrackList)


# Track -> Album is a forward reference; resolve it once everything exists.
Track.model_rebuild()
TrackList.model_rebuild()
Album.model_rebuild()

__all__ = [
    "Album",
    "Artist",
    "Contributor",
    "Genre",
    "GenreList",
    "Track",
    "TrackList",
]
