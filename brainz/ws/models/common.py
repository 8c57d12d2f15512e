"""Leaf records shared by several entity kinds.

These records hold no references to other entities. Genre and Tag double as
the top-level entities of the same name.
"""

from __future__ import annotations

from .base import MusicBrainzModel
from .dates import OptionalDate


class LifeSpan(MusicBrainzModel):
    """Begin and end of an artist, label, area, place or event."""

    begin: OptionalDate = None
    end: OptionalDate = None
    ended: bool | None = None


class Alias(MusicBrainzModel):
    """Alternate name, optionally tied to a locale."""

    name: str | None = None
    sort_name: str | None = None
    type: str | None = None
    type_id: str | None = None
    locale: str | None = None
    primary: bool | None = None
    begin: OptionalDate = None
    end: OptionalDate = None
    ended: bool | None = None


class Tag(MusicBrainzModel):
    """Folksonomy tag. ``count`` is the number of votes."""

    name: str
    count: int | None = None
    score: int | None = None


class Genre(MusicBrainzModel):
    id: str
    name: str | None = None
    disambiguation: str | None = None
    count: int | None = None


class Rating(MusicBrainzModel):
    value: float | None = None
    votes_count: int | None = None


class Coordinates(MusicBrainzModel):
    latitude: float | None = None
    longitude: float | None = None


class Disc(MusicBrainzModel):
    """Disc ID attached to a medium."""

    id: str
    offset_count: int | None = None
    sectors: int | None = None
    offsets: list[int] | None = None


class CoverArtArchive(MusicBrainzModel):
    artwork: bool | None = None
    count: int | None = None
    front: bool | None = None
    back: bool | None = None
    darkened: bool | None = None
