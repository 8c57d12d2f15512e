"""Core enumerations shared by the request and response layers.

Architecture:
    This module defines the closed sets the whole engine is keyed on. Every
    table in ``capability.registry`` and ``search.fields`` maps from these
    enums, so adding a kind or an include token is a one-line change here
    plus a row in the relevant table.

Design Decisions:
    - String enums: values are the literal wire tokens, so rendering a URL
      never needs a lookup table
    - Include is a union of two enums, not a wrapper class: the two families
      share one token namespace once rendered

Key Types:
    - EntityKind: the 16 resource kinds and their URL path tokens
    - Subquery / Relationship: the two families of ``inc=`` tokens
    - BrowseBy: relation params accepted by browse requests
    - RequestMode: lookup, browse or search
    - SerializationMode: key casing used when re-encoding models
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias

# Envelope list keys for kinds whose plural is not "<kind>s"
_IRREGULAR_PLURALS = {
    "series": "series",
}


class EntityKind(str, Enum):
    """Resource kinds exposed by the web service.

    The value doubles as the path segment (``/ws/2/release-group/...``).
    """

    ANNOTATION = "annotation"
    AREA = "area"
    ARTIST = "artist"
    CDSTUB = "cdstub"
    EVENT = "event"
    GENRE = "genre"
    INSTRUMENT = "instrument"
    LABEL = "label"
    PLACE = "place"
    RECORDING = "recording"
    RELEASE = "release"
    RELEASE_GROUP = "release-group"
    SERIES = "series"
    TAG = "tag"
    URL = "url"
    WORK = "work"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @property
    def path(self) -> str:
        """URL path segment for this kind."""
        return self.value

    @property
    def plural_key(self) -> str:
        """Key holding the entity list in browse and search envelopes."""
        return _IRREGULAR_PLURALS.get(self.value, f"{self.value}s")

    @classmethod
    def from_str(cls, value: str) -> EntityKind | None:
        """Get kind from its path token. Returns None if no match."""
        try:
            return cls(value.strip().lower().replace("_", "-"))
        except ValueError:
            return None


class Subquery(str, Enum):
    """Includes that embed a related entity's own fields (or misc data)."""

    AREAS = "areas"
    ARTISTS = "artists"
    ARTIST_CREDITS = "artist-credits"
    ALIASES = "aliases"
    ANNOTATION = "annotation"
    DISCIDS = "discids"
    GENRES = "genres"
    ISRCS = "isrcs"
    LABELS = "labels"
    MEDIA = "media"
    RATINGS = "ratings"
    RECORDINGS = "recordings"
    RELEASES = "releases"
    RELEASE_GROUPS = "release-groups"
    TAGS = "tags"
    USER_COLLECTIONS = "user-collections"
    USER_GENRES = "user-genres"
    USER_RATINGS = "user-ratings"
    USER_TAGS = "user-tags"
    VARIOUS_ARTISTS = "various-artists"
    WORKS = "works"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @property
    def requires_auth(self) -> bool:
        """Whether the service only honours this include for an authenticated user."""
        return self in _AUTH_ONLY_SUBQUERIES


_AUTH_ONLY_SUBQUERIES = frozenset(
    {
        Subquery.USER_COLLECTIONS,
        Subquery.USER_GENRES,
        Subquery.USER_RATINGS,
        Subquery.USER_TAGS,
    }
)


class Relationship(str, Enum):
    """Includes that embed relationship edges to other entities."""

    AREA = "area-rels"
    ARTIST = "artist-rels"
    EVENT = "event-rels"
    GENRE = "genre-rels"
    INSTRUMENT = "instrument-rels"
    LABEL = "label-rels"
    PLACE = "place-rels"
    RECORDING = "recording-rels"
    RELEASE = "release-rels"
    RELEASE_GROUP = "release-group-rels"
    SERIES = "series-rels"
    URL = "url-rels"
    WORK = "work-rels"
    # Level rels expand relationships of nested entities
    RECORDING_LEVEL = "recording-level-rels"
    RELEASE_GROUP_LEVEL = "release-group-level-rels"
    WORK_LEVEL = "work-level-rels"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value

    @property
    def requires_auth(self) -> bool:
        return False


Include: TypeAlias = Subquery | Relationship


def parse_include(value: Include | str) -> Include | None:
    """Coerce a token into an Include. Returns None if the token is unknown."""
    if isinstance(value, (Subquery, Relationship)):
        return value
    token = str(value).strip().lower()
    for family in (Subquery, Relationship):
        try:
            return family(token)
        except ValueError:
            continue
    return None


class BrowseBy(str, Enum):
    """Relation params that scope a browse request."""

    AREA = "area"
    ARTIST = "artist"
    COLLECTION = "collection"
    EVENT = "event"
    LABEL = "label"
    PLACE = "place"
    RECORDING = "recording"
    RELEASE = "release"
    RELEASE_GROUP = "release-group"
    TRACK = "track"
    TRACK_ARTIST = "track_artist"
    WORK = "work"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


class RequestMode(str, Enum):
    """Access pattern of a request."""

    LOOKUP = "lookup"
    BROWSE = "browse"
    SEARCH = "search"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


class SerializationMode(str, Enum):
    """Key casing used when models are re-encoded.

    MODERN emits the hyphenated keys the service itself sends. LEGACY emits
    snake_case attribute names. Decoding accepts both regardless.
    """

    MODERN = "modern"
    LEGACY = "legacy"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value
