"""Static capability tables for the web service.

This module answers "is this request shape legal?" without touching the
network: which includes an entity kind accepts, which browse-by filters it
accepts, and which access modes the service exposes for it.

Architecture:
    The registry maps:
    EntityKind → frozenset[Include]        (LEGAL_INCLUDES)
    EntityKind → frozenset[BrowseBy]       (LEGAL_BROWSE_BY)
    EntityKind → frozenset[RequestMode]    (SUPPORTED_MODES)

    Tables are plain dicts built once at import time and consulted by the
    include algebra and the request composer. Adding a new capability means
    editing a row, not adding code paths.

Design Decisions:
    - Static registry: fast lookups, no network discovery
    - Frozen sets: tables cannot be mutated by callers
    - Shared fragments: the misc includes most kinds accept are declared
      once and unioned into each row

See Also:
    - core.includes: validates includes against LEGAL_INCLUDES
    - core.request: validates modes and browse-by filters
"""

from __future__ import annotations

from ..core.enums import BrowseBy, EntityKind, Include, Relationship, RequestMode, Subquery

# Relationship includes every relatable kind accepts
_ALL_RELS: frozenset[Include] = frozenset(
    {
        Relationship.AREA,
        Relationship.ARTIST,
        Relationship.EVENT,
        Relationship.GENRE,
        Relationship.INSTRUMENT,
        Relationship.LABEL,
        Relationship.PLACE,
        Relationship.RECORDING,
        Relationship.RELEASE,
        Relationship.RELEASE_GROUP,
        Relationship.SERIES,
        Relationship.URL,
        Relationship.WORK,
    }
)

_NAMING: frozenset[Include] = frozenset({Subquery.ALIASES, Subquery.ANNOTATION})

_FOLKSONOMY: frozenset[Include] = frozenset(
    {
        Subquery.TAGS,
        Subquery.USER_TAGS,
        Subquery.GENRES,
        Subquery.USER_GENRES,
    }
)

_RATINGS: frozenset[Include] = frozenset({Subquery.RATINGS, Subquery.USER_RATINGS})

_COMMON = _NAMING | _FOLKSONOMY | _ALL_RELS


LEGAL_INCLUDES: dict[EntityKind, frozenset[Include]] = {
    EntityKind.AREA: _COMMON,
    EntityKind.ARTIST: _COMMON
    | _RATINGS
    | {
        Subquery.RECORDINGS,
        Subquery.RELEASES,
        Subquery.RELEASE_GROUPS,
        Subquery.WORKS,
        Subquery.VARIOUS_ARTISTS,
        Subquery.DISCIDS,
        Subquery.MEDIA,
        Subquery.ISRCS,
        Subquery.ARTIST_CREDITS,
        Relationship.RECORDING_LEVEL,
        Relationship.RELEASE_GROUP_LEVEL,
        Relationship.WORK_LEVEL,
    },
    EntityKind.EVENT: _COMMON | _RATINGS,
    EntityKind.GENRE: _NAMING,
    EntityKind.INSTRUMENT: _COMMON,
    EntityKind.LABEL: _COMMON
    | _RATINGS
    | {
        Subquery.RELEASES,
        Subquery.DISCIDS,
        Subquery.MEDIA,
    },
    EntityKind.PLACE: _COMMON,
    EntityKind.RECORDING: _COMMON
    | _RATINGS
    | {
        Subquery.ARTISTS,
        Subquery.RELEASES,
        Subquery.RELEASE_GROUPS,
        Subquery.ISRCS,
        Subquery.ARTIST_CREDITS,
        Subquery.DISCIDS,
        Subquery.MEDIA,
        Relationship.WORK_LEVEL,
    },
    EntityKind.RELEASE: _COMMON
    | _RATINGS
    | {
        Subquery.ARTISTS,
        Subquery.LABELS,
        Subquery.RECORDINGS,
        Subquery.RELEASE_GROUPS,
        Subquery.DISCIDS,
        Subquery.MEDIA,
        Subquery.ARTIST_CREDITS,
        Subquery.ISRCS,
        Subquery.USER_COLLECTIONS,
        Relationship.RECORDING_LEVEL,
        Relationship.RELEASE_GROUP_LEVEL,
        Relationship.WORK_LEVEL,
    },
    EntityKind.RELEASE_GROUP: _COMMON
    | _RATINGS
    | {
        Subquery.ARTISTS,
        Subquery.RELEASES,
        Subquery.DISCIDS,
        Subquery.MEDIA,
        Subquery.ARTIST_CREDITS,
    },
    EntityKind.SERIES: _COMMON,
    EntityKind.WORK: _COMMON | _RATINGS,
    EntityKind.URL: _ALL_RELS,
    # Search-only kinds take no expansions
    EntityKind.ANNOTATION: frozenset(),
    EntityKind.CDSTUB: frozenset(),
    EntityKind.TAG: frozenset(),
}


LEGAL_BROWSE_BY: dict[EntityKind, frozenset[BrowseBy]] = {
    EntityKind.AREA: frozenset({BrowseBy.COLLECTION}),
    EntityKind.ARTIST: frozenset(
        {
            BrowseBy.AREA,
            BrowseBy.COLLECTION,
            BrowseBy.RECORDING,
            BrowseBy.RELEASE,
            BrowseBy.RELEASE_GROUP,
            BrowseBy.WORK,
        }
    ),
    EntityKind.EVENT: frozenset(
        {BrowseBy.AREA, BrowseBy.ARTIST, BrowseBy.COLLECTION, BrowseBy.PLACE}
    ),
    EntityKind.INSTRUMENT: frozenset({BrowseBy.COLLECTION}),
    EntityKind.LABEL: frozenset({BrowseBy.AREA, BrowseBy.COLLECTION, BrowseBy.RELEASE}),
    EntityKind.PLACE: frozenset({BrowseBy.AREA, BrowseBy.COLLECTION}),
    EntityKind.RECORDING: frozenset(
        {BrowseBy.ARTIST, BrowseBy.COLLECTION, BrowseBy.RELEASE, BrowseBy.WORK}
    ),
    EntityKind.RELEASE: frozenset(
        {
            BrowseBy.AREA,
            BrowseBy.ARTIST,
            BrowseBy.COLLECTION,
            BrowseBy.LABEL,
            BrowseBy.RECORDING,
            BrowseBy.RELEASE_GROUP,
            BrowseBy.TRACK,
            BrowseBy.TRACK_ARTIST,
        }
    ),
    EntityKind.RELEASE_GROUP: frozenset(
        {BrowseBy.ARTIST, BrowseBy.COLLECTION, BrowseBy.RELEASE}
    ),
    EntityKind.SERIES: frozenset({BrowseBy.COLLECTION}),
    EntityKind.WORK: frozenset({BrowseBy.ARTIST, BrowseBy.COLLECTION}),
    EntityKind.URL: frozenset({BrowseBy.COLLECTION}),
    EntityKind.ANNOTATION: frozenset(),
    EntityKind.CDSTUB: frozenset(),
    EntityKind.GENRE: frozenset(),
    EntityKind.TAG: frozenset(),
}


_LOOKUP_BROWSE_SEARCH = frozenset({RequestMode.LOOKUP, RequestMode.BROWSE, RequestMode.SEARCH})

SUPPORTED_MODES: dict[EntityKind, frozenset[RequestMode]] = {
    **{kind: _LOOKUP_BROWSE_SEARCH for kind in LEGAL_BROWSE_BY if LEGAL_BROWSE_BY[kind]},
    EntityKind.GENRE: frozenset({RequestMode.LOOKUP}),
    EntityKind.ANNOTATION: frozenset({RequestMode.SEARCH}),
    EntityKind.CDSTUB: frozenset({RequestMode.SEARCH}),
    EntityKind.TAG: frozenset({RequestMode.SEARCH}),
}


def legal_includes(kind: EntityKind) -> frozenset[Include]:
    """Get the includes a request for ``kind`` may carry.

    Args:
        kind: Entity kind of the request

    Returns:
        Frozen set of legal Include values (empty for search-only kinds)
    """
    return LEGAL_INCLUDES.get(kind, frozenset())


def legal_browse_by(kind: EntityKind) -> frozenset[BrowseBy]:
    """Get the browse-by filters accepted when browsing ``kind``."""
    return LEGAL_BROWSE_BY.get(kind, frozenset())


def supported_modes(kind: EntityKind) -> frozenset[RequestMode]:
    """Get the access modes the service exposes for ``kind``."""
    return SUPPORTED_MODES.get(kind, frozenset())


def supports_include(kind: EntityKind, include: Include) -> bool:
    """Check whether ``include`` is legal for ``kind``."""
    return include in legal_includes(kind)


def supports_mode(kind: EntityKind, mode: RequestMode) -> bool:
    """Check whether the service exposes ``mode`` for ``kind``."""
    return mode in supported_modes(kind)


def describe_kind(kind: EntityKind) -> dict[str, list[str]]:
    """Summarise capabilities of a kind in a JSON-friendly dict.

    Example:
        >>> describe_kind(EntityKind.GENRE)
        {'modes': ['lookup'], 'includes': ['aliases', 'annotation'], 'browse_by': []}
    """
    return {
        "modes": sorted(mode.value for mode in supported_modes(kind)),
        "includes": sorted(include.value for include in legal_includes(kind)),
        "browse_by": sorted(by.value for by in legal_browse_by(kind)),
    }
