"""Searchable fields per entity kind.

Architecture:
    SEARCHABLE_FIELDS maps EntityKind → {field name → FieldType}. Names are
    the index field names the search server understands (``artistname``,
    ``catno``, ``firstreleasedate``), not model attribute names. The query
    builder rejects any field missing from its kind's row and any value
    whose Python type does not match the declared FieldType.

Design Decisions:
    - Static table, like the capability registry: one row per kind
    - Four value types only; anything the server indexes as a keyword or a
      phrase is TEXT
    - Genre has no row: the service exposes no genre search
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType

from ..core.enums import EntityKind


class FieldType(str, Enum):
    """Value type accepted by a search field."""

    TEXT = "text"
    DATE = "date"
    NUMBER = "number"
    BOOLEAN = "boolean"

    def __str__(self) -> str:
        """String representation returns the value."""
        return self.value


_T = FieldType.TEXT
_D = FieldType.DATE
_N = FieldType.NUMBER
_B = FieldType.BOOLEAN


def _row(**fields: FieldType) -> Mapping[str, FieldType]:
    return MappingProxyType(dict(fields))


# Fields shared by kinds with begin/end dates
_LIFE_SPAN = {"begin": _D, "end": _D, "ended": _B}

SEARCHABLE_FIELDS: dict[EntityKind, Mapping[str, FieldType]] = {
    EntityKind.ANNOTATION: _row(entity=_T, id=_T, name=_T, text=_T, type=_T),
    EntityKind.AREA: _row(
        aid=_T,
        alias=_T,
        area=_T,
        areaaccent=_T,
        comment=_T,
        iso=_T,
        iso1=_T,
        iso2=_T,
        iso3=_T,
        sortname=_T,
        tag=_T,
        type=_T,
        **_LIFE_SPAN,
    ),
    EntityKind.ARTIST: _row(
        alias=_T,
        primary_alias=_T,
        area=_T,
        arid=_T,
        artist=_T,
        artistaccent=_T,
        beginarea=_T,
        comment=_T,
        country=_T,
        endarea=_T,
        gender=_T,
        ipi=_T,
        isni=_T,
        sortname=_T,
        tag=_T,
        type=_T,
        **_LIFE_SPAN,
    ),
    EntityKind.CDSTUB: _row(
        added=_D,
        artist=_T,
        barcode=_T,
        comment=_T,
        discid=_T,
        id=_T,
        title=_T,
        tracks=_N,
    ),
    EntityKind.EVENT: _row(
        aid=_T,
        alias=_T,
        area=_T,
        arid=_T,
        artist=_T,
        comment=_T,
        eid=_T,
        event=_T,
        eventaccent=_T,
        pid=_T,
        place=_T,
        tag=_T,
        type=_T,
        **_LIFE_SPAN,
    ),
    EntityKind.INSTRUMENT: _row(
        alias=_T,
        comment=_T,
        description=_T,
        iid=_T,
        instrument=_T,
        instrumentaccent=_T,
        tag=_T,
        type=_T,
    ),
    EntityKind.LABEL: _row(
        alias=_T,
        area=_T,
        code=_N,
        comment=_T,
        country=_T,
        ipi=_T,
        isni=_T,
        label=_T,
        labelaccent=_T,
        laid=_T,
        release_count=_N,
        sortname=_T,
        tag=_T,
        type=_T,
        **_LIFE_SPAN,
    ),
    EntityKind.PLACE: _row(
        address=_T,
        alias=_T,
        area=_T,
        comment=_T,
        lat=_N,
        long=_N,
        pid=_T,
        place=_T,
        placeaccent=_T,
        type=_T,
        **_LIFE_SPAN,
    ),
    EntityKind.RECORDING: _row(
        alias=_T,
        arid=_T,
        artist=_T,
        artistname=_T,
        comment=_T,
        country=_T,
        creditname=_T,
        date=_D,
        dur=_N,
        firstreleasedate=_D,
        format=_T,
        isrc=_T,
        number=_T,
        position=_N,
        primarytype=_T,
        qdur=_N,
        recording=_T,
        recordingaccent=_T,
        reid=_T,
        release=_T,
        rgid=_T,
        rid=_T,
        secondarytype=_T,
        status=_T,
        tag=_T,
        tid=_T,
        tnum=_N,
        tracks=_N,
        tracksrelease=_N,
        type=_T,
        video=_B,
    ),
    EntityKind.RELEASE: _row(
        alias=_T,
        arid=_T,
        artist=_T,
        artistname=_T,
        asin=_T,
        barcode=_T,
        catno=_T,
        comment=_T,
        country=_T,
        creditname=_T,
        date=_D,
        discids=_N,
        discidsmedium=_N,
        format=_T,
        laid=_T,
        label=_T,
        lang=_T,
        mediums=_N,
        packaging=_T,
        primarytype=_T,
        quality=_T,
        reid=_T,
        release=_T,
        releaseaccent=_T,
        rgid=_T,
        script=_T,
        secondarytype=_T,
        status=_T,
        tag=_T,
        tracks=_N,
        tracksmedium=_N,
        type=_T,
    ),
    EntityKind.RELEASE_GROUP: _row(
        alias=_T,
        arid=_T,
        artist=_T,
        artistname=_T,
        comment=_T,
        creditname=_T,
        firstreleasedate=_D,
        primarytype=_T,
        reid=_T,
        release=_T,
        releasegroup=_T,
        releasegroupaccent=_T,
        releases=_N,
        rgid=_T,
        secondarytype=_T,
        status=_T,
        tag=_T,
        type=_T,
    ),
    EntityKind.SERIES: _row(
        alias=_T,
        comment=_T,
        orderingattribute=_T,
        series=_T,
        seriesaccent=_T,
        sid=_T,
        tag=_T,
        type=_T,
    ),
    EntityKind.TAG: _row(tag=_T),
    EntityKind.URL: _row(
        relationtype=_T,
        targetid=_T,
        targettype=_T,
        uid=_T,
        url=_T,
    ),
    EntityKind.WORK: _row(
        alias=_T,
        arid=_T,
        artist=_T,
        comment=_T,
        iswc=_T,
        lang=_T,
        recording=_T,
        recording_count=_N,
        rid=_T,
        tag=_T,
        type=_T,
        wid=_T,
        work=_T,
        workaccent=_T,
    ),
}


def searchable_fields(kind: EntityKind) -> Mapping[str, FieldType]:
    """Get the search fields declared for ``kind`` (empty if not searchable)."""
    return SEARCHABLE_FIELDS.get(kind, MappingProxyType({}))


def field_type(kind: EntityKind, name: str) -> FieldType | None:
    """Get the value type of ``name`` for ``kind``. Returns None if undeclared."""
    return searchable_fields(kind).get(name)
