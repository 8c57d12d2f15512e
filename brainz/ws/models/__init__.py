"""Typed records decoded from web service responses.

Architecture:
    This package exports the pydantic v2 models for all 16 entity kinds,
    the shared sub-records they embed, the browse/search envelopes and the
    decode/encode entry points. Every record inherits MusicBrainzModel, so
    the decoding contract (optional fields, tolerant enums, partial dates,
    dual key casing) is declared once.

Design Decisions:
    - Pydantic v2: validation, aliasing and JSON serialization in one place
    - Frozen models: a decoded response cannot be modified by accident
    - Unknown keys kept: the service adds fields without notice

Model Categories:
    - Entities: Area, Artist, Event, Genre, Instrument, Label, Place,
      Recording, Release, ReleaseGroup, Series, Tag, Url, Work, Annotation,
      CDStub
    - Sub-records: ArtistCredit, Relation, Media, Track, LifeSpan, Alias, ...
    - Envelopes: BrowseResult, SearchResult
"""

from .base import MusicBrainzModel, to_kebab
from .codec import (
    ENTITY_MODELS,
    decode_browse,
    decode_entity,
    decode_search,
    encode,
    encode_browse,
    encode_search,
    model_for,
)
from .common import Alias, Coordinates, CoverArtArchive, Disc, Genre, LifeSpan, Rating, Tag
from .dates import OptionalDate, PartialDate
from .entities import (
    Annotation,
    Area,
    Artist,
    ArtistCredit,
    CDStub,
    Event,
    Instrument,
    Label,
    LabelInfo,
    Media,
    Place,
    Recording,
    Relation,
    Release,
    ReleaseEvent,
    ReleaseGroup,
    Series,
    TextRepresentation,
    Track,
    Url,
    Work,
)
from .enums import (
    AreaType,
    ArtistType,
    Direction,
    EventType,
    Gender,
    InstrumentType,
    LabelType,
    Language,
    PlaceType,
    ReleaseGroupPrimaryType,
    ReleaseGroupSecondaryType,
    ReleasePackaging,
    ReleaseQuality,
    ReleaseScript,
    ReleaseStatus,
    SeriesType,
    TolerantEnum,
    WorkType,
)
from .results import BrowseResult, SearchResult

__all__ = [
    # Base
    "MusicBrainzModel",
    "to_kebab",
    # Codec
    "ENTITY_MODELS",
    "decode_browse",
    "decode_entity",
    "decode_search",
    "encode",
    "encode_browse",
    "encode_search",
    "model_for",
    # Dates
    "OptionalDate",
    "PartialDate",
    # Entities
    "Annotation",
    "Area",
    "Artist",
    "CDStub",
    "Event",
    "Genre",
    "Instrument",
    "Label",
    "Place",
    "Recording",
    "Release",
    "ReleaseGroup",
    "Series",
    "Tag",
    "Url",
    "Work",
    # Sub-records
    "Alias",
    "ArtistCredit",
    "Coordinates",
    "CoverArtArchive",
    "Disc",
    "LabelInfo",
    "LifeSpan",
    "Media",
    "Rating",
    "Relation",
    "ReleaseEvent",
    "TextRepresentation",
    "Track",
    # Enums
    "AreaType",
    "ArtistType",
    "Direction",
    "EventType",
    "Gender",
    "InstrumentType",
    "LabelType",
    "Language",
    "PlaceType",
    "ReleaseGroupPrimaryType",
    "ReleaseGroupSecondaryType",
    "ReleasePackaging",
    "ReleaseQuality",
    "ReleaseScript",
    "ReleaseStatus",
    "SeriesType",
    "TolerantEnum",
    "WorkType",
    # Envelopes
    "BrowseResult",
    "SearchResult",
]
