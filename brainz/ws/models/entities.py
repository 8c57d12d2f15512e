"""Entity records for the 16 resource kinds.

Field lists follow the service's JSON output. Identity fields are required;
everything else depends on the includes requested and defaults to None.
The records reference each other (a release embeds its release group, a
relation embeds any kind), so they live in one module and are rebuilt once
at the bottom.
"""

from __future__ import annotations

from .base import MusicBrainzModel
from .common import (
    Alias,
    Coordinates,
    CoverArtArchive,
    Disc,
    Genre,
    LifeSpan,
    Rating,
    Tag,
)
from .dates import OptionalDate
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
    WorkType,
)


class Relation(MusicBrainzModel):
    """Relationship edge from the enclosing entity to a target entity.

    Exactly one of the target fields is populated, named by ``target_type``.
    """

    type: str | None = None
    type_id: str | None = None
    target_type: str | None = None
    direction: Direction | None = None
    begin: OptionalDate = None
    end: OptionalDate = None
    ended: bool | None = None
    attributes: list[str] | None = None
    attribute_ids: dict[str, str] | None = None
    attribute_values: dict[str, str] | None = None
    target_credit: str | None = None
    source_credit: str | None = None
    ordering_key: int | None = None

    area: Area | None = None
    artist: Artist | None = None
    event: Event | None = None
    genre: Genre | None = None
    instrument: Instrument | None = None
    label: Label | None = None
    place: Place | None = None
    recording: Recording | None = None
    release: Release | None = None
    release_group: ReleaseGroup | None = None
    series: Series | None = None
    url: Url | None = None
    work: Work | None = None


class ArtistCredit(MusicBrainzModel):
    """One credited name in an artist credit, with its join phrase."""

    name: str | None = None
    joinphrase: str | None = None
    artist: Artist | None = None


class Area(MusicBrainzModel):
    id: str
    name: str | None = None
    sort_name: str | None = None
    type: AreaType | None = None
    type_id: str | None = None
    disambiguation: str | None = None
    iso_3166_1_codes: list[str] | None = None
    iso_3166_2_codes: list[str] | None = None
    life_span: LifeSpan | None = None
    aliases: list[Alias] | None = None
    tags: list[Tag] | None = None
    genres: list[Genre] | None = None
    relations: list[Relation] | None = None
    annotation: str | None = None
    score: int | None = None


class Artist(MusicBrainzModel):
    id: str
    name: str | None = None
    sort_name: str | None = None
    type: ArtistType | None = None
    type_id: str | None = None
    gender: Gender | None = None
    gender_id: str | None = None
    country: str | None = None
    disambiguation: str | None = None
    area: Area | None = None
    begin_area: Area | None = None
    end_area: Area | None = None
    life_span: LifeSpan | None = None
    ipis: list[str] | None = None
    isnis: list[str] | None = None
    aliases: list[Alias] | None = None
    tags: list[Tag] | None = None
    genres: list[Genre] | None = None
    rating: Rating | None = None
    relations: list[Relation] | None = None
    recordings: list[Recording] | None = None
    releases: list[Release] | None = None
    release_groups: list[ReleaseGroup] | None = None
    works: list[Work] | None = None
    annotation: str | None = None
    score: int | None = None


class Event(MusicBrainzModel):
    id: str
    name: str | None = None
    type: EventType | None = None
    type_id: str | None = None
    cancelled: bool | None = None
    time: str | None = None
    setlist: str | None = None
    disambiguation: str | None = None
    life_span: LifeSpan | None = None
    aliases: list[Alias] | None = None
    tags: list[Tag] | None = None
    genres: list[Genre] | None = None
    rating: Rating | None = None
    relations: list[Relation] | None = None
    annotation: str | None = None
    score: int | None = None


class Instrument(MusicBrainzModel):
    id: str
    name: str | None = None
    type: InstrumentType | None = None
    type_id: str | None = None
    description: str | None = None
    disambiguation: str | None = None
    aliases: list[Alias] | None = None
    tags: list[Tag] | None = None
    genres: list[Genre] | None = None
    relations: list[Relation] | None = None
    annotation: str | None = None
    score: int | None = None


class Label(MusicBrainzModel):
    id: str
    name: str | None = None
    sort_name: str | None = None
    type: LabelType | None = None
    type_id: str | None = None
    label_code: int | None = None
    country: str | None = None
    disambiguation: str | None = None
    area: Area | None = None
    life_span: LifeSpan | None = None
    ipis: list[str] | None = None
    isnis: list[str] | None = None
    aliases: list[Alias] | None = None
    tags: list[Tag] | None = None
    genres: list[Genre] | None = None
    rating: Rating | None = None
    relations: list[Relation] | None = None
    releases: list[Release] | None = None
    annotation: str | None = None
    score: int | None = None


class LabelInfo(MusicBrainzModel):
    catalog_number: str | None = None
    label: Label | None = None


class Place(MusicBrainzModel):
    id: str
    name: str | None = None
    type: PlaceType | None = None
    type_id: str | None = None
    address: str | None = None
    disambiguation: str | None = None
    area: Area | None = None
    coordinates: Coordinates | None = None
    life_span: LifeSpan | None = None
    aliases: list[Alias] | None = None
    tags: list[Tag] | None = None
    genres: list[Genre] | None = None
    relations: list[Relation] | None = None
    annotation: str | None = None
    score: int | None = None


class Recording(MusicBrainzModel):
    id: str
    title: str | None = None
    length: int | None = None
    video: bool | None = None
    disambiguation: str | None = None
    first_release_date: OptionalDate = None
    isrcs: list[str] | None = None
    artist_credit: list[ArtistCredit] | None = None
    releases: list[Release] | None = None
    aliases: list[Alias] | None = None
    tags: list[Tag] | None = None
    genres: list[Genre] | None = None
    rating: Rating | None = None
    relations: list[Relation] | None = None
    annotation: str | None = None
    score: int | None = None


class Track(MusicBrainzModel):
    """A recording as it appears on one medium."""

    id: str
    title: str | None = None
    number: str | None = None
    position: int | None = None
    length: int | None = None
    recording: Recording | None = None
    artist_credit: list[ArtistCredit] | None = None


class Media(MusicBrainzModel):
    """One medium (disc, side pair, file set) of a release."""

    title: str | None = None
    position: int | None = None
    format: str | None = None
    format_id: str | None = None
    track_count: int | None = None
    track_offset: int | None = None
    discs: list[Disc] | None = None
    tracks: list[Track] | None = None
    data_tracks: list[Track] | None = None
    pregap: Track | None = None


class TextRepresentation(MusicBrainzModel):
    language: Language | None = None
    script: ReleaseScript | None = None


class ReleaseEvent(MusicBrainzModel):
    date: OptionalDate = None
    area: Area | None = None


class Release(MusicBrainzModel):
    id: str
    title: str | None = None
    status: ReleaseStatus | None = None
    status_id: str | None = None
    date: OptionalDate = None
    country: str | None = None
    quality: ReleaseQuality | None = None
    barcode: str | None = None
    asin: str | None = None
    disambiguation: str | None = None
    packaging: ReleasePackaging | None = None
    packaging_id: str | None = None
    text_representation: TextRepresentation | None = None
    release_events: list[ReleaseEvent] | None = None
    release_group: ReleaseGroup | None = None
    artist_credit: list[ArtistCredit] | None = None
    label_info: list[LabelInfo] | None = None
    media: list[Media] | None = None
    track_count: int | None = None
    cover_art_archive: CoverArtArchive | None = None
    aliases: list[Alias] | None = None
    tags: list[Tag] | None = None
    genres: list[Genre] | None = None
    rating: Rating | None = None
    relations: list[Relation] | None = None
    annotation: str | None = None
    score: int | None = None


class ReleaseGroup(MusicBrainzModel):
    id: str
    title: str | None = None
    primary_type: ReleaseGroupPrimaryType | None = None
    primary_type_id: str | None = None
    secondary_types: list[ReleaseGroupSecondaryType] | None = None
    secondary_type_ids: list[str] | None = None
    first_release_date: OptionalDate = None
    disambiguation: str | None = None
    artist_credit: list[ArtistCredit] | None = None
    releases: list[Release] | None = None
    aliases: list[Alias] | None = None
    tags: list[Tag] | None = None
    genres: list[Genre] | None = None
    rating: Rating | None = None
    relations: list[Relation] | None = None
    annotation: str | None = None
    score: int | None = None


class Series(MusicBrainzModel):
    id: str
    name: str | None = None
    type: SeriesType | None = None
    type_id: str | None = None
    disambiguation: str | None = None
    aliases: list[Alias] | None = None
    tags: list[Tag] | None = None
    genres: list[Genre] | None = None
    relations: list[Relation] | None = None
    annotation: str | None = None
    score: int | None = None


class Url(MusicBrainzModel):
    id: str
    resource: str | None = None
    relations: list[Relation] | None = None
    score: int | None = None


class Work(MusicBrainzModel):
    id: str
    title: str | None = None
    type: WorkType | None = None
    type_id: str | None = None
    language: Language | None = None
    languages: list[Language] | None = None
    iswcs: list[str] | None = None
    disambiguation: str | None = None
    aliases: list[Alias] | None = None
    tags: list[Tag] | None = None
    genres: list[Genre] | None = None
    rating: Rating | None = None
    relations: list[Relation] | None = None
    annotation: str | None = None
    score: int | None = None


class Annotation(MusicBrainzModel):
    """Wiki-style annotation text attached to an entity (search only)."""

    entity: str
    type: str | None = None
    name: str | None = None
    text: str | None = None
    score: int | None = None


class CDStub(MusicBrainzModel):
    """Unmoderated CD submission (search only)."""

    id: str
    title: str | None = None
    artist: str | None = None
    barcode: str | None = None
    comment: str | None = None
    count: int | None = None
    score: int | None = None


for _model in (
    Relation,
    ArtistCredit,
    Area,
    Artist,
    Event,
    Instrument,
    Label,
    LabelInfo,
    Place,
    Recording,
    Track,
    Media,
    ReleaseEvent,
    Release,
    ReleaseGroup,
    Series,
    Url,
    Work,
):
    _model.model_rebuild()
