"""Unit tests for request composition."""

import pytest

from brainz.ws.core import (
    BrowseBy,
    BrowseFilter,
    EntityKind,
    IncompleteQueryError,
    InvalidIncludeError,
    InvalidRequestError,
    PaginationCursor,
    Relationship,
    RequestBuilder,
    RequestMode,
    Subquery,
    compose,
)
from brainz.ws.search import SearchQueryBuilder

BASE = "https://musicbrainz.org/ws/2"
NIRVANA_ID = "5b11f4ce-a62d-471e-81fc-a69a8278c7da"


class TestLookup:
    """Test lookup composition."""

    def test_lookup_without_includes(self):
        request = compose(RequestMode.LOOKUP, EntityKind.ARTIST, entity_id=NIRVANA_ID)
        assert request.path == f"artist/{NIRVANA_ID}"
        assert request.url(BASE) == f"{BASE}/artist/{NIRVANA_ID}?fmt=json"

    def test_lookup_with_recordings(self):
        request = compose(
            RequestMode.LOOKUP,
            EntityKind.ARTIST,
            entity_id=NIRVANA_ID,
            includes=[Subquery.RECORDINGS],
        )
        assert request.url(BASE) == f"{BASE}/artist/{NIRVANA_ID}?fmt=json&inc=recordings"

    def test_include_plus_is_not_escaped(self):
        request = compose(
            RequestMode.LOOKUP,
            EntityKind.RELEASE,
            entity_id=NIRVANA_ID,
            includes=["artists", Relationship.URL, "artists"],
        )
        assert request.includes == (Subquery.ARTISTS, Relationship.URL)
        assert request.query_string() == "fmt=json&inc=artists+url-rels"

    @pytest.mark.parametrize("entity_id", [None, "", "   ", "nirvana", "5b11f4ce-a62d-471e-81fc"])
    def test_lookup_requires_mbid(self, entity_id):
        with pytest.raises(InvalidRequestError):
            compose(RequestMode.LOOKUP, EntityKind.ARTIST, entity_id=entity_id)

    def test_lookup_rejects_pagination(self):
        with pytest.raises(InvalidRequestError):
            compose(
                RequestMode.LOOKUP,
                EntityKind.ARTIST,
                entity_id=NIRVANA_ID,
                pagination=PaginationCursor(limit=10),
            )

    def test_lookup_of_search_only_kind_fails(self):
        with pytest.raises(InvalidRequestError, match="does not support lookup"):
            compose(RequestMode.LOOKUP, EntityKind.TAG, entity_id=NIRVANA_ID)

    def test_illegal_include_fails_before_network(self):
        with pytest.raises(InvalidIncludeError):
            compose(
                RequestMode.LOOKUP,
                EntityKind.AREA,
                entity_id=NIRVANA_ID,
                includes=[Subquery.RECORDINGS],
            )


class TestBrowse:
    """Test browse composition."""

    def test_browse_releases_by_artist(self):
        request = compose(
            RequestMode.BROWSE,
            EntityKind.RELEASE,
            browse_filter=BrowseFilter(BrowseBy.ARTIST, NIRVANA_ID),
            pagination=PaginationCursor(limit=10, offset=0),
        )
        assert request.params() == [
            ("artist", NIRVANA_ID),
            ("fmt", "json"),
            ("limit", "10"),
            ("offset", "0"),
        ]
        assert request.url(BASE) == (
            f"{BASE}/release?artist={NIRVANA_ID}&fmt=json&limit=10&offset=0"
        )

    def test_browse_requires_filter(self):
        with pytest.raises(InvalidRequestError, match="browse filter"):
            compose(RequestMode.BROWSE, EntityKind.RELEASE)

    def test_browse_by_illegal_relation(self):
        with pytest.raises(InvalidRequestError, match="Cannot browse artist by label"):
            compose(
                RequestMode.BROWSE,
                EntityKind.ARTIST,
                browse_filter=BrowseFilter(BrowseBy.LABEL, NIRVANA_ID),
            )

    def test_browse_filter_id_must_be_mbid(self):
        with pytest.raises(InvalidRequestError):
            compose(
                RequestMode.BROWSE,
                EntityKind.RELEASE,
                browse_filter=BrowseFilter(BrowseBy.ARTIST, "nirvana"),
            )

    def test_track_artist_param_name(self):
        request = compose(
            RequestMode.BROWSE,
            EntityKind.RELEASE,
            browse_filter=BrowseFilter(BrowseBy.TRACK_ARTIST, NIRVANA_ID),
        )
        assert ("track_artist", NIRVANA_ID) in request.params()

    def test_browse_rejects_entity_id(self):
        with pytest.raises(InvalidRequestError):
            compose(
                RequestMode.BROWSE,
                EntityKind.RELEASE,
                entity_id=NIRVANA_ID,
                browse_filter=BrowseFilter(BrowseBy.ARTIST, NIRVANA_ID),
            )


class TestSearch:
    """Test search composition."""

    def test_search_with_raw_query(self):
        request = compose(RequestMode.SEARCH, EntityKind.ARTIST, query="artist:Nirvana")
        assert request.path == "artist"
        assert request.query_string() == "fmt=json&query=artist%3ANirvana"

    def test_search_with_builder(self):
        builder = SearchQueryBuilder(EntityKind.ARTIST).where("artist", "Nirvana")
        request = compose(RequestMode.SEARCH, EntityKind.ARTIST, query=builder)
        assert request.query == "artist:Nirvana"

    def test_search_builder_errors_propagate(self):
        builder = SearchQueryBuilder(EntityKind.ARTIST).where("artist", "a").where("type", "b")
        with pytest.raises(IncompleteQueryError):
            compose(RequestMode.SEARCH, EntityKind.ARTIST, query=builder)

    def test_search_builder_for_other_kind(self):
        builder = SearchQueryBuilder(EntityKind.LABEL).where("label", "DGC")
        with pytest.raises(InvalidRequestError):
            compose(RequestMode.SEARCH, EntityKind.ARTIST, query=builder)

    @pytest.mark.parametrize("query", [None, "", "  "])
    def test_search_requires_query(self, query):
        with pytest.raises(InvalidRequestError):
            compose(RequestMode.SEARCH, EntityKind.ARTIST, query=query)

    def test_genre_search_unsupported(self):
        with pytest.raises(InvalidRequestError):
            compose(RequestMode.SEARCH, EntityKind.GENRE, query="grunge")

    def test_search_paginated(self):
        request = compose(
            RequestMode.SEARCH,
            EntityKind.TAG,
            query="tag:grunge",
            pagination=PaginationCursor(limit=5, offset=10),
        )
        assert [name for name, _ in request.params()] == ["fmt", "limit", "offset", "query"]


def test_unknown_mode_string_raises_contract_error():
    with pytest.raises(InvalidRequestError):
        compose("fetch", EntityKind.ARTIST, entity_id=NIRVANA_ID)


def test_descriptor_is_immutable():
    request = compose(RequestMode.LOOKUP, EntityKind.ARTIST, entity_id=NIRVANA_ID)
    with pytest.raises(AttributeError):
        request.entity_id = "other"  # type: ignore[misc]


def test_with_pagination_returns_new_descriptor():
    request = compose(
        RequestMode.BROWSE,
        EntityKind.RECORDING,
        browse_filter=BrowseFilter(BrowseBy.ARTIST, NIRVANA_ID),
    )
    paged = request.with_pagination(PaginationCursor(limit=50, offset=50))
    assert request.pagination is None
    assert paged.pagination == PaginationCursor(limit=50, offset=50)
    assert paged.browse_filter == request.browse_filter


class TestRequestBuilder:
    """Test the fluent request builder."""

    def test_lookup_with_includes(self):
        request = (
            RequestBuilder.lookup(EntityKind.ARTIST, NIRVANA_ID)
            .include(Subquery.ALIASES, "url-rels")
            .build()
        )
        assert request.mode is RequestMode.LOOKUP
        assert request.includes == (Subquery.ALIASES, Relationship.URL)

    def test_browse_with_limit_only(self):
        request = RequestBuilder.browse(EntityKind.RELEASE, BrowseBy.LABEL, NIRVANA_ID).limit(10).build()
        assert request.pagination == PaginationCursor(limit=10, offset=0)

    def test_browse_without_paging(self):
        request = RequestBuilder.browse(EntityKind.RELEASE, "label", NIRVANA_ID).build()
        assert request.pagination is None
        assert request.browse_filter == BrowseFilter(BrowseBy.LABEL, NIRVANA_ID)

    def test_page_copies_cursor(self):
        request = (
            RequestBuilder.search(EntityKind.ARTIST, "artist:Nirvana")
            .page(PaginationCursor(limit=20, offset=40))
            .build()
        )
        assert request.pagination.limit == 20
        assert request.pagination.offset == 40

    def test_invalid_include_raises_on_build(self):
        builder = RequestBuilder.lookup(EntityKind.GENRE, NIRVANA_ID).include("recordings")
        with pytest.raises(InvalidIncludeError):
            builder.build()
