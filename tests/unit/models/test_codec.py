"""Unit tests for decoding service documents and encoding them back."""

import json

import pytest

from brainz.ws.core import EntityKind, MalformedResponseError, SerializationMode, configure
from brainz.ws.models import (
    ENTITY_MODELS,
    Artist,
    BrowseResult,
    Release,
    ReleaseGroup,
    SearchResult,
    decode_browse,
    decode_entity,
    decode_search,
    encode,
    encode_browse,
    encode_search,
)
from brainz.ws.models.codec import model_for


class TestDecodeEntity:
    """Test lookup document decoding."""

    def test_decodes_dict(self, load_json, nirvana_id):
        artist = decode_entity(EntityKind.ARTIST, load_json("lookup", "artist", "nirvana.json"))
        assert isinstance(artist, Artist)
        assert artist.id == nirvana_id
        assert artist.sort_name == "Nirvana"

    def test_decodes_bytes_and_str(self, load_json):
        document = load_json("lookup", "release", "nevermind.json")
        text = json.dumps(document)
        from_str = decode_entity(EntityKind.RELEASE, text)
        from_bytes = decode_entity(EntityKind.RELEASE, text.encode("utf-8"))
        assert from_str == from_bytes
        assert isinstance(from_str, Release)

    def test_invalid_json(self):
        with pytest.raises(MalformedResponseError, match="not valid JSON") as exc_info:
            decode_entity(EntityKind.ARTIST, '{"id": ')
        assert exc_info.value.body == '{"id": '

    def test_invalid_utf8(self):
        with pytest.raises(MalformedResponseError, match="UTF-8"):
            decode_entity(EntityKind.ARTIST, b"\xff\xfe{")

    def test_non_object_document(self):
        with pytest.raises(MalformedResponseError, match="JSON object"):
            decode_entity(EntityKind.ARTIST, "[1, 2]")

    def test_missing_identity_field(self):
        with pytest.raises(MalformedResponseError, match="artist"):
            decode_entity(EntityKind.ARTIST, {"name": "Nirvana"})

    def test_wrong_field_type(self):
        with pytest.raises(MalformedResponseError):
            decode_entity(EntityKind.RECORDING, {"id": "x", "length": "very long"})

    def test_explicit_null_is_absent(self):
        artist = decode_entity(EntityKind.ARTIST, {"id": "x", "aliases": None, "country": None})
        assert artist.aliases is None
        assert encode(artist) == {"id": "x"}

    def test_unknown_keys_survive(self, load_json):
        release = decode_entity(
            EntityKind.RELEASE, load_json("lookup", "release", "unrecognized_values.json")
        )
        assert release.unknown_fields
        encoded = encode(release)
        for key, value in release.unknown_fields.items():
            assert encoded[key] == value

    def test_every_kind_has_a_model(self):
        assert set(ENTITY_MODELS) == set(EntityKind)
        assert model_for(EntityKind.RELEASE_GROUP) is ReleaseGroup


class TestEncodeModes:
    """Test MODERN and LEGACY key casing."""

    def test_modern_uses_wire_keys(self):
        group = ReleaseGroup(id="rg", first_release_date="1991-09-24", primary_type="Album")
        encoded = encode(group, SerializationMode.MODERN)
        assert encoded == {"id": "rg", "first-release-date": "1991-09-24", "primary-type": "Album"}

    def test_legacy_uses_attribute_names(self):
        group = ReleaseGroup(id="rg", first_release_date="1991-09-24")
        encoded = encode(group, SerializationMode.LEGACY)
        assert encoded == {"id": "rg", "first_release_date": "1991-09-24"}

    def test_legacy_document_decodes(self, load_json):
        original = decode_entity(EntityKind.RELEASE, load_json("lookup", "release", "nevermind.json"))
        legacy = encode(original, SerializationMode.LEGACY)
        assert decode_entity(EntityKind.RELEASE, legacy) == original

    def test_default_mode_comes_from_config(self):
        group = ReleaseGroup(id="rg", first_release_date="1991")
        assert "first-release-date" in encode(group)
        configure(serialization_mode=SerializationMode.LEGACY)
        assert "first_release_date" in encode(group)


class TestEnvelopes:
    """Test browse and search envelopes."""

    def test_browse_prefixed_keys(self, load_json):
        document = load_json("browse", "release", "by_artist.json")
        result = decode_browse(EntityKind.RELEASE, document)
        assert isinstance(result, BrowseResult)
        assert result.count == document["release-count"]
        assert result.offset == 0
        assert all(isinstance(entity, Release) for entity in result.entities)
        assert result.prefixed_keys
        encoded = encode_browse(EntityKind.RELEASE, result)
        assert "release-count" in encoded and "count" not in encoded

    def test_browse_plain_keys(self, load_json):
        document = load_json("browse", "release-group", "plain_envelope.json")
        result = decode_browse(EntityKind.RELEASE_GROUP, document)
        assert result.count == 1
        assert not result.prefixed_keys
        assert encode_browse(EntityKind.RELEASE_GROUP, result)["count"] == 1

    def test_missing_list_is_empty_page(self):
        result = decode_browse(EntityKind.RELEASE, {"release-count": 0, "release-offset": 0})
        assert result.count == 0
        assert result.entities == []

    def test_missing_count(self):
        with pytest.raises(MalformedResponseError, match="no count"):
            decode_browse(EntityKind.RELEASE, {"releases": []})

    def test_entity_list_not_a_list(self):
        with pytest.raises(MalformedResponseError, match="not a list"):
            decode_browse(EntityKind.RELEASE, {"count": 1, "releases": {"id": "x"}})

    def test_bad_entity_inside_envelope(self):
        with pytest.raises(MalformedResponseError):
            decode_browse(EntityKind.RELEASE, {"count": 1, "releases": [{"title": "No id"}]})

    def test_search_carries_scores_and_created(self, load_json):
        document = load_json("search", "artist", "nirvana.json")
        result = decode_search(EntityKind.ARTIST, document)
        assert isinstance(result, SearchResult)
        assert result.created == document["created"]
        assert result.entities[0].score == document["artists"][0]["score"]

    def test_search_only_kinds(self, load_json):
        tags = decode_search(EntityKind.TAG, load_json("search", "tag", "grunge.json"))
        assert [tag.name for tag in tags.entities] == ["grunge", "post-grunge"]
        stubs = decode_search(EntityKind.CDSTUB, load_json("search", "cdstub", "nevermind.json"))
        assert stubs.entities

    def test_search_encode_keeps_created(self, load_json):
        document = load_json("search", "tag", "grunge.json")
        result = decode_search(EntityKind.TAG, document)
        assert encode_search(EntityKind.TAG, result) == document

    def test_legacy_envelope_round_trip(self, load_json):
        document = load_json("browse", "release", "by_artist.json")
        result = decode_browse(EntityKind.RELEASE, document)
        legacy = encode_browse(EntityKind.RELEASE, result, SerializationMode.LEGACY)
        assert "release_count" in legacy
        assert decode_browse(EntityKind.RELEASE, legacy) == result
