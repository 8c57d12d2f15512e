"""Every recorded service document must survive decode then encode unchanged.

Nulls are stripped first: the encoder drops None, so an explicit null and a
missing key are the same document.
"""

import json
from pathlib import Path
from typing import Any

import pytest

from brainz.ws.core import EntityKind, SerializationMode
from brainz.ws.models import (
    decode_browse,
    decode_entity,
    decode_search,
    encode,
    encode_browse,
    encode_search,
)

FIXTURES_DIR = Path(__file__).resolve().parents[2] / "fixtures"


def _strip_nulls(value: Any) -> Any:
    if isinstance(value, dict):
        return {key: _strip_nulls(item) for key, item in value.items() if item is not None}
    if isinstance(value, list):
        return [_strip_nulls(item) for item in value]
    return value


def _documents(mode: str) -> list[Any]:
    params = []
    for path in sorted((FIXTURES_DIR / mode).glob("*/*.json")):
        kind = EntityKind(path.parent.name)
        params.append(pytest.param(kind, path, id=f"{kind.value}/{path.stem}"))
    return params


def _load(path: Path) -> dict[str, Any]:
    return _strip_nulls(json.loads(path.read_text(encoding="utf-8")))


@pytest.mark.parametrize("kind,path", _documents("lookup"))
def test_lookup_document_round_trips(kind, path):
    document = _load(path)
    assert encode(decode_entity(kind, document), SerializationMode.MODERN) == document


@pytest.mark.parametrize("kind,path", _documents("browse"))
def test_browse_document_round_trips(kind, path):
    document = _load(path)
    result = decode_browse(kind, document)
    assert encode_browse(kind, result, SerializationMode.MODERN) == document


@pytest.mark.parametrize("kind,path", _documents("search"))
def test_search_document_round_trips(kind, path):
    document = _load(path)
    result = decode_search(kind, document)
    assert encode_search(kind, result, SerializationMode.MODERN) == document


def test_every_lookup_kind_has_a_fixture():
    covered = {kind for kind, _ in (param.values for param in _documents("lookup"))}
    lookup_kinds = {
        kind
        for kind in EntityKind
        if kind not in (EntityKind.ANNOTATION, EntityKind.CDSTUB, EntityKind.TAG)
    }
    assert covered == lookup_kinds
