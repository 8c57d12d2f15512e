"""Decode service documents into models and encode them back.

Architecture:
    ENTITY_MODELS maps each EntityKind to its record class. Envelope keys
    (``releases``, ``release-count``) are derived from the kind, never
    spelled out at call sites.

    Decoding accepts a dict, a JSON string or bytes. Any JSON syntax error or
    pydantic validation failure (wrong type, missing identity field) is
    re-raised as MalformedResponseError; unknown enum values and unknown
    keys are not failures.

Design Decisions:
    - Envelopes accept both ``count``/``offset`` and ``<kind>-count`` /
      ``<kind>-offset``, and remember which form they saw so encoding
      reproduces it
    - Legacy (snake_case) documents decode as well, so anything encoded in
      either mode can be read back
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import ValidationError

from ..core.config import get_config
from ..core.enums import EntityKind, SerializationMode
from ..core.exceptions import MalformedResponseError
from .base import MusicBrainzModel
from .common import Genre, Tag
from .entities import (
    Annotation,
    Area,
    Artist,
    CDStub,
    Event,
    Instrument,
    Label,
    Place,
    Recording,
    Release,
    ReleaseGroup,
    Series,
    Url,
    Work,
)
from .results import BrowseResult, SearchResult

ENTITY_MODELS: dict[EntityKind, type[MusicBrainzModel]] = {
    EntityKind.ANNOTATION: Annotation,
    EntityKind.AREA: Area,
    EntityKind.ARTIST: Artist,
    EntityKind.CDSTUB: CDStub,
    EntityKind.EVENT: Event,
    EntityKind.GENRE: Genre,
    EntityKind.INSTRUMENT: Instrument,
    EntityKind.LABEL: Label,
    EntityKind.PLACE: Place,
    EntityKind.RECORDING: Recording,
    EntityKind.RELEASE: Release,
    EntityKind.RELEASE_GROUP: ReleaseGroup,
    EntityKind.SERIES: Series,
    EntityKind.TAG: Tag,
    EntityKind.URL: Url,
    EntityKind.WORK: Work,
}


def model_for(kind: EntityKind) -> type[MusicBrainzModel]:
    """Record class decoded for ``kind``."""
    return ENTITY_MODELS[kind]


def _cased(key: str, mode: SerializationMode) -> str:
    return key if mode == SerializationMode.MODERN else key.replace("-", "_")


def _resolve_mode(mode: SerializationMode | None) -> SerializationMode:
    return mode if mode is not None else get_config().serialization_mode


def _load(payload: Any) -> dict[str, Any]:
    if isinstance(payload, (bytes, bytearray)):
        try:
            payload = payload.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise MalformedResponseError(f"Response is not valid UTF-8: {exc}") from exc
    if isinstance(payload, str):
        try:
            payload = json.loads(payload)
        except json.JSONDecodeError as exc:
            raise MalformedResponseError(
                f"Response is not valid JSON: {exc}", body=payload
            ) from exc
    if not isinstance(payload, dict):
        raise MalformedResponseError(
            f"Expected a JSON object, got {type(payload).__name__}"
        )
    return payload


def _malformed(kind: EntityKind, exc: ValidationError, payload: Any) -> MalformedResponseError:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return MalformedResponseError(
        f"Cannot decode {kind.value} document: {exc.error_count()} error(s), "
        f"first at '{location}': {first.get('msg')}",
        body=payload if isinstance(payload, str) else None,
    )


def decode_entity(kind: EntityKind, payload: Any) -> MusicBrainzModel:
    """Decode a lookup response (a bare entity object).

    Raises:
        MalformedResponseError: On invalid JSON or a structurally invalid document
    """
    data = _load(payload)
    try:
        return model_for(kind).model_validate(data)
    except ValidationError as exc:
        raise _malformed(kind, exc, payload) from exc


def _pick(data: dict[str, Any], *keys: str) -> tuple[Any, str | None]:
    for key in keys:
        if key in data:
            return data[key], key
    return None, None


def _envelope(kind: EntityKind, data: dict[str, Any]) -> dict[str, Any]:
    prefix = kind.value
    count, count_key = _pick(
        data, "count", f"{prefix}-count", _cased(f"{prefix}-count", SerializationMode.LEGACY)
    )
    offset, _ = _pick(
        data, "offset", f"{prefix}-offset", _cased(f"{prefix}-offset", SerializationMode.LEGACY)
    )
    entities, _ = _pick(
        data, kind.plural_key, _cased(kind.plural_key, SerializationMode.LEGACY)
    )
    if count is None:
        raise MalformedResponseError(f"{kind.value} envelope has no count")
    if entities is not None and not isinstance(entities, list):
        raise MalformedResponseError(
            f"{kind.value} envelope key '{kind.plural_key}' is not a list"
        )
    return {
        "count": count,
        "offset": 0 if offset is None else offset,
        "entities": entities or [],
        "prefixed_keys": count_key not in (None, "count"),
    }


def decode_browse(kind: EntityKind, payload: Any) -> BrowseResult[Any]:
    """Decode a browse envelope into ``BrowseResult[Model]``."""
    data = _load(payload)
    fields = _envelope(kind, data)
    try:
        return BrowseResult[model_for(kind)].model_validate(fields)  # type: ignore[index]
    except ValidationError as exc:
        raise _malformed(kind, exc, payload) from exc


def decode_search(kind: EntityKind, payload: Any) -> SearchResult[Any]:
    """Decode a search envelope into ``SearchResult[Model]``."""
    data = _load(payload)
    fields = _envelope(kind, data)
    fields["created"] = data.get("created")
    try:
        return SearchResult[model_for(kind)].model_validate(fields)  # type: ignore[index]
    except ValidationError as exc:
        raise _malformed(kind, exc, payload) from exc


def encode(model: MusicBrainzModel, mode: SerializationMode | None = None) -> dict[str, Any]:
    """Encode a record; ``mode`` defaults to the configured serialization mode."""
    return model.to_dict(_resolve_mode(mode))


def encode_browse(
    kind: EntityKind,
    result: BrowseResult[Any],
    mode: SerializationMode | None = None,
) -> dict[str, Any]:
    """Encode a browse page back into the service's envelope shape."""
    resolved = _resolve_mode(mode)
    if result.prefixed_keys:
        count_key, offset_key = f"{kind.value}-count", f"{kind.value}-offset"
    else:
        count_key, offset_key = "count", "offset"
    return {
        _cased(count_key, resolved): result.count,
        _cased(offset_key, resolved): result.offset,
        _cased(kind.plural_key, resolved): [entity.to_dict(resolved) for entity in result.entities],
    }


def encode_search(
    kind: EntityKind,
    result: SearchResult[Any],
    mode: SerializationMode | None = None,
) -> dict[str, Any]:
    """Encode a search page back into the service's envelope shape."""
    document = encode_browse(kind, result, mode)
    if result.created is not None:
        document = {"created": result.created, **document}
    return document
