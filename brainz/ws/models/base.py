"""Base model for every record decoded from the web service.

Architecture:
    All entity and sub-record models inherit MusicBrainzModel. The model
    config carries the decoding contract in one place:
    - hyphenated aliases generated from snake_case field names, so the wire
      key ``sort-name`` fills ``sort_name``
    - ``populate_by_name`` so snake_case documents (legacy encoding) decode too
    - ``extra="allow"`` so keys added by the service survive decode/encode
    - frozen instances

Design Decisions:
    - Optional by default: subclasses declare every non-identity field as
      ``X | None = None``; an explicit JSON null is accepted as None
    - Encoding drops None values, so null and missing are the same thing
      after a round trip
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict

from ..core.enums import SerializationMode


def to_kebab(name: str) -> str:
    """Alias generator: ``sort_name`` -> ``sort-name``."""
    return name.replace("_", "-")


class MusicBrainzModel(BaseModel):
    """Frozen, forward-compatible record."""

    model_config = ConfigDict(
        alias_generator=to_kebab,
        populate_by_name=True,
        extra="allow",
        frozen=True,
    )

    def to_dict(self, mode: SerializationMode = SerializationMode.MODERN) -> dict[str, Any]:
        """Encode to a JSON-compatible dict.

        Args:
            mode: MODERN emits hyphenated wire keys, LEGACY emits snake_case

        Returns:
            Dict without None values
        """
        return self.model_dump(
            mode="json",
            by_alias=mode == SerializationMode.MODERN,
            exclude_none=True,
        )

    @property
    def unknown_fields(self) -> dict[str, Any]:
        """Keys the service sent that this model does not declare."""
        return dict(self.model_extra or {})
