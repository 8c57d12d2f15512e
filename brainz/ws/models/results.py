"""Envelopes returned by browse and search requests."""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from .base import MusicBrainzModel

T = TypeVar("T", bound=MusicBrainzModel)


class BrowseResult(BaseModel, Generic[T]):
    """One page of entities related to a browse-by filter.

    The upstream service guarantees ``len(entities) <= limit`` and
    ``offset + len(entities) <= count``; this model does not assert it.
    """

    model_config = ConfigDict(frozen=True)

    count: int = Field(..., ge=0)
    offset: int = Field(0, ge=0)
    entities: list[T] = Field(default_factory=list)
    # Whether the envelope used "<kind>-count" style keys
    prefixed_keys: bool = Field(default=False, exclude=True, repr=False)


class SearchResult(BrowseResult[T], Generic[T]):
    """One page of search hits; each entity carries its ``score``."""

    created: str | None = None
