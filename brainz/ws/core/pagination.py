"""Offset/limit pagination state for browse and search requests."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Final

from .exceptions import InvalidRequestError

if TYPE_CHECKING:
    from ..models.results import BrowseResult

logger = logging.getLogger(__name__)

# Server-documented ceiling for browse and search page sizes
MAX_LIMIT: Final[int] = 100


@dataclass(frozen=True)
class PaginationCursor:
    """Position in a paginated collection.

    ``total_count`` stays None until a response has been seen; it is copied
    from ``BrowseResult.count`` by ``advance()``.

    Example:
        >>> cursor = PaginationCursor(limit=25)
        >>> cursor.as_params()
        {'limit': '25', 'offset': '0'}
    """

    limit: int = MAX_LIMIT
    offset: int = 0
    total_count: int | None = None

    def __post_init__(self) -> None:
        if self.limit < 1:
            raise InvalidRequestError(f"limit must be >= 1, got {self.limit}")
        if self.offset < 0:
            raise InvalidRequestError(f"offset must be >= 0, got {self.offset}")
        if self.limit > MAX_LIMIT:
            logger.debug(
                "Clamping page limit to server maximum",
                extra={"requested": self.limit, "max_limit": MAX_LIMIT},
            )
            object.__setattr__(self, "limit", MAX_LIMIT)

    def advance(self, result: BrowseResult[Any]) -> PaginationCursor:
        """Cursor for the page following ``result``.

        The limit is preserved; the offset moves past the entities actually
        returned, which may be fewer than requested.
        """
        return replace(
            self,
            offset=self.offset + len(result.entities),
            total_count=result.count,
        )

    def is_exhausted(self, result: BrowseResult[Any]) -> bool:
        """Whether ``result`` was the last page of the collection."""
        if len(result.entities) < self.limit:
            return True
        return self.offset + len(result.entities) >= result.count

    @property
    def remaining(self) -> int | None:
        """Entities left after the current offset, once the total is known."""
        if self.total_count is None:
            return None
        return max(0, self.total_count - self.offset)

    def as_params(self) -> dict[str, str]:
        return {"limit": str(self.limit), "offset": str(self.offset)}
