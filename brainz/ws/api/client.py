"""High-level facade over request composition and execution.

Architecture:
    MusicBrainzAPI wraps an ExecutionEngine and offers one method per
    access pattern. Each method builds a RequestDescriptor through
    RequestBuilder (so every contract check still applies) and delegates to
    the engine. browse_all/search_all drive a PaginationCursor until the
    service returns a short page.

    SyncMusicBrainzAPI offers the same calls for code without an event
    loop, running each one through ExecutionEngine.execute_blocking.

Design Decisions:
    - Facade over direct engine use: callers pass kinds, ids and includes,
      never descriptors
    - Engine injection allows testing with a mock transport
    - Context manager pattern ensures the aiohttp session is closed

See Also:
    - RequestBuilder: request construction used by every method
    - ExecutionEngine: HTTP execution and outcome classification
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator, Iterable, Iterator
from typing import Any

from ..core.config import ClientConfig
from ..core.enums import BrowseBy, EntityKind, Include
from ..core.pagination import MAX_LIMIT, PaginationCursor
from ..core.request import RequestBuilder, RequestDescriptor
from ..models.base import MusicBrainzModel
from ..models.results import BrowseResult, SearchResult
from ..runtime.engine import ExecutionEngine, ExecutionResult
from ..runtime.http import HTTPTransport
from ..search.query import SearchQueryBuilder

logger = logging.getLogger(__name__)


def _lookup_request(
    kind: EntityKind, entity_id: str, includes: Iterable[Include | str]
) -> RequestDescriptor:
    return RequestBuilder.lookup(kind, entity_id).include(*includes).build()


def _browse_request(
    kind: EntityKind,
    by: BrowseBy,
    entity_id: str,
    includes: Iterable[Include | str],
    limit: int | None,
    offset: int | None,
) -> RequestDescriptor:
    return (
        RequestBuilder.browse(kind, by, entity_id)
        .include(*includes)
        .limit(limit)
        .offset(offset)
        .build()
    )


def _search_request(
    kind: EntityKind,
    query: str | SearchQueryBuilder,
    limit: int | None,
    offset: int | None,
) -> RequestDescriptor:
    return RequestBuilder.search(kind, query).limit(limit).offset(offset).build()


class MusicBrainzAPI:
    """Async client for lookup, browse and search.

    Example:
        >>> async with MusicBrainzAPI() as api:
        ...     artist = await api.lookup(
        ...         EntityKind.ARTIST,
        ...         "5b11f4ce-a62d-471e-81fc-a69a8278c7da",
        ...         includes=[Subquery.ALIASES],
        ...     )
        ...     async for release in api.browse_all(
        ...         EntityKind.RELEASE, BrowseBy.ARTIST, artist.id
        ...     ):
        ...         print(release.title)
    """

    def __init__(
        self,
        *,
        engine: ExecutionEngine | None = None,
        transport: HTTPTransport | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        """Initialize the API.

        Args:
            engine: Engine to delegate to; built from ``transport`` and
                ``config`` when omitted
            transport: HTTP transport for the engine this API creates
            config: Fixed configuration for the engine this API creates

        Note:
            An injected engine is not closed by close(); its owner closes it.
        """
        if engine is not None and (transport is not None or config is not None):
            raise ValueError("Pass either engine or transport/config, not both")
        self._owns_engine = engine is None
        self._engine = engine or ExecutionEngine(transport=transport, config=config)
        self._closed = False

    @property
    def engine(self) -> ExecutionEngine:
        return self._engine

    async def execute(self, request: RequestDescriptor) -> ExecutionResult:
        """Execute a prebuilt request."""
        return await self._engine.execute(request)

    async def lookup(
        self,
        kind: EntityKind,
        entity_id: str,
        *,
        includes: Iterable[Include | str] = (),
    ) -> MusicBrainzModel:
        """Fetch one entity by MBID.

        Args:
            kind: Entity kind
            entity_id: MBID of the entity
            includes: Expansions to embed, validated against ``kind``

        Returns:
            The decoded entity record

        Raises:
            ContractError: If the request shape is invalid
            ClientError: If execution fails
        """
        request = _lookup_request(kind, entity_id, includes)
        logger.debug("Lookup", extra={"kind": request.kind.value, "id": request.entity_id})
        return await self._engine.execute(request)  # type: ignore[return-value]

    async def browse(
        self,
        kind: EntityKind,
        by: BrowseBy,
        entity_id: str,
        *,
        includes: Iterable[Include | str] = (),
        limit: int | None = None,
        offset: int | None = None,
    ) -> BrowseResult[Any]:
        """Fetch one page of ``kind`` entities related to ``entity_id``.

        Args:
            kind: Entity kind to list
            by: Relation that scopes the listing (must be legal for ``kind``)
            entity_id: MBID of the related entity
            includes: Expansions to embed
            limit: Page size, clamped to 100
            offset: Entities to skip

        Returns:
            BrowseResult with the page and the collection's total count
        """
        request = _browse_request(kind, by, entity_id, includes, limit, offset)
        logger.debug(
            "Browse",
            extra={"kind": request.kind.value, "by": str(by), "id": entity_id},
        )
        return await self._engine.execute(request)  # type: ignore[return-value]

    async def search(
        self,
        kind: EntityKind,
        query: str | SearchQueryBuilder,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> SearchResult[Any]:
        """Run a Lucene search over ``kind``.

        Args:
            kind: Entity kind to search
            query: Raw Lucene string or a SearchQueryBuilder for ``kind``
            limit: Page size, clamped to 100
            offset: Hits to skip

        Returns:
            SearchResult whose entities carry a ``score``
        """
        request = _search_request(kind, query, limit, offset)
        logger.debug("Search", extra={"kind": request.kind.value, "query": request.query})
        return await self._engine.execute(request)  # type: ignore[return-value]

    async def browse_all(
        self,
        kind: EntityKind,
        by: BrowseBy,
        entity_id: str,
        *,
        includes: Iterable[Include | str] = (),
        page_size: int = MAX_LIMIT,
        max_pages: int | None = None,
    ) -> AsyncIterator[MusicBrainzModel]:
        """Yield every related entity, one page request at a time.

        Iteration stops on a short page, when the reported count is reached,
        or after ``max_pages`` requests.
        """
        request = _browse_request(kind, by, entity_id, includes, page_size, 0)
        async for entity in self._paginate(request, max_pages):
            yield entity

    async def search_all(
        self,
        kind: EntityKind,
        query: str | SearchQueryBuilder,
        *,
        page_size: int = MAX_LIMIT,
        max_pages: int | None = None,
    ) -> AsyncIterator[MusicBrainzModel]:
        """Yield every search hit, one page request at a time."""
        request = _search_request(kind, query, page_size, 0)
        async for entity in self._paginate(request, max_pages):
            yield entity

    async def _paginate(
        self, request: RequestDescriptor, max_pages: int | None
    ) -> AsyncIterator[MusicBrainzModel]:
        cursor = request.pagination or PaginationCursor()
        pages = 0
        while True:
            result: BrowseResult[Any] = await self._engine.execute(  # type: ignore[assignment]
                request.with_pagination(cursor)
            )
            pages += 1
            for entity in result.entities:
                yield entity
            if cursor.is_exhausted(result):
                break
            if max_pages is not None and pages >= max_pages:
                logger.debug("Stopping pagination at page cap", extra={"max_pages": max_pages})
                break
            cursor = cursor.advance(result)

    # --- Lifecycle -----------------------------------------------------------

    async def close(self) -> None:
        """Close the API and clean up resources."""
        if self._closed:
            return
        self._closed = True
        logger.debug("Closing MusicBrainzAPI")
        if self._owns_engine:
            await self._engine.close()

    async def __aenter__(self) -> MusicBrainzAPI:
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.close()


class SyncMusicBrainzAPI:
    """Blocking client for scripts and code without an event loop.

    Each call runs on its own event loop, so it must not be used from inside
    async code; use MusicBrainzAPI there.
    """

    def __init__(
        self,
        *,
        transport: HTTPTransport | None = None,
        config: ClientConfig | None = None,
    ) -> None:
        self._engine = ExecutionEngine(transport=transport, config=config)

    def execute(self, request: RequestDescriptor) -> ExecutionResult:
        return self._engine.execute_blocking(request)

    def lookup(
        self,
        kind: EntityKind,
        entity_id: str,
        *,
        includes: Iterable[Include | str] = (),
    ) -> MusicBrainzModel:
        """Blocking version of MusicBrainzAPI.lookup."""
        return self.execute(_lookup_request(kind, entity_id, includes))  # type: ignore[return-value]

    def browse(
        self,
        kind: EntityKind,
        by: BrowseBy,
        entity_id: str,
        *,
        includes: Iterable[Include | str] = (),
        limit: int | None = None,
        offset: int | None = None,
    ) -> BrowseResult[Any]:
        """Blocking version of MusicBrainzAPI.browse."""
        request = _browse_request(kind, by, entity_id, includes, limit, offset)
        return self.execute(request)  # type: ignore[return-value]

    def search(
        self,
        kind: EntityKind,
        query: str | SearchQueryBuilder,
        *,
        limit: int | None = None,
        offset: int | None = None,
    ) -> SearchResult[Any]:
        """Blocking version of MusicBrainzAPI.search."""
        return self.execute(_search_request(kind, query, limit, offset))  # type: ignore[return-value]

    def browse_all(
        self,
        kind: EntityKind,
        by: BrowseBy,
        entity_id: str,
        *,
        includes: Iterable[Include | str] = (),
        page_size: int = MAX_LIMIT,
        max_pages: int | None = None,
    ) -> Iterator[MusicBrainzModel]:
        """Blocking version of MusicBrainzAPI.browse_all."""
        request = _browse_request(kind, by, entity_id, includes, page_size, 0)
        cursor = request.pagination or PaginationCursor()
        pages = 0
        while True:
            result: BrowseResult[Any] = self.execute(  # type: ignore[assignment]
                request.with_pagination(cursor)
            )
            pages += 1
            yield from result.entities
            if cursor.is_exhausted(result) or (max_pages is not None and pages >= max_pages):
                return
            cursor = cursor.advance(result)
