"""Request composition: one validated, immutable descriptor per call.

Architecture:
    compose() is the single place where a request shape is checked:
    - the access mode must be exposed for the kind (SUPPORTED_MODES)
    - lookup needs an MBID, browse exactly one legal BrowseFilter, search a
      non-empty query (a string or a SearchQueryBuilder)
    - every include must be legal for the kind (core.includes)
    The result is a frozen RequestDescriptor that the execution engine turns
    into a URL. RequestBuilder is a fluent front end over compose().

Design Decisions:
    - Fail before the network: every check raises a ContractError
    - Deterministic URLs: query parameters are sorted by name
    - Nothing from configuration is stored in the descriptor; base URL and
      headers are read by the engine at execution time

Example:
    >>> request = compose(
    ...     RequestMode.LOOKUP,
    ...     EntityKind.ARTIST,
    ...     entity_id="5b11f4ce-a62d-471e-81fc-a69a8278c7da",
    ...     includes=[Subquery.RECORDINGS],
    ... )
    >>> request.url("https://musicbrainz.org/ws/2")
    'https://musicbrainz.org/ws/2/artist/5b11f4ce-a62d-471e-81fc-a69a8278c7da?fmt=json&inc=recordings'
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final
from urllib.parse import quote, quote_plus

from ..capability.registry import legal_browse_by, supported_modes
from .enums import BrowseBy, EntityKind, Include, RequestMode, Subquery
from .exceptions import InvalidRequestError
from .includes import IncludeSet, render_includes
from .pagination import MAX_LIMIT, PaginationCursor

if TYPE_CHECKING:
    from ..search.query import SearchQueryBuilder

logger = logging.getLogger(__name__)

MBID_PATTERN: Final[re.Pattern[str]] = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)


def is_mbid(value: str) -> bool:
    """Whether ``value`` is shaped like an MBID (a UUID). Existence is not checked."""
    return bool(MBID_PATTERN.match(value))


def _require_mbid(value: str | None, what: str) -> str:
    if value is None or not value.strip():
        raise InvalidRequestError(f"{what} requires a non-empty id")
    stripped = value.strip()
    if not is_mbid(stripped):
        raise InvalidRequestError(f"{what} id '{value}' is not a valid MBID")
    return stripped


@dataclass(frozen=True)
class BrowseFilter:
    """The (relation, id) pair that scopes a browse request."""

    by: BrowseBy
    id: str

    def as_param(self) -> tuple[str, str]:
        return (self.by.value, self.id)


@dataclass(frozen=True)
class RequestDescriptor:
    """Immutable, fully validated request.

    Attributes:
        mode: Lookup, browse or search
        kind: Entity kind addressed
        entity_id: MBID (lookup only)
        browse_filter: Browse-by relation and id (browse only)
        includes: Ordered, deduplicated includes
        pagination: Page position (browse and search only)
        query: Lucene query string (search only)
    """

    mode: RequestMode
    kind: EntityKind
    entity_id: str | None = None
    browse_filter: BrowseFilter | None = None
    includes: tuple[Include, ...] = ()
    pagination: PaginationCursor | None = None
    query: str | None = None

    @property
    def path(self) -> str:
        """Path below the base URL: ``artist/<mbid>`` or ``release``."""
        if self.mode == RequestMode.LOOKUP:
            return f"{self.kind.path}/{self.entity_id}"
        return self.kind.path

    @property
    def auth_includes(self) -> tuple[Subquery, ...]:
        """Includes the service only honours for an authenticated user."""
        return tuple(
            include
            for include in self.includes
            if isinstance(include, Subquery) and include.requires_auth
        )

    def params(self) -> list[tuple[str, str]]:
        """Query parameters sorted by name; ``fmt=json`` is always present."""
        params: dict[str, str] = {"fmt": "json"}
        if self.includes:
            params["inc"] = render_includes(self.includes)
        if self.pagination is not None:
            params.update(self.pagination.as_params())
        if self.browse_filter is not None:
            name, value = self.browse_filter.as_param()
            params[name] = value
        if self.query is not None:
            params["query"] = self.query
        return sorted(params.items())

    def query_string(self) -> str:
        """Percent-encoded query string; the '+' joining include tokens stays literal."""
        return "&".join(
            f"{name}={quote(value, safe='+') if name == 'inc' else quote_plus(value)}"
            for name, value in self.params()
        )

    def url(self, base_url: str) -> str:
        """Absolute URL under ``base_url``."""
        return f"{base_url.rstrip('/')}/{self.path}?{self.query_string()}"

    def with_pagination(self, pagination: PaginationCursor) -> RequestDescriptor:
        """Same request at another page position."""
        if self.mode == RequestMode.LOOKUP:
            raise InvalidRequestError("lookup requests cannot be paginated")
        return replace(self, pagination=pagination)


def compose(
    mode: RequestMode,
    kind: EntityKind,
    *,
    entity_id: str | None = None,
    browse_filter: BrowseFilter | None = None,
    includes: Iterable[Include | str] = (),
    pagination: PaginationCursor | None = None,
    query: str | SearchQueryBuilder | None = None,
) -> RequestDescriptor:
    """Validate a request shape and freeze it into a RequestDescriptor.

    Args:
        mode: Access pattern
        kind: Entity kind
        entity_id: MBID, required for lookup and rejected otherwise
        browse_filter: Required for browse and rejected otherwise
        includes: Include members or raw tokens, validated for ``kind``
        pagination: Optional page position for browse and search
        query: Lucene string or SearchQueryBuilder, required for search

    Returns:
        Immutable request descriptor

    Raises:
        InvalidRequestError: If the mode, selector or pagination is invalid
        InvalidIncludeError: If an include is not legal for ``kind``
        IncompleteQueryError: If a SearchQueryBuilder cannot be built
    """
    try:
        mode = RequestMode(mode)
        kind = EntityKind(kind)
    except ValueError as exc:
        raise InvalidRequestError(str(exc)) from exc
    if mode not in supported_modes(kind):
        raise InvalidRequestError(f"The service does not support {mode.value} for {kind.value}")

    include_set = IncludeSet(kind, includes)
    rendered_query: str | None = None

    if mode == RequestMode.LOOKUP:
        if browse_filter is not None or query is not None:
            raise InvalidRequestError("lookup takes only an id")
        if pagination is not None:
            raise InvalidRequestError("lookup requests cannot be paginated")
        entity_id = _require_mbid(entity_id, f"{kind.value} lookup")

    elif mode == RequestMode.BROWSE:
        if entity_id is not None or query is not None:
            raise InvalidRequestError("browse takes only a browse filter")
        if browse_filter is None:
            raise InvalidRequestError(f"{kind.value} browse requires exactly one browse filter")
        try:
            by = BrowseBy(browse_filter.by)
        except ValueError as exc:
            raise InvalidRequestError(str(exc)) from exc
        if by not in legal_browse_by(kind):
            legal = ", ".join(sorted(item.value for item in legal_browse_by(kind)))
            raise InvalidRequestError(
                f"Cannot browse {kind.value} by {by.value}; legal filters: {legal}"
            )
        browse_filter = BrowseFilter(by, _require_mbid(browse_filter.id, f"{by.value} filter"))

    else:
        if entity_id is not None or browse_filter is not None:
            raise InvalidRequestError("search takes only a query")
        rendered_query = _render_query(kind, query)

    descriptor = RequestDescriptor(
        mode=mode,
        kind=kind,
        entity_id=entity_id,
        browse_filter=browse_filter,
        includes=include_set.as_tuple(),
        pagination=pagination,
        query=rendered_query,
    )
    logger.debug(
        "Composed request",
        extra={"mode": mode.value, "kind": kind.value, "path": descriptor.path},
    )
    return descriptor


def _render_query(kind: EntityKind, query: str | SearchQueryBuilder | None) -> str:
    if query is None:
        raise InvalidRequestError(f"{kind.value} search requires a query")
    if isinstance(query, str):
        if not query.strip():
            raise InvalidRequestError(f"{kind.value} search requires a non-empty query")
        return query
    if query.kind != kind:
        raise InvalidRequestError(
            f"Query was built for {query.kind.value}, not {kind.value}"
        )
    return query.build()


class RequestBuilder:
    """Fluent builder over compose().

    Example:
        >>> request = (RequestBuilder
        ...     .browse(EntityKind.RELEASE, BrowseBy.ARTIST, "5b11f4ce-a62d-471e-81fc-a69a8278c7da")
        ...     .limit(10)
        ...     .build())
        >>> request.params()[:2]
        [('artist', '5b11f4ce-a62d-471e-81fc-a69a8278c7da'), ('fmt', 'json')]
    """

    def __init__(self, mode: RequestMode, kind: EntityKind) -> None:
        self._mode = mode
        self._kind = kind
        self._entity_id: str | None = None
        self._browse_filter: BrowseFilter | None = None
        self._query: str | SearchQueryBuilder | None = None
        self._includes: list[Include | str] = []
        self._limit: int | None = None
        self._offset: int | None = None

    @classmethod
    def lookup(cls, kind: EntityKind, entity_id: str) -> RequestBuilder:
        builder = cls(RequestMode.LOOKUP, kind)
        builder._entity_id = entity_id
        return builder

    @classmethod
    def browse(cls, kind: EntityKind, by: BrowseBy, entity_id: str) -> RequestBuilder:
        builder = cls(RequestMode.BROWSE, kind)
        builder._browse_filter = BrowseFilter(by, entity_id)
        return builder

    @classmethod
    def search(cls, kind: EntityKind, query: str | SearchQueryBuilder) -> RequestBuilder:
        builder = cls(RequestMode.SEARCH, kind)
        builder._query = query
        return builder

    def include(self, *includes: Include | str) -> RequestBuilder:
        """Append includes; validated when build() is called."""
        self._includes.extend(includes)
        return self

    def limit(self, limit: int | None) -> RequestBuilder:
        self._limit = limit
        return self

    def offset(self, offset: int | None) -> RequestBuilder:
        self._offset = offset
        return self

    def page(self, cursor: PaginationCursor) -> RequestBuilder:
        """Take limit and offset from an existing cursor."""
        self._limit = cursor.limit
        self._offset = cursor.offset
        return self

    def _pagination(self) -> PaginationCursor | None:
        if self._limit is None and self._offset is None:
            return None
        return PaginationCursor(
            limit=self._limit if self._limit is not None else MAX_LIMIT,
            offset=self._offset or 0,
        )

    def build(self) -> RequestDescriptor:
        """Validate and freeze the request.

        Raises:
            ContractError: Any of the errors raised by compose()
        """
        return compose(
            self._mode,
            self._kind,
            entity_id=self._entity_id,
            browse_filter=self._browse_filter,
            includes=self._includes,
            pagination=self._pagination(),
            query=self._query,
        )
