"""Lucene query builder for the search endpoints.

Architecture:
    SearchQueryBuilder accumulates an ordered list of parts: terms
    (``field:value`` or a parenthesised group), connectors (AND/OR) and
    prefix negations. Field names and value types are checked against
    ``search.fields`` as each term is added; the sequence itself is checked
    by ``build()``, which freezes it into the string sent as ``query=``.

Design Decisions:
    - Explicit connectors: two terms with nothing between them are an
      error, never an implicit OR
    - Field names are emitted verbatim; only values are escaped
    - Text values containing whitespace become phrase queries
    - Dates render at their own precision (a PartialDate of ``1991``
      renders ``1991``), calendar dates as ``YYYY-MM-DD``

Example:
    >>> query = (
    ...     SearchQueryBuilder(EntityKind.ARTIST)
    ...     .where("artist", "Nirvana")
    ...     .and_()
    ...     .where("type", "group")
    ...     .build()
    ... )
    >>> query
    'artist:Nirvana AND type:group'
"""

from __future__ import annotations

import logging
from datetime import date, datetime
from enum import Enum
from typing import Any, Final

from ..core.enums import EntityKind
from ..core.exceptions import IncompleteQueryError
from ..models.dates import PartialDate
from .fields import FieldType, field_type, searchable_fields

logger = logging.getLogger(__name__)

LUCENE_SPECIAL_CHARS: Final[frozenset[str]] = frozenset('+-&|!(){}[]^"~*?:\\')


class _Part(str, Enum):
    TERM = "term"
    AND = "AND"
    OR = "OR"
    NOT = "NOT"


def escape_lucene(value: str) -> str:
    """Backslash-escape every Lucene special character in ``value``.

    Example:
        >>> escape_lucene("AC/DC: Live!")
        'AC/DC\\\\: Live\\\\!'
    """
    return "".join(f"\\{char}" if char in LUCENE_SPECIAL_CHARS else char for char in value)


def _render_text(value: str) -> str:
    escaped = escape_lucene(value)
    if any(char.isspace() for char in value):
        return f'"{escaped}"'
    return escaped


def _render_date(field: str, value: Any) -> str:
    if isinstance(value, PartialDate):
        return value.isoformat()
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, str):
        try:
            return PartialDate.parse(value).isoformat()
        except ValueError as exc:
            raise IncompleteQueryError(f"Field '{field}' expects a date: {exc}") from exc
    raise IncompleteQueryError(
        f"Field '{field}' expects a date, got {type(value).__name__}"
    )


def _render_value(field: str, kind: FieldType, value: Any) -> str:
    if kind == FieldType.DATE:
        return _render_date(field, value)
    if kind == FieldType.BOOLEAN:
        if not isinstance(value, bool):
            raise IncompleteQueryError(
                f"Field '{field}' expects a boolean, got {type(value).__name__}"
            )
        return "true" if value else "false"
    if kind == FieldType.NUMBER:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise IncompleteQueryError(
                f"Field '{field}' expects a number, got {type(value).__name__}"
            )
        return escape_lucene(str(value))
    if not isinstance(value, str):
        raise IncompleteQueryError(
            f"Field '{field}' expects text, got {type(value).__name__}"
        )
    if not value.strip():
        raise IncompleteQueryError(f"Field '{field}' needs a non-empty value")
    return _render_text(str(value))


class SearchQueryBuilder:
    """Fluent builder for one entity kind's search query.

    Every method returns the builder so calls chain. Terms must be joined
    with ``and_()`` or ``or_()``; ``not_()`` negates the term that follows.
    """

    def __init__(self, kind: EntityKind) -> None:
        if not searchable_fields(kind):
            raise IncompleteQueryError(f"{kind.value} has no searchable fields")
        self.kind = kind
        self._parts: list[tuple[_Part, str]] = []

    def where(self, field: str, value: Any) -> SearchQueryBuilder:
        """Add a ``field:value`` term.

        Args:
            field: Index field name declared for this kind
            value: str for text fields, date/PartialDate (or an ISO string)
                for date fields, int/float for numbers, bool for booleans

        Raises:
            IncompleteQueryError: If the field is undeclared or the value has
                the wrong type
        """
        declared = field_type(self.kind, field)
        if declared is None:
            raise IncompleteQueryError(
                f"Unknown search field '{field}' for {self.kind.value}"
            )
        rendered = _render_value(field, declared, value)
        self._parts.append((_Part.TERM, f"{field}:{rendered}"))
        return self

    def and_(self) -> SearchQueryBuilder:
        self._parts.append((_Part.AND, _Part.AND.value))
        return self

    def or_(self) -> SearchQueryBuilder:
        self._parts.append((_Part.OR, _Part.OR.value))
        return self

    def not_(self) -> SearchQueryBuilder:
        """Negate the next term."""
        self._parts.append((_Part.NOT, _Part.NOT.value))
        return self

    def group(self, builder: SearchQueryBuilder) -> SearchQueryBuilder:
        """Add another builder's query as one parenthesised term.

        The nested builder is built immediately, so its errors surface here.
        """
        if builder.kind != self.kind:
            raise IncompleteQueryError(
                f"Cannot group a {builder.kind.value} query into a {self.kind.value} query"
            )
        self._parts.append((_Part.TERM, f"({builder.build()})"))
        return self

    def _check(self) -> None:
        if not any(part == _Part.TERM for part, _ in self._parts):
            raise IncompleteQueryError("Search query has no terms")

        expect_term = True
        for index, (part, _) in enumerate(self._parts):
            if part == _Part.TERM:
                if not expect_term:
                    raise IncompleteQueryError(
                        f"Missing connector before term {index}; use and_() or or_()"
                    )
                expect_term = False
            elif part == _Part.NOT:
                if not expect_term:
                    raise IncompleteQueryError(
                        f"Negation at position {index} follows a term without a connector"
                    )
                following = self._parts[index + 1][0] if index + 1 < len(self._parts) else None
                if following != _Part.TERM:
                    raise IncompleteQueryError("not_() must be followed by a term")
            else:
                if expect_term:
                    raise IncompleteQueryError(
                        f"Connector {part.value} at position {index} has no term on its left"
                    )
                expect_term = True

        if expect_term:
            raise IncompleteQueryError("Search query ends with a dangling connector")

    def build(self) -> str:
        """Freeze the query into a Lucene string.

        Raises:
            IncompleteQueryError: If the query has no terms, two terms without
                a connector, two connectors in a row, or a trailing connector
                or negation
        """
        self._check()
        query = " ".join(text for _, text in self._parts)
        logger.debug("Built search query", extra={"kind": self.kind.value, "query": query})
        return query

    def __repr__(self) -> str:
        rendered = " ".join(text for _, text in self._parts)
        return f"SearchQueryBuilder({self.kind.value!r}, {rendered!r})"
