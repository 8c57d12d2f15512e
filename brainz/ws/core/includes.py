"""Include algebra: validated, ordered ``inc=`` expansions.

Architecture:
    An IncludeSet is bound to one EntityKind. Every add() is checked against
    the static legality table in ``capability.registry`` so an illegal
    expansion fails at construction time instead of as a 400 from the
    server. Rendering joins tokens with ``+`` in insertion order.

Design Decisions:
    - Insertion order preserved: rendered URLs are reproducible
    - Value-equality dedup: adding the same include twice is a no-op
    - No distinction after rendering: subqueries and relationships share one
      token namespace, only the legality table tells them apart
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..capability.registry import legal_includes
from .enums import EntityKind, Include, Relationship, Subquery, parse_include
from .exceptions import InvalidIncludeError


def validate_include(kind: EntityKind, include: Include | str) -> Include:
    """Coerce and validate a single include for ``kind``.

    Args:
        kind: Entity kind the include will be attached to
        include: Include enum member or raw token such as ``"artist-rels"``

    Returns:
        The include as an enum member

    Raises:
        InvalidIncludeError: If the token is unknown or not legal for ``kind``
    """
    parsed = parse_include(include)
    if parsed is None:
        raise InvalidIncludeError(kind, include, f"Unknown include token '{include}'")
    if parsed not in legal_includes(kind):
        raise InvalidIncludeError(kind, parsed)
    return parsed


def render_includes(includes: Iterable[Include]) -> str:
    """Render includes into the value of the ``inc`` query parameter.

    Duplicates are collapsed, first occurrence wins.

    Example:
        >>> render_includes([Subquery.RECORDINGS, Relationship.URL, Subquery.RECORDINGS])
        'recordings+url-rels'
    """
    seen: dict[str, None] = {}
    for include in includes:
        seen.setdefault(include.value, None)
    return "+".join(seen)


class IncludeSet:
    """Ordered, deduplicated set of includes legal for one entity kind.

    Example:
        >>> includes = IncludeSet(EntityKind.ARTIST)
        >>> _ = includes.add(Subquery.RECORDINGS).add(Relationship.URL)
        >>> includes.render()
        'recordings+url-rels'
    """

    def __init__(self, kind: EntityKind, includes: Iterable[Include | str] = ()) -> None:
        self.kind = kind
        self._items: dict[Include, None] = {}
        self.extend(includes)

    def add(self, include: Include | str) -> IncludeSet:
        """Add an include, raising InvalidIncludeError if illegal for this kind."""
        parsed = validate_include(self.kind, include)
        self._items.setdefault(parsed, None)
        return self

    def extend(self, includes: Iterable[Include | str]) -> IncludeSet:
        for include in includes:
            self.add(include)
        return self

    @property
    def subqueries(self) -> tuple[Subquery, ...]:
        return tuple(item for item in self._items if isinstance(item, Subquery))

    @property
    def relationships(self) -> tuple[Relationship, ...]:
        return tuple(item for item in self._items if isinstance(item, Relationship))

    def as_tuple(self) -> tuple[Include, ...]:
        return tuple(self._items)

    def render(self) -> str:
        return render_includes(self._items)

    def __iter__(self) -> Iterator[Include]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, include: object) -> bool:
        if not isinstance(include, str):
            return False
        return parse_include(include) in self._items

    def __repr__(self) -> str:
        return f"IncludeSet({self.kind.value!r}, {self.render()!r})"
