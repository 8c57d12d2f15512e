"""Search query construction."""

from .fields import SEARCHABLE_FIELDS, FieldType, field_type, searchable_fields
from .query import LUCENE_SPECIAL_CHARS, SearchQueryBuilder, escape_lucene

__all__ = [
    "FieldType",
    "LUCENE_SPECIAL_CHARS",
    "SEARCHABLE_FIELDS",
    "SearchQueryBuilder",
    "escape_lucene",
    "field_type",
    "searchable_fields",
]
