"""Multi-precision dates as sent by the web service.

The service emits dates as ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD`` and uses
an empty string for "unknown". PartialDate keeps the precision it was given
so a decoded ``"1991"`` is re-encoded as ``"1991"`` and not ``"1991-01-01"``.
Callers that need a calendar date use ``to_date()``, which fills missing
components with 01.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Annotated, Any, Literal

from pydantic import BeforeValidator, GetCoreSchemaHandler
from pydantic_core import core_schema

_DATE_RE = re.compile(r"^(?P<year>\d{4})(?:-(?P<month>\d{2})(?:-(?P<day>\d{2}))?)?$")

Precision = Literal["year", "month", "day"]


@dataclass(frozen=True)
class PartialDate:
    """A date known to year, month or day precision.

    Example:
        >>> PartialDate.parse("1991-09")
        PartialDate(year=1991, month=9, day=None)
        >>> str(PartialDate.parse("1991-09"))
        '1991-09'
        >>> PartialDate.parse("1991-09").to_date()
        datetime.date(1991, 9, 1)
    """

    year: int
    month: int | None = None
    day: int | None = None

    def __post_init__(self) -> None:
        if self.day is not None and self.month is None:
            raise ValueError("day requires a month")
        # Validates ranges, including days past the end of the month
        date(self.year, self.month or 1, self.day or 1)

    @classmethod
    def parse(cls, value: str) -> PartialDate:
        """Parse ``YYYY``, ``YYYY-MM`` or ``YYYY-MM-DD``.

        Raises:
            ValueError: If the string matches none of the forms or is not a
                valid calendar date
        """
        match = _DATE_RE.match(value.strip())
        if match is None:
            raise ValueError(f"Unsupported date format: {value!r}")
        month = match.group("month")
        day = match.group("day")
        return cls(
            year=int(match.group("year")),
            month=int(month) if month else None,
            day=int(day) if day else None,
        )

    @classmethod
    def from_date(cls, value: date) -> PartialDate:
        return cls(value.year, value.month, value.day)

    @property
    def precision(self) -> Precision:
        if self.day is not None:
            return "day"
        if self.month is not None:
            return "month"
        return "year"

    def to_date(self) -> date:
        """Concrete date, defaulting missing month and day to 01."""
        return date(self.year, self.month or 1, self.day or 1)

    def isoformat(self) -> str:
        text = f"{self.year:04d}"
        if self.month is not None:
            text += f"-{self.month:02d}"
        if self.day is not None:
            text += f"-{self.day:02d}"
        return text

    def __str__(self) -> str:
        return self.isoformat()

    @classmethod
    def _validate(cls, value: Any) -> PartialDate:
        if isinstance(value, PartialDate):
            return value
        if isinstance(value, date):
            return cls.from_date(value)
        if isinstance(value, str):
            return cls.parse(value)
        raise ValueError(f"Expected a date string, got {type(value).__name__}")

    @classmethod
    def __get_pydantic_core_schema__(
        cls, _source: Any, _handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        return core_schema.no_info_plain_validator_function(
            cls._validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value: value.isoformat(), when_used="json"
            ),
        )


def _blank_as_none(value: Any) -> Any:
    if isinstance(value, str) and not value.strip():
        return None
    return value


# Field type for every date the service sends; "" means unknown
OptionalDate = Annotated[PartialDate | None, BeforeValidator(_blank_as_none)]
