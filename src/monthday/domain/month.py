"""The twelve ISO months and their lengths."""

from __future__ import annotations

from enum import IntEnum
from typing import Final

from monthday.domain.errors import ConversionError
from monthday.domain.fields import TemporalField
from monthday.domain.temporal import Extracted, extract_fields


class Month(IntEnum):
    """Month-of-year, ``JANUARY`` (1) to ``DECEMBER`` (12)."""

    JANUARY = 1
    FEBRUARY = 2
    MARCH = 3
    APRIL = 4
    MAY = 5
    JUNE = 6
    JULY = 7
    AUGUST = 8
    SEPTEMBER = 9
    OCTOBER = 10
    NOVEMBER = 11
    DECEMBER = 12

    @classmethod
    def of(cls, month: int) -> Month:
        """Resolve a 1-based ordinal, raising ``RangeError`` outside 1..12."""

        return cls(TemporalField.MONTH_OF_YEAR.check_valid_value(month))

    @classmethod
    def from_temporal(cls, source: object) -> Month:
        result = extract_fields(source, TemporalField.MONTH_OF_YEAR)
        if not isinstance(result, Extracted):
            raise ConversionError(source, result.reason, target="Month") from result.cause
        return cls.of(result.values[0])

    @property
    def display_name(self) -> str:
        return self.name

    def max_length(self) -> int:
        """Day count of this month in a leap year."""
        return _MAX_LENGTHS[self]

    def min_length(self) -> int:
        """Day count of this month in a common year."""
        return 28 if self is Month.FEBRUARY else _MAX_LENGTHS[self]


_MAX_LENGTHS: Final[dict[Month, int]] = {
    Month.JANUARY: 31,
    Month.FEBRUARY: 29,
    Month.MARCH: 31,
    Month.APRIL: 30,
    Month.MAY: 31,
    Month.JUNE: 30,
    Month.JULY: 31,
    Month.AUGUST: 31,
    Month.SEPTEMBER: 30,
    Month.OCTOBER: 31,
    Month.NOVEMBER: 30,
    Month.DECEMBER: 31,
}


__all__ = ["Month"]
