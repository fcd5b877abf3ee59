"""Calendar fields and their legal numeric ranges."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Final

from monthday.domain.errors import RangeError


@dataclass(frozen=True, slots=True)
class ValueRange:
    minimum: int
    maximum: int

    def is_valid(self, value: object) -> bool:
        if isinstance(value, bool) or not isinstance(value, int):
            return False
        return self.minimum <= value <= self.maximum

    def check_valid_value(self, value: object, field: TemporalField) -> int:
        """Return ``value`` unchanged or raise :class:`RangeError` for ``field``."""

        if isinstance(value, bool) or not isinstance(value, int):
            raise RangeError(field, value)
        if not self.minimum <= value <= self.maximum:
            raise RangeError(field, value)
        return value


class TemporalField(StrEnum):
    """Fields that date-like objects can expose to the extraction protocol."""

    YEAR = "year"
    MONTH_OF_YEAR = "month-of-year"
    DAY_OF_MONTH = "day-of-month"

    @property
    def range(self) -> ValueRange:
        return _RANGES[self]

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    def check_valid_value(self, value: object) -> int:
        return self.range.check_valid_value(value, self)


_RANGES: Final[dict[TemporalField, ValueRange]] = {
    TemporalField.YEAR: ValueRange(-999_999_999, 999_999_999),
    TemporalField.MONTH_OF_YEAR: ValueRange(1, 12),
    TemporalField.DAY_OF_MONTH: ValueRange(1, 31),
}

_DISPLAY_NAMES: Final[dict[TemporalField, str]] = {
    TemporalField.YEAR: "Year",
    TemporalField.MONTH_OF_YEAR: "MonthOfYear",
    TemporalField.DAY_OF_MONTH: "DayOfMonth",
}


__all__ = ["TemporalField", "ValueRange"]
