"""Errors raised while building, converting and parsing calendar values."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from monthday.domain.fields import TemporalField
    from monthday.domain.month import Month


class DateTimeError(ValueError):
    """Base class for every calendar validation or conversion failure."""


class RangeError(DateTimeError):
    """Raised when a raw field value lies outside the field's numeric range."""

    def __init__(self, field: TemporalField, value: object) -> None:
        super().__init__(
            f"Invalid value for {field.display_name} "
            f"(valid values {field.range.minimum} - {field.range.maximum}): {value}"
        )
        self.field = field
        self.value = value


class InvalidCombinationError(DateTimeError):
    """Raised when a day-of-month can never occur in the given month."""

    def __init__(self, day: int, month: Month) -> None:
        super().__init__(
            f"Illegal value for DayOfMonth field, value {day} "
            f"is not valid for month {month.display_name}"
        )
        self.day = day
        self.month = month


class ConversionError(DateTimeError):
    """Raised when a calendar value cannot be obtained from an arbitrary object."""

    def __init__(
        self,
        source: object,
        reason: str | None = None,
        *,
        target: str = "MonthDay",
    ) -> None:
        message = (
            f"Unable to obtain {target} from TemporalAccessor: {source!r}, "
            f"type {type(source).__name__}"
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)
        self.source = source
        self.reason = reason
        self.target = target


class ParseError(DateTimeError):
    """Raised by a formatter when text does not match its pattern."""

    def __init__(self, message: str, text: str, error_index: int = 0) -> None:
        super().__init__(message)
        self.text = text
        self.error_index = error_index
