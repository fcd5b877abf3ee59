"""Year-less month-day values such as ``--12-03``."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering
from typing import TYPE_CHECKING, Final

from monthday.domain.clock import Clock, system_clock, today
from monthday.domain.errors import ConversionError, DateTimeError, InvalidCombinationError
from monthday.domain.fields import TemporalField, ValueRange
from monthday.domain.formatting import DateTimeFormatter, DateTimeFormatterBuilder
from monthday.domain.month import Month
from monthday.domain.temporal import Extracted, TemporalQuery, extract_fields, register_query

if TYPE_CHECKING:
    from collections.abc import Callable
    from datetime import tzinfo


@total_ordering
@dataclass(frozen=True, slots=True, eq=False)
class MonthDay:
    """A month-day in the ISO-8601 calendar system, e.g. "December 3rd".

    No year, time or zone is stored. Without a year, February 29th is always
    valid; April 31st never is. Instances are validated on construction and
    immutable afterwards, so they can be shared freely. Ordering is by month,
    then day.
    """

    month_value: int
    day_of_month: int

    def __post_init__(self) -> None:
        if self.month_value is None or self.day_of_month is None:
            raise TypeError("month and day must not be None")
        month = Month.of(self.month_value)
        TemporalField.DAY_OF_MONTH.check_valid_value(self.day_of_month)
        if self.day_of_month > month.max_length():
            raise InvalidCombinationError(self.day_of_month, month)
        # store plain ints even when given a Month member
        object.__setattr__(self, "month_value", int(month))

    # Factories ---------------------------------------------------------------

    @classmethod
    def of_month_and_day(cls, month: Month, day: int) -> MonthDay:
        if not isinstance(month, Month):
            raise TypeError(f"month must be a Month, got {type(month).__name__}")
        return cls(month.value, day)

    @classmethod
    def of(cls, month: int, day: int) -> MonthDay:
        """Build from a month number (1-12) and a day-of-month (1-31)."""

        if month is None or day is None:
            raise TypeError("month and day must not be None")
        return cls.of_month_and_day(Month.of(month), day)

    @classmethod
    def now_from(cls, clock: Clock) -> MonthDay:
        """Current month-day according to ``clock``."""

        current = today(clock)
        return cls.of_month_and_day(Month.of(current.month), current.day)

    @classmethod
    def now_in(cls, zone: tzinfo | str) -> MonthDay:
        if zone is None:
            raise TypeError("zone must not be None")
        return cls.now_from(system_clock(zone))

    @classmethod
    def now(cls) -> MonthDay:
        return cls.now_from(system_clock())

    @classmethod
    def from_temporal(cls, source: object) -> MonthDay:
        """Obtain a month-day from any object exposing month and day fields.

        ``source`` may be a :class:`MonthDay` (returned as is), any
        :class:`~monthday.domain.temporal.TemporalAccessor`, or a standard
        library ``date``/``datetime``. The calendar system of ``source`` is
        not checked.
        """

        if source is None:
            raise TypeError("source must not be None")
        if isinstance(source, MonthDay):
            return source

        result = extract_fields(source, TemporalField.MONTH_OF_YEAR, TemporalField.DAY_OF_MONTH)
        if not isinstance(result, Extracted):
            raise ConversionError(source, result.reason) from result.cause
        month, day = result.values
        try:
            return cls.of(month, day)
        except DateTimeError as exc:
            raise ConversionError(source, str(exc)) from exc

    @classmethod
    def parse(cls, text: str) -> MonthDay:
        """Parse text such as ``"--12-03"``."""

        return cls.parse_with(text, PARSER)

    @classmethod
    def parse_with(cls, text: str, formatter: DateTimeFormatter) -> MonthDay:
        if text is None:
            raise TypeError("text must not be None")
        if not isinstance(formatter, DateTimeFormatter):
            raise TypeError(f"formatter must be a DateTimeFormatter, got {type(formatter).__name__}")
        return formatter.parse(text, FROM)

    # Accessors ---------------------------------------------------------------

    @property
    def month(self) -> Month:
        return Month.of(self.month_value)

    def is_supported(self, field: TemporalField) -> bool:
        return field in (TemporalField.MONTH_OF_YEAR, TemporalField.DAY_OF_MONTH)

    def get(self, field: TemporalField) -> int:
        if field is TemporalField.MONTH_OF_YEAR:
            return self.month_value
        if field is TemporalField.DAY_OF_MONTH:
            return self.day_of_month
        raise DateTimeError(f"Unsupported field: {field.display_name}")

    def range(self, field: TemporalField) -> ValueRange:
        """Valid values of ``field``; the day range depends on this month."""

        if field is TemporalField.DAY_OF_MONTH:
            return ValueRange(1, self.month.max_length())
        if self.is_supported(field):
            return field.range
        raise DateTimeError(f"Unsupported field: {field.display_name}")

    def query[R](self, query: TemporalQuery[R] | Callable[[MonthDay], R]) -> R:
        return query(self)

    # Adjusters ---------------------------------------------------------------

    def with_month(self, month: int | Month) -> MonthDay:
        """Same day in ``month``, clamped to that month's length (Jan 31 -> Apr 30)."""

        target = Month.of(month)
        return MonthDay.of_month_and_day(target, min(self.day_of_month, target.max_length()))

    def with_day_of_month(self, day: int) -> MonthDay:
        return MonthDay.of_month_and_day(self.month, day)

    # Comparison --------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if isinstance(other, MonthDay):
            return self._key() == other._key()
        return False

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, MonthDay):
            return NotImplemented
        return self._key() < other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self) -> tuple[int, int]:
        return (self.month_value, self.day_of_month)

    def is_after(self, other: MonthDay) -> bool:
        return self > other

    def is_before(self, other: MonthDay) -> bool:
        return self < other

    # Output ------------------------------------------------------------------

    def format(self, formatter: DateTimeFormatter) -> str:
        return formatter.format(self)

    def __str__(self) -> str:
        return f"--{self.month_value:02d}-{self.day_of_month:02d}"

    def __composite_values__(self) -> tuple[int, int]:
        """Return values in a shape suitable for SQLAlchemy composite columns."""
        return (self.month_value, self.day_of_month)


# Built once at import, before any parse() call can run.
PARSER: Final[DateTimeFormatter] = (
    DateTimeFormatterBuilder()
    .append_literal("--")
    .append_value(TemporalField.MONTH_OF_YEAR, 2)
    .append_literal("-")
    .append_value(TemporalField.DAY_OF_MONTH, 2)
    .to_formatter(pattern="--MM-dd")
)

FROM: Final[TemporalQuery[MonthDay]] = register_query(
    "MonthDay.FROM",
    MonthDay.from_temporal,
    pinned=True,
)


__all__ = ["FROM", "PARSER", "MonthDay"]
