"""SQLAlchemy column types for month-day values."""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Dialect, String, TypeDecorator
from sqlalchemy.orm import composite

from monthday.domain import MonthDay

if TYPE_CHECKING:
    from sqlalchemy import Column
    from sqlalchemy.orm import Composite


class MonthDayType(TypeDecorator[MonthDay]):
    """Store a :class:`MonthDay` as its ``--MM-dd`` text."""

    impl = String(7)
    cache_ok = True

    def process_bind_param(self, value: MonthDay | str | None, dialect: Dialect) -> str | None:
        _ = dialect
        if value is None:
            return None
        if isinstance(value, str):
            value = MonthDay.parse(value)
        return str(value)

    def process_result_value(self, value: str | None, dialect: Dialect) -> MonthDay | None:
        _ = dialect
        if value is None:
            return None
        return MonthDay.parse(value)


def month_day_composite(
    month_column: Column[int],
    day_column: Column[int],
) -> Composite[MonthDay]:
    """Map a :class:`MonthDay` over separate month and day integer columns."""

    return composite(MonthDay, month_column, day_column)


__all__ = ["MonthDayType", "month_day_composite"]
