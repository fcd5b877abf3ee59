"""Pydantic integration for month-day values in API payloads."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Annotated, cast

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    PlainSerializer,
    PlainValidator,
    WithJsonSchema,
    model_validator,
)

from monthday.domain import MonthDay


def _to_month_day(value: object) -> MonthDay:
    if isinstance(value, MonthDay):
        return value
    if isinstance(value, str):
        return MonthDay.parse(value.strip())
    if isinstance(value, date):
        return MonthDay.from_temporal(value)
    if isinstance(value, Mapping):
        mapping_value = cast(Mapping[str, object], value)
        month, day = mapping_value.get("month"), mapping_value.get("day")
        if not isinstance(month, int) or not isinstance(day, int):
            raise ValueError("Month-day mappings need integer 'month' and 'day' keys")
        return MonthDay.of(month, day)
    raise ValueError(f"Cannot interpret {type(value).__name__} as a month-day")


MonthDayField = Annotated[
    MonthDay,
    PlainValidator(_to_month_day),
    PlainSerializer(str, return_type=str),
    WithJsonSchema({"type": "string", "pattern": r"^--\d{2}-\d{2}$", "examples": ["--12-03"]}),
]


class MonthDayPayload(BaseModel):
    """Structured ``{"month": 12, "day": 3}`` form of a month-day."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)

    @model_validator(mode="after")
    def _check_combination(self) -> MonthDayPayload:
        self.to_domain()
        return self

    @classmethod
    def from_domain(cls, value: MonthDay) -> MonthDayPayload:
        return cls(month=value.month_value, day=value.day_of_month)

    def to_domain(self) -> MonthDay:
        return MonthDay.of(self.month, self.day)


__all__ = ["MonthDayField", "MonthDayPayload"]
