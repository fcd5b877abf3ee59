"""Sources of "now" for deriving calendar values."""

from __future__ import annotations

from datetime import UTC, date, datetime, tzinfo
from typing import Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from monthday.domain.errors import DateTimeError


class Clock(Protocol):
    def __call__(self) -> datetime: ...


def resolve_zone(zone: tzinfo | str) -> tzinfo:
    """Return ``zone`` unchanged or look it up as an IANA identifier."""

    if isinstance(zone, tzinfo):
        return zone
    try:
        return ZoneInfo(zone)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise DateTimeError(f"Unknown time-zone: {zone!r}") from exc


def system_clock(zone: tzinfo | str | None = None) -> Clock:
    """Clock reading the system time in ``zone`` (the local zone when ``None``)."""

    resolved = resolve_zone(zone) if zone is not None else None

    def _clock() -> datetime:
        if resolved is None:
            return datetime.now().astimezone()
        return datetime.now(resolved)

    return _clock


def fixed_clock(instant: datetime, zone: tzinfo | str = UTC) -> Clock:
    """Clock that always returns ``instant`` viewed from ``zone``."""

    if instant.tzinfo is None:
        raise ValueError("Fixed clock instants must include timezone information")
    reference = instant.astimezone(resolve_zone(zone))

    def _clock() -> datetime:
        return reference

    return _clock


def today(clock: Clock) -> date:
    if clock is None:
        raise TypeError("clock must not be None")
    return clock().date()


__all__ = ["Clock", "fixed_clock", "resolve_zone", "system_clock", "today"]
