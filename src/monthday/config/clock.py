"""Time-zone configuration used when deriving "today"."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from monthday.domain.clock import Clock, resolve_zone, system_clock
from monthday.domain.errors import DateTimeError

from .env import optional_env_var
from .errors import ConfigurationError

if TYPE_CHECKING:
    from datetime import tzinfo

ZONE_ENV_VAR = "MONTHDAY_ZONE"


@dataclass(frozen=True)
class ClockConfig:
    """Zone for the system clock; ``None`` means the local zone."""

    zone: tzinfo | None = None

    def clock(self) -> Clock:
        return system_clock(self.zone)


def get_clock_config() -> ClockConfig:
    name = optional_env_var(ZONE_ENV_VAR)
    if name is None:
        return ClockConfig()
    try:
        return ClockConfig(zone=resolve_zone(name))
    except DateTimeError as exc:
        raise ConfigurationError(f"Invalid {ZONE_ENV_VAR}: {name!r}") from exc
