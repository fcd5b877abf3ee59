"""Shared logging helpers for monthday."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .env import optional_env_var
from .errors import ConfigurationError

LOG_LEVEL_ENV_VAR = "MONTHDAY_LOG_LEVEL"


@dataclass(frozen=True)
class LoggingConfig:
    level: int = logging.INFO


def get_logging_config() -> LoggingConfig:
    name = optional_env_var(LOG_LEVEL_ENV_VAR)
    if name is None:
        return LoggingConfig()
    level = logging.getLevelNamesMapping().get(name.upper())
    if level is None:
        raise ConfigurationError(f"Invalid {LOG_LEVEL_ENV_VAR}: {name!r}")
    return LoggingConfig(level=level)


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Initialise the root logger with a terse format for CLI output.

    ``level`` usually comes from :func:`get_logging_config`. Pass ``force=True`` to
    replace handlers that are already installed.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
