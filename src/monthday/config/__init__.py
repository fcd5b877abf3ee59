"""Application configuration helpers."""

from __future__ import annotations

from .clock import ZONE_ENV_VAR, ClockConfig, get_clock_config
from .env import optional_env_var
from .errors import ConfigurationError
from .logging import LOG_LEVEL_ENV_VAR, LoggingConfig, configure_logging, get_logging_config

__all__ = [
    "LOG_LEVEL_ENV_VAR",
    "ZONE_ENV_VAR",
    "ClockConfig",
    "ConfigurationError",
    "LoggingConfig",
    "configure_logging",
    "get_clock_config",
    "get_logging_config",
    "optional_env_var",
]
