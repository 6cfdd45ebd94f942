"""Application configuration helpers."""

from __future__ import annotations

from .drift import LOG_LEVEL_ENV, OVERWRITE_ENV, DriftConfig, get_drift_config
from .env import env_bool, env_log_level
from .errors import ConfigurationError
from .logging import configure_logging

__all__ = [
    "LOG_LEVEL_ENV",
    "OVERWRITE_ENV",
    "ConfigurationError",
    "DriftConfig",
    "configure_logging",
    "env_bool",
    "env_log_level",
    "get_drift_config",
]
