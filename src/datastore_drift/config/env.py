"""Environment variable loaders for configuration."""

from __future__ import annotations

import logging
import os
from typing import Final

from .errors import ConfigurationError

_TRUE_VALUES: Final[frozenset[str]] = frozenset({"1", "true", "yes", "on"})
_FALSE_VALUES: Final[frozenset[str]] = frozenset({"0", "false", "no", "off"})


def env_bool(name: str, *, default: bool) -> bool:
    """Read a boolean flag, treating unset or blank as ``default``."""

    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean for {name}: {value!r}")


def env_log_level(name: str, *, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    level = logging.getLevelNamesMapping().get(value.strip().upper())
    if level is None:
        raise ConfigurationError(f"Invalid log level for {name}: {value!r}")
    return level
