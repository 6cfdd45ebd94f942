"""Defaults for drift reconciliation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Final

from .env import env_bool, env_log_level

OVERWRITE_ENV: Final[str] = "DATASTORE_DRIFT_OVERWRITE"
LOG_LEVEL_ENV: Final[str] = "DATASTORE_DRIFT_LOG_LEVEL"


@dataclass(frozen=True, slots=True)
class DriftConfig:
    overwrite: bool = True
    log_level: int = logging.INFO


def get_drift_config() -> DriftConfig:
    return DriftConfig(
        overwrite=env_bool(OVERWRITE_ENV, default=True),
        log_level=env_log_level(LOG_LEVEL_ENV, default=logging.INFO),
    )
