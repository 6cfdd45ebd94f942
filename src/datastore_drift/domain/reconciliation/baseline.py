"""Storage format of the size baseline kept in a resource's private state.

The baseline is the decimal ASCII rendering of a signed 64-bit size, stored
under :data:`ORIGINAL_STATE_SIZE_KEY` when a resource is created or read.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Final

from datastore_drift.domain.errors import BaselineParseError

if TYPE_CHECKING:
    from collections.abc import Mapping

ORIGINAL_STATE_SIZE_KEY: Final[str] = "original_state_size"

INT64_MIN: Final[int] = -(2**63)
INT64_MAX: Final[int] = 2**63 - 1

_DECIMAL = re.compile(rb"[+-]?[0-9]+")


def parse_baseline(raw: bytes) -> int:
    """Parse ``raw`` as a base-10 int64 or raise :class:`BaselineParseError`."""

    if _DECIMAL.fullmatch(raw) is None:
        raise BaselineParseError(raw, "invalid syntax")
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise BaselineParseError(raw, "value out of range")
    return value


def encode_baseline(size: int) -> bytes:
    if not INT64_MIN <= size <= INT64_MAX:
        raise ValueError(f"Size {size} does not fit in a signed 64-bit integer")
    return str(size).encode("ascii")


def baseline_from_private_state(private_state: Mapping[str, bytes | None]) -> bytes | None:
    return private_state.get(ORIGINAL_STATE_SIZE_KEY)


__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "ORIGINAL_STATE_SIZE_KEY",
    "baseline_from_private_state",
    "encode_baseline",
    "parse_baseline",
]
