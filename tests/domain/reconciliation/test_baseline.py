from __future__ import annotations

import pytest

from datastore_drift.domain import BaselineParseError
from datastore_drift.domain.reconciliation import (
    ORIGINAL_STATE_SIZE_KEY,
    baseline_from_private_state,
    encode_baseline,
    parse_baseline,
)
from datastore_drift.domain.reconciliation.baseline import INT64_MAX, INT64_MIN


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        (b"0", 0),
        (b"+42", 42),
        (b"-42", -42),
        (b"9223372036854775807", INT64_MAX),
        (b"-9223372036854775808", INT64_MIN),
    ],
)
def test_parse_baseline_accepts_int64(raw: bytes, expected: int) -> None:
    assert parse_baseline(raw) == expected


def test_parse_baseline_rejects_garbage_with_syntax_reason() -> None:
    with pytest.raises(BaselineParseError, match="invalid syntax") as excinfo:
        parse_baseline(b"12GB")

    assert excinfo.value.raw == b"12GB"
    assert 'parsing "12GB"' in str(excinfo.value)


def test_parse_baseline_rejects_out_of_range() -> None:
    with pytest.raises(BaselineParseError, match="out of range"):
        parse_baseline(b"-9223372036854775809")


def test_parse_baseline_rejects_trailing_newline() -> None:
    with pytest.raises(BaselineParseError):
        parse_baseline(b"100\n")


def test_encode_baseline_is_decimal_ascii() -> None:
    assert encode_baseline(1024) == b"1024"
    assert encode_baseline(-1) == b"-1"


def test_encode_baseline_rejects_oversized_values() -> None:
    with pytest.raises(ValueError, match="64-bit"):
        encode_baseline(INT64_MAX + 1)


def test_baseline_from_private_state() -> None:
    assert baseline_from_private_state({ORIGINAL_STATE_SIZE_KEY: b"7"}) == b"7"
    assert baseline_from_private_state({}) is None
