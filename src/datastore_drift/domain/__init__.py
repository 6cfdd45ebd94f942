"""Decision logic for datastore-backed resources.

Nothing in this package performs I/O. Every entry point takes values the
orchestration already holds and returns an immutable result describing what
the orchestration should do next.
"""

from __future__ import annotations

from .diagnostics import Diagnostic, DiagnosticCode, Severity
from .errors import (
    BaselineParseError,
    RemoteError,
    RemoteErrorKind,
    ResourceDoesNotExistError,
    error_kind,
)
from .outcomes import classify_delete, classify_read
from .reconciliation import ReplacementDecision, reconcile

__all__ = [
    "BaselineParseError",
    "Diagnostic",
    "DiagnosticCode",
    "RemoteError",
    "RemoteErrorKind",
    "ReplacementDecision",
    "ResourceDoesNotExistError",
    "Severity",
    "classify_delete",
    "classify_read",
    "error_kind",
    "reconcile",
]
