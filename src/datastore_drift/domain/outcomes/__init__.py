"""Classification of read and delete results against the remote datastore."""

from __future__ import annotations

from .contracts import (
    AlreadyAbsentOutcome,
    AuthErrorOutcome,
    BenignMissingOutcome,
    DeleteFailedOutcome,
    DeleteOutcome,
    DeleteStatus,
    DeleteSucceeded,
    ProceedOutcome,
    ReadOutcome,
    ReadStatus,
    RemoveFromStateOutcome,
)
from .delete import classify_delete
from .read import classify_read

__all__ = [
    "AlreadyAbsentOutcome",
    "AuthErrorOutcome",
    "BenignMissingOutcome",
    "DeleteFailedOutcome",
    "DeleteOutcome",
    "DeleteStatus",
    "DeleteSucceeded",
    "ProceedOutcome",
    "ReadOutcome",
    "ReadStatus",
    "RemoveFromStateOutcome",
    "classify_delete",
    "classify_read",
]
