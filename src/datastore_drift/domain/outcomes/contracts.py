"""Outcome variants returned by the read and delete classifiers.

Every variant is immutable and exposes ``status`` plus a ``diagnostics``
tuple, so the orchestration can switch on the variant and forward the
diagnostics without caring which classifier produced them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Literal

from datastore_drift.domain.diagnostics import Diagnostic, Severity


class ReadStatus(StrEnum):
    PROCEED = "proceed"
    REMOVE_FROM_STATE = "remove_from_state"
    AUTH_ERROR = "auth_error"


class DeleteStatus(StrEnum):
    SUCCESS = "success"
    ALREADY_ABSENT = "already_absent"
    BENIGN_MISSING = "benign_missing"
    FAILURE = "failure"


def _require_severity(diagnostic: Diagnostic, severity: Severity, variant: str) -> None:
    if diagnostic.severity is not severity:
        raise ValueError(f"{variant} requires a {severity} diagnostic")


@dataclass(slots=True, frozen=True, kw_only=True)
class ProceedOutcome:
    """No error; the caller continues normal read processing."""

    status: Literal[ReadStatus.PROCEED] = ReadStatus.PROCEED

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return ()

    @property
    def handled(self) -> bool:
        return False


@dataclass(slots=True, frozen=True, kw_only=True)
class RemoveFromStateOutcome:
    """The remote item is treated as gone and must leave tracked state."""

    warning: Diagnostic
    status: Literal[ReadStatus.REMOVE_FROM_STATE] = ReadStatus.REMOVE_FROM_STATE

    def __post_init__(self) -> None:
        _require_severity(self.warning, Severity.WARNING, "RemoveFromStateOutcome")

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return (self.warning,)

    @property
    def handled(self) -> bool:
        return True


@dataclass(slots=True, frozen=True, kw_only=True)
class AuthErrorOutcome:
    """Authentication failed; tracked state must stay untouched."""

    error: Diagnostic
    status: Literal[ReadStatus.AUTH_ERROR] = ReadStatus.AUTH_ERROR

    def __post_init__(self) -> None:
        _require_severity(self.error, Severity.ERROR, "AuthErrorOutcome")

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return (self.error,)

    @property
    def handled(self) -> bool:
        return True


type ReadOutcome = ProceedOutcome | RemoveFromStateOutcome | AuthErrorOutcome


@dataclass(slots=True, frozen=True, kw_only=True)
class DeleteSucceeded:
    status: Literal[DeleteStatus.SUCCESS] = DeleteStatus.SUCCESS

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return ()


@dataclass(slots=True, frozen=True, kw_only=True)
class AlreadyAbsentOutcome:
    """The item was already gone, which is the desired end state."""

    status: Literal[DeleteStatus.ALREADY_ABSENT] = DeleteStatus.ALREADY_ABSENT

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return ()


@dataclass(slots=True, frozen=True, kw_only=True)
class BenignMissingOutcome:
    warning: Diagnostic
    status: Literal[DeleteStatus.BENIGN_MISSING] = DeleteStatus.BENIGN_MISSING

    def __post_init__(self) -> None:
        _require_severity(self.warning, Severity.WARNING, "BenignMissingOutcome")

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return (self.warning,)


@dataclass(slots=True, frozen=True, kw_only=True)
class DeleteFailedOutcome:
    error: Diagnostic
    status: Literal[DeleteStatus.FAILURE] = DeleteStatus.FAILURE

    def __post_init__(self) -> None:
        _require_severity(self.error, Severity.ERROR, "DeleteFailedOutcome")

    @property
    def diagnostics(self) -> tuple[Diagnostic, ...]:
        return (self.error,)


type DeleteOutcome = (
    DeleteSucceeded | AlreadyAbsentOutcome | BenignMissingOutcome | DeleteFailedOutcome
)


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
]
