"""User-facing diagnostics produced during plan, read and delete evaluation.

Each diagnostic carries a fixed ``code`` so callers and tests can branch on
what happened without depending on the wording of ``summary`` or ``detail``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable


class Severity(StrEnum):
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class DiagnosticCode(StrEnum):
    """Closed set of situations this package reports on."""

    BASELINE_PARSE_ERROR = "baseline_parse_error"
    SIZE_DRIFT = "size_drift"
    AUTHENTICATION_FAILED = "authentication_failed"
    RESOURCE_GONE = "resource_gone"
    DELETE_TARGET_MISSING = "delete_target_missing"
    DELETE_FAILED = "delete_failed"


@dataclass(slots=True, frozen=True, kw_only=True)
class Diagnostic:
    code: DiagnosticCode
    severity: Severity
    summary: str
    detail: str = ""

    @classmethod
    def warning(cls, code: DiagnosticCode, summary: str, detail: str = "") -> Diagnostic:
        return cls(code=code, severity=Severity.WARNING, summary=summary, detail=detail)

    @classmethod
    def error(cls, code: DiagnosticCode, summary: str, detail: str = "") -> Diagnostic:
        return cls(code=code, severity=Severity.ERROR, summary=summary, detail=detail)

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    def render(self) -> str:
        """Return a single human readable line block for terminals and logs."""

        head = f"{self.severity.upper()}: {self.summary}"
        return f"{head}\n  {self.detail}" if self.detail else head


def has_errors(diagnostics: Iterable[Diagnostic]) -> bool:
    return any(diagnostic.is_error for diagnostic in diagnostics)


__all__ = ["Diagnostic", "DiagnosticCode", "Severity", "has_errors"]
