"""Ports for the orchestration's mutable per-operation responses.

The decision units never touch these; ``datastore_drift.domain.apply``
is the single place their results are written onto a response.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from datastore_drift.domain.diagnostics import Diagnostic


@runtime_checkable
class DiagnosticSink(Protocol):
    """Append-only collection of diagnostics surfaced to the end user."""

    def append(self, diagnostic: Diagnostic, /) -> None: ...


class PlanResponse(Protocol):
    """Plan-time response for a single attribute of one resource."""

    diagnostics: DiagnosticSink
    requires_replace: bool
    plan_value: int | None


class ReadResponse(Protocol):
    diagnostics: DiagnosticSink

    def remove_resource(self) -> None:
        """Drop the resource from tracked state."""
        ...


class DeleteResponse(Protocol):
    diagnostics: DiagnosticSink


__all__ = ["DeleteResponse", "DiagnosticSink", "PlanResponse", "ReadResponse"]
