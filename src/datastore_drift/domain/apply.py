"""Write immutable decisions onto the orchestration's responses.

Responsibilities of this stage:
- forward diagnostics in the order they were produced
- pin the plan value and request replacement for forced replacements
- signal removal from tracked state for read outcomes that require it
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .outcomes import RemoveFromStateOutcome

if TYPE_CHECKING:
    from collections.abc import Iterable

    from .diagnostics import Diagnostic
    from .outcomes import DeleteOutcome, ReadOutcome
    from .ports import DeleteResponse, DiagnosticSink, PlanResponse, ReadResponse
    from .reconciliation import ReplacementDecision


def _extend(sink: DiagnosticSink, diagnostics: Iterable[Diagnostic]) -> None:
    for diagnostic in diagnostics:
        sink.append(diagnostic)


def apply_replacement_decision(decision: ReplacementDecision, response: PlanResponse) -> None:
    _extend(response.diagnostics, decision.diagnostics)
    if decision.force_replace:
        response.requires_replace = True
        response.plan_value = decision.plan_value


def apply_read_outcome(outcome: ReadOutcome, response: ReadResponse) -> bool:
    """Apply ``outcome`` and return whether the caller should stop reading."""

    _extend(response.diagnostics, outcome.diagnostics)
    if isinstance(outcome, RemoveFromStateOutcome):
        response.remove_resource()
    return outcome.handled


def apply_delete_outcome(outcome: DeleteOutcome, response: DeleteResponse) -> None:
    _extend(response.diagnostics, outcome.diagnostics)


__all__ = ["apply_delete_outcome", "apply_read_outcome", "apply_replacement_decision"]
