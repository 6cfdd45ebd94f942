"""Result contract of the replacement reconciler."""

from __future__ import annotations

from dataclasses import dataclass

from datastore_drift.domain.diagnostics import Diagnostic, has_errors


@dataclass(slots=True, frozen=True, kw_only=True)
class ReplacementDecision:
    """What the plan should do about the size attribute of one resource.

    ``plan_value`` is the value the plan is pinned back to when
    ``force_replace`` is set; it is ``None`` whenever the plan is left alone.
    """

    force_replace: bool = False
    plan_value: int | None = None
    diagnostics: tuple[Diagnostic, ...] = ()

    def __post_init__(self) -> None:
        if self.force_replace and self.plan_value is None:
            raise ValueError("Forced replacement must pin a plan value")
        if self.force_replace and has_errors(self.diagnostics):
            raise ValueError("Forced replacement cannot carry error diagnostics")

    @classmethod
    def noop(cls, *diagnostics: Diagnostic) -> ReplacementDecision:
        return cls(diagnostics=diagnostics)

    @property
    def has_errors(self) -> bool:
        return has_errors(self.diagnostics)


__all__ = ["ReplacementDecision"]
