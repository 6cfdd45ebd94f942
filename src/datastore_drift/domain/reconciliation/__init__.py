"""Size drift reconciliation for datastore-backed resources.

Three values meet here:
1) the baseline recorded in private state at the last successful apply
2) the size currently observed on the datastore
3) the user's ``overwrite`` policy flag

The outcome is a :class:`ReplacementDecision`; applying it to the plan is the
orchestration's job (see ``datastore_drift.domain.apply``).
"""

from __future__ import annotations

from .baseline import (
    ORIGINAL_STATE_SIZE_KEY,
    baseline_from_private_state,
    encode_baseline,
    parse_baseline,
)
from .contracts import ReplacementDecision
from .size import reconcile, reconcile_from_private_state

__all__ = [
    "ORIGINAL_STATE_SIZE_KEY",
    "ReplacementDecision",
    "baseline_from_private_state",
    "encode_baseline",
    "parse_baseline",
    "reconcile",
    "reconcile_from_private_state",
]
