"""Decide whether an out-of-band size change forces replacement."""

from __future__ import annotations

from logging import getLogger
from typing import TYPE_CHECKING

from datastore_drift.domain.diagnostics import Diagnostic, DiagnosticCode
from datastore_drift.domain.errors import BaselineParseError

from .baseline import ORIGINAL_STATE_SIZE_KEY, baseline_from_private_state, parse_baseline
from .contracts import ReplacementDecision

if TYPE_CHECKING:
    from collections.abc import Mapping

log = getLogger(__name__)


def reconcile(
    baseline_raw: bytes | None,
    observed: int,
    *,
    overwrite: bool,
    resource_kind: str,
) -> ReplacementDecision:
    """Compare the recorded baseline with the observed size.

    Without a baseline there is nothing to compare against. A malformed
    baseline yields a single error diagnostic and no replacement; the caller
    must fail the plan. Drift only forces replacement when ``overwrite`` is
    set, pinning the plan back to the baseline so the resource is recreated
    at its original size.
    """

    if baseline_raw is None:
        return ReplacementDecision.noop()

    try:
        baseline = parse_baseline(baseline_raw)
    except BaselineParseError as exc:
        log.debug("Malformed %s baseline for %s: %s", ORIGINAL_STATE_SIZE_KEY, resource_kind, exc)
        return ReplacementDecision.noop(
            Diagnostic.error(
                DiagnosticCode.BASELINE_PARSE_ERROR,
                f"Unable to convert {ORIGINAL_STATE_SIZE_KEY} of the {resource_kind} to int64",
                f"Unexpected error parsing the {ORIGINAL_STATE_SIZE_KEY} value kept in state. "
                "Please retry the operation or report this issue.\n\n"
                f"Error: {exc}",
            )
        )

    if baseline == observed or not overwrite:
        return ReplacementDecision.noop()

    log.info(
        "%s size drifted outside of the tool: baseline=%s, observed=%s",
        resource_kind,
        baseline,
        observed,
    )
    return ReplacementDecision(
        force_replace=True,
        plan_value=baseline,
        diagnostics=(
            Diagnostic.warning(
                DiagnosticCode.SIZE_DRIFT,
                f"The {resource_kind} size in datastore has changed outside of "
                "the provisioning tool.",
                f"Previous size: {baseline} saved in state does not match current size "
                f"from datastore: {observed}. You can disable this behaviour by using "
                "overwrite=false",
            ),
        ),
    )


def reconcile_from_private_state(
    private_state: Mapping[str, bytes | None],
    observed: int,
    *,
    overwrite: bool,
    resource_kind: str,
) -> ReplacementDecision:
    return reconcile(
        baseline_from_private_state(private_state),
        observed,
        overwrite=overwrite,
        resource_kind=resource_kind,
    )


__all__ = ["reconcile", "reconcile_from_private_state"]
