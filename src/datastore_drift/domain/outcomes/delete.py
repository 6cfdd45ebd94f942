"""Interpret the error, if any, of a delete against the remote datastore."""

from __future__ import annotations

from logging import getLogger

from datastore_drift.domain.diagnostics import Diagnostic, DiagnosticCode
from datastore_drift.domain.errors import (
    RemoteErrorKind,
    ResourceDoesNotExistError,
    error_kind,
    iter_error_chain,
)

from .contracts import (
    AlreadyAbsentOutcome,
    BenignMissingOutcome,
    DeleteFailedOutcome,
    DeleteOutcome,
    DeleteSucceeded,
)

log = getLogger(__name__)


def classify_delete(
    err: BaseException | None,
    *,
    item_id: str,
    item_kind: str,
    already_absent: type[BaseException] = ResourceDoesNotExistError,
) -> DeleteOutcome:
    if err is None:
        return DeleteSucceeded()

    kind = error_kind(err)
    # deleting something already gone satisfies the desired end state
    wraps_sentinel = any(isinstance(link, already_absent) for link in iter_error_chain(err))
    if wraps_sentinel or kind is RemoteErrorKind.NOT_FOUND:
        log.debug("Datastore %s '%s' already absent", item_kind, item_id)
        return AlreadyAbsentOutcome()

    if kind is RemoteErrorKind.MALFORMED_IDENTIFIER:
        log.debug("Datastore %s '%s' could not be resolved: %s", item_kind, item_id, err)
        return BenignMissingOutcome(
            warning=Diagnostic.warning(
                DiagnosticCode.DELETE_TARGET_MISSING,
                f"Datastore {item_kind} does not exist",
                f"Could not delete datastore {item_kind} '{item_id}', it does not exist "
                "or has been deleted outside of the provisioning tool.",
            )
        )

    return DeleteFailedOutcome(
        error=Diagnostic.error(
            DiagnosticCode.DELETE_FAILED,
            f"Error deleting datastore {item_kind}",
            f"Could not delete datastore {item_kind} '{item_id}', unexpected error: {err}",
        )
    )


__all__ = ["classify_delete"]
