"""Interpret the error, if any, of a read against the remote datastore."""

from __future__ import annotations

from logging import getLogger

from datastore_drift.domain.diagnostics import Diagnostic, DiagnosticCode
from datastore_drift.domain.errors import RemoteErrorKind, error_kind

from .contracts import AuthErrorOutcome, ProceedOutcome, ReadOutcome, RemoveFromStateOutcome

log = getLogger(__name__)


def classify_read(err: BaseException | None, not_found_message: str) -> ReadOutcome:
    """Classify a read error.

    Authentication failures are always hard errors: treating them as a
    vanished resource would drop every resource from tracked state. Any other
    error is taken to mean the remote item is gone, so the resource is
    removed from state with a warning and recreated on the next apply.
    """

    if err is None:
        return ProceedOutcome()

    if error_kind(err) is RemoteErrorKind.AUTH_FAILURE:
        log.debug("Read failed to authenticate: %s", err)
        return AuthErrorOutcome(
            error=Diagnostic.error(
                DiagnosticCode.AUTHENTICATION_FAILED, "Failed to authenticate", str(err)
            )
        )

    log.debug("Read failed, removing resource from state: %s", err)
    return RemoveFromStateOutcome(
        warning=Diagnostic.warning(DiagnosticCode.RESOURCE_GONE, not_found_message, str(err))
    )


__all__ = ["classify_read"]
