from __future__ import annotations

import pytest

from datastore_drift.domain import Diagnostic, DiagnosticCode
from datastore_drift.domain.outcomes import (
    AuthErrorOutcome,
    BenignMissingOutcome,
    DeleteFailedOutcome,
    RemoveFromStateOutcome,
)


def test_remove_from_state_requires_warning() -> None:
    error = Diagnostic.error(DiagnosticCode.RESOURCE_GONE, "gone")

    with pytest.raises(ValueError, match="warning"):
        RemoveFromStateOutcome(warning=error)


def test_auth_error_requires_error() -> None:
    warning = Diagnostic.warning(DiagnosticCode.AUTHENTICATION_FAILED, "auth")

    with pytest.raises(ValueError, match="error"):
        AuthErrorOutcome(error=warning)


def test_delete_variants_check_severity() -> None:
    warning = Diagnostic.warning(DiagnosticCode.DELETE_FAILED, "w")
    error = Diagnostic.error(DiagnosticCode.DELETE_TARGET_MISSING, "e")

    with pytest.raises(ValueError):
        BenignMissingOutcome(warning=error)
    with pytest.raises(ValueError):
        DeleteFailedOutcome(error=warning)
