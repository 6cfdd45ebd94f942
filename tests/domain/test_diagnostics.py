from __future__ import annotations

from datastore_drift.domain import Diagnostic, DiagnosticCode, Severity
from datastore_drift.domain.diagnostics import has_errors


def test_render_includes_severity_summary_and_detail() -> None:
    diagnostic = Diagnostic.warning(DiagnosticCode.SIZE_DRIFT, "size changed", "100 vs 150")

    assert diagnostic.render() == "WARNING: size changed\n  100 vs 150"


def test_render_without_detail() -> None:
    diagnostic = Diagnostic.error(DiagnosticCode.DELETE_FAILED, "boom")

    assert diagnostic.render() == "ERROR: boom"
    assert diagnostic.severity is Severity.ERROR


def test_has_errors() -> None:
    warning = Diagnostic.warning(DiagnosticCode.RESOURCE_GONE, "gone")
    error = Diagnostic.error(DiagnosticCode.AUTHENTICATION_FAILED, "auth")

    assert not has_errors([warning])
    assert has_errors([warning, error])
    assert not has_errors([])
