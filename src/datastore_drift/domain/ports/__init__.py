from __future__ import annotations

from .responses import DeleteResponse, DiagnosticSink, PlanResponse, ReadResponse

__all__ = ["DeleteResponse", "DiagnosticSink", "PlanResponse", "ReadResponse"]
