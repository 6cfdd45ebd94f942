from __future__ import annotations

from .remote_errors import capture_remote_result, remote_error_from_http

__all__ = ["capture_remote_result", "remote_error_from_http"]
