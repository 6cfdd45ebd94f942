"""Translate ``httpx`` failures of the datastore API into structured errors.

The datastore API reports a missing volume either as a 404 or as a 500 whose
body says the volume "does not exist"; an identifier it cannot resolve comes
back as "unable to parse". Mapping those here keeps message matching out of
the domain classifiers.
"""

from __future__ import annotations

from http import HTTPStatus
from logging import getLogger
from typing import TYPE_CHECKING, Final

import httpx

from datastore_drift.domain.errors import (
    MALFORMED_IDENTIFIER_MARKER,
    RemoteError,
    RemoteErrorKind,
    ResourceDoesNotExistError,
)

if TYPE_CHECKING:
    from collections.abc import Callable

log = getLogger(__name__)

DOES_NOT_EXIST_MARKER: Final[str] = "does not exist"

_AUTH_STATUSES: Final[frozenset[int]] = frozenset({HTTPStatus.UNAUTHORIZED, HTTPStatus.FORBIDDEN})


def _describe(response: httpx.Response) -> str:
    body = response.text.strip()
    head = f"{response.reason_phrase} ({response.status_code})"
    return f"{head}: {body}" if body else head


def remote_error_from_http(exc: httpx.HTTPError) -> RemoteError:
    if not isinstance(exc, httpx.HTTPStatusError):
        return RemoteError(f"datastore request failed: {exc}", kind=RemoteErrorKind.OTHER)

    response = exc.response
    message = _describe(response)
    if response.status_code in _AUTH_STATUSES:
        return RemoteError(f"failed to authenticate: {message}", kind=RemoteErrorKind.AUTH_FAILURE)
    if response.status_code == HTTPStatus.NOT_FOUND or (
        response.status_code == HTTPStatus.INTERNAL_SERVER_ERROR
        and DOES_NOT_EXIST_MARKER in message
    ):
        return ResourceDoesNotExistError(message)
    if MALFORMED_IDENTIFIER_MARKER in message:
        return RemoteError(message, kind=RemoteErrorKind.MALFORMED_IDENTIFIER)
    return RemoteError(message, kind=RemoteErrorKind.OTHER)


def capture_remote_result[T](call: Callable[[], T]) -> tuple[T | None, RemoteError | None]:
    """Run ``call`` and return ``(value, error)`` the way the lifecycle driver expects."""

    try:
        return call(), None
    except httpx.HTTPError as exc:
        error = remote_error_from_http(exc)
        log.debug("Datastore call failed (%s): %s", error.kind, error)
        return None, error


__all__ = ["DOES_NOT_EXIST_MARKER", "capture_remote_result", "remote_error_from_http"]
