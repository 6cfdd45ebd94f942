from __future__ import annotations

from typing import TYPE_CHECKING

import httpx
import pytest

from datastore_drift.adapters import capture_remote_result, remote_error_from_http
from datastore_drift.domain import (
    RemoteError,
    RemoteErrorKind,
    ResourceDoesNotExistError,
    classify_delete,
    classify_read,
)
from datastore_drift.domain.outcomes import (
    AlreadyAbsentOutcome,
    AuthErrorOutcome,
    BenignMissingOutcome,
    DeleteFailedOutcome,
)

if TYPE_CHECKING:
    from collections.abc import Callable

_VOLUME_URL = "https://pve.example/api2/json/nodes/pve/storage/local/content/local:iso/a.iso"


def _client(handler: Callable[[httpx.Request], httpx.Response]) -> httpx.Client:
    return httpx.Client(transport=httpx.MockTransport(handler))


def _delete(status_code: int, text: str = "") -> Callable[[], httpx.Response]:
    def handler(_request: httpx.Request) -> httpx.Response:
        return httpx.Response(status_code=status_code, text=text)

    def call() -> httpx.Response:
        with _client(handler) as client:
            return client.delete(_VOLUME_URL).raise_for_status()

    return call


@pytest.mark.parametrize("status_code", [401, 403])
def test_auth_statuses_map_to_auth_failure(status_code: int) -> None:
    value, error = capture_remote_result(_delete(status_code, "No ticket"))

    assert value is None
    assert isinstance(error, RemoteError)
    assert error.kind is RemoteErrorKind.AUTH_FAILURE
    assert "failed to authenticate" in str(error)
    assert isinstance(classify_read(error, "gone"), AuthErrorOutcome)


def test_not_found_maps_to_sentinel() -> None:
    _, error = capture_remote_result(_delete(404))

    assert isinstance(error, ResourceDoesNotExistError)
    outcome = classify_delete(error, item_id="local:iso/a.iso", item_kind="file")
    assert isinstance(outcome, AlreadyAbsentOutcome)


def test_server_error_saying_does_not_exist_maps_to_sentinel() -> None:
    _, error = capture_remote_result(
        _delete(500, "volume 'local:iso/a.iso' does not exist")
    )

    assert isinstance(error, ResourceDoesNotExistError)


def test_unparseable_identifier_maps_to_malformed() -> None:
    _, error = capture_remote_result(
        _delete(400, "unable to parse volume ID 'local:a.iso'")
    )

    assert error is not None
    assert error.kind is RemoteErrorKind.MALFORMED_IDENTIFIER
    outcome = classify_delete(error, item_id="local:a.iso", item_kind="file")
    assert isinstance(outcome, BenignMissingOutcome)


def test_other_status_is_unclassified() -> None:
    _, error = capture_remote_result(_delete(500, "storage is locked"))

    assert error is not None
    assert error.kind is RemoteErrorKind.OTHER
    assert "storage is locked" in str(error)
    assert "500" in str(error)
    outcome = classify_delete(error, item_id="local:iso/a.iso", item_kind="file")
    assert isinstance(outcome, DeleteFailedOutcome)
    assert "storage is locked" in outcome.diagnostics[0].detail


def test_transport_error_is_unclassified() -> None:
    error = remote_error_from_http(httpx.ConnectError("connection refused"))

    assert error.kind is RemoteErrorKind.OTHER
    assert "connection refused" in str(error)


def test_successful_call_returns_value() -> None:
    value, error = capture_remote_result(_delete(200, "{}"))

    assert error is None
    assert value is not None
    assert value.status_code == 200


def test_non_http_errors_propagate() -> None:
    def call() -> None:
        raise KeyError("boom")

    with pytest.raises(KeyError):
        capture_remote_result(call)
