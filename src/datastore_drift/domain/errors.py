"""Error kinds reported by the remote datastore client.

The remote client historically surfaced failures only as message text. The
structured :class:`RemoteErrorKind` replaces that: adapters raise
:class:`RemoteError` with an explicit kind, and :func:`error_kind` falls back
to the legacy message markers only for errors that carry no specific kind.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING, Final

if TYPE_CHECKING:
    from collections.abc import Iterator

AUTHENTICATION_FAILURE_MARKER: Final[str] = "failed to authenticate"
MALFORMED_IDENTIFIER_MARKER: Final[str] = "unable to parse"


class RemoteErrorKind(StrEnum):
    AUTH_FAILURE = "auth_failure"
    NOT_FOUND = "not_found"
    MALFORMED_IDENTIFIER = "malformed_identifier"
    OTHER = "other"


class RemoteError(RuntimeError):
    """Raised by remote-client adapters for a failed datastore call."""

    def __init__(self, message: str, *, kind: RemoteErrorKind = RemoteErrorKind.OTHER) -> None:
        super().__init__(message)
        self.kind = kind


class ResourceDoesNotExistError(RemoteError):
    """The remote item targeted by a call does not exist."""

    def __init__(self, message: str = "the requested resource does not exist") -> None:
        super().__init__(message, kind=RemoteErrorKind.NOT_FOUND)


class BaselineParseError(ValueError):
    """Raised when a recorded baseline is not a valid serialized size."""

    def __init__(self, raw: bytes, reason: str) -> None:
        super().__init__(f'parsing "{raw.decode("utf-8", errors="replace")}": {reason}')
        self.raw = raw
        self.reason = reason


def iter_error_chain(err: BaseException) -> Iterator[BaseException]:
    """Yield ``err`` and the exceptions it was raised from, outermost first."""

    seen: set[int] = set()
    current: BaseException | None = err
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        if current.__cause__ is not None:
            current = current.__cause__
        elif current.__suppress_context__:
            current = None
        else:
            current = current.__context__


def error_kind(err: BaseException) -> RemoteErrorKind:
    """Return the structured kind of ``err``, falling back to message markers.

    A specific kind anywhere in the exception chain wins. ``OTHER`` carries no
    information, so such errors are matched on their message text like any
    plain exception. Markers are matched case-sensitively.
    """

    chain = tuple(iter_error_chain(err))
    for link in chain:
        if isinstance(link, RemoteError) and link.kind is not RemoteErrorKind.OTHER:
            return link.kind
    messages = [str(link) for link in chain]
    if any(AUTHENTICATION_FAILURE_MARKER in message for message in messages):
        return RemoteErrorKind.AUTH_FAILURE
    if any(MALFORMED_IDENTIFIER_MARKER in message for message in messages):
        return RemoteErrorKind.MALFORMED_IDENTIFIER
    return RemoteErrorKind.OTHER


__all__ = [
    "AUTHENTICATION_FAILURE_MARKER",
    "MALFORMED_IDENTIFIER_MARKER",
    "BaselineParseError",
    "RemoteError",
    "RemoteErrorKind",
    "ResourceDoesNotExistError",
    "error_kind",
    "iter_error_chain",
]
