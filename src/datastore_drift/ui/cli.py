"""Operator CLI for evaluating drift and error-classification decisions offline.

Useful when triaging a failed plan: feed in the baseline from state and the
size reported by the datastore, or the raw error text of a read/delete, and
see exactly which diagnostics the provider would surface.
"""

# ruff: noqa: T201

from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from datastore_drift.config import ConfigurationError, configure_logging, get_drift_config
from datastore_drift.domain import (
    ResourceDoesNotExistError,
    classify_delete,
    classify_read,
    reconcile,
)
from datastore_drift.domain.diagnostics import has_errors

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

    from datastore_drift.config import DriftConfig
    from datastore_drift.domain.diagnostics import Diagnostic

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str], *, config: DriftConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Evaluate datastore drift decisions")
    subparsers = parser.add_subparsers(dest="command", required=True)

    plan = subparsers.add_parser("reconcile", help="Compare a size baseline with the datastore")
    plan.add_argument(
        "--kind",
        type=str,
        default="disk",
        help="Resource kind used in messages (default: %(default)s)",
    )
    plan.add_argument(
        "--baseline",
        type=str,
        help="Raw original_state_size value from private state (omit if absent)",
    )
    plan.add_argument(
        "--observed",
        type=int,
        required=True,
        help="Size currently reported by the datastore",
    )
    plan.add_argument(
        "--overwrite",
        action=argparse.BooleanOptionalAction,
        default=config.overwrite,
        help="Honor out-of-band size changes by forcing replacement (default: %(default)s)",
    )

    read = subparsers.add_parser("read", help="Classify the error of a read")
    read.add_argument("--error", type=str, help="Raw error text (omit for a successful read)")
    read.add_argument(
        "--not-found-message",
        type=str,
        default="Resource does not exist",
        help="Warning summary used when the resource is removed from state",
    )

    delete = subparsers.add_parser("delete", help="Classify the error of a delete")
    delete.add_argument("--id", dest="item_id", type=str, required=True, help="Item identifier")
    delete.add_argument("--kind", type=str, default="file", help="Item kind used in messages")
    delete.add_argument("--error", type=str, help="Raw error text (omit for a successful delete)")
    delete.add_argument(
        "--already-absent",
        action="store_true",
        help="Treat the error as the remote client's does-not-exist sentinel",
    )

    return parser.parse_args(list(argv))


def _error_from_args(args: argparse.Namespace) -> BaseException | None:
    if getattr(args, "already_absent", False):
        return ResourceDoesNotExistError(args.error or "the requested resource does not exist")
    if args.error is None:
        return None
    # raw text carries no structured kind, so message markers decide
    return RuntimeError(args.error)


def _report(status: str, diagnostics: Sequence[Diagnostic]) -> int:
    print(f"outcome: {status}")
    for diagnostic in diagnostics:
        print(diagnostic.render())
    return 1 if has_errors(diagnostics) else 0


def run(args: argparse.Namespace) -> int:
    """Evaluate the parsed command and return the process exit code."""

    if args.command == "reconcile":
        baseline = args.baseline.encode("utf-8") if args.baseline is not None else None
        decision = reconcile(
            baseline,
            args.observed,
            overwrite=args.overwrite,
            resource_kind=args.kind,
        )
        status = "replace" if decision.force_replace else "keep"
        if decision.force_replace:
            print(f"plan value: {decision.plan_value}")
        return _report(status, decision.diagnostics)
    if args.command == "read":
        outcome = classify_read(_error_from_args(args), args.not_found_message)
        return _report(outcome.status, outcome.diagnostics)
    if args.command == "delete":
        outcome = classify_delete(
            _error_from_args(args),
            item_id=args.item_id,
            item_kind=args.kind,
        )
        return _report(outcome.status, outcome.diagnostics)
    raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    try:
        config = get_drift_config()
    except ConfigurationError:
        configure_logging()
        log.exception("Invalid configuration")
        sys.exit(2)

    configure_logging(level=config.log_level)
    parsed_args = _parse_args(args_list, config=config)
    sys.exit(run(parsed_args))


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def entrypoint() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    entrypoint()
