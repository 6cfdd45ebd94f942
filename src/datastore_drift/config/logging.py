"""Logging setup for the ``datastore-drift`` command."""

from __future__ import annotations

import logging


def configure_logging(*, level: int = logging.INFO, force: bool = False) -> None:
    """Route decision logs from the domain modules to stderr.

    ``ui.cli.main`` calls this once, with the level from
    ``DATASTORE_DRIFT_LOG_LEVEL``; DEBUG shows every classifier decision and
    INFO only detected size drift. Library callers embedding the classifiers
    leave logging to their host and never call this. ``force=True`` replaces
    handlers installed earlier.
    """

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        datefmt="%H:%M:%S",
        force=force,
    )
