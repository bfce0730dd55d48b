"""Logging set-up for the command-line entry point."""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "WARNING") -> None:
    """Send records from the ``lunches`` package to stderr at *level*."""
    root = logging.getLogger("lunches")
    root.setLevel(level.upper())

    # Repeated CLI invocations in one process (tests) must not stack handlers.
    for handler in list(root.handlers):
        if getattr(handler, "_lunches_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    handler._lunches_handler = True  # type: ignore[attr-defined]
    root.addHandler(handler)
