"""Logging setup for the CLI."""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "strategic_claude"

_HANDLER_NAME = "strategic-claude-stderr"


def setup_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the package logger.

    Safe to call more than once; the handler is only added the first time
    and later calls just point it at the current stderr.
    """
    root = logging.getLogger(PACKAGE_LOGGER)
    root.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for existing in root.handlers:
        if existing.get_name() == _HANDLER_NAME and isinstance(
            existing, logging.StreamHandler
        ):
            existing.setStream(sys.stderr)
            return

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(
        logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root.addHandler(handler)
