"""Logging setup for the Human Sort command line."""

from __future__ import annotations

import logging
import sys

logger = logging.getLogger("human_sort")

_console_handler: logging.Handler | None = None


class ConsoleFormatter(logging.Formatter):
    """Console formatter with the standard one-line template."""

    def __init__(self) -> None:
        super().__init__("%(levelname)s: %(message)s")


def configure_logging(verbose: bool = False) -> None:
    """Attach a stderr handler to the package logger.

    The library itself never installs handlers; only the CLI calls this.
    Calling it again replaces the handler instead of adding another one.

    Args:
        verbose: Log DEBUG messages instead of warnings only
    """
    global _console_handler

    reset_logging()

    _console_handler = logging.StreamHandler(sys.stderr)
    _console_handler.setFormatter(ConsoleFormatter())
    logger.addHandler(_console_handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def reset_logging() -> None:
    """Remove the handler installed by configure_logging and restore the level."""
    global _console_handler

    if _console_handler is not None:
        logger.removeHandler(_console_handler)
        _console_handler = None
    logger.setLevel(logging.NOTSET)
