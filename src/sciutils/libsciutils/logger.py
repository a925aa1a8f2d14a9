"""
Package logging for sciutils.

Every module logs through a child of the ``sciutils`` logger, so one
``set_level()`` call controls the whole package. ``DEBUG2`` sits below
``DEBUG`` for per-step traces such as individual line breaks.

Usage
-----
>>> from sciutils.libsciutils.logger import get_logger, setup
>>> setup("DEBUG")
>>> log = get_logger(__name__)
>>> log.debug2("break at column %d", 12)
"""

import logging
import sys

ROOT_NAME = "sciutils"

DEBUG2 = logging.DEBUG - 1

logging.addLevelName(DEBUG2, "DEBUG2")


class _SciLogger(logging.Logger):
    """Logger with a ``debug2`` method for the level below ``DEBUG``."""

    def debug2(self, msg, *args, **kwargs):
        if self.isEnabledFor(DEBUG2):
            self._log(DEBUG2, msg, args, **kwargs)


logging.setLoggerClass(_SciLogger)


def get_logger(name: str | None = None) -> _SciLogger:
    """Return ``name`` as a logger under the ``sciutils`` root.

    Module names such as ``sciutils.libsciutils.strings`` are already
    children of the root; anything else is nested under it.
    """
    if not name:
        return logging.getLogger(ROOT_NAME)
    if name != ROOT_NAME and not name.startswith(ROOT_NAME + "."):
        name = f"{ROOT_NAME}.{name}"
    return logging.getLogger(name)


def set_level(level: int | str = logging.INFO) -> None:
    """Set the threshold of the ``sciutils`` root logger (int or level name)."""
    logging.getLogger(ROOT_NAME).setLevel(level)


def setup(level: int | str = logging.INFO, stream=None) -> None:
    """Attach a stream handler with the sciutils format; later calls do nothing."""
    root = logging.getLogger(ROOT_NAME)
    if root.handlers:
        return
    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(levelname)-7s: %(message)s"))
    root.addHandler(handler)
    set_level(level)
