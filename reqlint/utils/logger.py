"""
Logging utilities for reqlint.

Diagnostics go through the standard :mod:`logging` module under the
``reqlint`` namespace. Library callers get a silent ``NullHandler`` until
the CLI (or the embedding host) calls :func:`setup_logging`.
"""

from __future__ import annotations

import os
import sys
import logging
import threading
from typing import IO, Optional

from reqlint.constants import (
    LOG_DATE_FORMAT,
    LOG_DEFAULT_FORMAT,
    LOG_VERBOSE_FORMAT,
)

ROOT_LOGGER_NAME = "reqlint"
_lock = threading.Lock()


class ColoredFormatter(logging.Formatter):
    """Formatter that colors the level name when writing to a terminal."""

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def __init__(
        self,
        fmt: str,
        *,
        datefmt: Optional[str] = None,
        use_color: bool = True,
    ) -> None:
        super().__init__(fmt=fmt, datefmt=datefmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        color = self.COLORS.get(record.levelname)
        if not (color and self.use_color and _stderr_supports_color()):
            return super().format(record)

        # Records are shared between handlers; restore the plain level name.
        original = record.levelname
        record.levelname = f"{color}{original}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = original


def _stderr_supports_color() -> bool:
    """Return True when ANSI colors are appropriate for stderr."""
    if os.environ.get("NO_COLOR") or os.environ.get("CI"):
        return False
    try:
        return sys.stderr.isatty()
    except (AttributeError, OSError):
        return False


def level_for_verbosity(verbose: int) -> int:
    """Map a ``-v`` count to a logging level.

    ``0`` is WARNING, ``1`` is INFO and anything higher is DEBUG.
    """
    if verbose <= 0:
        return logging.WARNING
    if verbose == 1:
        return logging.INFO
    return logging.DEBUG


def setup_logging(
    *,
    level: int = logging.WARNING,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Attach a single stream handler to the ``reqlint`` logger.

    Safe to call repeatedly; previous handlers are replaced.

    Args:
        level: Logging level (e.g. ``logging.INFO``).
        verbose: Use the timestamped format that includes logger names.
        stream: Output stream; defaults to ``sys.stderr``.
    """
    with _lock:
        root_logger = logging.getLogger(ROOT_LOGGER_NAME)
        root_logger.handlers.clear()
        root_logger.setLevel(level)

        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(
            ColoredFormatter(
                LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
                datefmt=LOG_DATE_FORMAT,
                use_color=not os.environ.get("NO_COLOR"),
            )
        )

        root_logger.addHandler(handler)
        root_logger.propagate = False


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger within the ``reqlint`` namespace.

    ``get_logger("core.linter")`` and ``get_logger("reqlint.core.linter")``
    return the same logger.
    """
    if not name or name == ROOT_LOGGER_NAME:
        qualified = ROOT_LOGGER_NAME
    elif name.startswith(ROOT_LOGGER_NAME + "."):
        qualified = name
    else:
        qualified = f"{ROOT_LOGGER_NAME}.{name}"

    logger = logging.getLogger(qualified)

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not root_logger.handlers:
        root_logger.addHandler(logging.NullHandler())

    return logger
