# SPDX-License-Identifier: MIT
"""Logging setup for the semver-ranges command line.

The library itself only emits debug records through module loggers and
leaves handler configuration to the application; ``setup_logging`` is what
the CLI calls.
"""

from __future__ import annotations

import logging
import sys
import threading
from typing import IO, Optional

LOGGER_NAME = "semver_ranges"
LOG_DEFAULT_FORMAT = "%(levelname)s: %(message)s"
LOG_VERBOSE_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%H:%M:%S"

_logging_configured: bool = False
_lock = threading.Lock()


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the package logger, or one of its children."""
    if name is None or name == LOGGER_NAME:
        return logging.getLogger(LOGGER_NAME)
    if not name.startswith(f"{LOGGER_NAME}."):
        name = f"{LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    *,
    verbose: bool = False,
    stream: Optional[IO[str]] = None,
) -> None:
    """Attach a stream handler to the package logger.

    Safe to call more than once; later calls only adjust the level.

    Args:
        verbose: Log debug records with timestamps and logger names
        stream: Output stream, stderr by default
    """
    global _logging_configured

    logger = get_logger()
    level = logging.DEBUG if verbose else logging.WARNING

    with _lock:
        if not _logging_configured:
            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(
                logging.Formatter(
                    LOG_VERBOSE_FORMAT if verbose else LOG_DEFAULT_FORMAT,
                    datefmt=LOG_DATE_FORMAT,
                )
            )
            logger.addHandler(handler)
            logger.propagate = False
            _logging_configured = True
        logger.setLevel(level)


def reset_logging() -> None:
    """Remove handlers installed by setup_logging. Used by tests."""
    global _logging_configured

    logger = get_logger()
    with _lock:
        for handler in list(logger.handlers):
            if not isinstance(handler, logging.NullHandler):
                logger.removeHandler(handler)
        logger.propagate = True
        logger.setLevel(logging.NOTSET)
        _logging_configured = False
