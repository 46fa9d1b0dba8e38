"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain loggers under the ``pencil`` namespace.
    - Install a single stderr handler with a configurable level.

Notes/Edge cases:
    - :func:`configure_logging` is idempotent: repeated calls adjust the level
      and never duplicate handlers.
    - Library code only calls :func:`get_logger`; handlers are installed by
      the command line entry point.
"""

from __future__ import annotations

import logging
import sys

__all__ = ["PACKAGE_LOGGER", "LOG_FORMAT", "get_logger", "configure_logging"]

PACKAGE_LOGGER = "pencil"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_HANDLER_ATTR = "_pencil_handler"

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger or a child logger for ``name``."""

    if not name or name == PACKAGE_LOGGER:
        return logging.getLogger(PACKAGE_LOGGER)
    if name.startswith(PACKAGE_LOGGER + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def configure_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a stderr handler to the package logger and set ``level``."""

    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level}")
        level = resolved

    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)

    # sys.stderr may have been swapped (and the old stream closed) since the
    # last call, so the previous handler is dropped without flushing it.
    for old in [h for h in logger.handlers if getattr(h, _HANDLER_ATTR, False)]:
        logger.removeHandler(old)
        old.close()

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))
    handler.setLevel(level)
    setattr(handler, _HANDLER_ATTR, True)
    logger.addHandler(handler)
    return logger
