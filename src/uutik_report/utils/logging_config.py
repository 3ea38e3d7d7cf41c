"""Logging setup shared by the report modules and the entry point."""

from __future__ import annotations

import logging
import sys

PACKAGE_LOGGER = "uutik_report"
_LOG_FORMAT = "%(message)s"


def get_logger(name: str) -> logging.Logger:
    """Return a logger namespaced under the package logger."""
    if name == "__main__":
        name = f"{PACKAGE_LOGGER}.main"
    return logging.getLogger(name)


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a single stderr handler to the package logger.

    Calling this more than once leaves exactly one handler installed.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    for handler in list(logger.handlers):
        if getattr(handler, "_uutik_report", False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setFormatter(logging.Formatter(_LOG_FORMAT))
    handler._uutik_report = True  # type: ignore[attr-defined]
    logger.addHandler(handler)
    return logger
