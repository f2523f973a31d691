"""Logging utilities for learnspring."""
from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
PACKAGE_LOGGER = "learnspring"


def setup_logging(level: str | int = "INFO") -> None:
    """Configure root logging once and apply ``level`` to the package logger.

    The package level is applied on every call so a host that installs its own
    root handlers (uvicorn, pytest) still honours ``LEARNSPRING_LOG_LEVEL``.
    """
    if isinstance(level, str):
        level = level.upper()
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)
    root = logging.getLogger()
    if root.handlers:
        return  # already configured
    logging.basicConfig(level=level, format=LOG_FORMAT)


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(name or PACKAGE_LOGGER)
