"""Logging helpers for the legacy shims."""

from __future__ import annotations

import logging
from typing import Optional

ROOT_LOGGER = "ztcshim"


def get_logger(name: str = ROOT_LOGGER, level: Optional[str] = None) -> logging.Logger:
    """Return a logger under the package logger, which writes to stderr."""

    root = logging.getLogger(ROOT_LOGGER)
    if not root.handlers:
        handler = logging.StreamHandler()
        formatter = logging.Formatter(
            "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
        root.setLevel(logging.WARNING)
        root.propagate = False
    logger = logging.getLogger(name)
    if level:
        logger.setLevel(level.upper())
    return logger


def configure(level: str) -> None:
    """Apply ``level`` to the package logger and its children."""

    get_logger(ROOT_LOGGER, level)


__all__ = ["ROOT_LOGGER", "configure", "get_logger"]
