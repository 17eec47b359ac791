"""Logging setup for the API process."""

from __future__ import annotations

import logging

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "inventory_backend.console"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Install a single console handler on the package logger and return it."""

    logger = logging.getLogger("inventory_backend")
    logger.setLevel(level.upper())
    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler()
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))
        logger.addHandler(handler)
    return logger


__all__ = ["LOG_DATE_FORMAT", "LOG_FORMAT", "configure_logging"]
