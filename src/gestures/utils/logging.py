"""Logging helpers shared across the package."""

from __future__ import annotations

import logging

_ROOT_LOGGER_NAME = "gestures"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger, or a child of it when *name* is given.

    Names already inside the package namespace (``gestures.state`` and the like)
    are used verbatim so ``get_logger(__name__)`` works from any module.
    """

    if not name:
        return logging.getLogger(_ROOT_LOGGER_NAME)
    if name == _ROOT_LOGGER_NAME or name.startswith(_ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")


logging.getLogger(_ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

__all__ = ["get_logger"]
