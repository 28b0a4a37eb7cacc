"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide helper to obtain configured loggers.
    - Allow optional verbose/debug modes.

Notes/Edge cases:
    - Logging configuration is idempotent; calling :func:`configure` twice
      does not attach a second handler.
"""

from __future__ import annotations

import logging

__all__ = ["ROOT_LOGGER_NAME", "get_logger", "configure"]

ROOT_LOGGER_NAME = "qanexus"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``qanexus`` namespace."""

    if name == ROOT_LOGGER_NAME or name.startswith(ROOT_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure(verbose: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    ``verbose`` selects ``DEBUG`` instead of ``WARNING``.
    """

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    if not any(getattr(h, "_qanexus", False) for h in logger.handlers):
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
        handler._qanexus = True  # type: ignore[attr-defined]
        logger.addHandler(handler)
    return logger
