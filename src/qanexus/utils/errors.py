"""Typed exceptions for generator misuse and failed assertions."""

from __future__ import annotations

import click

__all__ = ["UsageError", "AssertionFailedError", "colorize"]


class UsageError(ValueError):
    """Raised when a generator is called with arguments it cannot satisfy."""


def colorize(message: str) -> str:
    """Wrap ``message`` in ANSI red, resetting the colour afterwards."""

    return click.style(message, fg="red")


class AssertionFailedError(AssertionError):
    """Raised by every assertion helper when its predicate does not hold.

    ``message`` keeps the plain text (caller prefix followed by the computed
    detail).  ``str()`` of the exception is wrapped in ANSI red when
    ``color`` is true so failures stand out in a terminal.
    """

    def __init__(self, message: str, *, color: bool = True) -> None:
        self.message = message
        self.color = color
        super().__init__(colorize(message) if color else message)
