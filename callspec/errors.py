"""Exceptions raised while building call interactions."""

from __future__ import annotations


class CallSpecError(Exception):
    """Base class for errors raised by :mod:`callspec`."""


class InteractionSyntaxError(CallSpecError):
    """Raised when an interaction definition is structurally invalid.

    The error carries the diagnostic location of the interaction so the
    failure can be traced back to the declaration that produced it.
    """

    def __init__(self, message: str, line: int, column: int, text: str) -> None:
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.text = text

    def __str__(self) -> str:
        """Return the message followed by the interaction location."""
        return (
            f"{self.message} (line {self.line}, column {self.column}: {self.text})"
        )


class LifecycleError(CallSpecError):
    """Raised when an :class:`InteractionBuilder` is used after ``build()``."""


__all__ = ["CallSpecError", "InteractionSyntaxError", "LifecycleError"]
