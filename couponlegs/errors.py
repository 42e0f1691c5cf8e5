"""Exceptions raised while building coupon legs."""

from __future__ import annotations

from typing import Any


class LegError(Exception):
    """Base class for leg-construction errors.

    `context` carries whatever identifies the failing leg or period (period
    index, leg kind, offending value) and is rendered after the message.
    """

    def __init__(self, message: str, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context = context or {}

    def __str__(self) -> str:
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            return f"{self.message} ({context_str})"
        return self.message


class LegConfigurationError(LegError, ValueError):
    """Invalid builder input: empty nominals/rates, bad day-count override."""


class LegInvariantError(LegError, RuntimeError):
    """A built leg breaks an invariant the builders guarantee.

    This is a defect in leg construction, never a user input problem.
    """


__all__ = ["LegError", "LegConfigurationError", "LegInvariantError"]
