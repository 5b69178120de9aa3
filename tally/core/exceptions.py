"""tally.core.exceptions

Errors are part of the interface.
"""

from __future__ import annotations


class TallyError(Exception):
    """Base exception for tally."""


class ConfigError(TallyError):
    """Configuration is missing, invalid, or inconsistent."""


class InvalidCounterIdError(TallyError, ValueError):
    """A counter identifier could not be parsed."""

    def __init__(self, raw: str) -> None:
        super().__init__(f"Invalid counter id: {raw!r}")
        self.raw = raw


class CounterNotFoundError(TallyError):
    """No counter is stored under the requested identifier."""
