"""
Exception hierarchy for the tracker.
"""

from typing import Any


class TrackerError(Exception):
    """Base class for every error raised by the tracker core."""


class InvalidAttributeError(TrackerError, KeyError):
    """Raised when an attribute name is not one of the five tracked ones."""

    def __init__(self, name: Any) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"Unknown attribute: {self.name!r}"


class InvalidModifierError(TrackerError, ValueError):
    """Raised when a modifier is created with a bad duration or magnitude."""


class PersistenceError(TrackerError):
    """Base class for storage medium failures."""

    def __init__(self, key: str, message: str) -> None:
        super().__init__(f"{message} (key={key!r})")
        self.key = key


class PersistenceReadError(PersistenceError):
    """The storage medium could not be read for a given key."""


class PersistenceWriteError(PersistenceError):
    """The storage medium could not be written for a given key."""
