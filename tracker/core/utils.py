"""
Utilities module for the tracker.

Provides common utility functions and helpers, including console printing
with rich formatting and the synthetic id generator used by the stores.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from rich.console import Console
from rich.rule import Rule

# Initialize the rich console.
_console = Console(markup=True, width=120, force_jupyter=False)


def cprint(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output.

    Args:
        *args: Arguments to pass to the console print function.
        **kwargs: Keyword arguments to pass to the console print function.

    """
    _console.print(*args, **kwargs)


def crule(*args: Any, **kwargs: Any) -> None:
    """
    Custom print function to handle colored output with a rule.

    Args:
        *args: Arguments to pass to the Rule constructor.
        **kwargs: Keyword arguments to pass to the Rule constructor.

    """
    _console.print(Rule(*args, **kwargs))


def ccapture(content: Any) -> str:
    """
    Captures console output as a string.

    Args:
        content (Any): The content to capture.

    Returns:
        str: The captured output as a string.

    """
    with _console.capture() as capture:
        _console.print(content, markup=True, end="")
    return capture.get()


def signed(value: int) -> str:
    """Formats an integer with an explicit sign, e.g. +2 or -3."""
    return f"{value:+d}"


# ---- Synthetic identity ----


class IdGenerator:
    """
    Monotonic counter handing out unique integer ids.

    Every store owns its own generator, so ids are unique within a store even
    when many records are created back to back.
    """

    def __init__(self, start: int = 1) -> None:
        self._next = start

    def next_id(self) -> int:
        """Returns a fresh id and advances the counter."""
        value = self._next
        self._next += 1
        return value

    def seed(self, existing: Iterable[int]) -> None:
        """
        Moves the counter past every id in `existing`.

        Args:
            existing (Iterable[int]): Ids already in use, e.g. restored ones.

        """
        highest = max(existing, default=None)
        if highest is not None and highest >= self._next:
            self._next = highest + 1

    def reset(self) -> None:
        self._next = 1
