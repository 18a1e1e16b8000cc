"""
Status effect module for the tracker.

Status effects are free-form, descriptive conditions with a duration. They
decay like modifiers but never change an attribute.
"""

from catchery import log_debug
from pydantic import Field, field_validator

from core.errors import InvalidModifierError

from .base_effect import EffectStore, TimedEffect


class StatusEffect(TimedEffect):
    """A named condition lasting a number of turns."""

    title: str = Field(
        description="The name of the status.",
    )
    description: str = Field(
        "",
        description="Free-form details about the status.",
    )

    @field_validator("remaining_turns")
    @classmethod
    def _check_turns(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Status must last at least one turn.")
        return value

    @property
    def display_name(self) -> str:
        return f"{self.title} T{self.remaining_turns}"

    @property
    def color(self) -> str:
        return "bold magenta"


class StatusEffectStore(EffectStore[StatusEffect]):
    """Owns the active status effects, independently of the modifiers."""

    def add_status(self, title: str, description: str, duration: int) -> StatusEffect:
        """
        Adds a status effect.

        Args:
            title (str): The name of the status.
            description (str): Free-form details.
            duration (int): Number of turns the status lasts, at least 1.

        Raises:
            InvalidModifierError: If the duration is below 1.

        Returns:
            StatusEffect: The stored status, with its id assigned.

        """
        if duration < 1:
            raise InvalidModifierError(f"Status duration must be at least 1, got {duration}.")
        status = self._append(
            StatusEffect(title=title, description=description, remaining_turns=duration)
        )
        log_debug("Added status", {"id": status.id, "title": title, "turns": duration})
        return status

    def remove_status(self, status_id: int) -> bool:
        """Removes a status by id. Unknown ids are ignored."""
        return self.remove(status_id)
