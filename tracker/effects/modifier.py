"""
Modifier module for the tracker.

Defines buffs and debuffs: timed, signed adjustments to a single attribute.
"""

from typing import Any

from pydantic import Field, field_validator

from core.constants import Attribute
from core.utils import signed

from .base_effect import TimedEffect


class Modifier(TimedEffect):
    """
    A buff or debuff applied to one attribute for a number of turns.

    The sign of the magnitude only decides how the modifier is displayed;
    both signs are folded onto the attribute the same way.
    """

    attribute: Attribute = Field(
        alias="stat",
        description="The attribute this modifier adjusts.",
    )
    magnitude: int = Field(
        alias="points",
        description="The signed amount added to the attribute.",
    )

    @field_validator("magnitude")
    @classmethod
    def _check_magnitude(cls, value: int) -> int:
        if value == 0:
            raise ValueError("Modifier magnitude cannot be zero.")
        return value

    @field_validator("remaining_turns")
    @classmethod
    def _check_turns(cls, value: int) -> int:
        if value < 1:
            raise ValueError("Modifier must last at least one turn.")
        return value

    @property
    def is_buff(self) -> bool:
        """True for buffs, False for debuffs."""
        return self.magnitude >= 0

    @property
    def display_name(self) -> str:
        return f"{self.attribute.name}: {signed(self.magnitude)} T{self.remaining_turns}"

    @property
    def color(self) -> str:
        """Returns green for buffs and red for debuffs."""
        return "bold green" if self.is_buff else "bold red"

    @property
    def emoji(self) -> str:
        return "⬆️" if self.is_buff else "⬇️"

    def to_record(self) -> dict[str, Any]:
        """
        Serializes the modifier as `{stat, turns, points}`.

        The id is session local and is assigned again on load.
        """
        return self.model_dump(mode="json", by_alias=True, exclude={"id"})

    def __repr__(self) -> str:
        return (
            f"Modifier({self.attribute.value}, turns={self.remaining_turns}, "
            f"points={self.magnitude})"
        )
