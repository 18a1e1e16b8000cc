"""
Modifier store module for the tracker.

Holds the ordered collection of active buffs and debuffs.
"""

from collections.abc import Iterable

from catchery import log_debug

from core.constants import Attribute
from core.errors import InvalidModifierError

from .base_effect import EffectStore
from .modifier import Modifier


class ModifierStore(EffectStore[Modifier]):
    """
    Owns every active Modifier, in the order they were added.

    Each modifier is independent: adding the same buff to several attributes
    creates one modifier per attribute, each decaying and removable on its
    own.
    """

    def add_modifier(
        self,
        attribute: Attribute | str,
        duration: int,
        magnitude: int,
        debuff: bool = False,
    ) -> Modifier:
        """
        Adds a single modifier.

        Args:
            attribute (Attribute | str):
                The attribute to adjust.
            duration (int):
                Number of turns the modifier lasts, at least 1.
            magnitude (int):
                The amount to add. When `debuff` is set the amount is negated
                before being stored.
            debuff (bool):
                Whether the modifier is a debuff.

        Raises:
            InvalidAttributeError:
                If the attribute name is not recognized.
            InvalidModifierError:
                If the duration is below 1 or the magnitude is zero.

        Returns:
            Modifier:
                The stored modifier, with its id assigned.

        """
        target = Attribute.parse(attribute)
        _check_parameters(duration, magnitude)
        points = -abs(magnitude) if debuff else magnitude
        modifier = self._append(
            Modifier(attribute=target, remaining_turns=duration, magnitude=points)
        )
        log_debug(
            "Added modifier",
            {"id": modifier.id, "stat": target.value, "turns": duration, "points": points},
        )
        return modifier

    def add_modifiers(
        self,
        attributes: Iterable[Attribute | str],
        duration: int,
        magnitude: int,
        debuff: bool = False,
    ) -> list[Modifier]:
        """
        Adds the same buff or debuff to several attributes at once.

        Every attribute name is validated before anything is added, so a bad
        name leaves the store untouched.

        Returns:
            list[Modifier]:
                One modifier per attribute, in the given order.

        """
        targets = [Attribute.parse(attribute) for attribute in attributes]
        _check_parameters(duration, magnitude)
        return [self.add_modifier(target, duration, magnitude, debuff) for target in targets]

    def remove_modifier(self, modifier_id: int) -> bool:
        """Removes a modifier by id. Unknown ids are ignored."""
        return self.remove(modifier_id)

    def for_attribute(self, attribute: Attribute | str) -> list[Modifier]:
        """Returns the modifiers targeting the given attribute."""
        target = Attribute.parse(attribute)
        return self.find(lambda modifier: modifier.attribute == target)


def _check_parameters(duration: int, magnitude: int) -> None:
    if duration < 1:
        raise InvalidModifierError(f"Modifier duration must be at least 1, got {duration}.")
    if magnitude == 0:
        raise InvalidModifierError("Modifier magnitude cannot be zero.")
