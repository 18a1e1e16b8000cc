"""
Effective value resolver for the tracker.

Folds the active modifiers onto the base attribute values to obtain the
values that are displayed and used for currency accrual.
"""

from collections.abc import Iterable, Mapping
from typing import Any

from core.constants import Attribute

from .modifier import Modifier


def resolve(
    attribute_set: Mapping[Attribute, int],
    modifiers: Iterable[Modifier],
) -> dict[Attribute, int]:
    """
    Computes the effective value of every attribute.

    Each effective value is the base value plus the sum of the magnitudes of
    the modifiers targeting that attribute. Summation makes the result
    independent of the modifier order. No clamping is applied.

    Args:
        attribute_set (Mapping[Attribute, int]):
            The base value of each attribute.
        modifiers (Iterable[Modifier]):
            The active modifiers.

    Returns:
        dict[Attribute, int]:
            The effective value of each attribute, in Attribute order.

    """
    effective = {attribute: attribute_set.get(attribute, 0) for attribute in Attribute}
    for modifier in modifiers:
        effective[modifier.attribute] += modifier.magnitude
    return effective


class EffectiveValueResolver:
    """
    Memoizes resolve() for a pair of stores.

    The cached result is keyed on the version counters of both stores, so any
    mutation of either store invalidates it.
    """

    def __init__(self, attributes: Any, modifiers: Any) -> None:
        """
        Args:
            attributes (AttributeStore):
                The base attribute values.
            modifiers (ModifierStore):
                The active modifiers.

        """
        self._attributes = attributes
        self._modifiers = modifiers
        self._key: tuple[int, int] | None = None
        self._cached: dict[Attribute, int] = {}

    def effective_attributes(self) -> dict[Attribute, int]:
        """Returns the effective attribute values, recomputed when stale."""
        key = (self._attributes.version, self._modifiers.version)
        if key != self._key:
            self._cached = resolve(self._attributes.as_dict(), self._modifiers)
            self._key = key
        return dict(self._cached)

    def effective_value(self, attribute: Attribute | str) -> int:
        """Returns the effective value of a single attribute."""
        return self.effective_attributes()[Attribute.parse(attribute)]
