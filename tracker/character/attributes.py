"""
Character attributes module for the tracker.

Holds the base value of the five tracked attributes.
"""

from collections.abc import Mapping

from catchery import log_debug

from core.constants import Attribute


class AttributeStore:
    """
    Base values of the five tracked attributes.

    Values are unbounded signed integers: decrementing below zero is allowed.

    Attributes:
        version (int):
            Counter bumped on every mutation, used to invalidate derived
            values computed from the base values.

    """

    def __init__(self, values: Mapping[Attribute | str, int] | None = None) -> None:
        """
        Initializes every attribute at 0, then applies `values`.

        Args:
            values (Mapping[Attribute | str, int] | None):
                Restored base values. Missing attributes stay at 0.

        Raises:
            InvalidAttributeError:
                If `values` names an unknown attribute.

        """
        self._values: dict[Attribute, int] = {attribute: 0 for attribute in Attribute}
        self.version: int = 0
        if values:
            self.restore(values)

    def get(self, name: Attribute | str) -> int:
        """Returns the base value of an attribute."""
        return self._values[Attribute.parse(name)]

    def __getitem__(self, name: Attribute | str) -> int:
        return self.get(name)

    def as_dict(self) -> dict[Attribute, int]:
        """Returns a copy of every base value, in Attribute order."""
        return dict(self._values)

    def increment(self, name: Attribute | str) -> int:
        """
        Adds one to an attribute.

        Raises:
            InvalidAttributeError: If the name is not recognized.

        Returns:
            int: The new base value.

        """
        return self._change(name, 1)

    def decrement(self, name: Attribute | str) -> int:
        """
        Subtracts one from an attribute.

        Raises:
            InvalidAttributeError: If the name is not recognized.

        Returns:
            int: The new base value.

        """
        return self._change(name, -1)

    def _change(self, name: Attribute | str, delta: int) -> int:
        attribute = Attribute.parse(name)
        self._values[attribute] += delta
        self.version += 1
        log_debug(
            "Attribute changed",
            {"stat": attribute.value, "delta": delta, "value": self._values[attribute]},
        )
        return self._values[attribute]

    def reset(self) -> None:
        """Sets every attribute back to 0."""
        self._values = {attribute: 0 for attribute in Attribute}
        self.version += 1

    def restore(self, values: Mapping[Attribute | str, int]) -> None:
        """Replaces the base values; attributes not listed are set to 0."""
        restored = {attribute: 0 for attribute in Attribute}
        for name, value in values.items():
            restored[Attribute.parse(name)] = int(value)
        self._values = restored
        self.version += 1

    def to_record(self) -> dict[str, int]:
        """Serializes the base values keyed by attribute name."""
        return {attribute.value: value for attribute, value in self._values.items()}
