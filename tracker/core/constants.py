"""
Constants and enumerations for the tracker.

Defines the closed set of tracked attributes, the turn states and turn models
used by the turn controller, and the default values shared by the
configuration and persistence layers.
"""

from enum import Enum

from core.errors import InvalidAttributeError

# Currency gained per point of effective wealth at a turn boundary.
ACCRUAL_MULTIPLIER = 10

# How long the "turn ended" notice stays visible, in seconds.
TURN_ENDED_DISPLAY_SECONDS = 2.0

# Default directory holding the persisted keys.
DEFAULT_DATA_DIR = ".statit"


class NiceEnum(Enum):
    """An enumeration that provides a nicer string representation."""

    def __str__(self) -> str:
        return self.name

    @property
    def display_name(self) -> str:
        return self.name.lower().capitalize()


class Attribute(NiceEnum):
    """The five attributes tracked for a character."""

    DETERMINATION = "determination"
    HUMOR = "humor"
    INTELLIGENCE = "intelligence"
    APPEARANCE = "appearance"
    WEALTH = "wealth"

    @property
    def emoji(self) -> str:
        """Returns the emoji associated with this attribute."""
        return {
            Attribute.DETERMINATION: "🔥",
            Attribute.HUMOR: "🎭",
            Attribute.INTELLIGENCE: "🧠",
            Attribute.APPEARANCE: "✨",
            Attribute.WEALTH: "💰",
        }.get(self, "❔")

    @property
    def color(self) -> str:
        """Returns the color string associated with this attribute."""
        return {
            Attribute.DETERMINATION: "bold red",
            Attribute.HUMOR: "bold magenta",
            Attribute.INTELLIGENCE: "bold blue",
            Attribute.APPEARANCE: "bold cyan",
            Attribute.WEALTH: "bold yellow",
        }.get(self, "dim white")

    @property
    def colored_name(self) -> str:
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies attribute color formatting to a message."""
        return f"[{self.color}]{message}[/]"

    @classmethod
    def parse(cls, name: "Attribute | str") -> "Attribute":
        """
        Converts an attribute name into an Attribute.

        Args:
            name (Attribute | str):
                The attribute, or its name in any letter case.

        Raises:
            InvalidAttributeError:
                If the name is not one of the five tracked attributes.

        Returns:
            Attribute:
                The matching attribute.

        """
        if isinstance(name, cls):
            return name
        if isinstance(name, str):
            try:
                return cls(name.strip().lower())
            except ValueError:
                pass
        raise InvalidAttributeError(name)


class TurnState(NiceEnum):
    """Who currently holds the turn."""

    MY_TURN = "MY_TURN"
    NOT_MY_TURN = "NOT_MY_TURN"

    @property
    def display_name(self) -> str:
        return "My turn" if self == TurnState.MY_TURN else "Not my turn"


class TurnModel(NiceEnum):
    """How a turn boundary is driven by the user."""

    # Separate start/end transitions; accrual happens when the turn starts.
    TWO_PHASE = "two_phase"
    # A single end-turn action that accrues (pre-decay) and decays.
    FUSED = "fused"


# Default accrual source attribute.
ACCRUAL_ATTRIBUTE = Attribute.WEALTH
