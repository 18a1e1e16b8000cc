"""
Input validation for the user interface.

These policies guard what the user types before it reaches the session. The
session itself only rejects unknown attributes and bad modifier parameters.
"""

from core.constants import Attribute
from core.errors import InvalidAttributeError

# Money can only be moved in steps of MONEY_STEP, between the two bounds.
MONEY_STEP = 10
MONEY_MIN = 10
MONEY_MAX = 1000


class InputError(ValueError):
    """Raised when user input does not satisfy an interface policy."""


def parse_int(text: str, field: str) -> int:
    """
    Parses an integer typed by the user.

    Raises:
        InputError: If the text is not an integer.

    """
    try:
        return int(text.strip())
    except ValueError:
        raise InputError(f"{field} must be a whole number, got '{text}'.") from None


def validate_money_amount(amount: int) -> int:
    """
    Checks a money amount against the step and bounds policy.

    Args:
        amount (int): The unsigned amount to add or subtract.

    Raises:
        InputError: If the amount is out of bounds or not a multiple of the step.

    Returns:
        int: The amount, unchanged.

    """
    if amount < MONEY_MIN or amount > MONEY_MAX:
        raise InputError(f"Amount must be between {MONEY_MIN} and {MONEY_MAX}.")
    if amount % MONEY_STEP:
        raise InputError(f"Amount must be a multiple of {MONEY_STEP}.")
    return amount


def validate_title(title: str) -> str:
    """Returns the stripped title, rejecting empty ones."""
    title = title.strip()
    if not title:
        raise InputError("Title cannot be empty.")
    return title


def validate_turns(turns: int) -> int:
    if turns < 1:
        raise InputError("Turns must be at least 1.")
    return turns


def validate_points(points: int) -> int:
    if points == 0:
        raise InputError("Points cannot be zero.")
    return points


def parse_attribute_selection(text: str) -> list[Attribute]:
    """
    Parses a selection of attributes such as "1,3" or "humor, wealth".

    Numbers refer to the attributes in display order, starting at 1.
    Duplicates are dropped while keeping the first occurrence.

    Raises:
        InputError: If the selection is empty or names an unknown attribute.

    Returns:
        list[Attribute]: The selected attributes, in the order given.

    """
    ordered = list(Attribute)
    selected: list[Attribute] = []
    for token in text.replace(" ", ",").split(","):
        token = token.strip()
        if not token:
            continue
        if token.isdigit():
            index = int(token) - 1
            if not 0 <= index < len(ordered):
                raise InputError(f"No attribute number {token}.")
            attribute = ordered[index]
        else:
            try:
                attribute = Attribute.parse(token)
            except InvalidAttributeError as e:
                raise InputError(str(e)) from None
        if attribute not in selected:
            selected.append(attribute)
    if not selected:
        raise InputError("Select at least one attribute.")
    return selected
