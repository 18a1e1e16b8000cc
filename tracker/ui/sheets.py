"""
Module for rendering the tracker state as rich renderables.
"""

from rich.console import Group
from rich.table import Table
from rich.text import Text

from core.constants import Attribute
from core.utils import signed
from effects.modifier import Modifier
from game.session import GameSession


def modifier_to_string(modifier: Modifier) -> str:
    """
    Converts a Modifier to a formatted string, e.g. `WEALTH: +2 T3`.

    Args:
        modifier (Modifier): The modifier to format.

    Returns:
        str: The label colored green for buffs and red for debuffs.

    """
    return modifier.colored_name


def attributes_table(session: GameSession) -> Table:
    """Builds the table of base values, modifier totals and effective values."""
    base = session.attributes
    effective = session.get_effective_attributes()
    table = Table(title="Attributes", pad_edge=False)
    table.add_column("#", style="cyan", no_wrap=True)
    table.add_column("Attribute", style="bold")
    table.add_column("Base", justify="right")
    table.add_column("Mods", justify="right")
    table.add_column("Effective", justify="right", style="bold")
    for i, attribute in enumerate(Attribute, 1):
        bonus = effective[attribute] - base[attribute]
        bonus_text = ""
        if bonus:
            bonus_text = f"[{'green' if bonus > 0 else 'red'}]{signed(bonus)}[/]"
        table.add_row(
            str(i),
            f"{attribute.emoji} {attribute.colored_name}",
            str(base[attribute]),
            bonus_text,
            str(effective[attribute]),
        )
    return table


def modifiers_table(session: GameSession) -> Table:
    table = Table(title="Buffs & Debuffs", pad_edge=False)
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Modifier")
    for modifier in session.modifiers:
        table.add_row(str(modifier.id), modifier_to_string(modifier))
    if not session.modifiers:
        table.add_row("", "[dim]none[/]")
    return table


def statuses_table(session: GameSession) -> Table:
    table = Table(title="Statuses", pad_edge=False)
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Status", style="bold magenta")
    table.add_column("Description", style="italic")
    table.add_column("Turns", justify="right")
    for status in session.statuses:
        table.add_row(str(status.id), status.title, status.description, str(status.remaining_turns))
    if not session.statuses:
        table.add_row("", "[dim]none[/]", "", "")
    return table


def inventory_table(session: GameSession) -> Table:
    table = Table(title="Inventory", pad_edge=False)
    table.add_column("Id", style="cyan", no_wrap=True)
    table.add_column("Item", style="bold")
    table.add_column("Description", style="italic")
    for item in session.inventory:
        table.add_row(str(item.id), item.title, item.description)
    if not session.inventory:
        table.add_row("", "[dim]none[/]", "")
    return table


def status_line(session: GameSession) -> Text:
    """One line with the money balance, the turn holder and the turn notice."""
    line = Text()
    line.append("💰 Money: ", style="bold")
    line.append(str(session.money), style="bold yellow" if session.money >= 0 else "bold red")
    line.append("   ⏱ ")
    line.append(
        session.turn_state.display_name,
        style="bold green" if session.is_my_turn else "dim white",
    )
    if session.turn_ended:
        line.append("   Turn ended!", style="bold yellow")
    return line


def character_sheet(session: GameSession) -> Group:
    """Everything the tracker shows, stacked vertically."""
    return Group(
        status_line(session),
        attributes_table(session),
        modifiers_table(session),
        statuses_table(session),
        inventory_table(session),
    )
