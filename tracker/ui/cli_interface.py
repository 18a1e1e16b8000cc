"""
User interface module for the tracker.

Provides the console-based menu used to drive a GameSession: the character
sheet is rendered with rich, and input is read with prompt_toolkit.
"""

from collections.abc import Callable

from catchery import log_debug
from prompt_toolkit import ANSI, PromptSession
from rich.table import Table

from core.constants import Attribute
from core.errors import TrackerError
from core.utils import ccapture, cprint, signed
from game.session import GameSession
from game.turn_controller import TurnReport

from ui.sheets import character_sheet, modifier_to_string
from ui.validation import (
    InputError,
    parse_attribute_selection,
    parse_int,
    validate_money_amount,
    validate_points,
    validate_title,
    validate_turns,
)

# (key, label, handler name)
MENU: list[tuple[str, str, str]] = [
    ("+", "Increase attribute", "do_increment"),
    ("-", "Decrease attribute", "do_decrement"),
    ("b", "Add buff/debuff", "do_add_modifier"),
    ("r", "Remove buff/debuff", "do_remove_modifier"),
    ("s", "Add status", "do_add_status"),
    ("x", "Remove status", "do_remove_status"),
    ("i", "Add item", "do_add_item"),
    ("d", "Drop item", "do_remove_item"),
    ("m", "Add/subtract money", "do_money"),
    ("t", "Start turn", "do_start_turn"),
    ("e", "End turn", "do_end_turn"),
    ("z", "Reset game", "do_reset"),
    ("q", "Quit", ""),
]


class TrackerInterface:
    """
    Command-line interface for a GameSession.

    Shows the character sheet and a menu of actions, then asks for the
    parameters of the chosen action. Every input policy (money steps,
    non-empty titles, positive durations) is enforced here before the session
    is called.
    """

    def __init__(
        self,
        session: GameSession,
        prompt: Callable[[str], str] | None = None,
    ) -> None:
        """
        Args:
            session (GameSession):
                The session to drive.
            prompt (Callable[[str], str] | None):
                Reads one answer for a question. Defaults to a prompt_toolkit
                session, which keeps history between questions.

        """
        self.session = session
        self._prompt = prompt
        self._prompt_session: PromptSession | None = None

    # ============================================================================
    # INPUT HELPERS
    # ============================================================================

    def ask(self, question: str) -> str:
        """Asks a question and returns the stripped answer."""
        if self._prompt is not None:
            return self._prompt(question).strip()
        if self._prompt_session is None:
            self._prompt_session = PromptSession(erase_when_done=True)
        return self._prompt_session.prompt(ANSI(question)).strip()

    def ask_int(self, question: str, field: str) -> int:
        return parse_int(self.ask(question), field)

    def confirm(self, question: str) -> bool:
        return self.ask(f"{question} [y/N] ").lower() in ("y", "yes")

    def choose_attribute(self) -> Attribute:
        """Asks for a single attribute by number or name."""
        selection = parse_attribute_selection(self.ask(self._attribute_prompt("Attribute > ")))
        if len(selection) != 1:
            raise InputError("Select exactly one attribute.")
        return selection[0]

    @staticmethod
    def _attribute_prompt(question: str) -> str:
        choices = "  ".join(f"{i}) {a.value}" for i, a in enumerate(Attribute, 1))
        return f"{choices}\n{question}"

    # ============================================================================
    # MAIN LOOP
    # ============================================================================

    def menu_table(self) -> Table:
        table = Table(title="Actions", pad_edge=False)
        table.add_column("Key", style="cyan")
        table.add_column("Action", style="bold")
        for key, label, _ in MENU:
            if key == "t" and not self.session.can_start_turn():
                continue
            if key == "e" and not self.session.can_end_turn():
                continue
            table.add_row(key, label)
        return table

    def run(self) -> None:
        """Runs the menu until the user quits."""
        while True:
            prompt = (
                "\n"
                + ccapture(character_sheet(self.session))
                + "\n"
                + ccapture(self.menu_table())
                + "\nAction > "
            )
            try:
                answer = self.ask(prompt)
            except (EOFError, KeyboardInterrupt):
                return
            if answer.lower() == "q":
                return
            if not self.handle(answer):
                cprint(f"[red]Unknown action '{answer}'.[/]")

    def handle(self, answer: str) -> bool:
        """
        Runs the action bound to a menu key.

        Returns:
            bool: False if the key is not bound to any action.

        """
        for key, _, handler_name in MENU:
            if handler_name and answer.lower() == key:
                log_debug("Menu action", {"key": key, "action": handler_name})
                try:
                    getattr(self, handler_name)()
                except (InputError, TrackerError) as e:
                    cprint(f"[red]{e}[/]")
                except (EOFError, KeyboardInterrupt):
                    cprint("[dim]Cancelled.[/]")
                return True
        return False

    # ============================================================================
    # ACTIONS
    # ============================================================================

    def do_increment(self) -> None:
        attribute = self.choose_attribute()
        self.session.increment(attribute)

    def do_decrement(self) -> None:
        attribute = self.choose_attribute()
        self.session.decrement(attribute)

    def do_add_modifier(self) -> None:
        """The buff form: one modifier per selected attribute."""
        attributes = parse_attribute_selection(
            self.ask(self._attribute_prompt("Attributes (e.g. 1,3) > "))
        )
        turns = validate_turns(self.ask_int("Turns > ", "Turns"))
        points = validate_points(self.ask_int("Points > ", "Points"))
        debuff = self.confirm("Debuff?")
        modifiers = self.session.add_modifiers(attributes, turns, abs(points), debuff=debuff or points < 0)
        for modifier in modifiers:
            cprint(f"    Added {modifier_to_string(modifier)}")

    def do_remove_modifier(self) -> None:
        modifier_id = self.ask_int("Buff id > ", "Buff id")
        if not self.session.remove_modifier(modifier_id):
            cprint(f"[dim]No buff with id {modifier_id}.[/]")

    def do_add_status(self) -> None:
        title = validate_title(self.ask("Title > "))
        description = self.ask("Description > ")
        turns = validate_turns(self.ask_int("Turns > ", "Turns"))
        self.session.add_status(title, description, turns)

    def do_remove_status(self) -> None:
        status_id = self.ask_int("Status id > ", "Status id")
        if not self.session.remove_status(status_id):
            cprint(f"[dim]No status with id {status_id}.[/]")

    def do_add_item(self) -> None:
        title = validate_title(self.ask("Title > "))
        description = self.ask("Description > ")
        self.session.add_item(title, description)

    def do_remove_item(self) -> None:
        item_id = self.ask_int("Item id > ", "Item id")
        if not self.session.remove_item(item_id):
            cprint(f"[dim]No item with id {item_id}.[/]")

    def do_money(self) -> None:
        amount = validate_money_amount(self.ask_int("Amount > ", "Amount"))
        if self.confirm("Subtract?"):
            amount = -amount
        balance = self.session.adjust_currency(amount)
        cprint(f"    💰 {signed(amount)} → {balance}")

    def do_start_turn(self) -> None:
        report = self.session.start_turn()
        if report is None:
            cprint("[red]You cannot start a turn now.[/]")
            return
        self._print_report(report)

    def do_end_turn(self) -> None:
        report = self.session.end_turn()
        if report is None:
            cprint("[red]It is not your turn.[/]")
            return
        self._print_report(report)

    def do_reset(self) -> None:
        if self.confirm("Reset everything? This cannot be undone."):
            self.session.reset_game()
            cprint("[bold yellow]Game reset.[/]")

    @staticmethod
    def _print_report(report: TurnReport) -> None:
        if report.accrued:
            cprint(f"    💰 Accrued {signed(report.accrued)}")
        for modifier in report.expired_modifiers:
            cprint(f"    ⌛ {modifier_to_string(modifier)} has expired.")
        for status in report.expired_statuses:
            cprint(f"    ⌛ {status.title} has expired.")
