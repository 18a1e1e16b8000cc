"""
Game session module for the tracker.

The GameSession is the single state container owned by the application. It
restores every store from persistence at construction, exposes the
operations available to the user interface, and saves the stores touched by
each operation.
"""

import time
from collections.abc import Callable, Iterable

from catchery import log_info

from character.attributes import AttributeStore
from character.inventory import Inventory, InventoryItem
from character.wallet import CurrencyLedger
from core.config import TrackerConfig
from core.constants import Attribute, TurnState
from effects.modifier import Modifier
from effects.modifier_store import ModifierStore
from effects.resolver import EffectiveValueResolver
from effects.status_effect import StatusEffect, StatusEffectStore

from game.persistence import (
    BUFFS_KEY,
    INVENTORY_KEY,
    IS_MY_TURN_KEY,
    MONEY_KEY,
    PERSISTED_KEYS,
    STATS_KEY,
    STATUSES_KEY,
    MemoryStorage,
    PersistenceAdapter,
)
from game.turn_controller import TurnController, TurnReport


class GameSession:
    """
    Owns the attribute store, modifier store, status effects, inventory,
    currency ledger and turn controller of one character.

    Attributes:
        config (TrackerConfig):
            The rules in use (turn model, accrual attribute and multiplier).
        persistence (PersistenceAdapter):
            Where every store is loaded from and saved to.

    """

    def __init__(
        self,
        persistence: PersistenceAdapter | None = None,
        config: TrackerConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.config = config or TrackerConfig()
        self.persistence = persistence or PersistenceAdapter(MemoryStorage())

        self._attributes = AttributeStore()
        self._modifiers = ModifierStore()
        self._statuses = StatusEffectStore()
        self._inventory = Inventory()
        self._ledger = CurrencyLedger()
        self._resolver = EffectiveValueResolver(self._attributes, self._modifiers)
        self._turns = TurnController(
            modifiers=self._modifiers,
            statuses=self._statuses,
            ledger=self._ledger,
            resolver=self._resolver,
            turn_model=self.config.turn_model,
            accrual_attribute=self.config.accrual_attribute,
            accrual_multiplier=self.config.accrual_multiplier,
            turn_ended_display_seconds=self.config.turn_ended_display_seconds,
            clock=clock,
        )
        self.load()

    # ============================================================================
    # PERSISTENCE
    # ============================================================================

    def load(self) -> None:
        """Restores every store; each key falls back to its own default."""
        self._attributes.restore(self.persistence.load_stats())
        self._modifiers.restore(self.persistence.load_buffs())
        self._statuses.restore(self.persistence.load_statuses())
        self._inventory.restore(self.persistence.load_inventory())
        self._ledger.balance = self.persistence.load_money()
        self._turns.restore(self.persistence.load_is_my_turn())

    def _save(self, *keys: str) -> None:
        for key in keys:
            self.persistence.save(key, self._record(key))

    def _record(self, key: str) -> object:
        if key == STATS_KEY:
            return self._attributes.to_record()
        if key == BUFFS_KEY:
            return self._modifiers.to_records()
        if key == STATUSES_KEY:
            return self._statuses.to_records()
        if key == INVENTORY_KEY:
            return self._inventory.to_records()
        if key == MONEY_KEY:
            return self._ledger.balance
        if key == IS_MY_TURN_KEY:
            return self._turns.is_my_turn
        raise KeyError(key)

    # ============================================================================
    # READ ACCESS
    # ============================================================================

    @property
    def attributes(self) -> dict[Attribute, int]:
        """The base attribute values."""
        return self._attributes.as_dict()

    @property
    def modifiers(self) -> list[Modifier]:
        return self._modifiers.effects

    @property
    def statuses(self) -> list[StatusEffect]:
        return self._statuses.effects

    @property
    def inventory(self) -> list[InventoryItem]:
        return list(self._inventory.items)

    @property
    def money(self) -> int:
        return self._ledger.balance

    @property
    def turn_state(self) -> TurnState:
        return self._turns.state

    @property
    def is_my_turn(self) -> bool:
        return self._turns.is_my_turn

    @property
    def turn_ended(self) -> bool:
        """Whether the transient "turn ended" notice should be shown."""
        return self._turns.turn_ended

    def can_end_turn(self) -> bool:
        return self._turns.can_end_turn()

    def can_start_turn(self) -> bool:
        return self._turns.can_start_turn()

    def get_effective_attributes(self) -> dict[Attribute, int]:
        """The attribute values with every active modifier applied."""
        return self._resolver.effective_attributes()

    # ============================================================================
    # ATTRIBUTES
    # ============================================================================

    def increment(self, name: Attribute | str) -> int:
        value = self._attributes.increment(name)
        self._save(STATS_KEY)
        return value

    def decrement(self, name: Attribute | str) -> int:
        value = self._attributes.decrement(name)
        self._save(STATS_KEY)
        return value

    # ============================================================================
    # MODIFIERS AND STATUSES
    # ============================================================================

    def add_modifier(
        self,
        attribute: Attribute | str,
        duration: int,
        magnitude: int,
        debuff: bool = False,
    ) -> Modifier:
        """Adds a buff, or a debuff when `debuff` is set."""
        modifier = self._modifiers.add_modifier(attribute, duration, magnitude, debuff)
        self._save(BUFFS_KEY)
        return modifier

    def add_modifiers(
        self,
        attributes: Iterable[Attribute | str],
        duration: int,
        magnitude: int,
        debuff: bool = False,
    ) -> list[Modifier]:
        """Adds one independent modifier per attribute."""
        modifiers = self._modifiers.add_modifiers(attributes, duration, magnitude, debuff)
        self._save(BUFFS_KEY)
        return modifiers

    def remove_modifier(self, modifier_id: int) -> bool:
        removed = self._modifiers.remove_modifier(modifier_id)
        if removed:
            self._save(BUFFS_KEY)
        return removed

    def add_status(self, title: str, description: str, duration: int) -> StatusEffect:
        status = self._statuses.add_status(title, description, duration)
        self._save(STATUSES_KEY)
        return status

    def remove_status(self, status_id: int) -> bool:
        removed = self._statuses.remove_status(status_id)
        if removed:
            self._save(STATUSES_KEY)
        return removed

    # ============================================================================
    # INVENTORY AND CURRENCY
    # ============================================================================

    def add_item(self, title: str, description: str = "") -> InventoryItem:
        item = self._inventory.add_item(title, description)
        self._save(INVENTORY_KEY)
        return item

    def remove_item(self, item_id: int) -> bool:
        removed = self._inventory.remove_item(item_id)
        if removed:
            self._save(INVENTORY_KEY)
        return removed

    def adjust_currency(self, amount: int) -> int:
        balance = self._ledger.adjust(amount)
        self._save(MONEY_KEY)
        return balance

    # ============================================================================
    # TURNS
    # ============================================================================

    def end_turn(self) -> TurnReport | None:
        """Ends the turn; see TurnController.end_turn()."""
        report = self._turns.end_turn()
        if report is not None:
            self._save(BUFFS_KEY, STATUSES_KEY, MONEY_KEY, IS_MY_TURN_KEY)
        return report

    def start_turn(self) -> TurnReport | None:
        """Starts the turn; see TurnController.start_turn()."""
        report = self._turns.start_turn()
        if report is not None:
            self._save(MONEY_KEY, IS_MY_TURN_KEY)
        return report

    def reset_game(self) -> None:
        """
        Clears every store at once and returns the turn controller to its
        initial state. Asking the user for confirmation is up to the caller.
        """
        self._attributes.reset()
        self._modifiers.clear()
        self._statuses.clear()
        self._inventory.clear()
        self._ledger.reset()
        self._turns.reset()
        self._save(*PERSISTED_KEYS)
        log_info("Game reset")
