"""
Turn controller module for the tracker.

Drives turn boundaries: decays modifiers and status effects, accrues currency
from the effective value of the accrual attribute, and tracks who holds the
turn.
"""

import time
from collections.abc import Callable
from dataclasses import dataclass, field

from catchery import log_info, log_warning

from character.wallet import CurrencyLedger
from core.constants import (
    ACCRUAL_ATTRIBUTE,
    ACCRUAL_MULTIPLIER,
    TURN_ENDED_DISPLAY_SECONDS,
    Attribute,
    TurnModel,
    TurnState,
)
from effects.modifier import Modifier
from effects.modifier_store import ModifierStore
from effects.resolver import EffectiveValueResolver
from effects.status_effect import StatusEffect, StatusEffectStore


@dataclass
class TurnReport:
    """Outcome of a successful turn transition."""

    state: TurnState
    accrued: int = 0
    expired_modifiers: list[Modifier] = field(default_factory=list)
    expired_statuses: list[StatusEffect] = field(default_factory=list)


class TurnController:
    """
    State machine for turn boundaries.

    With the two-phase model the machine alternates between NOT_MY_TURN
    (initial) and MY_TURN: start_turn() accrues currency, end_turn() decays
    the effects. With the fused model only end_turn() is available, and it
    accrues using the effective value measured before the decay of the same
    turn.

    Every transition computes its whole outcome before committing it, so a
    reader never sees decayed modifiers alongside a not yet updated balance.
    """

    def __init__(
        self,
        modifiers: ModifierStore,
        statuses: StatusEffectStore,
        ledger: CurrencyLedger,
        resolver: EffectiveValueResolver,
        turn_model: TurnModel = TurnModel.TWO_PHASE,
        accrual_attribute: Attribute = ACCRUAL_ATTRIBUTE,
        accrual_multiplier: int = ACCRUAL_MULTIPLIER,
        turn_ended_display_seconds: float = TURN_ENDED_DISPLAY_SECONDS,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self._modifiers = modifiers
        self._statuses = statuses
        self._ledger = ledger
        self._resolver = resolver
        self.turn_model = turn_model
        self.accrual_attribute = accrual_attribute
        self.accrual_multiplier = accrual_multiplier
        self.turn_ended_display_seconds = turn_ended_display_seconds
        self._clock = clock
        self.state: TurnState = TurnState.NOT_MY_TURN
        self._turn_ended_at: float | None = None

    # ============================================================================
    # STATE QUERIES
    # ============================================================================

    @property
    def is_my_turn(self) -> bool:
        return self.state == TurnState.MY_TURN

    @property
    def turn_ended(self) -> bool:
        """
        True for a short while after end_turn().

        This is display feedback only; it expires on its own and never
        affects game state.
        """
        if self._turn_ended_at is None:
            return False
        if self._clock() - self._turn_ended_at < self.turn_ended_display_seconds:
            return True
        self._turn_ended_at = None
        return False

    def can_end_turn(self) -> bool:
        return self.turn_model == TurnModel.FUSED or self.is_my_turn

    def can_start_turn(self) -> bool:
        return self.turn_model == TurnModel.TWO_PHASE and not self.is_my_turn

    # ============================================================================
    # TRANSITIONS
    # ============================================================================

    def end_turn(self) -> TurnReport | None:
        """
        Ends the current turn.

        Decays modifiers and status effects, raises the "turn ended" notice
        and hands the turn over. With the fused model it also accrues
        currency from the pre-decay effective value.

        Returns:
            TurnReport | None:
                What happened, or None if ending the turn is not allowed in
                the current state.

        """
        if not self.can_end_turn():
            log_warning(
                "Cannot end the turn: it is not your turn",
                {"state": self.state.value, "turn_model": self.turn_model.value},
            )
            return None

        # Compute everything first.
        accrual_value: int | None = None
        if self.turn_model == TurnModel.FUSED:
            accrual_value = self._resolver.effective_value(self.accrual_attribute)
        modifier_survivors, expired_modifiers = self._modifiers.preview_decay()
        status_survivors, expired_statuses = self._statuses.preview_decay()

        # Then commit as one step.
        self._modifiers.apply_decay(modifier_survivors)
        self._statuses.apply_decay(status_survivors)
        accrued = 0
        if accrual_value is not None:
            accrued = self._ledger.accrue_from_attribute(accrual_value, self.accrual_multiplier)
        self.state = TurnState.NOT_MY_TURN
        self._turn_ended_at = self._clock()

        log_info(
            "Turn ended",
            {
                "expired_modifiers": len(expired_modifiers),
                "expired_statuses": len(expired_statuses),
                "accrued": accrued,
            },
        )
        return TurnReport(
            state=self.state,
            accrued=accrued,
            expired_modifiers=expired_modifiers,
            expired_statuses=expired_statuses,
        )

    def start_turn(self) -> TurnReport | None:
        """
        Starts a new turn (two-phase model only).

        Accrues currency from the effective value of the accrual attribute at
        this moment.

        Returns:
            TurnReport | None:
                What happened, or None if starting a turn is not allowed.

        """
        if not self.can_start_turn():
            log_warning(
                "Cannot start a turn now",
                {"state": self.state.value, "turn_model": self.turn_model.value},
            )
            return None

        value = self._resolver.effective_value(self.accrual_attribute)
        accrued = self._ledger.accrue_from_attribute(value, self.accrual_multiplier)
        self.state = TurnState.MY_TURN

        log_info("Turn started", {"accrual_value": value, "accrued": accrued})
        return TurnReport(state=self.state, accrued=accrued)

    def reset(self) -> None:
        """Returns to the initial state with the notice cleared."""
        self.state = TurnState.NOT_MY_TURN
        self._turn_ended_at = None

    def restore(self, is_my_turn: bool) -> None:
        """Restores the persisted turn ownership; the notice is never restored."""
        self.state = TurnState.MY_TURN if is_my_turn else TurnState.NOT_MY_TURN
        self._turn_ended_at = None
