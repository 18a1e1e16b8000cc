"""
Base effect module for the tracker.

Defines the base class for every effect that lasts a number of turns, and the
ordered store that owns such effects and decays them at a turn boundary.
"""

from collections.abc import Callable, Iterator
from typing import Any, Generic, TypeVar

from catchery import log_debug
from pydantic import BaseModel, ConfigDict, Field

from core.utils import IdGenerator


class TimedEffect(BaseModel):
    """
    Base class for effects that expire after a number of turns.

    Buffs, debuffs and status effects all share this lifecycle: they are
    created with a positive duration, lose one turn at every turn boundary and
    are discarded once no turns remain.
    """

    model_config = ConfigDict(populate_by_name=True)

    id: int | None = Field(
        default=None,
        description="Synthetic identity assigned by the owning store.",
    )
    remaining_turns: int = Field(
        alias="turns",
        description="Turns left before the effect expires.",
    )

    @property
    def display_name(self) -> str:
        """Returns a short human readable label for the effect."""
        return self.__class__.__name__

    @property
    def color(self) -> str:
        """Returns the color string associated with this effect type."""
        return "dim white"

    @property
    def colored_name(self) -> str:
        """Returns the effect name with color formatting applied."""
        return self.colorize(self.display_name)

    def colorize(self, message: str) -> str:
        """Applies effect color formatting to a message."""
        return f"[{self.color}]{message}[/]"

    def decayed(self) -> "TimedEffect | None":
        """
        Returns a copy of the effect with one turn less, or None if that copy
        would have no turns left.
        """
        turns = self.remaining_turns - 1
        if turns <= 0:
            return None
        return self.model_copy(update={"remaining_turns": turns})

    def to_record(self) -> dict[str, Any]:
        """Serializes the effect using its persisted field names."""
        return self.model_dump(mode="json", by_alias=True)


EffectT = TypeVar("EffectT", bound=TimedEffect)


class EffectStore(Generic[EffectT]):
    """
    Ordered collection of timed effects with synthetic identities.

    Attributes:
        version (int):
            Counter bumped on every mutation, used to invalidate derived
            values computed from the collection.

    """

    def __init__(self, effects: list[EffectT] | None = None) -> None:
        self._ids = IdGenerator()
        self._effects: list[EffectT] = []
        self.version: int = 0
        if effects:
            self.restore(effects)

    def __iter__(self) -> Iterator[EffectT]:
        return iter(self._effects)

    def __len__(self) -> int:
        return len(self._effects)

    @property
    def effects(self) -> list[EffectT]:
        """Returns a snapshot of the current effects, in insertion order."""
        return list(self._effects)

    def get(self, effect_id: int) -> EffectT | None:
        """Returns the effect with the given id, if still present."""
        for effect in self._effects:
            if effect.id == effect_id:
                return effect
        return None

    def _append(self, effect: EffectT) -> EffectT:
        if effect.id is None:
            effect = effect.model_copy(update={"id": self._ids.next_id()})
        self._commit([*self._effects, effect])
        return effect

    def _commit(self, effects: list[EffectT]) -> None:
        # The whole list is swapped in one assignment.
        self._effects = effects
        self.version += 1

    def remove(self, effect_id: int) -> bool:
        """
        Removes an effect by id.

        Removing an id that is no longer present (already removed, or expired
        during a turn) is a no-op.

        Args:
            effect_id (int):
                The id of the effect to remove.

        Returns:
            bool:
                True if an effect was removed, False otherwise.

        """
        remaining = [effect for effect in self._effects if effect.id != effect_id]
        if len(remaining) == len(self._effects):
            log_debug(
                "Ignoring removal of an effect that is no longer present",
                {"store": self.__class__.__name__, "effect_id": effect_id},
            )
            return False
        self._commit(remaining)
        return True

    def preview_decay(self) -> tuple[list[EffectT], list[EffectT]]:
        """
        Computes the outcome of a decay step without applying it.

        Returns:
            tuple[list[EffectT], list[EffectT]]:
                The surviving effects (with one turn less) and the effects
                that would expire.

        """
        survivors: list[EffectT] = []
        expired: list[EffectT] = []
        for effect in self._effects:
            decayed = effect.decayed()
            if decayed is None:
                expired.append(effect)
            else:
                survivors.append(decayed)  # type: ignore[arg-type]
        return survivors, expired

    def apply_decay(self, survivors: list[EffectT]) -> None:
        """Commits a decay step previously computed by preview_decay()."""
        self._commit(list(survivors))

    def decay_all(self) -> list[EffectT]:
        """
        Removes one turn from every effect and drops the expired ones.

        Returns:
            list[EffectT]:
                The effects that expired during this step.

        """
        survivors, expired = self.preview_decay()
        self.apply_decay(survivors)
        return expired

    def clear(self) -> None:
        """Removes every effect. Ids handed out before are never reused."""
        self._commit([])

    def restore(self, effects: list[EffectT]) -> None:
        """
        Replaces the collection with restored effects.

        Effects that carry an id keep it; the others, and any repeat of an id
        already seen, get a fresh one.
        """
        self._ids.reset()
        self._ids.seed(effect.id for effect in effects if effect.id is not None)
        seen: set[int] = set()
        restored: list[EffectT] = []
        for effect in effects:
            if effect.id is None or effect.id in seen:
                effect = effect.model_copy(update={"id": self._ids.next_id()})
            seen.add(effect.id)
            restored.append(effect)
        self._commit(restored)

    def to_records(self) -> list[dict[str, Any]]:
        """Serializes every effect, in order."""
        return [effect.to_record() for effect in self._effects]

    def find(self, predicate: Callable[[EffectT], bool]) -> list[EffectT]:
        """Returns the effects matching a predicate."""
        return [effect for effect in self._effects if predicate(effect)]
