"""
Tests for the game session, the state container used by the interface.
"""

import json

import pytest
from core.config import TrackerConfig
from core.constants import Attribute, TurnModel, TurnState
from core.errors import InvalidAttributeError, PersistenceWriteError
from game.persistence import (
    BUFFS_KEY,
    INVENTORY_KEY,
    IS_MY_TURN_KEY,
    MONEY_KEY,
    STATS_KEY,
    STATUSES_KEY,
    TURN_ENDED_KEY,
    JsonFileStorage,
    MemoryStorage,
    PersistenceAdapter,
)
from game.session import GameSession


class FailingWrites(MemoryStorage):
    """Reads like memory, but every write fails."""

    def write(self, key, raw):
        raise PersistenceWriteError(key, "read-only medium")


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def session(storage):
    return GameSession(PersistenceAdapter(storage))


def stored(storage, key):
    return json.loads(storage.data[key])


def test_fresh_session_defaults(session):
    assert session.attributes == {attribute: 0 for attribute in Attribute}
    assert session.modifiers == []
    assert session.statuses == []
    assert session.inventory == []
    assert session.money == 0
    assert session.turn_state == TurnState.NOT_MY_TURN
    assert session.turn_ended is False


def test_increment_persists_stats(session, storage):
    session.increment("wealth")
    session.increment("wealth")
    session.decrement("humor")
    assert stored(storage, STATS_KEY)["wealth"] == 2
    assert stored(storage, STATS_KEY)["humor"] == -1


def test_invalid_attribute_is_reported(session, storage):
    with pytest.raises(InvalidAttributeError):
        session.increment("luck")
    assert STATS_KEY not in storage.data


def test_effective_attributes_follow_mutations(session):
    session.increment("humor")
    session.add_modifier("humor", 2, 3)
    assert session.get_effective_attributes()[Attribute.HUMOR] == 4
    session.decrement("humor")
    assert session.get_effective_attributes()[Attribute.HUMOR] == 3


def test_batch_add_and_independent_removal(session, storage):
    """Test the batch form: humor and appearance, 3 turns, +2."""
    humor, appearance = session.add_modifiers(["humor", "appearance"], 3, 2)
    assert len(stored(storage, BUFFS_KEY)) == 2

    assert session.remove_modifier(humor.id)
    assert [m.id for m in session.modifiers] == [appearance.id]
    assert stored(storage, BUFFS_KEY) == [{"stat": "appearance", "turns": 3, "points": 2}]
    effective = session.get_effective_attributes()
    assert effective[Attribute.HUMOR] == 0
    assert effective[Attribute.APPEARANCE] == 2


def test_debuff_is_stored_negative(session, storage):
    session.add_modifier("intelligence", 2, 4, debuff=True)
    assert stored(storage, BUFFS_KEY) == [{"stat": "intelligence", "turns": 2, "points": -4}]


def test_remove_twice_is_harmless(session):
    modifier = session.add_modifier("wealth", 2, 1)
    assert session.remove_modifier(modifier.id) is True
    assert session.remove_modifier(modifier.id) is False
    assert session.modifiers == []


def test_removal_after_expiry_is_a_no_op(session):
    """Test that removing a modifier that already expired does nothing."""
    session.start_turn()
    modifier = session.add_modifier("wealth", 1, 1)
    other = session.add_modifier("humor", 3, 1)
    session.end_turn()
    assert session.remove_modifier(modifier.id) is False
    assert [m.id for m in session.modifiers] == [other.id]


def test_two_phase_accrual_scenario(session, storage):
    """Test that base wealth 3 with a +2 buff accrues 50 when the turn starts."""
    for _ in range(3):
        session.increment("wealth")
    session.add_modifier("wealth", 2, 2)
    assert session.get_effective_attributes()[Attribute.WEALTH] == 5

    report = session.start_turn()

    assert report.accrued == 50
    assert session.money == 50
    assert session.is_my_turn
    assert stored(storage, MONEY_KEY) == 50
    assert stored(storage, IS_MY_TURN_KEY) is True


def test_fused_accrual_scenario(storage):
    """Test that the fused end turn accrues 50 using the pre-decay value."""
    config = TrackerConfig(turn_model=TurnModel.FUSED)
    session = GameSession(PersistenceAdapter(storage), config)
    for _ in range(3):
        session.increment("wealth")
    session.add_modifier("wealth", 1, 2)

    report = session.end_turn()

    assert report.accrued == 50
    assert session.money == 50
    assert session.modifiers == []
    assert stored(storage, BUFFS_KEY) == []


def test_end_turn_persists_decay(session, storage):
    session.start_turn()
    session.add_modifier("determination", 1, 1)
    session.add_modifier("humor", 2, 3, debuff=True)
    session.add_status("Dazed", "Seeing stars", 2)

    session.end_turn()

    assert stored(storage, BUFFS_KEY) == [{"stat": "humor", "turns": 1, "points": -3}]
    assert stored(storage, STATUSES_KEY)[0]["turns"] == 1
    assert stored(storage, IS_MY_TURN_KEY) is False
    assert session.turn_ended
    assert TURN_ENDED_KEY not in storage.data


def test_end_turn_out_of_turn_changes_nothing(session, storage):
    session.add_modifier("humor", 1, 1)
    assert session.end_turn() is None
    assert len(session.modifiers) == 1
    assert stored(storage, BUFFS_KEY) == [{"stat": "humor", "turns": 1, "points": 1}]


def test_statuses_and_inventory(session, storage):
    status = session.add_status("Dazed", "", 2)
    item = session.add_item("Rope", "Ten meters")
    assert stored(storage, STATUSES_KEY) == [
        {"id": status.id, "title": "Dazed", "description": "", "turns": 2}
    ]
    assert stored(storage, INVENTORY_KEY) == [
        {"id": item.id, "title": "Rope", "description": "Ten meters"}
    ]
    assert session.remove_status(status.id)
    assert session.remove_item(item.id)
    assert not session.remove_item(item.id)
    assert stored(storage, STATUSES_KEY) == []
    assert stored(storage, INVENTORY_KEY) == []


def test_adjust_currency(session, storage):
    session.adjust_currency(100)
    session.adjust_currency(-130)
    assert session.money == -30
    assert stored(storage, MONEY_KEY) == -30


def test_reset_game(session, storage):
    """Test that a reset clears every store regardless of prior state."""
    session.increment("wealth")
    session.decrement("humor")
    session.add_modifier("wealth", 3, 2)
    session.add_status("Dazed", "", 2)
    session.add_item("Rope")
    session.adjust_currency(70)
    session.start_turn()

    session.reset_game()

    assert session.attributes == {attribute: 0 for attribute in Attribute}
    assert session.modifiers == []
    assert session.statuses == []
    assert session.inventory == []
    assert session.money == 0
    assert session.turn_state == TurnState.NOT_MY_TURN
    assert session.turn_ended is False
    assert stored(storage, STATS_KEY)["wealth"] == 0
    assert stored(storage, BUFFS_KEY) == []
    assert stored(storage, MONEY_KEY) == 0
    assert stored(storage, IS_MY_TURN_KEY) is False


def test_session_restores_saved_state(storage):
    first = GameSession(PersistenceAdapter(storage))
    first.increment("intelligence")
    first.add_modifier("intelligence", 2, 5)
    status = first.add_status("Focused", "", 3)
    first.adjust_currency(40)
    first.start_turn()

    second = GameSession(PersistenceAdapter(storage))

    assert second.attributes[Attribute.INTELLIGENCE] == 1
    assert second.get_effective_attributes()[Attribute.INTELLIGENCE] == 6
    assert [s.id for s in second.statuses] == [status.id]
    # Accrual follows wealth, which is still 0.
    assert second.money == 40
    assert second.is_my_turn


def test_load_fallback_scenario():
    """Test that a corrupt buffs key keeps the stored stats."""
    storage = MemoryStorage(
        {
            STATS_KEY: json.dumps({"determination": 2, "wealth": 3}),
            BUFFS_KEY: json.dumps([{"stat": "wealth"}]),
            TURN_ENDED_KEY: json.dumps(True),
        }
    )
    session = GameSession(PersistenceAdapter(storage))
    assert session.modifiers == []
    assert session.attributes[Attribute.DETERMINATION] == 2
    assert session.attributes[Attribute.WEALTH] == 3
    assert session.turn_ended is False


def test_failed_saves_do_not_block_mutations():
    session = GameSession(PersistenceAdapter(FailingWrites()))
    session.increment("wealth")
    session.add_modifier("wealth", 1, 1)
    session.adjust_currency(20)
    assert session.attributes[Attribute.WEALTH] == 1
    assert session.get_effective_attributes()[Attribute.WEALTH] == 2
    assert session.money == 20


def test_session_on_disk(tmp_path):
    """Test a full save and restore through the file storage."""
    adapter = PersistenceAdapter(JsonFileStorage(tmp_path))
    session = GameSession(adapter)
    session.increment("appearance")
    session.add_item("Lamp")

    restored = GameSession(PersistenceAdapter(JsonFileStorage(tmp_path)))
    assert restored.attributes[Attribute.APPEARANCE] == 1
    assert [item.title for item in restored.inventory] == ["Lamp"]
    assert (tmp_path / "stats.json").exists()


def test_undecodable_file_does_not_block_startup(tmp_path):
    (tmp_path / "stats.json").write_text(json.dumps({"wealth": 3}), encoding="utf-8")
    (tmp_path / "buffs.json").write_bytes(b"\xff\xfe[garbage")
    session = GameSession(PersistenceAdapter(JsonFileStorage(tmp_path)))
    assert session.attributes[Attribute.WEALTH] == 3
    assert session.modifiers == []


def test_ids_are_not_reused_after_reset(session):
    """Test that a reference kept from before a reset cannot remove new records."""
    old_modifier = session.add_modifier("wealth", 2, 1)
    old_status = session.add_status("Dazed", "", 2)
    old_item = session.add_item("Rope")

    session.reset_game()
    new_modifier = session.add_modifier("humor", 2, 1)
    new_status = session.add_status("Cheered", "", 2)
    new_item = session.add_item("Lamp")

    assert new_modifier.id != old_modifier.id
    assert session.remove_modifier(old_modifier.id) is False
    assert session.remove_status(old_status.id) is False
    assert session.remove_item(old_item.id) is False
    assert [m.id for m in session.modifiers] == [new_modifier.id]
    assert [s.id for s in session.statuses] == [new_status.id]
    assert [i.id for i in session.inventory] == [new_item.id]
