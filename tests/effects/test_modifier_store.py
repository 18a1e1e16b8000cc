"""
Tests for the modifier store in the effects system.
"""

import pytest
from core.constants import Attribute
from core.errors import InvalidAttributeError, InvalidModifierError
from effects.modifier import Modifier
from effects.modifier_store import ModifierStore


@pytest.fixture
def store():
    return ModifierStore()


def test_add_modifier_assigns_ids(store):
    """Test that every added modifier gets a distinct id."""
    first = store.add_modifier("humor", 2, 3)
    second = store.add_modifier(Attribute.WEALTH, 1, 1)
    assert first.id != second.id
    assert [m.id for m in store] == [first.id, second.id]


def test_add_modifier_fields(store):
    """Test that the stored modifier keeps attribute, turns and points."""
    modifier = store.add_modifier("Intelligence", 3, 4)
    assert modifier.attribute == Attribute.INTELLIGENCE
    assert modifier.remaining_turns == 3
    assert modifier.magnitude == 4
    assert modifier.is_buff


def test_debuff_flag_negates_amount(store):
    """Test that the debuff flag negates the positive amount."""
    modifier = store.add_modifier("appearance", 2, 5, debuff=True)
    assert modifier.magnitude == -5
    assert not modifier.is_buff


def test_add_modifier_unknown_attribute(store):
    """Test that an unknown attribute is rejected without touching the store."""
    with pytest.raises(InvalidAttributeError):
        store.add_modifier("charisma", 2, 1)
    assert len(store) == 0


@pytest.mark.parametrize("duration, magnitude", [(0, 1), (-2, 1), (1, 0)])
def test_add_modifier_invalid_parameters(store, duration, magnitude):
    """Test that a duration below 1 or a zero magnitude is rejected."""
    with pytest.raises(InvalidModifierError):
        store.add_modifier("humor", duration, magnitude)
    assert len(store) == 0


def test_batch_add_creates_independent_modifiers(store):
    """Test that a batch add gives one removable modifier per attribute."""
    humor, appearance = store.add_modifiers(["humor", "appearance"], 3, 2)
    assert len(store) == 2
    assert humor.attribute == Attribute.HUMOR
    assert appearance.attribute == Attribute.APPEARANCE
    assert humor.remaining_turns == appearance.remaining_turns == 3
    assert humor.magnitude == appearance.magnitude == 2

    assert store.remove_modifier(humor.id)
    assert [m.id for m in store] == [appearance.id]
    assert store.get(appearance.id).remaining_turns == 3


def test_batch_add_validates_all_names_first(store):
    """Test that one bad name in a batch adds nothing."""
    with pytest.raises(InvalidAttributeError):
        store.add_modifiers(["humor", "luck"], 2, 1)
    assert len(store) == 0


def test_remove_is_idempotent(store):
    """Test that removing the same modifier twice is harmless."""
    kept = store.add_modifier("wealth", 2, 1)
    removed = store.add_modifier("humor", 2, 1)
    assert store.remove_modifier(removed.id) is True
    after_first = store.effects
    assert store.remove_modifier(removed.id) is False
    assert store.effects == after_first
    assert [m.id for m in store] == [kept.id]


def test_decay_removes_last_turn_modifiers(store):
    """Test that one decay removes modifiers with one turn left."""
    store.add_modifier("determination", 1, 1)
    humor = store.add_modifier("humor", 2, 3, debuff=True)

    expired = store.decay_all()

    assert [m.attribute for m in expired] == [Attribute.DETERMINATION]
    assert len(store) == 1
    remaining = store.get(humor.id)
    assert remaining.remaining_turns == 1
    assert remaining.magnitude == -3


def test_decay_decrements_longer_modifiers(store):
    """Test that modifiers with k > 1 turns have k - 1 turns after decay."""
    for turns in (2, 3, 5):
        store.add_modifier("wealth", turns, 1)
    store.decay_all()
    assert [m.remaining_turns for m in store] == [1, 2, 4]


def test_decay_bumps_version(store):
    """Test that mutations bump the version counter."""
    start = store.version
    store.add_modifier("wealth", 1, 1)
    store.decay_all()
    assert store.version == start + 2


def test_preview_decay_does_not_mutate(store):
    """Test that preview_decay() leaves the store untouched."""
    modifier = store.add_modifier("wealth", 1, 2)
    survivors, expired = store.preview_decay()
    assert survivors == []
    assert [m.id for m in expired] == [modifier.id]
    assert store.get(modifier.id) is not None


def test_for_attribute(store):
    """Test filtering the modifiers of a single attribute."""
    store.add_modifier("wealth", 1, 2)
    store.add_modifier("humor", 1, 2)
    store.add_modifier("wealth", 3, 1, debuff=True)
    assert [m.magnitude for m in store.for_attribute("wealth")] == [2, -1]


def test_restore_assigns_fresh_ids(store):
    """Test that restored modifiers without id get unique ids."""
    store.restore(
        [
            Modifier(stat="wealth", turns=2, points=2),
            Modifier(stat="humor", turns=1, points=-1),
        ]
    )
    ids = [m.id for m in store]
    assert None not in ids
    assert len(set(ids)) == 2
    added = store.add_modifier("intelligence", 1, 1)
    assert added.id not in ids


def test_clear(store):
    store.add_modifiers(list(Attribute), 2, 1)
    store.clear()
    assert len(store) == 0
