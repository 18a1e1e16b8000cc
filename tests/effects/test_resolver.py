"""
Tests for the effective value resolver.
"""

import itertools

from character.attributes import AttributeStore
from core.constants import Attribute
from effects.modifier import Modifier
from effects.modifier_store import ModifierStore
from effects.resolver import EffectiveValueResolver, resolve


def _modifiers():
    return [
        Modifier(stat="wealth", turns=2, points=2),
        Modifier(stat="wealth", turns=1, points=-5),
        Modifier(stat="humor", turns=3, points=4),
        Modifier(stat="determination", turns=1, points=1),
    ]


def test_resolve_without_modifiers():
    """Test that effective values equal base values when nothing is active."""
    base = {attribute: i for i, attribute in enumerate(Attribute)}
    assert resolve(base, []) == base


def test_resolve_sums_matching_modifiers():
    base = {attribute: 0 for attribute in Attribute}
    base[Attribute.WEALTH] = 3
    effective = resolve(base, _modifiers())
    assert effective[Attribute.WEALTH] == 0
    assert effective[Attribute.HUMOR] == 4
    assert effective[Attribute.DETERMINATION] == 1
    assert effective[Attribute.INTELLIGENCE] == 0
    assert effective[Attribute.APPEARANCE] == 0


def test_resolve_is_order_independent():
    """Test that every permutation of the modifiers gives the same result."""
    base = {attribute: -2 for attribute in Attribute}
    expected = resolve(base, _modifiers())
    for permutation in itertools.permutations(_modifiers()):
        assert resolve(base, permutation) == expected


def test_resolve_does_not_clamp():
    base = {attribute: 0 for attribute in Attribute}
    effective = resolve(base, [Modifier(stat="appearance", turns=1, points=-50)])
    assert effective[Attribute.APPEARANCE] == -50


def test_resolve_does_not_mutate_base():
    base = {attribute: 1 for attribute in Attribute}
    resolve(base, _modifiers())
    assert all(value == 1 for value in base.values())


def test_memoized_resolver_tracks_mutations():
    """Test that the memoized resolver never returns stale values."""
    attributes = AttributeStore()
    modifiers = ModifierStore()
    resolver = EffectiveValueResolver(attributes, modifiers)

    assert resolver.effective_value("wealth") == 0
    attributes.increment("wealth")
    assert resolver.effective_value("wealth") == 1
    buff = modifiers.add_modifier("wealth", 1, 2)
    assert resolver.effective_value("wealth") == 3
    modifiers.remove_modifier(buff.id)
    assert resolver.effective_value("wealth") == 1
    modifiers.add_modifier("wealth", 1, 4)
    modifiers.decay_all()
    assert resolver.effective_value("wealth") == 1
    attributes.reset()
    assert resolver.effective_attributes() == {attribute: 0 for attribute in Attribute}


def test_memoized_resolver_returns_copies():
    resolver = EffectiveValueResolver(AttributeStore(), ModifierStore())
    values = resolver.effective_attributes()
    values[Attribute.WEALTH] = 99
    assert resolver.effective_value(Attribute.WEALTH) == 0
