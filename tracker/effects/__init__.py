"""
Effects system module for the Statit tracker.

This module contains the timed effects applied to a character: buffs and
debuffs that adjust an attribute, descriptive status effects, the stores that
own and decay them, and the resolver that folds modifiers onto attributes.
"""

# Import base classes
from .base_effect import EffectStore, TimedEffect

# Import modifier-based effects
from .modifier import Modifier
from .modifier_store import ModifierStore

# Import status effects
from .status_effect import StatusEffect, StatusEffectStore

# Import the resolver
from .resolver import EffectiveValueResolver, resolve

__all__ = [
    # Base classes
    "TimedEffect",
    "EffectStore",
    # Modifier-based effects
    "Modifier",
    "ModifierStore",
    # Status effects
    "StatusEffect",
    "StatusEffectStore",
    # Resolver
    "EffectiveValueResolver",
    "resolve",
]
