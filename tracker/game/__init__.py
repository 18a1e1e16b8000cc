"""
Game module for the Statit tracker.

This module ties the stores together: the turn controller that drives turn
boundaries, the persistence layer that loads and saves each store, and the
session that owns the whole state.
"""

from .persistence import (
    JsonFileStorage,
    MemoryStorage,
    PersistenceAdapter,
    StorageBackend,
)
from .session import GameSession
from .turn_controller import TurnController, TurnReport

__all__ = [
    # Import from persistence.py
    "JsonFileStorage",
    "MemoryStorage",
    "PersistenceAdapter",
    "StorageBackend",
    # Import from session.py
    "GameSession",
    # Import from turn_controller.py
    "TurnController",
    "TurnReport",
]
