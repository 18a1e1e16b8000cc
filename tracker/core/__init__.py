"""
Core module for the Statit tracker.

This module contains the fundamental components shared by every other
package: constants and enumerations, the error hierarchy, configuration,
logging setup and console utilities.
"""

from .errors import (
    InvalidAttributeError,
    InvalidModifierError,
    PersistenceError,
    PersistenceReadError,
    PersistenceWriteError,
    TrackerError,
)
from .constants import (
    ACCRUAL_ATTRIBUTE,
    ACCRUAL_MULTIPLIER,
    TURN_ENDED_DISPLAY_SECONDS,
    Attribute,
    NiceEnum,
    TurnModel,
    TurnState,
)
from .config import TrackerConfig, load_config, save_config
from .utils import IdGenerator, ccapture, cprint, crule, signed

__all__ = [
    # Import from errors.py
    "TrackerError",
    "InvalidAttributeError",
    "InvalidModifierError",
    "PersistenceError",
    "PersistenceReadError",
    "PersistenceWriteError",
    # Import from constants.py
    "ACCRUAL_ATTRIBUTE",
    "ACCRUAL_MULTIPLIER",
    "TURN_ENDED_DISPLAY_SECONDS",
    "Attribute",
    "NiceEnum",
    "TurnModel",
    "TurnState",
    # Import from config.py
    "TrackerConfig",
    "load_config",
    "save_config",
    # Import from utils.py
    "IdGenerator",
    "ccapture",
    "cprint",
    "crule",
    "signed",
]
