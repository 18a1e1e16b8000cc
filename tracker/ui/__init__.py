"""
User interface module for the Statit tracker.

This module contains the console menu, the rich renderers for the character
sheet, and the input policies applied before calling the session.
"""

from .cli_interface import TrackerInterface
from .sheets import character_sheet, modifier_to_string
from .validation import InputError

__all__ = [
    "TrackerInterface",
    "character_sheet",
    "modifier_to_string",
    "InputError",
]
