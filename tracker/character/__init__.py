"""
Character module for the Statit tracker.

This module holds the per-character state that is not an effect: the base
attribute values, the currency balance and the inventory.
"""

from .attributes import AttributeStore
from .inventory import Inventory, InventoryItem
from .wallet import CurrencyLedger

__all__ = [
    # Import from attributes.py
    "AttributeStore",
    # Import from inventory.py
    "Inventory",
    "InventoryItem",
    # Import from wallet.py
    "CurrencyLedger",
]
