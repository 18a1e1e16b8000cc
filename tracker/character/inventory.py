"""
Character inventory module for the tracker.

Handles free-form items carried by the character. Items do not interact with
turns; they are only added and removed by the user.
"""

from collections.abc import Iterator
from typing import Any

from catchery import log_debug
from pydantic import BaseModel, Field

from core.utils import IdGenerator


class InventoryItem(BaseModel):
    """A free-form item with a synthetic identity."""

    id: int = Field(
        description="Synthetic identity assigned by the inventory.",
    )
    title: str = Field(
        description="The name of the item.",
    )
    description: str = Field(
        "",
        description="Free-form details about the item.",
    )


class Inventory:
    """
    Ordered collection of inventory items.

    Attributes:
        items (list[InventoryItem]):
            The items, in the order they were added.

    """

    def __init__(self, items: list[InventoryItem] | None = None) -> None:
        self._ids = IdGenerator()
        self.items: list[InventoryItem] = []
        if items:
            self.restore(items)

    def __iter__(self) -> Iterator[InventoryItem]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def add_item(self, title: str, description: str = "") -> InventoryItem:
        """
        Adds an item.

        Args:
            title (str): The name of the item.
            description (str): Free-form details.

        Returns:
            InventoryItem: The stored item, with its id assigned.

        """
        item = InventoryItem(id=self._ids.next_id(), title=title, description=description)
        self.items = [*self.items, item]
        log_debug("Added inventory item", {"id": item.id, "title": title})
        return item

    def remove_item(self, item_id: int) -> bool:
        """
        Removes an item by id. Unknown ids are ignored.

        Returns:
            bool: True if an item was removed, False otherwise.

        """
        remaining = [item for item in self.items if item.id != item_id]
        if len(remaining) == len(self.items):
            return False
        self.items = remaining
        return True

    def clear(self) -> None:
        self.items = []

    def restore(self, items: list[InventoryItem]) -> None:
        """Replaces the items, keeping their ids. Repeated ids get a fresh one."""
        self._ids.reset()
        self._ids.seed(item.id for item in items)
        seen: set[int] = set()
        restored: list[InventoryItem] = []
        for item in items:
            if item.id in seen:
                item = item.model_copy(update={"id": self._ids.next_id()})
            seen.add(item.id)
            restored.append(item)
        self.items = restored

    def to_records(self) -> list[dict[str, Any]]:
        return [item.model_dump(mode="json") for item in self.items]
