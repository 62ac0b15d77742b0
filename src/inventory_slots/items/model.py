from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(eq=True, frozen=True)
class Item:
    """Immutable item descriptor.

    Two items are the same type iff they compare equal. Quantities live on
    ItemStack, never on the item itself.
    """

    id: str
    name: str = ""
    stackable: bool = True


class ItemStack:
    """A quantity of a single item type occupying one inventory slot.

    ``stackable`` defaults to the item's own ``stackable`` attribute, or True
    for items that do not carry one. increase_size() does not enforce it;
    the checked Inventory.add_item() path does.
    """

    def __init__(self, item: Any, size: int = 1, stackable: Optional[bool] = None) -> None:
        if size < 0:
            raise ValueError(f"Stack size cannot be negative: {size}")
        self._item = item
        self._size = size
        if stackable is None:
            stackable = bool(getattr(item, "stackable", True))
        self.stackable = stackable

    @property
    def item(self) -> Any:
        return self._item

    @property
    def size(self) -> int:
        return self._size

    def get_item(self) -> Any:
        return self._item

    def get_size(self) -> int:
        return self._size

    def increase_size(self, amount: int) -> None:
        if amount < 0:
            raise ValueError("Cannot increase stack size by a negative amount")
        self._size += amount

    def __repr__(self) -> str:
        return f"ItemStack(item={self._item!r}, size={self._size}, stackable={self.stackable})"


__all__ = ["Item", "ItemStack"]
