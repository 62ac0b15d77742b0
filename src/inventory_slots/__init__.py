"""
Slot-based inventory containers for game items.

An Inventory holds a fixed number of slots; each slot holds an ItemStack of a
single item type. Item types are matched by equality, so any value type with
a sensible ``__eq__`` can be stored.
"""

from .errors import (
    DuplicateItemTypeError,
    InvalidCapacityError,
    InvalidConfigError,
    InventoryError,
    InventoryFullError,
    InventorySlotsError,
    NotStackableError,
)
from .inventory import DEFAULT_SIZE, AddResult, Inventory, merge_stacks
from .items import Item, ItemStack
from .logging_config import configure_logging

__all__ = [
    "AddResult",
    "DEFAULT_SIZE",
    "DuplicateItemTypeError",
    "InvalidCapacityError",
    "InvalidConfigError",
    "Inventory",
    "InventoryError",
    "InventoryFullError",
    "InventorySlotsError",
    "Item",
    "ItemStack",
    "NotStackableError",
    "configure_logging",
    "merge_stacks",
]
