from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Iterator, List, Optional, Tuple

from ..config.loader import InventoryConfig
from ..errors import (
    DuplicateItemTypeError,
    InvalidCapacityError,
    InventoryError,
    InventoryFullError,
    NotStackableError,
)
from ..events import AddRejectedEvent, EventBus, SlotFilledEvent, StackMergedEvent
from ..items.model import ItemStack

logger = logging.getLogger(__name__)

DEFAULT_SIZE = 10


def merge_stacks(lhs: ItemStack, rhs: ItemStack) -> None:
    """Add the number of units in ``rhs`` to ``lhs``. ``rhs`` is left as is."""
    lhs.increase_size(rhs.get_size())


@dataclass(frozen=True)
class AddResult:
    added: bool
    stack: Optional[ItemStack] = None
    merged: bool = False
    reason: Optional[str] = None


class Inventory:
    """
    Fixed number of slots, each holding a stack of one distinct item type.

    Two layers of insertion are offered:

    - add_item_stack_no_check: raw append. Capacity and item uniqueness are
      the caller's responsibility.
    - add_item / add_item_stack / try_add_item: look up a matching stack,
      merge into it or take a new slot, and reject the add when the
      inventory is full or a non-stackable stack would exceed one unit.

    Lookups are a linear scan over occupied slots in insertion order.
    """

    def __init__(
        self,
        capacity: int = DEFAULT_SIZE,
        event_bus: Optional[EventBus] = None,
        enforce_stackable: bool = True,
    ) -> None:
        if capacity < 0:
            raise InvalidCapacityError(f"Inventory capacity must be >= 0, got {capacity}")
        self._capacity = capacity
        self._slots: List[ItemStack] = []
        self.event_bus = event_bus
        self.enforce_stackable = enforce_stackable

    @classmethod
    def from_config(cls, config: InventoryConfig, event_bus: Optional[EventBus] = None) -> "Inventory":
        return cls(
            capacity=config.default_capacity,
            event_bus=event_bus,
            enforce_stackable=config.enforce_stackable,
        )

    @property
    def capacity(self) -> int:
        return self._capacity

    @property
    def stacks(self) -> List[ItemStack]:
        return list(self._slots)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[ItemStack]:
        return iter(list(self._slots))

    def __contains__(self, item: Any) -> bool:
        return self.find_matching_item_stack(item) is not None

    # Occupancy

    def utilized_slots(self) -> int:
        return len(self._slots)

    def total_slots(self) -> int:
        return self._capacity

    def empty_slots(self) -> int:
        return self.total_slots() - self.utilized_slots()

    def is_full(self) -> bool:
        return self.utilized_slots() >= self._capacity

    # Lookup

    def find_matching_item_stack(self, item: Any) -> Optional[ItemStack]:
        for stack in self._slots:
            if stack.get_item() == item:
                return stack
        return None

    # Insertion

    def add_item_stack_no_check(self, stack: ItemStack) -> None:
        """Append ``stack`` as a new slot without any validation."""
        duplicate = self.find_matching_item_stack(stack.get_item()) is not None
        self._slots.append(stack)
        logger.debug("Slot %d <- %r", len(self._slots) - 1, stack)
        if len(self._slots) > self._capacity:
            logger.warning(
                "Unchecked add left inventory over capacity (%d/%d)",
                len(self._slots),
                self._capacity,
            )
        if duplicate:
            logger.warning("Unchecked add duplicated item type %r", stack.get_item())

    def add_item(self, item: Any, quantity: int = 1) -> AddResult:
        """
        Add ``quantity`` units of ``item``.

        Merges into the matching stack when the item type already occupies a
        slot; otherwise takes a new slot.

        Raises ValueError for a non-positive quantity, InventoryFullError when
        a new slot is needed but none is free, and NotStackableError when a
        non-stackable stack would hold more than one unit.
        """
        if quantity <= 0:
            raise ValueError(f"Quantity must be positive, got {quantity}")
        return self.add_item_stack(ItemStack(item, quantity))

    def add_item_stack(self, stack: ItemStack) -> AddResult:
        """Checked insert of a ready-made stack. Raises DuplicateItemTypeError
        when ``stack`` itself already occupies a slot here."""
        result, event = self._place(stack)
        self._emit(event)
        return result

    def try_add_item(self, item: Any, quantity: int = 1) -> AddResult:
        """Like add_item, but reports a rejected add in the result instead of raising."""
        if quantity <= 0:
            raise ValueError(f"Quantity must be positive, got {quantity}")
        try:
            result, event = self._place(ItemStack(item, quantity))
        except InventoryError as e:
            logger.warning("Rejected add of %d x %r: %s", quantity, item, e)
            self._emit(AddRejectedEvent(item=item, quantity=quantity, reason=str(e)))
            return AddResult(added=False, reason=str(e))
        # Handlers run after the slot change is committed; their errors propagate.
        self._emit(event)
        return result

    def _place(self, stack: ItemStack) -> Tuple[AddResult, Any]:
        if stack.get_size() <= 0:
            raise ValueError(f"Cannot add an empty stack: {stack!r}")

        if any(held is stack for held in self._slots):
            raise DuplicateItemTypeError(f"{stack!r} already occupies a slot")
        existing = self.find_matching_item_stack(stack.get_item())
        if existing is not None:
            if self.enforce_stackable and not existing.stackable and existing.get_size() + stack.get_size() > 1:
                raise NotStackableError(f"{existing.get_item()!r} is not stackable")
            merge_stacks(existing, stack)
            logger.debug("Merged %d into %r", stack.get_size(), existing)
            event = StackMergedEvent(item=existing.get_item(), added=stack.get_size(), new_size=existing.get_size())
            return AddResult(added=True, stack=existing, merged=True), event

        if self.is_full():
            raise InventoryFullError(f"Inventory is full ({self._capacity} slots)")
        if self.enforce_stackable and not stack.stackable and stack.get_size() > 1:
            raise NotStackableError(f"{stack.get_item()!r} is not stackable")
        self.add_item_stack_no_check(stack)
        event = SlotFilledEvent(item=stack.get_item(), size=stack.get_size(), slot_index=len(self._slots) - 1)
        return AddResult(added=True, stack=stack), event

    # Validation

    def assert_consistent(self) -> None:
        """Raise if the caller-maintained slot invariants have been broken."""
        if len(self._slots) > self._capacity:
            raise InventoryFullError(f"{len(self._slots)} slots in use but capacity is {self._capacity}")
        for i, stack in enumerate(self._slots):
            for other in self._slots[i + 1:]:
                if stack.get_item() == other.get_item():
                    raise DuplicateItemTypeError(f"{stack.get_item()!r} occupies more than one slot")

    def _emit(self, event: Any) -> None:
        if self.event_bus is not None:
            self.event_bus.emit(event)


__all__ = ["AddResult", "DEFAULT_SIZE", "Inventory", "merge_stacks"]
