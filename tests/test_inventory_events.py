import pytest

from inventory_slots.errors import InventoryError
from inventory_slots.events import AddRejectedEvent, EventBus, SlotFilledEvent, StackMergedEvent
from inventory_slots.inventory import Inventory
from inventory_slots.items import ItemStack


def test_inventory_emits_slot_and_merge_events(wood, stone):
    bus = EventBus()
    events = []
    bus.subscribe(SlotFilledEvent, events.append)
    bus.subscribe(StackMergedEvent, events.append)

    inv = Inventory(3, event_bus=bus)
    inv.add_item(wood, 2)
    inv.add_item(stone)
    inv.add_item(wood, 5)

    assert events == [
        SlotFilledEvent(item=wood, size=2, slot_index=0),
        SlotFilledEvent(item=stone, size=1, slot_index=1),
        StackMergedEvent(item=wood, added=5, new_size=7),
    ]


def test_rejected_add_emits_event(wood, stone):
    bus = EventBus()
    rejected = []
    bus.subscribe(AddRejectedEvent, rejected.append)

    inv = Inventory(1, event_bus=bus)
    inv.try_add_item(wood)
    inv.try_add_item(stone, 3)

    assert len(rejected) == 1
    assert rejected[0].item == stone
    assert rejected[0].quantity == 3
    assert "full" in rejected[0].reason


def test_unchecked_add_emits_nothing(wood):
    bus = EventBus()
    seen = []
    bus.subscribe(object, seen.append)
    inv = Inventory(event_bus=bus)
    inv.add_item_stack_no_check(ItemStack(wood))
    assert seen == []


def test_unsubscribe_stops_delivery(wood):
    bus = EventBus()
    seen = []
    bus.subscribe(SlotFilledEvent, seen.append)
    bus.unsubscribe(SlotFilledEvent, seen.append)
    Inventory(event_bus=bus).add_item(wood)
    assert seen == []


def test_handler_may_emit_and_unsubscribe_during_dispatch(wood):
    bus = EventBus()
    merged = []

    def on_filled(event):
        bus.unsubscribe(SlotFilledEvent, on_filled)
        bus.emit(StackMergedEvent(item=event.item, added=0, new_size=event.size))

    bus.subscribe(SlotFilledEvent, on_filled)
    bus.subscribe(StackMergedEvent, merged.append)

    inv = Inventory(event_bus=bus)
    inv.add_item(wood, 2)
    inv.add_item(wood, 1)

    assert merged == [
        StackMergedEvent(item=wood, added=0, new_size=2),
        StackMergedEvent(item=wood, added=1, new_size=3),
    ]


def test_handler_error_after_successful_add_is_not_reported_as_rejection(wood):
    bus = EventBus()
    rejected = []

    def failing_handler(event):
        raise InventoryError("handler failed")

    bus.subscribe(SlotFilledEvent, failing_handler)
    bus.subscribe(AddRejectedEvent, rejected.append)

    inv = Inventory(event_bus=bus)
    with pytest.raises(InventoryError, match="handler failed"):
        inv.try_add_item(wood, 2)

    assert inv.find_matching_item_stack(wood).get_size() == 2
    assert rejected == []
