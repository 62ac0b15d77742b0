import threading
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Type, TypeVar


T = TypeVar("T")


class EventBus:
    """Simple in-process event bus for inventory events.

    Subscribers are keyed by event class; events are emitted by instance.
    Delivery is synchronous so handlers observe the inventory state right
    after the change that triggered them. The lock only guards the
    subscriber table: emit() snapshots the matching handlers under it and
    calls them after releasing it, so a handler may subscribe, unsubscribe
    or emit without deadlocking other threads.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._subscribers: Dict[Type[Any], List[Callable[[Any], None]]] = {}

    def subscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        with self._lock:
            self._subscribers.setdefault(event_type, []).append(handler)  # type: ignore[arg-type]

    def unsubscribe(self, event_type: Type[T], handler: Callable[[T], None]) -> None:
        with self._lock:
            handlers = self._subscribers.get(event_type, [])
            if handler in handlers:
                handlers.remove(handler)
                if not handlers:
                    self._subscribers.pop(event_type, None)

    def emit(self, event: Any) -> None:
        with self._lock:
            handlers = [
                h
                for event_type, hs in self._subscribers.items()
                if isinstance(event, event_type)
                for h in hs
            ]
        for h in handlers:
            h(event)


@dataclass(frozen=True)
class SlotFilledEvent:
    item: Any
    size: int
    slot_index: int


@dataclass(frozen=True)
class StackMergedEvent:
    item: Any
    added: int
    new_size: int


@dataclass(frozen=True)
class AddRejectedEvent:
    item: Any
    quantity: int
    reason: str
