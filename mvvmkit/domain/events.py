"""Change-notification payloads and the hook they travel through.

``CollectionChangedEvent`` mirrors the five structural edits an ordered
sequence can undergo. Build instances through the factory classmethods so the
payload shape always matches the action:

========  ===============  ===============  ==================  ==================
action    new_items        old_items        new_starting_index  old_starting_index
========  ===============  ===============  ==================  ==================
ADD       added            ``None``         insert position     -1
REMOVE    ``None``         removed          -1                  first position
MOVE      moved            moved            target position     origin position
REPLACE   incoming         outgoing         position            position
RESET     ``None``         ``None``         -1                  -1
========  ===============  ===============  ==================  ==================
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, List, Optional, Tuple

EventHandler = Callable[[Any, Any], None]


class CollectionChangeAction(str, Enum):
    """Kind of structural edit applied to an ordered sequence."""

    ADD = "add"
    REMOVE = "remove"
    MOVE = "move"
    REPLACE = "replace"
    RESET = "reset"


@dataclass(frozen=True)
class CollectionChangedEvent:
    """Describes one structural edit of an observable sequence."""

    action: CollectionChangeAction
    new_items: Optional[Tuple[Any, ...]] = None
    old_items: Optional[Tuple[Any, ...]] = None
    new_starting_index: int = -1
    old_starting_index: int = -1

    @classmethod
    def add(cls, items: Iterable[Any], index: int) -> "CollectionChangedEvent":
        return cls(
            action=CollectionChangeAction.ADD,
            new_items=tuple(items),
            new_starting_index=index,
        )

    @classmethod
    def remove(cls, items: Iterable[Any], index: int) -> "CollectionChangedEvent":
        return cls(
            action=CollectionChangeAction.REMOVE,
            old_items=tuple(items),
            old_starting_index=index,
        )

    @classmethod
    def move(
        cls, items: Iterable[Any], new_index: int, old_index: int
    ) -> "CollectionChangedEvent":
        moved = tuple(items)
        return cls(
            action=CollectionChangeAction.MOVE,
            new_items=moved,
            old_items=moved,
            new_starting_index=new_index,
            old_starting_index=old_index,
        )

    @classmethod
    def replace(
        cls, new_items: Iterable[Any], old_items: Iterable[Any], index: int
    ) -> "CollectionChangedEvent":
        return cls(
            action=CollectionChangeAction.REPLACE,
            new_items=tuple(new_items),
            old_items=tuple(old_items),
            new_starting_index=index,
            old_starting_index=index,
        )

    @classmethod
    def reset(cls) -> "CollectionChangedEvent":
        return cls(action=CollectionChangeAction.RESET)


@dataclass(frozen=True)
class PropertyChangingEvent:
    """Emitted before a named property takes a new value."""

    property_name: str


@dataclass(frozen=True)
class PropertyChangedEvent:
    """Emitted after a named property took a new value."""

    property_name: str


RESET_COLLECTION_CHANGED = CollectionChangedEvent.reset()
COUNT_PROPERTY_CHANGED = PropertyChangedEvent("count")


class EventHook:
    """Ordered list of ``handler(sender, event)`` subscribers.

    Emission is synchronous and iterates over a snapshot of the subscribers,
    so handlers may subscribe or unsubscribe while an event is being delivered
    without affecting that delivery. Handler exceptions propagate to the
    emitter and stop delivery to later subscribers.
    """

    def __init__(self) -> None:
        self._handlers: List[EventHandler] = []

    def subscribe(self, handler: EventHandler) -> EventHandler:
        if not callable(handler):
            raise TypeError("Event handler must be callable")
        self._handlers.append(handler)
        return handler

    def unsubscribe(self, handler: EventHandler) -> None:
        try:
            self._handlers.remove(handler)
        except ValueError:
            raise ValueError("Handler is not subscribed") from None

    def __call__(self, sender: Any, event: Any) -> None:
        for handler in tuple(self._handlers):
            handler(sender, event)

    def __len__(self) -> int:
        return len(self._handlers)

    def __bool__(self) -> bool:
        return bool(self._handlers)


__all__ = [
    "COUNT_PROPERTY_CHANGED",
    "CollectionChangeAction",
    "CollectionChangedEvent",
    "EventHandler",
    "EventHook",
    "PropertyChangedEvent",
    "PropertyChangingEvent",
    "RESET_COLLECTION_CHANGED",
]
