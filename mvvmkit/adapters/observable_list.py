"""Mutable list that publishes a change event for every structural edit."""

from __future__ import annotations

import logging
from collections.abc import MutableSequence
from typing import Any, Iterable, Iterator, List, Optional

from ..domain.events import (
    COUNT_PROPERTY_CHANGED,
    RESET_COLLECTION_CHANGED,
    CollectionChangedEvent,
    EventHook,
)


class ObservableList(MutableSequence):
    """List-backed sequence emitting ``CollectionChangedEvent`` notifications.

    Each mutation emits exactly one ``collection_changed`` event after the
    backing list has been updated, followed by a ``property_changed`` event
    for ``count`` when the length changed. Bulk helpers (``extend``,
    ``__iadd__``) go through ``insert`` and therefore emit one ``ADD`` per
    element.

    Only integer positions are accepted; slice assignment and deletion raise
    ``TypeError`` because they cannot be described by a single event.
    """

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self._log = logging.getLogger(__name__)
        self._items: List[Any] = list(items) if items is not None else []
        self.collection_changed = EventHook()
        self.property_changed = EventHook()

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __contains__(self, value: Any) -> bool:
        return value in self._items

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ObservableList):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def index(self, value: Any, start: int = 0, stop: Optional[int] = None) -> int:
        if stop is None:
            return self._items.index(value, start)
        return self._items.index(value, start, stop)

    def count_of(self, value: Any) -> int:
        return self._items.count(value)

    @property
    def count(self) -> int:
        return len(self._items)

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------
    def insert(self, index: int, value: Any) -> None:
        position = self._clamp_insert_index(index)
        self._items.insert(position, value)
        self._log.debug("insert at %d", position)
        self._notify(CollectionChangedEvent.add((value,), position), count_changed=True)

    def __setitem__(self, index, value: Any) -> None:
        position = self._normalise_index(index)
        old = self._items[position]
        self._items[position] = value
        self._log.debug("replace at %d", position)
        self._notify(CollectionChangedEvent.replace((value,), (old,), position))

    def __delitem__(self, index) -> None:
        position = self._normalise_index(index)
        old = self._items.pop(position)
        self._log.debug("remove at %d", position)
        self._notify(CollectionChangedEvent.remove((old,), position), count_changed=True)

    def move(self, old_index: int, new_index: int) -> None:
        """Relocate the element at ``old_index`` so it ends up at ``new_index``."""
        source = self._normalise_index(old_index)
        target = self._normalise_index(new_index)
        value = self._items.pop(source)
        self._items.insert(target, value)
        self._log.debug("move %d -> %d", source, target)
        self._notify(CollectionChangedEvent.move((value,), target, source))

    def clear(self) -> None:
        self._items.clear()
        self._log.debug("clear")
        self._notify(RESET_COLLECTION_CHANGED, count_changed=True)

    def reset(self, items: Iterable[Any]) -> None:
        """Swap the whole content in one step, announced as a single reset."""
        self._items = list(items)
        self._log.debug("reset with %d items", len(self._items))
        self._notify(RESET_COLLECTION_CHANGED, count_changed=True)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _notify(self, event: CollectionChangedEvent, *, count_changed: bool = False) -> None:
        self.collection_changed(self, event)
        if count_changed:
            self.property_changed(self, COUNT_PROPERTY_CHANGED)

    def _normalise_index(self, index) -> int:
        if isinstance(index, slice):
            raise TypeError(f"{type(self).__name__} does not support slice mutation")
        position = int(index)
        size = len(self._items)
        if position < 0:
            position += size
        if not 0 <= position < size:
            raise IndexError(f"{type(self).__name__} index out of range")
        return position

    def _clamp_insert_index(self, index: int) -> int:
        # same clamping rules as list.insert
        size = len(self._items)
        position = int(index)
        if position < 0:
            position = max(0, position + size)
        return min(position, size)


__all__ = ["ObservableList"]
