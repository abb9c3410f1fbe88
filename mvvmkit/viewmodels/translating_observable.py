"""Live, read-only translation of an observable source sequence.

``TranslatingObservable`` keeps a list of translated items in lock-step with a
source sequence, typically turning model objects into view models::

    todo_items = ObservableList([ToDoItem("buy milk"), ToDoItem("file taxes")])
    rows = TranslatingObservable(todo_items, ToDoRowVM, close_item)

    todo_items.append(ToDoItem("water plants"))   # rows gains one ToDoRowVM
    del todo_items[0]                             # rows[0] is closed and dropped

Every source edit is replayed on the translated list and re-announced through
``collection_changed`` using translated items as payload. ``property_changed``
follows with ``count`` whenever the length changed (add, remove, reset).

Known limitation: edits are not atomic. If ``translate`` or ``dispose`` raises
part-way through a batch the exception reaches whoever mutated the source and
the translated list keeps whatever part of the edit was already applied.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    TypeVar,
    Union,
    overload,
)

from ..domain.errors import ConfigurationError, KeyNotFoundError
from ..domain.events import (
    COUNT_PROPERTY_CHANGED,
    RESET_COLLECTION_CHANGED,
    CollectionChangeAction,
    CollectionChangedEvent,
    EventHook,
)
from ..domain.ports import CollectionChangeNotifier, SupportsClose

TIn = TypeVar("TIn")
TOut = TypeVar("TOut")
TDefault = TypeVar("TDefault")


def ignore_disposal(item: Any) -> None:
    """Disposal function for translated items that hold no resources."""
    return None


def close_item(item: SupportsClose) -> None:
    """Disposal function for translated items that must be closed."""
    item.close()


class TranslatingObservable(Sequence, Generic[TIn, TOut]):
    """Read-only sequence of ``translate(x)`` for every ``x`` in ``source``.

    Args:
        source: Sequence publishing ``collection_changed`` events. It is
            observed for the lifetime of the view and never mutated by it.
        translate: Called exactly once for each source item entering the view.
        dispose: Called exactly once for each translated item leaving the view.
            Defaults to :func:`ignore_disposal`; pass :func:`close_item` when
            the translated items need closing.

    Raises:
        ConfigurationError: ``translate`` is missing or ``source`` is not a
            sequence publishing collection change events.
    """

    def __init__(
        self,
        source: Sequence,
        translate: Callable[[TIn], TOut],
        dispose: Optional[Callable[[TOut], None]] = None,
    ) -> None:
        if translate is None or not callable(translate):
            raise ConfigurationError("translate must be a callable")
        if not isinstance(source, CollectionChangeNotifier):
            raise ConfigurationError(
                "source must publish collection changes (collection_changed hook)"
            )
        if not isinstance(source, Sequence):
            raise ConfigurationError("source must be a sequence")
        if dispose is not None and not callable(dispose):
            raise ConfigurationError("dispose must be a callable")

        self._log = logging.getLogger(__name__)
        self._source = source
        self._translate = translate
        self._dispose = dispose if dispose is not None else ignore_disposal
        self._items: List[TOut] = []
        self._closed = False

        self.collection_changed = EventHook()
        self.property_changed = EventHook()

        self._handlers = {
            CollectionChangeAction.ADD: self._on_add_items,
            CollectionChangeAction.REMOVE: self._on_remove_items,
            CollectionChangeAction.MOVE: self._on_move_items,
            CollectionChangeAction.REPLACE: self._on_replace_items,
            CollectionChangeAction.RESET: self._on_reset_items,
        }
        # subscribe only once the first fill succeeded
        self._on_reset_items()
        source.collection_changed.subscribe(self._on_collection_changed)

    # ------------------------------------------------------------------
    # Public properties
    # ------------------------------------------------------------------
    @property
    def source(self) -> Sequence:
        return self._source

    @property
    def translate(self) -> Callable[[TIn], TOut]:
        return self._translate

    @property
    def dispose(self) -> Callable[[TOut], None]:
        return self._dispose

    @property
    def count(self) -> int:
        return len(self._items)

    @property
    def closed(self) -> bool:
        return self._closed

    # ------------------------------------------------------------------
    # Read access
    # ------------------------------------------------------------------
    def __len__(self) -> int:
        return len(self._items)

    @overload
    def __getitem__(self, index: int) -> TOut: ...

    @overload
    def __getitem__(self, index: slice) -> List[TOut]: ...

    def __getitem__(self, index: Union[int, slice]) -> Union[TOut, List[TOut]]:
        return self._items[index]

    def __iter__(self) -> Iterator[TOut]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r})"

    def get_translated_value(self, item: TIn) -> TOut:
        """Return the translated counterpart of ``item`` from the source.

        Raises:
            KeyNotFoundError: ``item`` is not present in the source.
        """
        position = self._source_index(item)
        if position is None:
            raise KeyNotFoundError(item)
        return self._items[position]

    def get_translated_value_or_none(
        self, item: TIn, default: Optional[TDefault] = None
    ) -> Union[TOut, Optional[TDefault]]:
        """Like :meth:`get_translated_value` but returns ``default`` when absent."""
        position = self._source_index(item)
        if position is None:
            return default
        return self._items[position]

    # ------------------------------------------------------------------
    # Teardown
    # ------------------------------------------------------------------
    def close(self) -> None:
        """Stop observing the source and dispose every remaining item.

        No change events are emitted. Calling ``close`` again is a no-op.
        """
        if self._closed:
            return
        self._closed = True
        self._source.collection_changed.unsubscribe(self._on_collection_changed)
        self._log.debug("close: disposing %d items", len(self._items))
        self._remove_items(0, len(self._items))

    # ------------------------------------------------------------------
    # Source change handling
    # ------------------------------------------------------------------
    def _on_collection_changed(self, sender: Any, event: CollectionChangedEvent) -> None:
        # delivery may still reach us after close() ran earlier in the same event
        if self._closed:
            return
        handler = self._handlers.get(event.action)
        if handler is None:
            raise ValueError(f"Unsupported collection change action: {event.action!r}")
        handler(event)

    def _on_add_items(self, event: CollectionChangedEvent) -> None:
        index = event.new_starting_index
        added = self._add_items(event.new_items or (), index)
        self._log.debug("add %d items at %d", len(added), index)
        self.collection_changed(self, CollectionChangedEvent.add(added, index))
        self.property_changed(self, COUNT_PROPERTY_CHANGED)

    def _on_remove_items(self, event: CollectionChangedEvent) -> None:
        index = event.old_starting_index
        removed = self._remove_items(index, len(event.old_items or ()))
        self._log.debug("remove %d items at %d", len(removed), index)
        self.collection_changed(self, CollectionChangedEvent.remove(removed, index))
        self.property_changed(self, COUNT_PROPERTY_CHANGED)

    def _on_move_items(self, event: CollectionChangedEvent) -> None:
        old_index = event.old_starting_index
        new_index = event.new_starting_index
        size = len(event.old_items or ())
        moved = self._items[old_index:old_index + size]
        del self._items[old_index:old_index + size]
        self._items[new_index:new_index] = moved
        self._log.debug("move %d items %d -> %d", size, old_index, new_index)
        self.collection_changed(
            self, CollectionChangedEvent.move(moved, new_index, old_index)
        )

    def _on_replace_items(self, event: CollectionChangedEvent) -> None:
        index = event.old_starting_index
        new_items = event.new_items or ()
        removed = self._remove_items(index, len(event.old_items or new_items))
        added = self._add_items(new_items, index)
        self._log.debug("replace %d items at %d", len(removed), index)
        self.collection_changed(
            self, CollectionChangedEvent.replace(added, removed, index)
        )

    def _on_reset_items(self, event: Optional[CollectionChangedEvent] = None) -> None:
        disposed = self._remove_items(0, len(self._items))
        self._add_items(self._source, 0)
        self._log.debug("reset: disposed %d, translated %d", len(disposed), len(self._items))
        self.collection_changed(self, RESET_COLLECTION_CHANGED)
        self.property_changed(self, COUNT_PROPERTY_CHANGED)

    # ------------------------------------------------------------------
    # Primitive edits; the only places that translate and dispose
    # ------------------------------------------------------------------
    def _add_items(self, items: Iterable[TIn], index: int) -> List[TOut]:
        translated: List[TOut] = []
        for item in items:
            translated.append(self._translate(item))
        self._items[index:index] = translated
        return translated

    def _remove_items(self, index: int, count: int) -> List[TOut]:
        removed = self._items[index:index + count]
        for item in removed:
            self._dispose(item)
        del self._items[index:index + count]
        return removed

    def _source_index(self, item: TIn) -> Optional[int]:
        try:
            return self._source.index(item)
        except ValueError:
            return None


__all__ = ["TranslatingObservable", "close_item", "ignore_disposal"]
