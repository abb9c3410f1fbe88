from __future__ import annotations

from typing import Protocol, runtime_checkable

from .events import EventHook


# ---- Ports (capabilities consumed across layers) ----
@runtime_checkable
class CollectionChangeNotifier(Protocol):
    """Publishes one ``CollectionChangedEvent`` per structural mutation."""

    collection_changed: EventHook


@runtime_checkable
class PropertyChangeNotifier(Protocol):
    """Publishes ``PropertyChangedEvent`` after a property value changes."""

    property_changed: EventHook


@runtime_checkable
class SupportsClose(Protocol):
    """Release-resources capability of view-model items."""

    def close(self) -> None: ...
