"""Concrete observable collections consumed by the view-model helpers.

Purpose:
    Provide a mutable sequence that satisfies the ``CollectionChangeNotifier``
    port so models can be bound to translating views without a UI toolkit.

Call context:
    Imported by application models (as their backing storage) and by tests
    (as the source driving ``TranslatingObservable``).
"""

from .observable_list import ObservableList

__all__ = ["ObservableList"]
