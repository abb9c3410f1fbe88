"""Domain package exports for events, ports and errors."""

from .errors import ConfigurationError, KeyNotFoundError, MvvmError
from .events import (
    CollectionChangeAction,
    CollectionChangedEvent,
    EventHook,
    PropertyChangedEvent,
    PropertyChangingEvent,
)
from .ports import CollectionChangeNotifier, PropertyChangeNotifier, SupportsClose

__all__ = [
    "CollectionChangeAction",
    "CollectionChangedEvent",
    "ConfigurationError",
    "EventHook",
    "KeyNotFoundError",
    "MvvmError",
    "CollectionChangeNotifier",
    "PropertyChangeNotifier",
    "PropertyChangedEvent",
    "PropertyChangingEvent",
    "SupportsClose",
]
