"""MVVM plumbing: commands, property change notification and live collections.

Typical use binds a model list to a list of view models::

    from mvvmkit import ObservableList, TranslatingObservable

    models = ObservableList([1, 2, 3])
    rows = TranslatingObservable(models, str)
    models.append(4)
    list(rows)  # ["1", "2", "3", "4"]

The package logs through ``logging.getLogger(__name__)`` loggers and never
configures handlers itself; see :mod:`mvvmkit.utils.logging`.
"""

from .adapters.observable_list import ObservableList
from .domain.errors import ConfigurationError, KeyNotFoundError, MvvmError
from .domain.events import (
    CollectionChangeAction,
    CollectionChangedEvent,
    EventHook,
    PropertyChangedEvent,
    PropertyChangingEvent,
)
from .domain.ports import CollectionChangeNotifier, PropertyChangeNotifier, SupportsClose
from .viewmodels.command import Command, ParameterCommand
from .viewmodels.notify_property_changed import NotifyPropertyChanged
from .viewmodels.translating_observable import (
    TranslatingObservable,
    close_item,
    ignore_disposal,
)

__version__ = "0.1.0"

__all__ = [
    "CollectionChangeAction",
    "CollectionChangeNotifier",
    "CollectionChangedEvent",
    "Command",
    "ConfigurationError",
    "EventHook",
    "KeyNotFoundError",
    "MvvmError",
    "NotifyPropertyChanged",
    "ObservableList",
    "ParameterCommand",
    "PropertyChangeNotifier",
    "PropertyChangedEvent",
    "PropertyChangingEvent",
    "SupportsClose",
    "TranslatingObservable",
    "close_item",
    "ignore_disposal",
]
