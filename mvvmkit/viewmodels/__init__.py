"""ViewModel helpers for binding views to model state.

Call context:
    Application view models import these helpers to expose commands, announce
    property changes, and present model collections as view-model collections.

Dependencies:
    Modules in this package depend on ``mvvmkit.domain`` events, ports and
    errors only. No UI toolkit is imported here.

Responsibilities:
    - ``Command`` / ``ParameterCommand``: action plus enablement predicate.
    - ``NotifyPropertyChanged``: equality-gated property change events.
    - ``TranslatingObservable``: live translated view of an observable list.
"""

from .command import Command, ParameterCommand
from .notify_property_changed import NotifyPropertyChanged
from .translating_observable import TranslatingObservable, close_item, ignore_disposal

__all__ = [
    "Command",
    "NotifyPropertyChanged",
    "ParameterCommand",
    "TranslatingObservable",
    "close_item",
    "ignore_disposal",
]
