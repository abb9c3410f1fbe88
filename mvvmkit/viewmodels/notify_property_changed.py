from __future__ import annotations

from typing import Any, Optional

from ..domain.events import EventHook, PropertyChangedEvent, PropertyChangingEvent

_MISSING = object()


class NotifyPropertyChanged:
    """Base class for view models that announce property changes.

    Subclasses keep the value in a private attribute and route the setter
    through :meth:`set_and_raise_if_changed`::

        class Counter(NotifyPropertyChanged):
            def __init__(self) -> None:
                super().__init__()
                self._value = 0

            @property
            def value(self) -> int:
                return self._value

            @value.setter
            def value(self, new: int) -> None:
                self.set_and_raise_if_changed("_value", new)
    """

    def __init__(self) -> None:
        self.property_changing = EventHook()
        self.property_changed = EventHook()

    def raise_property_changing(self, property_name: str) -> None:
        self.property_changing(self, PropertyChangingEvent(property_name))

    def raise_property_changed(self, property_name: str) -> None:
        self.property_changed(self, PropertyChangedEvent(property_name))

    def set_and_raise_if_changed(
        self,
        attribute: str,
        value: Any,
        property_name: Optional[str] = None,
    ) -> bool:
        """Store ``value`` in ``attribute`` if it differs from the current one.

        Emits ``property_changing`` before and ``property_changed`` after the
        store. Returns ``True`` when the value changed.
        """
        current = getattr(self, attribute, _MISSING)
        if current is not _MISSING and current == value:
            return False
        name = property_name if property_name is not None else attribute.lstrip("_")
        self.raise_property_changing(name)
        setattr(self, attribute, value)
        self.raise_property_changed(name)
        return True


__all__ = ["NotifyPropertyChanged"]
