"""Command objects that views bind buttons and menu entries to.

A command bundles an action with an optional enablement predicate. Views ask
``can_execute`` to decide whether the control is enabled and subscribe to
``can_execute_changed`` to know when to ask again; view models call
``raise_can_execute_changed`` after the state the predicate reads changes.
"""
from __future__ import annotations

from typing import Any, Callable, Generic, Optional, TypeVar

from ..domain.errors import ConfigurationError
from ..domain.events import EventHook

T = TypeVar("T")


def _require_callable(value: Any, name: str) -> None:
    if value is None or not callable(value):
        raise ConfigurationError(f"{name} must be a callable")


class Command:
    """Parameterless command; the parameter passed by the view is ignored."""

    def __init__(
        self,
        execute: Callable[[], None],
        can_execute: Optional[Callable[[], bool]] = None,
    ) -> None:
        _require_callable(execute, "execute")
        if can_execute is not None:
            _require_callable(can_execute, "can_execute")
        self._execute = execute
        self._can_execute = can_execute
        self.can_execute_changed = EventHook()

    def can_execute(self, parameter: Any = None) -> bool:
        if self._can_execute is None:
            return True
        return bool(self._can_execute())

    def execute(self, parameter: Any = None) -> None:
        self._execute()

    def raise_can_execute_changed(self) -> None:
        self.can_execute_changed(self, None)


class ParameterCommand(Generic[T]):
    """Command whose action and predicate receive the view's parameter."""

    def __init__(
        self,
        execute: Callable[[T], None],
        can_execute: Optional[Callable[[T], bool]] = None,
    ) -> None:
        _require_callable(execute, "execute")
        if can_execute is not None:
            _require_callable(can_execute, "can_execute")
        self._execute = execute
        self._can_execute = can_execute
        self.can_execute_changed = EventHook()

    def can_execute(self, parameter: T) -> bool:
        if self._can_execute is None:
            return True
        return bool(self._can_execute(parameter))

    def execute(self, parameter: T) -> None:
        self._execute(parameter)

    def raise_can_execute_changed(self) -> None:
        self.can_execute_changed(self, None)


__all__ = ["Command", "ParameterCommand"]
