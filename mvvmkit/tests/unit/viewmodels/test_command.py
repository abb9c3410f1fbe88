from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from mvvmkit.domain.errors import ConfigurationError
from mvvmkit.viewmodels.command import Command, ParameterCommand


def test_command_executes_action_ignoring_parameter() -> None:
    action = MagicMock()
    command = Command(action)

    command.execute("ignored")

    action.assert_called_once_with()


def test_command_without_predicate_is_always_enabled() -> None:
    assert Command(MagicMock()).can_execute() is True


def test_command_predicate_controls_enablement() -> None:
    state = {"busy": True}
    command = Command(MagicMock(), lambda: not state["busy"])

    assert command.can_execute() is False
    state["busy"] = False
    assert command.can_execute() is True


def test_command_requires_action() -> None:
    with pytest.raises(ConfigurationError):
        Command(None)


def test_command_rejects_non_callable_predicate() -> None:
    with pytest.raises(ConfigurationError):
        Command(MagicMock(), "yes")


def test_raise_can_execute_changed_notifies_subscribers() -> None:
    command = Command(MagicMock())
    handler = MagicMock()
    command.can_execute_changed.subscribe(handler)

    command.raise_can_execute_changed()

    handler.assert_called_once_with(command, None)


def test_parameter_command_passes_parameter() -> None:
    action = MagicMock()
    command = ParameterCommand(action, lambda well: well.startswith("A"))

    assert command.can_execute("A1") is True
    assert command.can_execute("B1") is False
    command.execute("A1")

    action.assert_called_once_with("A1")


def test_parameter_command_requires_action() -> None:
    with pytest.raises(ConfigurationError):
        ParameterCommand(None)
