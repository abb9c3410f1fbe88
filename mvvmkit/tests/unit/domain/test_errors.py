from __future__ import annotations

import pytest

from mvvmkit.domain.errors import ConfigurationError, KeyNotFoundError, MvvmError


def test_configuration_error_carries_code_and_message() -> None:
    err = ConfigurationError("translate must be a callable")
    assert err.code == "CONFIGURATION"
    assert err.message == "translate must be a callable"
    assert str(err) == "translate must be a callable"
    assert isinstance(err, MvvmError)


def test_key_not_found_error_is_catchable_as_key_error() -> None:
    with pytest.raises(KeyError):
        raise KeyNotFoundError("missing")


def test_key_not_found_error_message_is_readable() -> None:
    err = KeyNotFoundError(7)
    assert err.code == "KEY_NOT_FOUND"
    assert str(err) == "Item not found in source: 7"
