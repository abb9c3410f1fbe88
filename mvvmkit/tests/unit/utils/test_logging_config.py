from __future__ import annotations

import logging

import pytest

from mvvmkit.adapters.observable_list import ObservableList
from mvvmkit.utils.logging import PACKAGE_LOGGER, configure_logging, level_from_env
from mvvmkit.viewmodels.translating_observable import TranslatingObservable


class _ListHandler(logging.Handler):
    def __init__(self) -> None:
        super().__init__()
        self.messages = []

    def emit(self, record: logging.LogRecord) -> None:
        self.messages.append(record.getMessage())


@pytest.fixture
def package_logger(monkeypatch):
    monkeypatch.delenv("MVVMKIT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MVVMKIT_DEBUG", raising=False)
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_level_from_env_unset_returns_none(package_logger) -> None:
    assert level_from_env() is None


def test_level_from_env_accepts_names_and_numbers(package_logger, monkeypatch) -> None:
    monkeypatch.setenv("MVVMKIT_LOG_LEVEL", "error")
    assert level_from_env() == logging.ERROR
    monkeypatch.setenv("MVVMKIT_LOG_LEVEL", "15")
    assert level_from_env() == 15


def test_unknown_level_name_falls_through_to_debug_flag(package_logger, monkeypatch) -> None:
    monkeypatch.setenv("MVVMKIT_LOG_LEVEL", "chatty")
    assert level_from_env() is None
    monkeypatch.setenv("MVVMKIT_DEBUG", "yes")
    assert level_from_env() == logging.DEBUG


def test_configure_logging_sets_requested_level(package_logger) -> None:
    logger = configure_logging(logging.INFO, _ListHandler())
    assert logger is package_logger
    assert logger.level == logging.INFO


def test_env_level_overrides_argument(package_logger, monkeypatch) -> None:
    monkeypatch.setenv("MVVMKIT_LOG_LEVEL", "DEBUG")
    assert configure_logging(logging.ERROR, _ListHandler()).level == logging.DEBUG


def test_repeated_configuration_keeps_single_handler(package_logger) -> None:
    before = len(package_logger.handlers)
    configure_logging()
    configure_logging()
    assert len(package_logger.handlers) == before + 1


def test_view_edits_reach_configured_handler(package_logger) -> None:
    handler = _ListHandler()
    configure_logging(logging.DEBUG, handler)
    source = ObservableList([1])
    TranslatingObservable(source, str)

    source.append(2)

    assert "add 1 items at 1" in handler.messages
