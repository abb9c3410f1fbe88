"""Opt-in log output for the ``mvvmkit`` logger hierarchy.

Library modules only create loggers; nothing is attached on import. Hosts
that want to see edit traces from views and observable lists call
:func:`configure_logging`, optionally steered by the environment:

``MVVMKIT_LOG_LEVEL``
    Level name (``debug``, ``warning`` ...) or number. Wins over everything.

``MVVMKIT_DEBUG``
    Truthy value (``1``, ``true``, ``yes``, ``on``) selects ``DEBUG``.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

PACKAGE_LOGGER = "mvvmkit"
LEVEL_ENV = "MVVMKIT_LOG_LEVEL"
DEBUG_ENV = "MVVMKIT_DEBUG"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_HANDLER_TAG = "_mvvmkit_handler"


def level_from_env() -> Optional[int]:
    """Level requested through the environment, ``None`` when unset or unknown."""
    raw = (os.getenv(LEVEL_ENV) or "").strip()
    if raw:
        if raw.isdigit():
            return int(raw)
        level = logging.getLevelName(raw.upper())
        if isinstance(level, int):
            return level
    if (os.getenv(DEBUG_ENV) or "").strip().lower() in {"1", "true", "yes", "on"}:
        return logging.DEBUG
    return None


def configure_logging(
    level: int = logging.WARNING,
    handler: Optional[logging.Handler] = None,
) -> logging.Logger:
    """Attach one handler to the package logger and set its level.

    Repeated calls replace the handler installed by a previous call instead
    of stacking another one. The environment level overrides ``level``.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for existing in list(logger.handlers):
        if getattr(existing, _HANDLER_TAG, False):
            logger.removeHandler(existing)

    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
    setattr(handler, _HANDLER_TAG, True)
    logger.addHandler(handler)

    env_level = level_from_env()
    logger.setLevel(env_level if env_level is not None else level)
    return logger


__all__ = ["DEBUG_ENV", "LEVEL_ENV", "PACKAGE_LOGGER", "configure_logging", "level_from_env"]
