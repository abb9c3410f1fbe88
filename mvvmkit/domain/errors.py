"""Error types raised by the MVVM helpers.

Construction-time validation failures and lookup misses are reported through
this small hierarchy so callers can catch ``MvvmError`` at a single seam.
Errors raised by user-supplied callables (translate, dispose, event handlers)
are never wrapped; they reach the caller unchanged.
"""
from __future__ import annotations

from typing import Any


class MvvmError(Exception):
    """Base class for errors raised by this package."""

    def __init__(self, code: str, message: str):
        super().__init__(message)
        self.code = code
        self.message = message


class ConfigurationError(MvvmError, ValueError):
    """Invalid construction arguments (missing callable, unobservable source)."""

    def __init__(self, message: str):
        super().__init__("CONFIGURATION", message)


class KeyNotFoundError(MvvmError, KeyError):
    """A source value used as a lookup key is not present in the source."""

    def __init__(self, key: Any):
        super().__init__("KEY_NOT_FOUND", f"Item not found in source: {key!r}")
        self.key = key

    def __str__(self) -> str:
        # KeyError.__str__ would repr() the message
        return self.message


__all__ = ["ConfigurationError", "KeyNotFoundError", "MvvmError"]
