"""Internal helpers for haskellite.

Argument checks shared by the generator constructors. Every check raises
ConfigurationError at construction so nothing is deferred to the first pull."""

from __future__ import annotations

import typing
from collections.abc import Sized

from ._errors import ConfigurationError

def require_int(value: typing.Any, *, name: str, minimum: int | None = None) -> int:
    """
    Validate an integer parameter.

    bool is rejected although it subclasses int.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(name, f"must be an int, got {type(value).__name__}")
    if minimum is not None and value < minimum:
        raise ConfigurationError(name, f"must be >= {minimum}, got {value}")
    return value

def require_non_empty[S: Sized](value: S, *, name: str) -> S:
    """Validate that a collection holds at least one element."""
    if len(value) == 0:
        raise ConfigurationError(name, "must not be empty")
    return value

def require_callable(value: typing.Any, *, name: str) -> None:
    if not callable(value):
        raise ConfigurationError(name, f"must be callable, got {type(value).__name__}")

__all__ = (
    "require_int",
    "require_non_empty",
    "require_callable",
)
