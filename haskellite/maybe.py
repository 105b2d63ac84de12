"""
Maybe helpers
=============

Optional values are kungfu's Option: `Some(value)` or `Nothing()`.
`Some(None)` holds a value that happens to be None and is distinct from
`Nothing()`. The helpers below operate on Options without branching on None.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator

from kungfu import Nothing, Option, Some

from ._errors import MissingValueError


def maybe[T](value: T | None) -> Option[T]:
    """
    Lift an Optional into Option. None becomes Nothing().

    Example:
        maybe(5)     # Some(5)
        maybe(None)  # Nothing()
    """
    if value is None:
        return Nothing()
    return Some(value)


def cat_maybes[T](options: Iterable[Option[T]]) -> Iterator[T]:
    """
    Values of the Somes, in order (Haskell's catMaybes).

    Example:
        list(cat_maybes([Some(1), Nothing(), Some(3)]))  # [1, 3]
    """
    for option in options:
        if isinstance(option, Some):
            yield option.unwrap()


def map_maybe[A, T](f: Callable[[A], Option[T]], items: Iterable[A]) -> Iterator[T]:
    """Apply f to every item and keep the Some values (Haskell's mapMaybe)."""
    return cat_maybes(f(item) for item in items)


def get_or_default[T](option: Option[T], default: Callable[[], T]) -> T:
    """
    Value if present, otherwise default().

    Example:
        get_or_default(Some(5), lambda: 0)     # 5
        get_or_default(Nothing(), lambda: 0)   # 0
    """
    if isinstance(option, Some):
        return option.unwrap()
    return default()


def get_or_raise[T](option: Option[T], error: Callable[[], BaseException] | None = None) -> T:
    """
    Value if present, otherwise raise.

    Raises the exception built by error() when given, MissingValueError otherwise.
    """
    if isinstance(option, Some):
        return option.unwrap()
    if error is not None:
        raise error()
    raise MissingValueError("get_or_raise called on Nothing")


__all__ = (
    "maybe",
    "cat_maybes",
    "map_maybe",
    "get_or_default",
    "get_or_raise",
)
