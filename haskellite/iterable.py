"""
Iterable helpers
================

Haskell-style list functions. Partial functions (head, tail, ...) return an
Option instead of raising on empty input.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable, Iterable, Iterator

from kungfu import Nothing, Option, Some


def head[T](items: Iterable[T]) -> Option[T]:
    """First element, Nothing() for empty input."""
    for item in items:
        return Some(item)
    return Nothing()


def last[T](items: Iterable[T]) -> Option[T]:
    """Last element, Nothing() for empty input."""
    result: Option[T] = Nothing()
    for item in items:
        result = Some(item)
    return result


def tail[T](items: Iterable[T]) -> Option[list[T]]:
    """All elements after the first, Nothing() for empty input."""
    values = list(items)
    if not values:
        return Nothing()
    return Some(values[1:])


def init[T](items: Iterable[T]) -> Option[list[T]]:
    """All elements except the last, Nothing() for empty input."""
    values = list(items)
    if not values:
        return Nothing()
    return Some(values[:-1])


def fold1[T](f: Callable[[T, T], T], items: Iterable[T]) -> Option[T]:
    """
    Left fold seeded with the first element (Haskell's foldl1).

    Example:
        fold1(operator.add, [1, 2, 3])  # Some(6)
        fold1(operator.add, [])         # Nothing()
    """
    iterator = iter(items)
    for first in iterator:
        acc = first
        for item in iterator:
            acc = f(acc, item)
        return Some(acc)
    return Nothing()


def scan[A, T](f: Callable[[T, A], T], initial: T, items: Iterable[A]) -> Iterator[T]:
    """
    Running fold, initial value first (Haskell's scanl).

    Example:
        list(scan(operator.add, 0, [1, 2, 3]))  # [0, 1, 3, 6]
    """
    return itertools.accumulate(items, f, initial=initial)


def intersperse[T](
    items: Iterable[T],
    separator: Callable[[int], T],
    *,
    leading: bool = False,
    trailing: bool = False,
) -> Iterator[T]:
    """
    Insert separator(i) between elements, i being the index of the preceding one.

    The leading separator receives -1. The trailing one receives the number
    of separators emitted between elements.

    Example:
        list(intersperse([1, 2, 3], lambda _: 0))  # [1, 0, 2, 0, 3]
        list(intersperse([1, 2, 3], lambda i: i, leading=True, trailing=True))
        # [-1, 1, 0, 2, 1, 3, 2]
    """
    if leading:
        yield separator(-1)

    index = 0
    has_previous = False
    for item in items:
        if has_previous:
            yield separator(index)
            index += 1
        yield item
        has_previous = True

    if trailing:
        yield separator(index)


def cycle[T](items: Iterable[T]) -> Iterator[T]:
    """
    Repeat items forever, iterating them again on every pass.

    Unlike itertools.cycle nothing is cached, so a one-shot iterator ends after
    its first pass. An empty pass ends the cycle instead of spinning.
    """
    while True:
        empty = True
        for item in items:
            empty = False
            yield item
        if empty:
            return


def repeat[T](value: T) -> Iterator[T]:
    """value, value, value, ..."""
    return itertools.repeat(value)


__all__ = (
    "head",
    "last",
    "tail",
    "init",
    "fold1",
    "scan",
    "intersperse",
    "cycle",
    "repeat",
)
