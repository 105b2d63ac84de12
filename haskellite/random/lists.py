"""
List-backed random variables
============================

Shuffle a fixed collection, or pick one of its elements. The input is copied
at construction; later mutation of the caller's list has no effect.
"""

from __future__ import annotations

from collections.abc import Sequence

from .._helpers import require_non_empty
from .base import IntGenerator, RandomPolicy, RandomVariable


class RandomizedList[T](RandomVariable[list[T]]):
    """Each pull returns a new list holding the items in random order."""

    __slots__ = ("_items", "_random")

    def __init__(
        self,
        items: Sequence[T],
        *,
        seed: int | None = None,
        secure: bool = False,
    ) -> None:
        self._items = tuple(require_non_empty(items, name="items"))
        self._random = RandomPolicy(seed, secure).make_random()

    def next(self) -> list[T]:
        shuffled = list(self._items)
        self._random.shuffle(shuffled)
        return shuffled


class RandomListItem[T](RandomVariable[T]):
    """Each pull returns one of the items, uniformly by index."""

    __slots__ = ("_items", "_index")

    def __init__(
        self,
        items: Sequence[T],
        *,
        seed: int | None = None,
        secure: bool = False,
    ) -> None:
        self._items = tuple(require_non_empty(items, name="items"))
        self._index = IntGenerator(len(self._items), seed=seed, secure=secure)

    def next(self) -> T:
        return self._items[self._index.next()]


def randomized_list[T](
    items: Sequence[T],
    *,
    seed: int | None = None,
    secure: bool = False,
) -> RandomVariable[list[T]]:
    """
    Shallow-copying shuffler.

    Example:
        shuffler = randomized_list([1, 2, 3, 4])
        shuffler.next()  # e.g. [3, 1, 4, 2], a fresh list every time
    """
    return RandomizedList(items, seed=seed, secure=secure)


def random_list_item[T](
    items: Sequence[T],
    *,
    seed: int | None = None,
    secure: bool = False,
) -> RandomVariable[T]:
    """
    Uniform pick from a non-empty sequence, with replacement.

    Example:
        random_list_item(["rock", "paper", "scissors"]).next()
    """
    return RandomListItem(items, seed=seed, secure=secure)


__all__ = ("RandomizedList", "RandomListItem", "randomized_list", "random_list_item")
