"""
Either
======

A value that is one of two types. By convention Right holds the expected
value and Left the alternative, so `to_result()` maps Right to Ok.
"""

from __future__ import annotations

import typing
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from kungfu import Error, Nothing, Ok, Option, Result, Some

from ._errors import MissingValueError


@dataclass(frozen=True, slots=True)
class Left[L]:
    """Either holding a value of the left type."""

    value: L

    @property
    def is_left(self) -> bool:
        return True

    @property
    def is_right(self) -> bool:
        return False

    def map[A, B](
        self,
        left_mapper: Callable[[L], A],
        right_mapper: Callable[[typing.Any], B],
    ) -> Left[A]:
        """Apply left_mapper; right_mapper is ignored."""
        _ = right_mapper
        return Left(left_mapper(self.value))

    def left_or(self, default: Callable[[], L]) -> L:
        _ = default
        return self.value

    def right_or[R](self, default: Callable[[], R]) -> R:
        return default()

    def left_option(self) -> Option[L]:
        return Some(self.value)

    def right_option(self) -> Option[typing.Any]:
        return Nothing()

    def unwrap_left(self) -> L:
        return self.value

    def unwrap_right(self) -> typing.NoReturn:
        raise MissingValueError("unwrap_right called on Left")

    def swap(self) -> Right[L]:
        return Right(self.value)

    def to_result(self) -> Result[typing.Any, L]:
        return Error(self.value)


@dataclass(frozen=True, slots=True)
class Right[R]:
    """Either holding a value of the right type."""

    value: R

    @property
    def is_left(self) -> bool:
        return False

    @property
    def is_right(self) -> bool:
        return True

    def map[A, B](
        self,
        left_mapper: Callable[[typing.Any], A],
        right_mapper: Callable[[R], B],
    ) -> Right[B]:
        """Apply right_mapper; left_mapper is ignored."""
        _ = left_mapper
        return Right(right_mapper(self.value))

    def left_or[L](self, default: Callable[[], L]) -> L:
        return default()

    def right_or(self, default: Callable[[], R]) -> R:
        _ = default
        return self.value

    def left_option(self) -> Option[typing.Any]:
        return Nothing()

    def right_option(self) -> Option[R]:
        return Some(self.value)

    def unwrap_left(self) -> typing.NoReturn:
        raise MissingValueError("unwrap_left called on Right")

    def unwrap_right(self) -> R:
        return self.value

    def swap(self) -> Left[R]:
        return Left(self.value)

    def to_result(self) -> Result[R, typing.Any]:
        return Ok(self.value)


# Either = Left | Right, dispatch with `match` or isinstance
type Either[L, R] = Left[L] | Right[R]


def lefts[L, R](eithers: Iterable[Either[L, R]]) -> Iterator[L]:
    """
    Values of the Lefts, in order.

    Example:
        list(lefts([Left("1"), Right(2), Left("3")]))  # ["1", "3"]
    """
    for either in eithers:
        if isinstance(either, Left):
            yield either.value


def rights[L, R](eithers: Iterable[Either[L, R]]) -> Iterator[R]:
    """Values of the Rights, in order."""
    for either in eithers:
        if isinstance(either, Right):
            yield either.value


def partition_eithers[L, R](eithers: Iterable[Either[L, R]]) -> tuple[list[L], list[R]]:
    """Split into (lefts, rights) in one pass (Haskell's partitionEithers)."""
    left_values: list[L] = []
    right_values: list[R] = []
    for either in eithers:
        match either:
            case Left(value):
                left_values.append(value)
            case Right(value):
                right_values.append(value)
    return left_values, right_values


__all__ = (
    "Left",
    "Right",
    "Either",
    "lefts",
    "rights",
    "partition_eithers",
)
