"""
Base random variables
=====================

RandomVariable is a pull-based, lazily evaluated source of values: nothing is
computed until `next()` is called. The base generators wrap a `random.Random`
(seeded, or OS-seeded) or a `random.SystemRandom` (secure) chosen once at
construction through RandomPolicy.
"""

from __future__ import annotations

import abc
import random
from collections.abc import Callable, Iterator
from dataclasses import dataclass

from .._errors import ConfigurationError
from .._helpers import require_int


class RandomVariable[T](abc.ABC):
    """
    Random, lazily evaluated variable of type T.

    One operation: `next()` yields the next value. Variables are also infinite
    iterators, so the usual itertools apply:

        dice = random_int(max=6, offset=1)
        dice.next()                               # 1..6
        list(itertools.islice(dice, 3))           # three rolls

    Instances are single-owner: no internal locking is performed.
    """

    __slots__ = ()

    @abc.abstractmethod
    def next(self) -> T:
        """Yield the next random value."""

    def map[R](self, mapper: Callable[[T], R], /) -> RandomVariable[R]:
        """Shorthand for Mapped(self, mapper)."""
        from .wrap import Mapped

        return Mapped(self, mapper)

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        return self.next()


@dataclass(frozen=True, slots=True)
class RandomPolicy:
    """Where a base generator gets its randomness from.

    - seed given: reproducible `random.Random(seed)`
    - secure=True: `random.SystemRandom()`, seed not allowed
    - neither: `random.Random()` seeded from OS entropy
    """

    seed: int | None = None
    secure: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.secure, bool):
            raise ConfigurationError("secure", f"must be a bool, got {type(self.secure).__name__}")
        if self.seed is not None:
            require_int(self.seed, name="seed")
            if self.secure:
                raise ConfigurationError("seed", "cannot be combined with secure=True")

    def make_random(self) -> random.Random:
        if self.secure:
            return random.SystemRandom()
        return random.Random(self.seed)


class IntGenerator(RandomVariable[int]):
    """Uniform ints in [offset, offset + max)."""

    __slots__ = ("_random", "_max", "_offset")

    def __init__(
        self,
        max: int = 256,
        offset: int = 0,
        *,
        seed: int | None = None,
        secure: bool = False,
    ) -> None:
        self._max = require_int(max, name="max", minimum=1)
        self._offset = require_int(offset, name="offset")
        self._random = RandomPolicy(seed, secure).make_random()

    def next(self) -> int:
        return self._random.randrange(self._max) + self._offset

    def __repr__(self) -> str:
        return f"IntGenerator(max={self._max}, offset={self._offset})"


class DoubleGenerator(RandomVariable[float]):
    """Uniform floats in [0.0, 1.0)."""

    __slots__ = ("_random",)

    def __init__(self, *, seed: int | None = None, secure: bool = False) -> None:
        self._random = RandomPolicy(seed, secure).make_random()

    def next(self) -> float:
        return self._random.random()


class BoolGenerator(RandomVariable[bool]):
    """Fair coin flips."""

    __slots__ = ("_random",)

    def __init__(self, *, seed: int | None = None, secure: bool = False) -> None:
        self._random = RandomPolicy(seed, secure).make_random()

    def next(self) -> bool:
        return bool(self._random.getrandbits(1))


def random_int(
    *,
    max: int = 256,
    offset: int = 0,
    seed: int | None = None,
    secure: bool = False,
) -> RandomVariable[int]:
    """
    Variable producing ints in [offset, offset + max).

    Example:
        random_int(max=1000).next()        # 0..999
        random_int(max=6, offset=1).next() # a die roll, 1..6

    Raises ConfigurationError for max < 1, non-int bounds, or seed with secure=True.
    """
    return IntGenerator(max, offset, seed=seed, secure=secure)


def random_double(*, seed: int | None = None, secure: bool = False) -> RandomVariable[float]:
    """Variable producing floats in [0.0, 1.0)."""
    return DoubleGenerator(seed=seed, secure=secure)


def random_bool(*, seed: int | None = None, secure: bool = False) -> RandomVariable[bool]:
    """Variable producing True or False with equal probability."""
    return BoolGenerator(seed=seed, secure=secure)


__all__ = (
    "RandomVariable",
    "RandomPolicy",
    "IntGenerator",
    "DoubleGenerator",
    "BoolGenerator",
    "random_int",
    "random_double",
    "random_bool",
)
