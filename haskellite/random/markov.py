"""Markov chain variable

Recurrence over the previous output: value_n = transition(value_{n-1})."""

from __future__ import annotations

from .._helpers import require_callable
from .._types import Transition
from .base import RandomVariable

class Markov[T](RandomVariable[T]):
    """
    Feed every output back into `transition`.

    The first pull receives `initial`, which is None when omitted. A transition
    that cannot handle None fails on that first pull, and its exception
    propagates as is.
    """

    __slots__ = ("_transition", "_previous")

    def __init__(self, transition: Transition[T], initial: T | None = None) -> None:
        require_callable(transition, name="transition")
        self._transition = transition
        self._previous = initial

    @property
    def previous(self) -> T | None:
        """Input of the next pull."""
        return self._previous

    def next(self) -> T:
        value = self._transition(self._previous)
        self._previous = value
        return value

def random_markov[T](transition: Transition[T], *, initial: T | None = None) -> RandomVariable[T]:
    """
    Markov chain (https://en.wikipedia.org/wiki/Markov_chain).

    Example:
        def step(i: int | None) -> int:
            if i is None:
                raise ValueError("no predecessor")
            return i + 1

        random_markov(step).next()             # raises ValueError
        random_markov(step, initial=0).next()  # 1
    """
    return Markov(transition, initial)

__all__ = ("Markov", "random_markov")
