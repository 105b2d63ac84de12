"""Non-repeating variable

Reject-and-retry filter: a value is not emitted again until `length` other
values have been emitted after it."""

from __future__ import annotations

from collections import deque

from .._errors import ConfigurationError, RetriesExhaustedError
from .._helpers import require_int
from .base import RandomVariable


class NonRepeating[T](RandomVariable[T]):
    """
    Discard upstream values equal (==) to any of the last `length` emitted.

    Rejected values are dropped, so upstream order is not preserved.

    NOTE: if upstream can reach fewer than `length + 1` distinct values, no
          acceptable value exists and `next()` loops forever. Pass
          `max_retries` to raise RetriesExhaustedError instead.
    """

    __slots__ = ("_upstream", "_length", "_history", "_max_retries")

    def __init__(
        self,
        length: int,
        upstream: RandomVariable[T],
        *,
        max_retries: int | None = None,
    ) -> None:
        if not isinstance(upstream, RandomVariable):
            raise ConfigurationError("upstream", "must be a RandomVariable")
        self._length = require_int(length, name="length", minimum=1)
        if max_retries is not None:
            require_int(max_retries, name="max_retries", minimum=1)
        self._upstream = upstream
        self._max_retries = max_retries
        # Most recent first; maxlen evicts the oldest
        self._history: deque[T] = deque(maxlen=self._length)

    @property
    def length(self) -> int:
        return self._length

    @property
    def history(self) -> tuple[T, ...]:
        """Emitted values still inside the window, most recent first."""
        return tuple(self._history)

    def next(self) -> T:
        rejected = 0
        while True:
            value = self._upstream.next()
            # == only: `in` matches on identity first (nan)
            if not any(value == seen for seen in self._history):
                self._history.appendleft(value)
                return value

            rejected += 1
            if self._max_retries is not None and rejected >= self._max_retries:
                raise RetriesExhaustedError(rejected)


def random_non_repeating[T](
    length: int,
    upstream: RandomVariable[T],
    *,
    max_retries: int | None = None,
) -> RandomVariable[T]:
    """
    Wrap `upstream` so a value is not repeated within `length` pulls.

    Example:
        variable = random_non_repeating(10, random_int())
        value = variable.next()  # the following 10 pulls will not return value

        random_non_repeating(0, base) is base  # zero length leaves upstream as is
    """
    require_int(length, name="length", minimum=0)
    if length == 0:
        return upstream
    return NonRepeating(length, upstream, max_retries=max_retries)


__all__ = ("NonRepeating", "random_non_repeating")
