"""Integer ranges

Inspired by Haskell's `[1..n]` and `[1..]` syntax."""

from __future__ import annotations

import itertools
from collections.abc import Iterator

from ._errors import ConfigurationError
from ._helpers import require_int

def to(start: int, end: int, *, step: int = 1) -> list[int]:
    """
    List from start toward end, both included.

    The sign of step is ignored; direction follows end. start is always
    included, and the last element may overshoot end.

    Example:
        to(1, 5)          # [1, 2, 3, 4, 5]
        to(5, 1)          # [5, 4, 3, 2, 1]
        to(1, 5, step=3)  # [1, 4, 7]
    """
    require_int(start, name="start")
    require_int(end, name="end")
    require_int(step, name="step")
    if step == 0:
        raise ConfigurationError("step", "must not be 0")

    if start == end:
        return [start]

    ascending = end > start
    step = abs(step) if ascending else -abs(step)

    values: list[int] = []
    i = start
    while True:
        values.append(i)
        if (ascending and i >= end) or (not ascending and i <= end):
            return values
        i += step

def to_infinity(start: int, *, step: int = 1) -> Iterator[int]:
    """
    start, start + step, start + 2 * step, ...

    Example:
        list(itertools.islice(to_infinity(1, step=2), 4))  # [1, 3, 5, 7]
    """
    require_int(step, name="step")
    return itertools.count(start, step)

__all__ = ("to", "to_infinity")
