"""
Weighted variable
=================

Discrete distribution sampling by cumulative weight.
"""

from __future__ import annotations

import math
from numbers import Real
from types import MappingProxyType

from .._errors import ConfigurationError
from .._helpers import require_non_empty
from .._types import Weights
from .base import DoubleGenerator, RandomVariable


class Weighted[T](RandomVariable[T]):
    """
    Returns candidates with probability proportional to their weight.

    Example:
        greeting = Weighted({"hello": 1, "world": 2})
        greeting.next()  # "hello" 1/3 of the time, "world" 2/3

    Each pull draws u in [0, 1), scales it by the total weight and walks the
    candidates in insertion order over half-open intervals [start, end). When
    rounding leaves the target past the final interval, the last candidate is
    returned.
    """

    __slots__ = ("_weights", "_total", "_variable")

    def __init__(
        self,
        weights: Weights[T],
        *,
        seed: int | None = None,
        secure: bool = False,
    ) -> None:
        require_non_empty(weights, name="weights")
        for candidate, weight in weights.items():
            if isinstance(weight, bool) or not isinstance(weight, Real) or not math.isfinite(weight):
                raise ConfigurationError("weights", f"weight of {candidate!r} is not a finite number")
            if weight < 0:
                raise ConfigurationError("weights", f"weight of {candidate!r} is negative")

        total = sum(weights.values())
        if not math.isfinite(total):
            raise ConfigurationError("weights", "total weight overflows to a non-finite number")
        if not total > 0:
            raise ConfigurationError("weights", "total weight must be > 0")

        self._weights = dict(weights)
        self._total = total
        self._variable = DoubleGenerator(seed=seed, secure=secure)

    @property
    def weights(self) -> MappingProxyType[T, float]:
        """The distribution this variable follows (read-only)."""
        return MappingProxyType(self._weights)

    @property
    def total_weight(self) -> float:
        return self._total

    def next(self) -> T:
        target = self._variable.next() * self._total
        end = 0.0

        for candidate, weight in self._weights.items():
            start = end
            end += weight
            if start <= target < end:
                return candidate

        # Rounding fallback: target landed at or past the final end
        return candidate


__all__ = ("Weighted",)
