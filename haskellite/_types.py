"""
Core type definitions for haskellite.

Aliases shared by the random variables and the container helpers.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping

# ============================================================================
# Type aliases
# ============================================================================

# Mapper = pure value transform
type Mapper[T, R] = Callable[[T], R]

# Factory = zero-arg producer, called once per use
type Factory[T] = Callable[[], T]

# Transition = Markov step; receives None when there is no predecessor
type Transition[T] = Callable[[T | None], T]

# Weights = candidate -> non-negative weight, iterated in insertion order
type Weights[T] = Mapping[T, float]

__all__ = (
    "Mapper",
    "Factory",
    "Transition",
    "Weights",
)
