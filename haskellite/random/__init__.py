"""
RandomVariable: composable, lazily evaluated random values.

Base generators produce primitives; combinators transform or pick; Precached
and NonRepeating decorate another variable with state.

Example:
    from haskellite import random as R

    dice = R.random_int(max=6, offset=1, seed=42)
    fresh_rolls = R.random_non_repeating(2, dice)
    buffered = R.Precached(fresh_rolls, depth=16)
    buffered.next()
"""

from .base import (
    BoolGenerator,
    DoubleGenerator,
    IntGenerator,
    RandomPolicy,
    RandomVariable,
    random_bool,
    random_double,
    random_int,
)
from .lists import RandomizedList, RandomListItem, random_list_item, randomized_list
from .markov import Markov, random_markov
from .non_repeating import NonRepeating, random_non_repeating
from .precached import Precached
from .weighted import Weighted
from .wrap import Mapped, WrappedFactory, random_mapped, random_wrapped_factory

__all__ = (
    # Capability
    "RandomVariable",
    "RandomPolicy",
    # Base generators
    "IntGenerator",
    "DoubleGenerator",
    "BoolGenerator",
    "random_int",
    "random_double",
    "random_bool",
    # Combinators
    "WrappedFactory",
    "Mapped",
    "random_wrapped_factory",
    "random_mapped",
    "RandomizedList",
    "RandomListItem",
    "randomized_list",
    "random_list_item",
    "Markov",
    "random_markov",
    "Weighted",
    # Stateful decorators
    "Precached",
    "NonRepeating",
    "random_non_repeating",
)
