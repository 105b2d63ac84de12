"""
Haskell-like value handling for Python.

Building blocks for code that would rather compose than branch on None or
wrap everything in try/except.

Architecture:
- random     - composable, lazily evaluated random variables (pull-based)
- maybe      - helpers over kungfu Option (Some / Nothing)
- either     - Left / Right disjoint union
- result     - helpers over kungfu Result (Ok / Error), sync and async
- curry      - curry / uncurry / swap and curried operators
- iterable   - head, tail, scan, intersperse, cycle, ...
- ranges     - inclusive int ranges
"""

import logging

# Core types
from ._types import Factory, Mapper, Transition, Weights

# Random variables
from . import random
from .random import (
    BoolGenerator,
    DoubleGenerator,
    IntGenerator,
    Mapped,
    Markov,
    NonRepeating,
    Precached,
    RandomizedList,
    RandomListItem,
    RandomPolicy,
    RandomVariable,
    Weighted,
    WrappedFactory,
    random_bool,
    random_double,
    random_int,
    random_list_item,
    random_mapped,
    random_markov,
    random_non_repeating,
    random_wrapped_factory,
    randomized_list,
)

# Containers (module namespaces: maybe.get_or_default vs result.get_or_default)
from . import either, maybe, result
from .either import Either, Left, Right, lefts, partition_eithers, rights
from .maybe import cat_maybes, map_maybe
from .result import catching, catching_async, from_awaitable

# Function and sequence helpers
from .curry import add, concat, curry, divide, mod, multiply, subtract, swap, swap_uncurried, uncurry
from .iterable import cycle, fold1, head, init, intersperse, last, repeat, scan, tail
from .ranges import to, to_infinity

# Errors
from ._errors import ConfigurationError, MissingValueError, RetriesExhaustedError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = (
    # Types
    "Factory",
    "Mapper",
    "Transition",
    "Weights",
    # Random module (namespace import)
    "random",
    # Random - capability and policy
    "RandomVariable",
    "RandomPolicy",
    # Random - base generators
    "IntGenerator",
    "DoubleGenerator",
    "BoolGenerator",
    "random_int",
    "random_double",
    "random_bool",
    # Random - combinators
    "WrappedFactory",
    "Mapped",
    "RandomizedList",
    "RandomListItem",
    "Markov",
    "Weighted",
    "random_wrapped_factory",
    "random_mapped",
    "randomized_list",
    "random_list_item",
    "random_markov",
    # Random - stateful decorators
    "Precached",
    "NonRepeating",
    "random_non_repeating",
    # Container modules
    "maybe",
    "either",
    "result",
    # Either
    "Either",
    "Left",
    "Right",
    "lefts",
    "rights",
    "partition_eithers",
    # Maybe
    "cat_maybes",
    "map_maybe",
    # Result
    "catching",
    "catching_async",
    "from_awaitable",
    # Curry
    "curry",
    "uncurry",
    "swap",
    "swap_uncurried",
    "add",
    "subtract",
    "multiply",
    "divide",
    "mod",
    "concat",
    # Iterable
    "head",
    "last",
    "tail",
    "init",
    "fold1",
    "scan",
    "intersperse",
    "cycle",
    "repeat",
    # Ranges
    "to",
    "to_infinity",
    # Errors
    "ConfigurationError",
    "MissingValueError",
    "RetriesExhaustedError",
)
