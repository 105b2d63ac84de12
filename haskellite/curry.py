"""Curry helpers

Convert between binary functions and functions returning functions, which
makes partial application read naturally:

    add_one = curry(operator.add)(1)
    list(map(add_one, [1, 2, 3]))  # [2, 3, 4]
"""

from __future__ import annotations

from collections.abc import Callable

def curry[A, B, C](function: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """f(a, b) -> f(a)(b)"""
    return lambda a: lambda b: function(a, b)

def uncurry[A, B, C](function: Callable[[A], Callable[[B], C]]) -> Callable[[A, B], C]:
    """f(a)(b) -> f(a, b)"""
    return lambda a, b: function(a)(b)

def swap_uncurried[A, B, C](function: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """
    Swap the arguments of a binary function.

    Example:
        describe = lambda s, i: f"{s}, {i}"
        swap_uncurried(describe)(2, "hello")  # "hello, 2"
    """
    return lambda b, a: function(a, b)

def swap[A, B, C](function: Callable[[A], Callable[[B], C]]) -> Callable[[B], Callable[[A], C]]:
    """
    Swap the arguments of a curried function.

    Example:
        subtract(3)(4)        # 1
        swap(subtract)(3)(4)  # -1
    """
    return lambda b: lambda a: function(a)(b)

# Curried operators. The first argument is the right-hand operand so that
# map(subtract(1), xs) subtracts 1 from every element.

def add(a: float) -> Callable[[float], float]:
    return lambda b: b + a

def subtract(a: float) -> Callable[[float], float]:
    return lambda b: b - a

def multiply(a: float) -> Callable[[float], float]:
    return lambda b: b * a

def divide(a: float) -> Callable[[float], float]:
    return lambda b: b / a

def mod(a: float) -> Callable[[float], float]:
    return lambda b: b % a

def concat(a: str) -> Callable[[str], str]:
    """Append a: list(map(concat("!"), ["hi"])) == ["hi!"]"""
    return lambda b: b + a

__all__ = (
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
)
