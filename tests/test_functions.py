import itertools
import operator

import pytest
from kungfu import Nothing

from haskellite import (
    ConfigurationError,
    add,
    concat,
    curry,
    cycle,
    divide,
    fold1,
    head,
    init,
    intersperse,
    last,
    mod,
    multiply,
    repeat,
    scan,
    subtract,
    swap,
    swap_uncurried,
    tail,
    to,
    to_infinity,
    uncurry,
)


def test_curry_and_uncurry():
    curried = curry(operator.add)
    assert list(map(curried(1), [1, 2, 3])) == [2, 3, 4]
    assert uncurry(lambda a: lambda b: a + b)(2, 3) == 5


def test_swap():
    describe = lambda s, i: f"{s}, {i}"  # noqa: E731
    assert swap_uncurried(describe)(2, "hello") == "hello, 2"
    assert subtract(3)(4) == 1
    assert swap(subtract)(3)(4) == -1


def test_curried_operators():
    assert list(map(add(1), [1, 2, 3])) == [2, 3, 4]
    assert list(map(subtract(1), [1, 2, 3])) == [0, 1, 2]
    assert list(map(multiply(2), [1, 2, 3])) == [2, 4, 6]
    assert list(map(divide(2), [2, 4, 6])) == [1, 2, 3]
    assert list(map(mod(3), [3, 4, 5])) == [0, 1, 2]
    assert list(map(concat("!"), ["hi", "yo"])) == ["hi!", "yo!"]


def test_head_last_tail_init():
    assert head([1, 2, 3]).unwrap() == 1
    assert last([1, 2, 3]).unwrap() == 3
    assert tail([1, 2, 3]).unwrap() == [2, 3]
    assert init([1, 2, 3]).unwrap() == [1, 2]
    assert tail([1]).unwrap() == []

    for f in (head, last, tail, init):
        assert isinstance(f([]), Nothing)


def test_head_of_infinite_iterator():
    assert head(to_infinity(7)).unwrap() == 7


def test_fold1():
    assert fold1(operator.add, [1, 2, 3]).unwrap() == 6
    assert fold1(operator.sub, iter([10, 1, 2])).unwrap() == 7
    assert isinstance(fold1(operator.add, []), Nothing)


def test_scan():
    assert list(scan(operator.add, 0, [1, 2, 3])) == [0, 1, 3, 6]
    assert list(scan(operator.add, 0, [])) == [0]


def test_intersperse():
    assert list(intersperse([1, 2, 3], lambda _: 0)) == [1, 0, 2, 0, 3]
    assert list(intersperse([1, 2, 3], lambda i: i)) == [1, 0, 2, 1, 3]
    assert list(intersperse([1, 2, 3], lambda i: i, leading=True, trailing=True)) == [-1, 1, 0, 2, 1, 3, 2]
    assert list(intersperse([], lambda i: i)) == []
    assert list(intersperse([], lambda i: i, leading=True, trailing=True)) == [-1, 0]


def test_cycle():
    assert list(itertools.islice(cycle([1, 2, 3]), 7)) == [1, 2, 3, 1, 2, 3, 1]
    assert list(cycle([])) == []
    assert list(cycle(iter([1, 2]))) == [1, 2]


def test_repeat():
    assert list(itertools.islice(repeat("x"), 3)) == ["x", "x", "x"]


def test_to():
    assert to(1, 5) == [1, 2, 3, 4, 5]
    assert to(5, 1) == [5, 4, 3, 2, 1]
    assert to(3, -3) == [3, 2, 1, 0, -1, -2, -3]
    assert to(1, 5, step=3) == [1, 4, 7]
    assert to(1, 5, step=-3) == [1, 4, 7]
    assert to(2, 2) == [2]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"start": 1, "end": None},
        {"start": 1, "end": 5, "step": None},
        {"start": 1, "end": 5, "step": 0},
    ],
)
def test_to_rejects_invalid_arguments(kwargs):
    start = kwargs.pop("start")
    end = kwargs.pop("end")
    with pytest.raises(ConfigurationError):
        to(start, end, **kwargs)


def test_to_infinity():
    assert list(itertools.islice(to_infinity(0), 10)) == list(range(10))
    assert list(itertools.islice(to_infinity(1, step=-1), 4)) == [1, 0, -1, -2]
    with pytest.raises(ConfigurationError):
        to_infinity(1, step=None)


def test_every_exported_name_resolves():
    import haskellite

    missing = [name for name in haskellite.__all__ if not hasattr(haskellite, name)]
    assert missing == []
    assert "Predicate" not in haskellite.__all__
