import itertools
from collections import Counter

import pytest

from haskellite import (
    ConfigurationError,
    Mapped,
    Markov,
    RandomListItem,
    Weighted,
    random_bool,
    random_int,
    random_list_item,
    random_mapped,
    random_markov,
    random_wrapped_factory,
    randomized_list,
)

from .conftest import ITERATIONS, SEED


def test_wrapped_factory_is_lazy_and_called_once_per_pull(counter):
    variable = random_wrapped_factory(counter)
    assert counter.calls == 0

    assert variable.next() == 0
    assert counter.calls == 1
    assert variable.next() == 1
    assert counter.calls == 2


def test_wrapped_factory_rejects_non_callable():
    with pytest.raises(ConfigurationError):
        random_wrapped_factory(42)


def test_mapped_calls_mapper_once_per_pull(counting_variable, counter):
    seen = []

    def mapper(value: int) -> str:
        seen.append(value)
        return f"#{value}"

    variable = random_mapped(counting_variable, mapper)
    assert [variable.next() for _ in range(3)] == ["#0", "#1", "#2"]
    assert seen == [0, 1, 2]
    assert counter.calls == 3


def test_mapped_propagates_mapper_errors(counting_variable):
    def mapper(value: int) -> int:
        raise KeyError(value)

    variable = Mapped(counting_variable, mapper)
    with pytest.raises(KeyError):
        variable.next()


def test_mapped_requires_random_variable_upstream():
    with pytest.raises(ConfigurationError):
        Mapped([1, 2, 3], str)


def test_randomized_list_returns_fresh_permutations():
    items = [1, 2, 3, 4, 5]
    variable = randomized_list(items, seed=SEED)

    first = variable.next()
    second = variable.next()
    assert sorted(first) == items
    assert sorted(second) == items
    assert first is not items
    assert first is not second

    first.append(6)
    assert items == [1, 2, 3, 4, 5]
    assert sorted(second) == items
    assert sorted(variable.next()) == items


def test_randomized_list_copies_input():
    items = [1, 2, 3]
    variable = randomized_list(items)
    items.append(4)
    assert sorted(variable.next()) == [1, 2, 3]


def test_randomized_list_is_reproducible_with_seed():
    a = randomized_list(list(range(20)), seed=SEED)
    b = randomized_list(list(range(20)), seed=SEED)
    assert [a.next() for _ in range(5)] == [b.next() for _ in range(5)]


def test_list_variables_reject_empty_input():
    with pytest.raises(ConfigurationError):
        randomized_list([])
    with pytest.raises(ConfigurationError):
        random_list_item([])


def test_random_list_item_picks_from_items():
    items = ["rock", "paper", "scissors"]
    variable = RandomListItem(items, seed=SEED)
    values = list(itertools.islice(variable, 300))
    assert set(values) == set(items)


def test_random_list_item_single_element():
    assert list(itertools.islice(random_list_item(["only"]), ITERATIONS)) == ["only"] * ITERATIONS


def test_markov_recurrence():
    variable = random_markov(lambda x: x + 1, initial=0)
    assert [variable.next() for _ in range(5)] == [1, 2, 3, 4, 5]


def test_markov_first_pull_fails_without_initial_value():
    def step(value: int | None) -> int:
        if value is None:
            raise ValueError("no predecessor")
        return value + 1

    variable = Markov(step)
    with pytest.raises(ValueError, match="no predecessor"):
        variable.next()


def test_markov_passes_none_without_initial_value():
    variable = Markov(lambda previous: 0 if previous is None else previous * 2 + 1)
    assert [variable.next() for _ in range(4)] == [0, 1, 3, 7]
    assert variable.previous == 7


def test_markov_over_random_steps():
    steps = random_int(max=3, offset=-1, seed=SEED)
    walk = random_markov(lambda position: position + steps.next(), initial=0)
    positions = [walk.next() for _ in range(100)]
    assert all(abs(b - a) <= 1 for a, b in itertools.pairwise([0, *positions]))


def test_weighted_single_candidate():
    assert Weighted({"hello": 1}).next() == "hello"
    assert Weighted({"hello": 9999}).next() == "hello"


def test_weighted_skips_zero_weights():
    variable = Weighted({"never": 0, "always": 2.5, "also never": 0}, seed=SEED)
    assert set(itertools.islice(variable, 200)) == {"always"}


@pytest.mark.parametrize(
    "weights",
    [
        {},
        {"hello": -1},
        {"hello": 0},
        {"hello": 0, "world": 0.0},
        {"hello": 1, "world": 2.2, "!": 3, "never exists": 0, "fail": -4},
        {"hello": float("nan")},
        {"hello": float("inf")},
        {"hello": "1"},
        {"hello": 1e308, "world": 1e308},
    ],
)
def test_weighted_rejects_invalid_weights(weights):
    with pytest.raises(ConfigurationError):
        Weighted(weights)


def test_weighted_follows_distribution():
    variable = Weighted({"hello": 1, "world": 3}, seed=SEED)
    counts = Counter(itertools.islice(variable, 4000))
    assert set(counts) == {"hello", "world"}
    assert 0.2 < counts["hello"] / 4000 < 0.3


def test_weighted_exposes_read_only_weights():
    source = {"a": 1, "b": 2}
    variable = Weighted(source)
    source["c"] = 3

    assert dict(variable.weights) == {"a": 1, "b": 2}
    assert variable.total_weight == 3
    with pytest.raises(TypeError):
        variable.weights["a"] = 5


class FixedDouble:
    def __init__(self, value: float) -> None:
        self.value = value

    def next(self) -> float:
        return self.value


@pytest.mark.parametrize(
    ("u", "expected"),
    [
        (0.0, "a"),
        (0.24, "a"),
        (0.25, "b"),
        (0.74, "b"),
        (0.75, "c"),
        (0.999, "c"),
    ],
)
def test_weighted_half_open_intervals(u, expected):
    variable = Weighted({"a": 1, "b": 2, "c": 1})
    variable._variable = FixedDouble(u)
    assert variable.next() == expected


def test_weighted_falls_back_to_last_candidate():
    variable = Weighted({"a": 1, "b": 1, "zero": 0})
    # target == total lands on no interval
    variable._variable = FixedDouble(1.0)
    assert variable.next() == "zero"


def test_bool_upstream_for_mapped_strings():
    words = random_mapped(random_bool(seed=SEED), lambda b: "yes" if b else "no")
    assert set(itertools.islice(words, 100)) == {"yes", "no"}
