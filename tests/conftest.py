import pytest

from haskellite import RandomVariable, random_wrapped_factory

SEED = 12345
ITERATIONS = 10


class CountingFactory:
    """Zero-arg producer returning 0, 1, 2, ... and counting its calls."""

    def __init__(self) -> None:
        self.calls = 0

    def __call__(self) -> int:
        value = self.calls
        self.calls += 1
        return value


@pytest.fixture
def counter() -> CountingFactory:
    return CountingFactory()


@pytest.fixture
def counting_variable(counter: CountingFactory) -> RandomVariable[int]:
    return random_wrapped_factory(counter)
