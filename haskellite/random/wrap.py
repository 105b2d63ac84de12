"""Stateless combinators

Adapt a plain producer into a RandomVariable, or transform the values of an
existing one."""

from __future__ import annotations

from .._errors import ConfigurationError
from .._helpers import require_callable
from .._types import Factory, Mapper
from .base import RandomVariable

class WrappedFactory[T](RandomVariable[T]):
    """
    RandomVariable backed by a user-supplied zero-arg producer.

    The producer is called exactly once per pull and nothing is cached, so the
    distribution is entirely the producer's business.
    """

    __slots__ = ("_factory",)

    def __init__(self, factory: Factory[T], /) -> None:
        require_callable(factory, name="factory")
        self._factory = factory

    def next(self) -> T:
        return self._factory()

class Mapped[T, R](RandomVariable[R]):
    """Pull from upstream, apply mapper once, return the mapped value."""

    __slots__ = ("_upstream", "_mapper")

    def __init__(self, upstream: RandomVariable[T], mapper: Mapper[T, R], /) -> None:
        if not isinstance(upstream, RandomVariable):
            raise ConfigurationError("upstream", "must be a RandomVariable")
        require_callable(mapper, name="mapper")
        self._upstream = upstream
        self._mapper = mapper

    @property
    def upstream(self) -> RandomVariable[T]:
        return self._upstream

    def next(self) -> R:
        return self._mapper(self._upstream.next())

def random_wrapped_factory[T](factory: Factory[T]) -> RandomVariable[T]:
    """
    Wrap a zero-arg producer.

    Example:
        random_wrapped_factory(lambda: 1).next()  # 1
        clock = random_wrapped_factory(lambda: time.monotonic_ns() % 2 == 0)
    """
    return WrappedFactory(factory)

def random_mapped[T, R](upstream: RandomVariable[T], mapper: Mapper[T, R]) -> RandomVariable[R]:
    """
    Map values of another variable.

    Example:
        greeting = random_mapped(random_bool(), lambda b: "hello" if b else "goodbye")
    """
    return Mapped(upstream, mapper)

__all__ = ("WrappedFactory", "Mapped", "random_wrapped_factory", "random_mapped")
