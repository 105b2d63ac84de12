"""
Precached variable
==================

Bounded lookahead over another variable. Values are generated ahead of demand
and handed out in exactly the order upstream produced them.
"""

from __future__ import annotations

import logging
from collections import deque

from .._errors import ConfigurationError
from .._helpers import require_int
from .base import RandomVariable

logger = logging.getLogger(__name__)


class Precached[T](RandomVariable[T]):
    """
    Keep at least `depth` upstream values buffered.

    - construction and any depth increase pull upstream until the buffer
      holds `depth` values
    - a depth decrease evicts nothing; `depth` is a lower bound on `len(self)`
    - `next()` pops the oldest buffered value and tops the buffer back up;
      with an empty buffer (depth 0) it pulls upstream directly

    Example:
        cached = Precached(random_int(), depth=5)  # upstream pulled 5 times
        cached.depth = 20                          # pulled 15 more times
        cached.depth = 5                           # nothing happens, 20 stay buffered
    """

    __slots__ = ("_upstream", "_depth", "_queue")

    def __init__(self, upstream: RandomVariable[T], depth: int = 10) -> None:
        if not isinstance(upstream, RandomVariable):
            raise ConfigurationError("upstream", "must be a RandomVariable")
        self._upstream = upstream
        self._queue: deque[T] = deque()
        self._depth = 0
        self.depth = depth

    @property
    def upstream(self) -> RandomVariable[T]:
        return self._upstream

    @property
    def depth(self) -> int:
        """Target buffer depth; a floor on the number of buffered values."""
        return self._depth

    @depth.setter
    def depth(self, depth: int) -> None:
        self._depth = require_int(depth, name="depth", minimum=0)
        self._fill()

    def next(self) -> T:
        if not self._queue:
            return self._upstream.next()

        value = self._queue.popleft()
        try:
            self._fill()
        except BaseException:
            # Refill failed: value stays at the head of the queue
            self._queue.appendleft(value)
            raise
        return value

    def peek(self) -> T:
        """
        Value the next `next()` call will return, without consuming it.

        With an empty buffer one value is pulled and buffered, which leaves the
        emission order unchanged.
        """
        if not self._queue:
            self._queue.append(self._upstream.next())
        return self._queue[0]

    def __len__(self) -> int:
        return len(self._queue)

    def __repr__(self) -> str:
        return f"Precached({self._upstream!r}, depth={self._depth}, buffered={len(self._queue)})"

    def _fill(self) -> None:
        missing = self._depth - len(self._queue)
        if missing <= 0:
            return

        for _ in range(missing):
            self._queue.append(self._upstream.next())
        logger.debug("Precached: pulled %d value(s) to reach depth %d", missing, self._depth)


__all__ = ("Precached",)
