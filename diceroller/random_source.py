"""Random source abstraction for the dice simulator.

The simulator only needs "an integer in [low, high]". Anything with a
``randint`` method of that shape can be passed to :class:`diceroller.dice.Roller`,
which is how tests replay fixed draws.
"""

from __future__ import annotations

import logging
import random
import threading
import time
from typing import Protocol

from diceroller.config import settings

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Interface for drawing uniform integers."""

    def randint(self, low: int, high: int) -> int:
        """Return a uniform integer N with low <= N <= high."""
        ...


class LockedRandomSource:
    """``random.Random`` wrapper that serialises draws behind a lock.

    Args:
        seed: Seed for the generator. ``None`` seeds from ``time.time_ns()``.
    """

    def __init__(self, seed: int | None = None) -> None:
        if seed is None:
            seed = time.time_ns()
        self._seed = seed
        self._random = random.Random(seed)
        self._lock = threading.Lock()

    @property
    def seed(self) -> int:
        return self._seed

    def randint(self, low: int, high: int) -> int:
        with self._lock:
            return self._random.randint(low, high)


_shared_source: LockedRandomSource | None = None
_shared_lock = threading.Lock()


def get_random_source() -> LockedRandomSource:
    """Return the process-wide random source, creating it on first use.

    Uses ``settings.seed`` when set, otherwise a clock-based seed. Concurrent
    first calls all receive the same instance.
    """
    global _shared_source
    if _shared_source is None:
        with _shared_lock:
            if _shared_source is None:
                _shared_source = LockedRandomSource(settings.seed)
                logger.debug("Created shared random source (fixed seed: %s)", settings.seed is not None)
    return _shared_source


def reset_random_source() -> None:
    """Drop the shared source so the next call rebuilds it from settings."""
    global _shared_source
    with _shared_lock:
        _shared_source = None
