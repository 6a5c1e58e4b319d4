"""Shared test fixtures for the diceroller test suite.

``scripted_roller`` builds a Roller whose random source replays a fixed list
of draws, so roll results can be asserted exactly. The source records every
``randint`` call in ``calls`` for checking draw bounds and counts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

import pytest

from diceroller.dice import Roller
from diceroller.random_source import reset_random_source


class ScriptedSource:
    """Random source that returns pre-set values in order."""

    def __init__(self, values: Iterable[int]) -> None:
        self._values = iter(values)
        self.calls: list[tuple[int, int]] = []

    def randint(self, low: int, high: int) -> int:
        self.calls.append((low, high))
        return next(self._values)


@pytest.fixture
def scripted_roller() -> Callable[[Iterable[int]], tuple[Roller, ScriptedSource]]:
    def _make(values: Iterable[int]) -> tuple[Roller, ScriptedSource]:
        source = ScriptedSource(values)
        return Roller(source), source

    return _make


@pytest.fixture(autouse=True)
def fresh_random_source():
    """Drop the cached shared source so settings changes take effect."""
    reset_random_source()
    yield
    reset_random_source()
