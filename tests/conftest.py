"""Shared test fixtures."""

import itertools

import pytest

from py_peaks.config.mountain_config import StageSpec


class ScriptedPRNG:
    """Random source that replays a fixed list of values, cycling when exhausted."""

    def __init__(self, values):
        self._values = itertools.cycle(values)
        self.call_count = 0

    def random(self):
        self.call_count += 1
        return next(self._values)


@pytest.fixture
def scripted():
    """Factory for scripted random sources."""
    return ScriptedPRNG


@pytest.fixture
def stage():
    """An 80x100 stage; nine points land on every 10 x-units."""
    return StageSpec(width=80, height=100)
