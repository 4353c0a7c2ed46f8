"""Shared fixtures."""

import pytest

from flybird.config.settings import WorldConfig
from flybird.console.buffer import CellBuffer
from flybird.game.session import GameSession


class SequenceRandom:
    """Deterministic RandomSource cycling through fixed values."""

    def __init__(self, values):
        self._values = list(values)
        self.calls = []

    def range(self, low, high):
        value = self._values[len(self.calls) % len(self._values)]
        self.calls.append((low, high))
        return value


@pytest.fixture
def world():
    return WorldConfig()


@pytest.fixture
def console(world):
    return CellBuffer(world.screen_width, world.screen_height)


@pytest.fixture
def rng():
    return SequenceRandom([20])


@pytest.fixture
def session(world, rng):
    return GameSession(world=world, rng=rng)
