"""Random number sources for obstacle placement."""

import random
from typing import Protocol


class RandomSource(Protocol):
    """Supplies uniform integers in a half-open range."""

    def range(self, low: int, high: int) -> int:
        """Return an integer in [low, high)."""
        ...


class SystemRandom:
    """RandomSource backed by the standard random module."""

    def __init__(self, seed: int | None = None) -> None:
        self._random = random.Random(seed)

    def range(self, low: int, high: int) -> int:
        return self._random.randrange(low, high)
