"""Gameplay: bird, obstacles and the session loop."""

from .bird import Bird
from .obstacle import Obstacle
from .rng import RandomSource, SystemRandom
from .session import GameSession

__all__ = ["Bird", "Obstacle", "RandomSource", "SystemRandom", "GameSession"]
