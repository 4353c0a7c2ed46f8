"""Gap obstacles."""

from dataclasses import dataclass
import logging

from flybird.config.settings import WorldConfig
from flybird.console.base import Console, BLACK, RED
from flybird.game.bird import Bird
from flybird.game.rng import RandomSource

logger = logging.getLogger(__name__)

GLYPH = "|"


@dataclass
class Obstacle:
    """A vertical wall at world column ``x`` with a gap centered on ``gap_y``."""

    x: int
    gap_y: int
    size: int

    @classmethod
    def spawn(
        cls,
        x: int,
        score: int,
        rng: RandomSource,
        world: WorldConfig,
    ) -> "Obstacle":
        """Create an obstacle whose gap narrows as the score grows.

        Args:
            x: World column of the wall
            score: Current score, each point shrinks the gap by one cell
            rng: Source for the gap center
            world: Gap range and size limits

        Returns:
            New obstacle with ``size >= world.min_gap_size``
        """
        obstacle = cls(
            x=x,
            gap_y=rng.range(world.gap_min, world.gap_max),
            size=max(world.min_gap_size, world.base_gap_size - score),
        )
        logger.debug(f"Obstacle spawned: {obstacle}")
        return obstacle

    @property
    def half_size(self) -> int:
        return self.size // 2

    def render(self, console: Console, bird_x: int, world_height: int) -> None:
        """Draw the wall relative to the bird, leaving the gap empty."""
        screen_x = self.x - bird_x
        half_size = self.half_size

        # Upper part
        for y in range(0, self.gap_y - half_size):
            console.set(screen_x, y, RED, BLACK, GLYPH)

        # Lower part
        for y in range(self.gap_y + half_size, world_height):
            console.set(screen_x, y, RED, BLACK, GLYPH)

    def hit_obstacle(self, bird: Bird) -> bool:
        """Check whether the bird crashes into this wall.

        Only tested on the wall's exact column. The bird has no height
        of its own, the gap's half size is applied to its position.
        """
        half_size = self.half_size
        does_x_match = bird.x == self.x
        bird_above_gap = bird.y + half_size < self.gap_y
        bird_below_gap = bird.y - half_size > self.gap_y
        return does_x_match and (bird_above_gap or bird_below_gap)
