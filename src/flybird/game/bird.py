"""The player-controlled bird."""

from dataclasses import dataclass, field
import logging

from flybird.config.settings import WorldConfig
from flybird.console.base import Console, BLACK, YELLOW

logger = logging.getLogger(__name__)

GLYPH = "@"


@dataclass
class Bird:
    """
    Bird position and vertical velocity.

    ``x`` is the world position and only ever grows, one cell per
    physics step. ``y`` grows downwards and never goes above row 0.
    """

    x: int
    y: int
    velocity: float = 0.0
    world: WorldConfig = field(default_factory=WorldConfig, repr=False, compare=False)

    @classmethod
    def spawn(cls, world: WorldConfig) -> "Bird":
        """Create a bird at the world's start cell."""
        return cls(x=world.bird_start_x, y=world.bird_start_y, world=world)

    def gravity(self) -> None:
        """Apply one physics step."""
        self.velocity = min(self.velocity + self.world.gravity_step, self.world.gravity_cap)
        self.x += 1
        self.y += int(self.velocity)

        # No floor clamp: falling out of the world is a death condition
        if self.y < 0:
            self.y = 0

    def flap(self) -> None:
        """Replace the current velocity with the upward impulse."""
        self.velocity = self.world.flap_impulse
        logger.debug(f"Flap at x={self.x} y={self.y}")

    def render(self, console: Console) -> None:
        # Pinned to column 0, the world scrolls instead
        console.set(0, self.y, YELLOW, BLACK, GLYPH)
