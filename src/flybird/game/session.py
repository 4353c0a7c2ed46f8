"""
Game session - the per-tick loop of Fly Bird.

The presentation driver calls tick() once per frame with the elapsed
time and at most one key. The session advances physics at a fixed
cadence, draws through the console and switches between the menu,
playing and ending modes.
"""

import logging

from flybird.config.settings import WorldConfig
from flybird.console.base import Console, Key, NAVY
from flybird.core.events import Event, EventBus, EventType
from flybird.core.state import GameMode, StateMachine
from flybird.game.bird import Bird
from flybird.game.obstacle import Obstacle
from flybird.game.rng import RandomSource, SystemRandom

logger = logging.getLogger(__name__)

TITLE = "Welcome to Fly Bird"
PLAY_PROMPT = "(P) Play a game"
QUIT_PROMPT = "(Q) Quit"
FLAP_HINT = "Press SPACE to flap!"


class GameSession:
    """
    Owns the bird, the live obstacle and the score.

    Lifecycle:
        1. Created in MENU
        2. restart() starts a round in PLAYING
        3. A crash or a fall moves to ENDING, keeping the score
        4. restart() again, or quit() to raise the termination flag
    """

    def __init__(
        self,
        world: WorldConfig | None = None,
        rng: RandomSource | None = None,
        event_bus: EventBus | None = None,
    ) -> None:
        self.world = world or WorldConfig()
        self.rng = rng or SystemRandom()
        self.event_bus = event_bus or EventBus()
        self.state_machine = StateMachine(GameMode.MENU)

        self.bird = Bird.spawn(self.world)
        self.obstacle = Obstacle.spawn(self.world.screen_width, 0, self.rng, self.world)
        self.score = 0
        self.frame_time = 0.0
        self.quitting = False

    @property
    def mode(self) -> GameMode:
        return self.state_machine.mode

    def restart(self) -> None:
        """Start a fresh round, dropping everything from the previous one."""
        self.state_machine.transition(GameMode.PLAYING)
        self.frame_time = 0.0
        self.bird = Bird.spawn(self.world)
        self.obstacle = Obstacle.spawn(self.world.screen_width, 0, self.rng, self.world)
        self.score = 0
        logger.info("Round started")

    def quit(self) -> None:
        """Raise the termination flag for the driver."""
        self.quitting = True
        self.event_bus.emit(Event(EventType.SHUTDOWN, data={"score": self.score}))
        logger.info("Quit requested")

    def tick(self, console: Console, elapsed_ms: float, key: Key | None = None) -> None:
        """Advance one presentation frame.

        Args:
            console: Draw target for this frame
            elapsed_ms: Real time since the previous tick
            key: Key pressed during this frame, if any
        """
        mode = self.mode
        if mode == GameMode.MENU:
            self._main_menu(console, key)
        elif mode == GameMode.PLAYING:
            self._play(console, elapsed_ms, key)
        elif mode == GameMode.ENDING:
            self._dead(console, key)

    def _handle_menu_key(self, key: Key | None) -> None:
        if key == Key.PLAY:
            self.restart()
        elif key == Key.QUIT:
            self.quit()

    def _main_menu(self, console: Console, key: Key | None) -> None:
        console.cls()
        console.print_centered(5, TITLE)
        console.print_centered(9, PLAY_PROMPT)
        console.print_centered(12, QUIT_PROMPT)
        self._handle_menu_key(key)

    def _dead(self, console: Console, key: Key | None) -> None:
        console.cls()
        console.print_centered(5, "You're dead!")
        console.print_centered(7, f"You've earned {self.score} points.")
        console.print_centered(9, PLAY_PROMPT)
        console.print_centered(12, QUIT_PROMPT)
        self._handle_menu_key(key)

    def _play(self, console: Console, elapsed_ms: float, key: Key | None) -> None:
        console.cls_bg(NAVY)

        # Fixed-rate physics, independent of the frame rate
        self.frame_time += elapsed_ms
        if self.frame_time > self.world.physics_step_ms:
            self.frame_time = 0.0
            self.bird.gravity()

        if key == Key.FLAP:
            self.bird.flap()
            self.event_bus.emit(Event(EventType.FLAP, data={"x": self.bird.x, "y": self.bird.y}))

        self.bird.render(console)
        console.print(0, 0, FLAP_HINT)
        console.print(0, 1, f"Score: {self.score}")
        self.obstacle.render(console, self.bird.x, self.world.screen_height)

        if self.bird.x > self.obstacle.x:
            self.score += 1
            self.event_bus.emit(Event(EventType.SCORED, data={"score": self.score}))
            self.obstacle = Obstacle.spawn(
                self.bird.x + self.world.screen_width, self.score, self.rng, self.world
            )
            self.event_bus.emit(Event(
                EventType.OBSTACLE_SPAWNED,
                data={"x": self.obstacle.x, "gap_y": self.obstacle.gap_y, "size": self.obstacle.size},
            ))

        if self.bird.y > self.world.screen_height or self.obstacle.hit_obstacle(self.bird):
            self.state_machine.transition(GameMode.ENDING)
            self.event_bus.emit(Event(EventType.DIED, data={"score": self.score}))
            logger.info(f"Bird died with score {self.score}")
