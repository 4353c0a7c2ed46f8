"""
Game window using pygame.

Drives the session at a fixed frame rate and paints the glyph grid.

Keyboard Mapping:
    P: Play / restart
    Q: Quit (through the session)
    SPACE: Flap
    ESC or closing the window: Exit immediately
"""

import asyncio
import logging
from dataclasses import dataclass

import pygame

from ..console.base import Color, Key
from ..console.buffer import CellBuffer
from ..core.events import Event, EventType
from ..game.session import GameSession

logger = logging.getLogger(__name__)

KEY_BINDINGS: dict[int, Key] = {
    pygame.K_p: Key.PLAY,
    pygame.K_q: Key.QUIT,
    pygame.K_SPACE: Key.FLAP,
}


def map_key(pygame_key: int) -> Key | None:
    """Translate a pygame key code into a game key."""
    return KEY_BINDINGS.get(pygame_key)


class WindowInitError(RuntimeError):
    """The window or its font could not be created."""


@dataclass
class WindowConfig:
    """Window configuration."""
    title: str = "Fly Bird"
    fps: int = 30
    cell_size: int = 12  # pixels per glyph cell


class SimulatorWindow:
    """
    Desktop window presenting a GameSession.

    Every frame: poll input, tick the session into the cell buffer,
    paint the buffer.
    """

    def __init__(self, session: GameSession, config: WindowConfig | None = None) -> None:
        self.session = session
        self.config = config or WindowConfig()
        self.console = CellBuffer(session.world.screen_width, session.world.screen_height)

        self._screen: pygame.Surface | None = None
        self._clock: pygame.time.Clock | None = None
        self._font: pygame.font.Font | None = None
        self._glyph_cache: dict[tuple[str, Color], pygame.Surface] = {}
        self._running = False
        self._frame_count = 0

        self.session.event_bus.subscribe(EventType.SHUTDOWN, self._on_shutdown)

        logger.info("SimulatorWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create the window.

        Raises:
            WindowInitError: if the display or font cannot be set up
        """
        size = (
            self.console.width * self.config.cell_size,
            self.console.height * self.config.cell_size,
        )
        try:
            pygame.init()
            pygame.display.set_caption(self.config.title)
            self._screen = pygame.display.set_mode(size, pygame.DOUBLEBUF)
            self._clock = pygame.time.Clock()
            pygame.font.init()
            self._font = pygame.font.SysFont("monospace", self.config.cell_size, bold=True)
        except pygame.error as e:
            pygame.quit()
            raise WindowInitError(f"Cannot open {size[0]}x{size[1]} window: {e}") from e

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _on_shutdown(self, event: Event) -> None:
        self.stop()

    def _poll_key(self) -> Key | None:
        """Process pygame events and return the first game key of the frame."""
        key = None
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.stop()
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.stop()
                elif key is None:
                    key = map_key(event.key)
        return key

    def _glyph_surface(self, glyph: str, color: Color) -> pygame.Surface:
        cache_key = (glyph, color)
        surface = self._glyph_cache.get(cache_key)
        if surface is None:
            surface = self._font.render(glyph, True, color)
            self._glyph_cache[cache_key] = surface
        return surface

    def _render(self) -> None:
        """Paint the cell buffer."""
        if not self._screen:
            return

        cell = self.config.cell_size

        # Backgrounds: one pixel per cell, scaled up
        bg = pygame.surfarray.make_surface(self.console.bg.swapaxes(0, 1))
        self._screen.blit(pygame.transform.scale(bg, self._screen.get_size()), (0, 0))

        glyphs = self.console.glyphs
        fg = self.console.fg
        for y in range(self.console.height):
            for x in range(self.console.width):
                glyph = str(glyphs[y, x])
                if glyph == " ":
                    continue
                color = tuple(int(c) for c in fg[y, x])
                surface = self._glyph_surface(glyph, color)
                rect = surface.get_rect(center=(x * cell + cell // 2, y * cell + cell // 2))
                self._screen.blit(surface, rect)

        pygame.display.flip()

    async def run(self) -> None:
        """Main loop."""
        self._init_pygame()
        self._running = True

        logger.info("Window loop started")

        while self._running:
            key = self._poll_key()
            if not self._running:
                break

            elapsed_ms = float(self._clock.get_time()) if self._clock else 0.0
            self.session.tick(self.console, elapsed_ms, key)
            if self.session.quitting:
                break

            self._render()

            if self._clock:
                self._clock.tick(self.config.fps)

            self._frame_count += 1

            # Yield to other tasks
            await asyncio.sleep(0)

        self._cleanup()

    def _cleanup(self) -> None:
        """Clean up pygame resources."""
        pygame.quit()
        logger.info(f"Window closed after {self._frame_count} frames")

    def stop(self) -> None:
        """Stop the loop."""
        self._running = False
