"""
Abstract presentation interface.

The game draws through this contract; the pygame window and the
in-memory cell buffer used by tests both implement it.
"""

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import Tuple

Color = Tuple[int, int, int]

BLACK: Color = (0, 0, 0)
WHITE: Color = (255, 255, 255)
NAVY: Color = (0, 0, 128)
RED: Color = (255, 0, 0)
YELLOW: Color = (255, 255, 0)


class Key(Enum):
    """Semantic key bindings understood by the game."""
    PLAY = auto()   # Start / restart
    QUIT = auto()
    FLAP = auto()


class Console(ABC):
    """Abstract base class for glyph-grid consoles."""

    @property
    @abstractmethod
    def width(self) -> int:
        """Console width in cells."""
        ...

    @property
    @abstractmethod
    def height(self) -> int:
        """Console height in cells."""
        ...

    @abstractmethod
    def cls(self) -> None:
        """Clear console to black."""
        ...

    @abstractmethod
    def cls_bg(self, color: Color) -> None:
        """Clear console to a background color."""
        ...

    @abstractmethod
    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str) -> None:
        """
        Set a single cell.

        Cells outside the console are ignored.
        """
        ...

    @abstractmethod
    def print(self, x: int, y: int, text: str) -> None:
        """Print left-aligned text starting at (x, y)."""
        ...

    def print_centered(self, y: int, text: str) -> None:
        """Print text horizontally centered on row y."""
        self.print((self.width - len(text)) // 2, y, text)
