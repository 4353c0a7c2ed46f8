"""In-memory glyph grid backed by numpy arrays."""

import numpy as np
from numpy.typing import NDArray

from .base import Console, Color, BLACK, WHITE


class CellBuffer(Console):
    """
    Glyph grid console.

    Holds one glyph plus foreground and background colors per cell.
    The simulator window paints it every frame; tests inspect it
    directly.
    """

    def __init__(self, width: int = 80, height: int = 60) -> None:
        self._width = width
        self._height = height
        self.glyphs: NDArray[np.str_] = np.full((height, width), " ", dtype="<U1")
        self.fg: NDArray[np.uint8] = np.zeros((height, width, 3), dtype=np.uint8)
        self.bg: NDArray[np.uint8] = np.zeros((height, width, 3), dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def cls(self) -> None:
        self.cls_bg(BLACK)

    def cls_bg(self, color: Color) -> None:
        self.glyphs.fill(" ")
        self.fg[:, :] = WHITE
        self.bg[:, :] = color

    def set(self, x: int, y: int, fg: Color, bg: Color, glyph: str) -> None:
        if self.in_bounds(x, y):
            self.glyphs[y, x] = glyph
            self.fg[y, x] = fg
            self.bg[y, x] = bg

    def print(self, x: int, y: int, text: str) -> None:
        # Text keeps whatever background the row already has
        for offset, char in enumerate(text):
            px = x + offset
            if self.in_bounds(px, y):
                self.glyphs[y, px] = char
                self.fg[y, px] = WHITE

    # Inspection helpers

    def glyph_at(self, x: int, y: int) -> str:
        """Get the glyph drawn at a cell."""
        return str(self.glyphs[y, x])

    def row_text(self, y: int) -> str:
        """Get a row as a string with trailing blanks stripped."""
        return "".join(self.glyphs[y]).rstrip()

    def find(self, glyph: str) -> list[tuple[int, int]]:
        """List (x, y) of every cell holding glyph, row-major."""
        return [(int(x), int(y)) for y, x in np.argwhere(self.glyphs == glyph)]

    def column(self, x: int) -> str:
        """Get a column top to bottom."""
        return "".join(self.glyphs[:, x])
