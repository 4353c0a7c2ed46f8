"""Presentation boundary for Fly Bird."""

from .base import Console, Color, Key, BLACK, WHITE, NAVY, RED, YELLOW
from .buffer import CellBuffer

__all__ = [
    "Console", "Color", "Key", "CellBuffer",
    "BLACK", "WHITE", "NAVY", "RED", "YELLOW",
]
