"""Fly Bird - a minimal side-scrolling reflex game."""

__version__ = "0.1.0"
