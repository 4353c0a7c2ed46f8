"""Desktop window driving the game with pygame."""
