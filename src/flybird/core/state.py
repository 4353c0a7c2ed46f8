"""
State machine for the Fly Bird session flow.

States:
    MENU: Title screen, waiting for the player to start
    PLAYING: A round is in progress
    ENDING: The bird died, final score is shown
"""

from enum import Enum, auto
from typing import Callable
import logging

logger = logging.getLogger(__name__)


class GameMode(Enum):
    """Session modes."""
    MENU = auto()
    PLAYING = auto()
    ENDING = auto()


Listener = Callable[[GameMode, GameMode], None]


class StateMachine:
    """
    Tracks the current game mode and validates transitions.

    Listeners are notified after every successful transition with
    the old and new mode.
    """

    # Valid mode transitions
    VALID_TRANSITIONS: list[tuple[GameMode, GameMode]] = [
        # From MENU
        (GameMode.MENU, GameMode.PLAYING),

        # From PLAYING
        (GameMode.PLAYING, GameMode.PLAYING),  # Restart mid-round
        (GameMode.PLAYING, GameMode.ENDING),

        # From ENDING
        (GameMode.ENDING, GameMode.PLAYING),  # Play again
    ]

    def __init__(self, initial_mode: GameMode = GameMode.MENU) -> None:
        self._mode = initial_mode
        self._listeners: list[Listener] = []
        self._valid_transitions = set(self.VALID_TRANSITIONS)
        logger.debug(f"StateMachine initialized with mode: {initial_mode.name}")

    @property
    def mode(self) -> GameMode:
        """Get current mode."""
        return self._mode

    def can_transition(self, to_mode: GameMode) -> bool:
        """Check if transition to given mode is valid."""
        return (self._mode, to_mode) in self._valid_transitions

    def transition(self, to_mode: GameMode) -> bool:
        """
        Attempt to transition to a new mode.

        Args:
            to_mode: Target mode

        Returns:
            True if transition successful, False otherwise
        """
        if not self.can_transition(to_mode):
            logger.warning(
                f"Invalid transition: {self._mode.name} -> {to_mode.name}"
            )
            return False

        old_mode = self._mode
        self._mode = to_mode

        logger.info(f"Mode transition: {old_mode.name} -> {to_mode.name}")
        self._notify(old_mode, to_mode)
        return True

    def add_listener(self, callback: Listener) -> None:
        """Add a mode change listener."""
        self._listeners.append(callback)

    def remove_listener(self, callback: Listener) -> None:
        """Remove a mode change listener."""
        if callback in self._listeners:
            self._listeners.remove(callback)

    def _notify(self, old_mode: GameMode, new_mode: GameMode) -> None:
        for listener in self._listeners:
            try:
                listener(old_mode, new_mode)
            except Exception as e:
                logger.error(f"Error in mode listener: {e}")
