"""
Snake controls - keyboard mapping and button availability.

Keys are identified by name (as returned by pygame.key.name) so the
mapping can be used and tested without a display.
"""
from dataclasses import dataclass
from typing import Dict, Optional

from .game import Direction, RunState, SnakeGame


KEY_MAP: Dict[str, Direction] = {
    "up": Direction.UP,
    "down": Direction.DOWN,
    "left": Direction.LEFT,
    "right": Direction.RIGHT,
    "w": Direction.UP,
    "s": Direction.DOWN,
    "a": Direction.LEFT,
    "d": Direction.RIGHT,
}

TOGGLE_KEY = "space"


def direction_for_key(key_name: str) -> Optional[Direction]:
    """Return the direction bound to a key, or None for unbound keys."""
    return KEY_MAP.get(key_name.lower())


def is_toggle_key(key_name: str) -> bool:
    return key_name.lower() == TOGGLE_KEY


@dataclass(frozen=True)
class ControlState:
    """Availability and labels of the Start, Pause and Reset controls."""

    start_enabled: bool
    start_label: str
    pause_enabled: bool
    pause_label: str
    reset_enabled: bool

    @classmethod
    def from_game(cls, game: SnakeGame) -> "ControlState":
        """Derive control availability from the game's run state."""
        state = game.run_state
        over = state is RunState.GAME_OVER
        running = state is RunState.RUNNING

        return cls(
            start_enabled=not (running or (game.has_started and not over)),
            start_label="Play Again" if over else "Start",
            pause_enabled=game.has_started and not over,
            pause_label="Resume" if state is RunState.PAUSED else "Pause",
            reset_enabled=game.has_started and not running,
        )
