"""
Snake game configuration.

Gameplay values are fixed constants; only the render style is
selectable at runtime.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, List, Tuple


CELL_SIZE = 20                  # Pixels per grid cell
BOARD_PIXELS = 400              # Board is square
BOARD_CELLS = BOARD_PIXELS // CELL_SIZE
TICK_MS = 110                   # Milliseconds per move
FOOD_REWARD = 10
START_SNAKE: List[Tuple[int, int]] = [(8, 10), (7, 10), (6, 10)]
RENDER_STYLES = ("classic", "neon")


@dataclass
class SnakeConfig:
    """Configuration for Snake game."""

    board_cells: int = BOARD_CELLS
    cell_size: int = CELL_SIZE
    tick_ms: int = TICK_MS
    food_reward: int = FOOD_REWARD
    start_snake: List[Tuple[int, int]] = field(default_factory=lambda: list(START_SNAKE))
    style: str = "neon"

    @property
    def board_pixels(self) -> int:
        """Side length of the board in pixels."""
        return self.board_cells * self.cell_size

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SnakeConfig":
        """Create config from dictionary; only the style is honored."""
        style = data.get("style", "neon")
        if style not in RENDER_STYLES:
            raise ValueError(f"Unknown render style: {style}")
        return cls(style=style)
