"""
Snake Game Core - Pure game logic without rendering or timing.

The game advances only when step() is called. Run control (start, pause,
resume, reset) is a set of plain state transitions; the session decides
when ticks happen.
"""
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Dict, Any
import logging
import random

from ...core.game_interface import GameInterface
from .config import SnakeConfig

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Snake movement directions as (dx, dy) unit vectors."""
    RIGHT = (1, 0)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    UP = (0, -1)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]

    @property
    def opposite(self) -> "Direction":
        """The direction pointing the other way."""
        return Direction((-self.dx, -self.dy))

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.dx, "y": self.dy}


class RunState(Enum):
    """Lifecycle of a single game."""
    NOT_STARTED = "not_started"
    RUNNING = "running"
    PAUSED = "paused"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class Point:
    """A cell on the game grid."""
    x: int
    y: int

    def moved(self, direction: Direction) -> "Point":
        """Return the neighbouring cell in the given direction."""
        return Point(self.x + direction.dx, self.y + direction.dy)

    def to_dict(self) -> Dict[str, int]:
        """Convert to dictionary for serialization."""
        return {"x": self.x, "y": self.y}


@dataclass
class StepResult:
    """Outcome of a single tick."""
    moved: bool = False
    ate_food: bool = False
    game_over: bool = False
    score: int = 0


class SnakeGame(GameInterface):
    """
    Core Snake game logic.

    The snake moves one cell per tick in its current direction and grows
    by one segment for every food item eaten. The game ends when the head
    leaves the board or lands on the body.
    """

    def __init__(self, config: Optional[SnakeConfig] = None, rng: Optional[random.Random] = None):
        """
        Initialize the game.

        Args:
            config: Gameplay constants (defaults to the standard board)
            rng: Random source for food placement
        """
        self.config = config or SnakeConfig()
        self.width = self.config.board_cells
        self.height = self.config.board_cells
        self._rng = rng or random.Random()

        # Game state (initialized in _reset_board)
        self.direction: Direction = Direction.RIGHT
        self.pending_direction: Direction = Direction.RIGHT
        self.snake: List[Point] = []
        self.food: Optional[Point] = None
        self.score: int = 0
        self.frame_count: int = 0
        self.run_state: RunState = RunState.NOT_STARTED

        self._reset_board()

    # ------------------------------------------------------------------
    # Derived flags
    # ------------------------------------------------------------------

    @property
    def head(self) -> Point:
        return self.snake[0]

    @property
    def has_started(self) -> bool:
        return self.run_state is not RunState.NOT_STARTED

    @property
    def is_running(self) -> bool:
        return self.run_state is RunState.RUNNING

    @property
    def is_paused(self) -> bool:
        return self.run_state is RunState.PAUSED

    @property
    def is_game_over(self) -> bool:
        return self.run_state is RunState.GAME_OVER

    # ------------------------------------------------------------------
    # Run control
    # ------------------------------------------------------------------

    def _reset_board(self):
        """Fresh snake, direction, score and food."""
        self.snake = [Point(x, y) for x, y in self.config.start_snake]
        self.direction = Direction.RIGHT
        self.pending_direction = Direction.RIGHT
        self.score = 0
        self.frame_count = 0
        self._place_food()

    def reset(self) -> bool:
        """Return to NOT_STARTED with a fresh board. No-op if already there."""
        if self.run_state is RunState.NOT_STARTED:
            return False

        self.run_state = RunState.NOT_STARTED
        self._reset_board()
        logger.debug("Game reset")
        return True

    def start(self) -> bool:
        """
        Start running.

        Starting after a game over resets the board first. Starting a
        paused game resumes it.
        """
        if self.run_state is RunState.RUNNING:
            return False

        if self.run_state is RunState.GAME_OVER:
            self.reset()

        self.run_state = RunState.RUNNING
        logger.debug("Game started")
        return True

    def pause(self) -> bool:
        if self.run_state is not RunState.RUNNING:
            return False
        self.run_state = RunState.PAUSED
        return True

    def resume(self) -> bool:
        if self.run_state is not RunState.PAUSED:
            return False
        self.run_state = RunState.RUNNING
        return True

    def toggle_pause(self) -> bool:
        """Pause when running, resume when paused, otherwise do nothing."""
        if self.run_state is RunState.RUNNING:
            return self.pause()
        return self.resume()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def change_direction(self, direction: Direction) -> bool:
        """
        Buffer a direction for the next tick.

        A direction opposite to the current one is rejected, as is any
        input once the game is over.

        Returns:
            True if the pending direction was updated
        """
        if self.run_state is RunState.GAME_OVER:
            return False

        if direction == self.direction.opposite:
            return False

        self.pending_direction = direction
        return True

    # ------------------------------------------------------------------
    # Update
    # ------------------------------------------------------------------

    def _place_food(self):
        """Place food at a random cell not on the snake."""
        occupied = set(self.snake)
        attempts = 0
        max_attempts = self.width * self.height

        while attempts < max_attempts:
            x = self._rng.randrange(self.width)
            y = self._rng.randrange(self.height)
            food = Point(x, y)

            if food not in occupied:
                self.food = food
                return

            attempts += 1

        # Fallback: find any empty cell (board is nearly full)
        for x in range(self.width):
            for y in range(self.height):
                point = Point(x, y)
                if point not in occupied:
                    self.food = point
                    return

        self.food = None

    def is_collision(self, point: Point) -> bool:
        """
        Check if a point is off the board or on the snake body.

        Args:
            point: Point to check

        Returns:
            True if moving there would end the game
        """
        if point.x < 0 or point.x >= self.width:
            return True
        if point.y < 0 or point.y >= self.height:
            return True

        return point in self.snake

    def step(self) -> StepResult:
        """
        Execute one game tick.

        Returns:
            StepResult describing what happened
        """
        if self.run_state is not RunState.RUNNING:
            return StepResult(score=self.score)

        self.frame_count += 1
        self.direction = self.pending_direction
        new_head = self.head.moved(self.direction)

        if self.is_collision(new_head):
            self.run_state = RunState.GAME_OVER
            logger.info("Game over at %s with score %d", new_head, self.score)
            return StepResult(game_over=True, score=self.score)

        self.snake.insert(0, new_head)

        if new_head == self.food:
            self.score += self.config.food_reward
            self._place_food()
            return StepResult(moved=True, ate_food=True, score=self.score)

        self.snake.pop()  # Remove tail
        return StepResult(moved=True, score=self.score)

    # ------------------------------------------------------------------
    # Snapshot
    # ------------------------------------------------------------------

    def get_state(self) -> Dict[str, Any]:
        """
        Get current game state for rendering.

        Returns:
            Dictionary containing full game state
        """
        return {
            "snake": [p.to_dict() for p in self.snake],
            "food": self.food.to_dict() if self.food is not None else None,
            "direction": self.direction.to_dict(),
            "score": self.score,
            "run_state": self.run_state.value,
            "game_over": self.is_game_over,
            "frame": self.frame_count,
            "width": self.width,
            "height": self.height,
            "cell_size": self.config.cell_size,
        }

    def get_score(self) -> int:
        return self.score
