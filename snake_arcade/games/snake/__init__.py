"""
Snake game module for Snake Arcade.
"""

from .game import SnakeGame, Direction, Point, RunState, StepResult
from .renderer import SnakeRenderer
from .config import SnakeConfig
from .controls import ControlState, direction_for_key, is_toggle_key
from .high_score import HighScore, HighScoreStore
from .session import SnakeSession

__all__ = [
    'SnakeGame',
    'SnakeRenderer',
    'SnakeConfig',
    'SnakeSession',
    'Direction',
    'Point',
    'RunState',
    'StepResult',
    'ControlState',
    'direction_for_key',
    'is_toggle_key',
    'HighScore',
    'HighScoreStore',
]
