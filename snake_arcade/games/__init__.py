"""
Games module for Snake Arcade.
"""

from .snake import SnakeGame

__all__ = [
    'SnakeGame',
]
