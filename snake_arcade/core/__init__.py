"""
Core abstractions for Snake Arcade.

Provides the abstract game and renderer interfaces, the drawing surface
capability renderers draw onto, and the interval timer that drives ticks.
"""

from .game_interface import GameInterface
from .renderer_interface import DrawingSurface, RendererInterface
from .scheduler import IntervalTimer

__all__ = [
    'GameInterface',
    'DrawingSurface',
    'RendererInterface',
    'IntervalTimer',
]
