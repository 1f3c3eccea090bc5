"""
Pytest configuration and fixtures for Snake Arcade tests.

This module sets up pygame mocking to allow testing the front end
without requiring a display, audio device, or actual pygame
initialization, and provides a DrawingSurface that records calls.
"""

import random
import sys
from pathlib import Path
from typing import Any, List, Tuple
from unittest.mock import MagicMock

import pytest


# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))
sys.path.insert(0, str(PROJECT_ROOT / "scripts"))

from snake_arcade.core.renderer_interface import DrawingSurface  # noqa: E402


class PygameError(RuntimeError):
    """Stand-in for pygame.error so `except pygame.error` works."""


def create_mock_pygame():
    """Create a comprehensive mock of the pygame module."""
    mock_pygame = MagicMock()
    mock_pygame.error = PygameError

    # Basic initialization
    mock_pygame.init.return_value = (6, 0)  # (success, fail) count
    mock_pygame.quit.return_value = None

    # Display
    mock_surface = MagicMock()
    mock_surface.get_width.return_value = 448
    mock_surface.get_height.return_value = 532
    mock_surface.get_size.return_value = (448, 532)
    mock_surface.fill.return_value = None
    mock_surface.blit.return_value = None
    mock_pygame.display.set_mode.return_value = mock_surface
    mock_pygame.display.set_caption.return_value = None
    mock_pygame.display.flip.return_value = None

    # Fonts
    mock_font = MagicMock()
    mock_font.render.return_value = MagicMock()  # Returns a surface
    mock_font.size.return_value = (100, 30)  # (width, height)
    mock_pygame.font.Font.return_value = mock_font
    mock_pygame.font.SysFont.return_value = mock_font
    mock_pygame.font.init.return_value = None

    # Drawing
    mock_pygame.draw.rect.return_value = None
    mock_pygame.draw.line.return_value = None
    mock_pygame.draw.circle.return_value = None
    mock_pygame.draw.polygon.return_value = None
    mock_pygame.transform.smoothscale.return_value = MagicMock()

    # Audio
    mock_pygame.mixer.get_init.return_value = (22050, -16, 1)
    mock_pygame.sndarray.make_sound.return_value = MagicMock()

    # Events
    mock_pygame.event.get.return_value = []

    # Constants
    mock_pygame.QUIT = 256
    mock_pygame.KEYDOWN = 768
    mock_pygame.KEYUP = 769
    mock_pygame.MOUSEBUTTONDOWN = 1025
    mock_pygame.MOUSEBUTTONUP = 1026
    mock_pygame.MOUSEMOTION = 1024
    mock_pygame.SRCALPHA = 65536
    mock_pygame.BLEND_RGBA_MIN = 18
    mock_pygame.K_ESCAPE = 27
    mock_pygame.K_RETURN = 13
    mock_pygame.K_KP_ENTER = 1073741912
    mock_pygame.K_BACKSPACE = 8
    mock_pygame.K_SPACE = 32
    mock_pygame.K_UP = 273
    mock_pygame.K_DOWN = 274
    mock_pygame.K_LEFT = 276
    mock_pygame.K_RIGHT = 275
    mock_pygame.K_w = 119
    mock_pygame.K_a = 97
    mock_pygame.K_s = 115
    mock_pygame.K_d = 100

    key_names = {
        273: "up", 274: "down", 275: "right", 276: "left",
        119: "w", 97: "a", 115: "s", 100: "d", 32: "space", 27: "escape",
    }
    mock_pygame.key.name.side_effect = lambda key: key_names.get(key, "unknown")

    # Time
    mock_clock = MagicMock()
    mock_clock.tick.return_value = 16  # ~60fps
    mock_pygame.time.Clock.return_value = mock_clock
    mock_pygame.time.get_ticks.return_value = 0

    # Rect
    mock_pygame.Rect = MagicMock(side_effect=lambda *args: MagicMock(
        x=args[0] if args else 0,
        y=args[1] if len(args) > 1 else 0,
        width=args[2] if len(args) > 2 else 0,
        height=args[3] if len(args) > 3 else 0,
        collidepoint=MagicMock(return_value=False)
    ))

    # Surface creation
    mock_pygame.Surface.return_value = mock_surface

    return mock_pygame


@pytest.fixture(scope="session", autouse=True)
def mock_pygame_module():
    """
    Session-scoped fixture that mocks pygame before any imports.

    This runs automatically for all tests and ensures pygame
    is mocked before any front end modules are imported.
    """
    mock_pygame = create_mock_pygame()

    # Store original module if it exists
    original_pygame = sys.modules.get('pygame')

    # Install mock
    sys.modules['pygame'] = mock_pygame

    yield mock_pygame

    # Restore original (or remove mock)
    if original_pygame:
        sys.modules['pygame'] = original_pygame
    else:
        del sys.modules['pygame']


class RecordingSurface(DrawingSurface):
    """DrawingSurface that records every call instead of drawing."""

    def __init__(self, width: int = 400, height: int = 400):
        self.width = width
        self.height = height
        self.calls: List[Tuple[str, Tuple[Any, ...], dict]] = []

    def _record(self, name, *args, **kwargs):
        self.calls.append((name, args, kwargs))

    def calls_named(self, name: str):
        return [c for c in self.calls if c[0] == name]

    def texts(self) -> List[str]:
        return [args[0] for _, args, _ in self.calls_named("draw_text")]

    def get_size(self):
        return (self.width, self.height)

    def clear(self, color=None):
        self._record("clear", color)

    def draw_line(self, color, start, end, width=1):
        self._record("draw_line", color, start, end, width=width)

    def draw_rect(self, color, rect, border_radius=0, width=0):
        self._record("draw_rect", color, rect, border_radius=border_radius, width=width)

    def draw_gradient_rect(self, rect, start_color, end_color, border_radius=0, vertical=False):
        self._record("draw_gradient_rect", rect, start_color, end_color,
                     border_radius=border_radius, vertical=vertical)

    def draw_circle(self, color, center, radius):
        self._record("draw_circle", color, center, radius)

    def draw_gradient_circle(self, center, radius, inner_color, outer_color, inner_radius=0.0):
        self._record("draw_gradient_circle", center, radius, inner_color, outer_color,
                     inner_radius=inner_radius)

    def draw_polygon(self, color, points):
        self._record("draw_polygon", color, list(points))

    def draw_text(self, text, position, color, size=16, bold=False):
        self._record("draw_text", text, position, color, size=size, bold=bold)


@pytest.fixture
def recording_surface():
    """Provide a fresh recording drawing surface (400x400)."""
    return RecordingSurface()


@pytest.fixture
def game():
    """Provide a Snake game with a seeded food placement."""
    from snake_arcade.games.snake.game import SnakeGame

    return SnakeGame(rng=random.Random(1234))


@pytest.fixture
def scores_path(tmp_path):
    """Path for a throwaway high score file."""
    return tmp_path / "scores" / "highscore.json"


@pytest.fixture
def high_scores(scores_path):
    """Provide an empty high score store backed by a temp file."""
    from snake_arcade.games.snake.high_score import HighScoreStore
    from snake_arcade.utils.storage import JsonKeyValueStore

    return HighScoreStore(JsonKeyValueStore(str(scores_path)))
