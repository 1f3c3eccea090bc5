"""
Abstract renderer interface for Snake Arcade.

Renderers never talk to a display library directly. They draw onto a
DrawingSurface, which the front end implements on top of pygame and the
tests implement as a call recorder.
"""

from abc import ABC, abstractmethod
from typing import Dict, Any, Optional, Sequence, Tuple

Color = Tuple[int, ...]                 # (r, g, b) or (r, g, b, a)
PointF = Tuple[float, float]
RectF = Tuple[float, float, float, float]


class DrawingSurface(ABC):
    """
    Immediate-mode 2D drawing target addressed in pixel coordinates.

    Colors may carry an alpha channel; implementations blend them.
    """

    @abstractmethod
    def get_size(self) -> Tuple[int, int]:
        """Return (width, height) in pixels."""
        pass

    @abstractmethod
    def clear(self, color: Optional[Color] = None) -> None:
        """Erase the whole surface, optionally filling with a color."""
        pass

    @abstractmethod
    def draw_line(self, color: Color, start: PointF, end: PointF, width: int = 1) -> None:
        """Draw a straight line."""
        pass

    @abstractmethod
    def draw_rect(
        self,
        color: Color,
        rect: RectF,
        border_radius: int = 0,
        width: int = 0
    ) -> None:
        """
        Draw a rectangle.

        Args:
            color: Fill or outline color
            rect: (x, y, width, height)
            border_radius: Corner radius in pixels
            width: Outline thickness, 0 fills the rectangle
        """
        pass

    @abstractmethod
    def draw_gradient_rect(
        self,
        rect: RectF,
        start_color: Color,
        end_color: Color,
        border_radius: int = 0,
        vertical: bool = False
    ) -> None:
        """
        Fill a rounded rectangle with a linear gradient.

        The gradient runs from the top-left corner to the bottom-right
        corner, or from top to bottom when vertical is set.
        """
        pass

    @abstractmethod
    def draw_circle(self, color: Color, center: PointF, radius: float) -> None:
        """Draw a filled circle."""
        pass

    @abstractmethod
    def draw_gradient_circle(
        self,
        center: PointF,
        radius: float,
        inner_color: Color,
        outer_color: Color,
        inner_radius: float = 0.0
    ) -> None:
        """
        Fill a circle with a radial gradient.

        Pixels within inner_radius use inner_color; the color then blends
        linearly to outer_color at radius.
        """
        pass

    @abstractmethod
    def draw_polygon(self, color: Color, points: Sequence[PointF]) -> None:
        """Fill a closed polygon."""
        pass

    @abstractmethod
    def draw_text(
        self,
        text: str,
        position: PointF,
        color: Color,
        size: int = 16,
        bold: bool = False
    ) -> None:
        """Draw text centered on position."""
        pass


class RendererInterface(ABC):
    """
    Abstract renderer for game visualization.

    Renderers are pure functions of a game state snapshot.
    """

    @abstractmethod
    def render(self, game_state: Dict[str, Any], surface: DrawingSurface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary containing game state from get_state()
            surface: Drawing surface to draw on
        """
        pass

    @abstractmethod
    def get_preferred_size(self) -> Tuple[int, int]:
        """
        Get the preferred render size.

        Returns:
            Tuple of (width, height) in pixels
        """
        pass

    def get_cell_size(self) -> int:
        """
        Get the cell/unit size for grid-based games.

        Returns:
            Cell size in pixels (default 20)
        """
        return 20
