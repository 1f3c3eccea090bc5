"""
Snake Game Renderer - draws a state snapshot onto a DrawingSurface.

Two styles are available: "classic" (flat blocks with simple eyes) and
"neon" (gradient rounded segments with directional eyes and a tongue).
"""

import colorsys
from typing import Dict, Any, Tuple

from ...core.renderer_interface import Color, DrawingSurface, RendererInterface
from .config import CELL_SIZE, BOARD_CELLS, RENDER_STYLES


# Colors
BACKGROUND = (15, 23, 42)
GRID_COLOR = (30, 41, 59)
WHITE = (248, 250, 252)
PUPIL = (15, 23, 42)
FOOD_CORE = (251, 191, 36, 255)
FOOD_EDGE = (251, 191, 36, 51)
SNAKE_HEAD_COLOR = (0, 220, 100)
SNAKE_BODY_COLOR = (0, 180, 80)
SNAKE_GLOW = (34, 197, 94, 89)
SNAKE_OUTLINE = (15, 23, 42, 115)
SHINE_TOP = (255, 255, 255, 61)
SHINE_BOTTOM = (255, 255, 255, 0)
TONGUE_COLOR = (248, 113, 113, 217)
BANNER_COLOR = (15, 23, 42, 178)
BANNER_TEXT = (241, 245, 249)


def hsl(hue: float, saturation: float, lightness: float) -> Color:
    """Convert CSS-style hsl (degrees, percent, percent) to an RGB tuple."""
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360.0, lightness / 100.0, saturation / 100.0)
    return (round(r * 255), round(g * 255), round(b * 255))


class SnakeRenderer(RendererInterface):
    """
    Renders the Snake game onto any DrawingSurface.

    The renderer only reads the state dictionary produced by
    SnakeGame.get_state(); it never touches the game itself.
    """

    def __init__(
        self,
        cell_size: int = CELL_SIZE,
        grid_width: int = BOARD_CELLS,
        grid_height: int = BOARD_CELLS,
        style: str = "neon"
    ):
        """
        Initialize the renderer.

        Args:
            cell_size: Size of each grid cell in pixels
            grid_width: Grid width in cells
            grid_height: Grid height in cells
            style: "neon" or "classic"
        """
        if style not in RENDER_STYLES:
            raise ValueError(f"Unknown render style: {style}")

        self._cell_size = cell_size
        self._grid_width = grid_width
        self._grid_height = grid_height
        self.style = style

    def get_preferred_size(self) -> Tuple[int, int]:
        return (self._grid_width * self._cell_size, self._grid_height * self._cell_size)

    def get_cell_size(self) -> int:
        return self._cell_size

    def render(self, game_state: Dict[str, Any], surface: DrawingSurface) -> None:
        """
        Render the game state to a surface.

        Args:
            game_state: Dictionary containing game state
            surface: Surface to draw on
        """
        width = game_state.get("width", self._grid_width)
        height = game_state.get("height", self._grid_height)

        surface.clear(BACKGROUND)
        self._draw_grid(surface, width, height)

        if game_state.get("food") is not None:
            self._draw_food(surface, game_state["food"])

        if self.style == "neon":
            self._draw_snake_neon(surface, game_state["snake"], game_state["direction"])
        else:
            self._draw_snake_classic(surface, game_state["snake"], game_state["direction"])

        if game_state.get("game_over"):
            self._draw_game_over(surface)

    # ------------------------------------------------------------------
    # Board
    # ------------------------------------------------------------------

    def _draw_grid(self, surface: DrawingSurface, width: int, height: int):
        """Draw grid lines (subtle)."""
        cs = self._cell_size
        game_width = width * cs
        game_height = height * cs

        for x in range(width + 1):
            surface.draw_line(GRID_COLOR, (x * cs, 0), (x * cs, game_height))

        for y in range(height + 1):
            surface.draw_line(GRID_COLOR, (0, y * cs), (game_width, y * cs))

    def _draw_food(self, surface: DrawingSurface, food: Dict[str, int]):
        """Draw food as a glowing amber orb."""
        radius = self._cell_size / 2
        center = (food["x"] * self._cell_size + radius, food["y"] * self._cell_size + radius)
        surface.draw_gradient_circle(
            center, radius, FOOD_CORE, FOOD_EDGE,
            inner_radius=self._cell_size / 8
        )

    def _draw_game_over(self, surface: DrawingSurface):
        """Dim a horizontal band and print the retry prompt."""
        width, height = surface.get_size()
        surface.draw_rect(BANNER_COLOR, (0, height / 2 - 40, width, 80))
        surface.draw_text("Game Over", (width / 2, height / 2 - 10), BANNER_TEXT, size=28, bold=True)
        surface.draw_text("Press Start to try again", (width / 2, height / 2 + 20), BANNER_TEXT, size=16)

    # ------------------------------------------------------------------
    # Classic style
    # ------------------------------------------------------------------

    def _draw_snake_classic(self, surface: DrawingSurface, snake, direction: Dict[str, int]):
        cs = self._cell_size
        for i, segment in enumerate(snake):
            color = SNAKE_HEAD_COLOR if i == 0 else SNAKE_BODY_COLOR
            rect = (segment["x"] * cs + 1, segment["y"] * cs + 1, cs - 2, cs - 2)
            surface.draw_rect(color, rect)

            if i == 0:
                self._draw_simple_eyes(surface, segment, direction)

    def _draw_simple_eyes(self, surface: DrawingSurface, head: Dict[str, int], direction: Dict[str, int]):
        """Draw two dark eye marks toward the front of the head."""
        cs = self._cell_size
        cx = head["x"] * cs + cs // 2
        cy = head["y"] * cs + cs // 2
        eye_size = max(2, cs // 6)
        eye_offset = cs // 4
        forward = cs // 5

        if direction["x"] != 0:
            ex = cx + direction["x"] * forward
            positions = [(ex, cy - eye_offset), (ex, cy + eye_offset)]
        else:
            ey = cy + direction["y"] * forward
            positions = [(cx - eye_offset, ey), (cx + eye_offset, ey)]

        for px, py in positions:
            surface.draw_rect(PUPIL, (px - eye_size / 2, py - eye_size / 2, eye_size, eye_size))

    # ------------------------------------------------------------------
    # Neon style
    # ------------------------------------------------------------------

    def _draw_snake_neon(self, surface: DrawingSurface, snake, direction: Dict[str, int]):
        cs = self._cell_size
        padding = cs * 0.15
        radius = round(cs / 2.3)
        body_size = cs - padding * 2
        last = max(1, len(snake) - 1)

        for i, segment in enumerate(snake):
            x = segment["x"] * cs
            y = segment["y"] * cs
            progress = i / last

            start_color = hsl(145 - progress * 18, 82, 55 - progress * 10)
            end_color = hsl(165 - progress * 10, 88, 42 - progress * 8)
            body = (x + padding, y + padding, body_size, body_size)

            glow = (x + padding - 2, y + padding - 2, body_size + 4, body_size + 4)
            surface.draw_rect(SNAKE_GLOW, glow, border_radius=radius + 2)
            surface.draw_gradient_rect(body, start_color, end_color, border_radius=radius)
            surface.draw_rect(SNAKE_OUTLINE, body, border_radius=radius, width=1)

            shine = (x + padding + 1.5, y + padding + 1.5, body_size - 3, (body_size - 3) / 1.7)
            surface.draw_gradient_rect(
                shine, SHINE_TOP, SHINE_BOTTOM,
                border_radius=round(radius / 1.5), vertical=True
            )

            if i == 0:
                self._draw_neon_head(surface, x, y, padding, body_size, direction)

    def _draw_neon_head(self, surface: DrawingSurface, x: float, y: float,
                        padding: float, body_size: float, direction: Dict[str, int]):
        """Eyes looking toward the heading, plus a flicking tongue."""
        cs = self._cell_size
        dx, dy = direction["x"], direction["y"]
        center_x = x + cs / 2
        center_y = y + cs / 2
        eye_radius = max(2.5, cs / 6.5)
        pupil_radius = eye_radius / 1.8
        eye_offset = eye_radius * 1.2

        if dx != 0:
            if dx > 0:
                base_x = x + cs - padding - eye_radius * 1.2
            else:
                base_x = x + padding + eye_radius * 1.2
            eyes = [(base_x, center_y - eye_offset), (base_x, center_y + eye_offset)]
        else:
            if dy > 0:
                base_y = y + cs - padding - eye_radius * 1.2
            else:
                base_y = y + padding + eye_radius * 1.2
            eyes = [(center_x - eye_offset, base_y), (center_x + eye_offset, base_y)]

        for ex, ey in eyes:
            surface.draw_circle(WHITE, (ex, ey), eye_radius)
            pupil = (ex + dx * eye_radius * 0.25, ey + dy * eye_radius * 0.25)
            surface.draw_circle(PUPIL, pupil, pupil_radius)

        tongue_length = cs / 3.2
        tongue_width = cs / 10
        base_x = center_x + dx * (body_size / 2 + 1)
        base_y = center_y + dy * (body_size / 2 + 1)

        if dx != 0:
            points = [
                (base_x, base_y - tongue_width / 2),
                (base_x + dx * tongue_length, base_y),
                (base_x, base_y + tongue_width / 2),
            ]
        else:
            points = [
                (base_x - tongue_width / 2, base_y),
                (base_x, base_y + dy * tongue_length),
                (base_x + tongue_width / 2, base_y),
            ]
        surface.draw_polygon(TONGUE_COLOR, points)
