"""
Pygame Surface - DrawingSurface implementation backed by a pygame.Surface.

Colors with an alpha channel are drawn on a temporary SRCALPHA surface and
blitted so they blend with what is already there.
"""
from typing import Dict, Optional, Sequence, Tuple

import pygame

from ..core.renderer_interface import Color, DrawingSurface, PointF, RectF

FONT_NAMES = "segoeui,helveticaneue,arial"


def _is_translucent(color: Color) -> bool:
    return len(color) == 4 and color[3] < 255


def _rgba(color: Color) -> Tuple[int, int, int, int]:
    """Pad an RGB color to RGBA (opaque)."""
    return tuple(color) + (255,) * (4 - len(color))


def _lerp_color(a: Color, b: Color, t: float) -> Tuple[int, int, int, int]:
    """Linear blend between two colors."""
    a4 = _rgba(a)
    b4 = _rgba(b)
    return tuple(round(a4[i] + (b4[i] - a4[i]) * t) for i in range(4))


class PygameSurface(DrawingSurface):
    """
    Draws onto a pygame surface.

    The wrapped surface can be the window itself or an off-screen board
    surface that the app blits into place.
    """

    def __init__(self, surface: pygame.Surface):
        self.surface = surface
        self._fonts: Dict[Tuple[int, bool], pygame.font.Font] = {}

    def get_size(self) -> Tuple[int, int]:
        return self.surface.get_size()

    def _font(self, size: int, bold: bool) -> pygame.font.Font:
        key = (size, bold)
        if key not in self._fonts:
            self._fonts[key] = pygame.font.SysFont(FONT_NAMES, size, bold=bold)
        return self._fonts[key]

    def _layer(self, width: float, height: float) -> pygame.Surface:
        return pygame.Surface((max(1, round(width)), max(1, round(height))), pygame.SRCALPHA)

    def clear(self, color: Optional[Color] = None) -> None:
        self.surface.fill(color or (0, 0, 0))

    def draw_line(self, color: Color, start: PointF, end: PointF, width: int = 1) -> None:
        pygame.draw.line(self.surface, color, start, end, width)

    def draw_rect(self, color: Color, rect: RectF, border_radius: int = 0, width: int = 0) -> None:
        x, y, w, h = rect
        if not _is_translucent(color):
            pygame.draw.rect(self.surface, color, pygame.Rect(x, y, w, h), width,
                             border_radius=border_radius)
            return

        layer = self._layer(w, h)
        pygame.draw.rect(layer, color, pygame.Rect(0, 0, w, h), width, border_radius=border_radius)
        self.surface.blit(layer, (x, y))

    def draw_gradient_rect(
        self,
        rect: RectF,
        start_color: Color,
        end_color: Color,
        border_radius: int = 0,
        vertical: bool = False
    ) -> None:
        x, y, w, h = rect

        # Scale a tiny seed image up; smoothscale interpolates between the corners
        if vertical:
            seed = pygame.Surface((1, 2), pygame.SRCALPHA)
            seed.set_at((0, 0), _rgba(start_color))
            seed.set_at((0, 1), _rgba(end_color))
        else:
            mid = _lerp_color(start_color, end_color, 0.5)
            seed = pygame.Surface((2, 2), pygame.SRCALPHA)
            seed.set_at((0, 0), _rgba(start_color))
            seed.set_at((1, 0), mid)
            seed.set_at((0, 1), mid)
            seed.set_at((1, 1), _rgba(end_color))

        size = (max(1, round(w)), max(1, round(h)))
        gradient = pygame.transform.smoothscale(seed, size)

        # Cut the rounded corners out with a mask
        mask = self._layer(w, h)
        pygame.draw.rect(mask, (255, 255, 255, 255), pygame.Rect(0, 0, *size),
                         border_radius=border_radius)
        mask.blit(gradient, (0, 0), special_flags=pygame.BLEND_RGBA_MIN)
        self.surface.blit(mask, (x, y))

    def draw_circle(self, color: Color, center: PointF, radius: float) -> None:
        if not _is_translucent(color):
            pygame.draw.circle(self.surface, color, center, radius)
            return

        layer = self._layer(radius * 2, radius * 2)
        pygame.draw.circle(layer, color, (radius, radius), radius)
        self.surface.blit(layer, (center[0] - radius, center[1] - radius))

    def draw_gradient_circle(
        self,
        center: PointF,
        radius: float,
        inner_color: Color,
        outer_color: Color,
        inner_radius: float = 0.0
    ) -> None:
        layer = self._layer(radius * 2, radius * 2)
        span = radius - inner_radius
        steps = max(1, int(span))

        # Paint from the rim inwards so inner rings cover outer ones
        for i in range(steps):
            r = radius - i
            t = (r - inner_radius) / span if span > 0 else 0.0
            pygame.draw.circle(layer, _lerp_color(inner_color, outer_color, t), (radius, radius), r)

        if inner_radius > 0:
            pygame.draw.circle(layer, _rgba(inner_color), (radius, radius), inner_radius)
        self.surface.blit(layer, (center[0] - radius, center[1] - radius))

    def draw_polygon(self, color: Color, points: Sequence[PointF]) -> None:
        if not _is_translucent(color):
            pygame.draw.polygon(self.surface, color, points)
            return

        min_x = min(p[0] for p in points)
        min_y = min(p[1] for p in points)
        max_x = max(p[0] for p in points)
        max_y = max(p[1] for p in points)
        layer = self._layer(max_x - min_x + 1, max_y - min_y + 1)
        pygame.draw.polygon(layer, color, [(px - min_x, py - min_y) for px, py in points])
        self.surface.blit(layer, (min_x, min_y))

    def draw_text(self, text: str, position: PointF, color: Color, size: int = 16, bold: bool = False) -> None:
        text_surf = self._font(size, bold).render(text, True, color)
        text_rect = text_surf.get_rect(center=(round(position[0]), round(position[1])))
        self.surface.blit(text_surf, text_rect)
