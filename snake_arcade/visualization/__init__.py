from .app import SnakeApp
from .pygame_surface import PygameSurface
from .ui_components import (
    Button, NameEntryDialog,
    BG_COLOR, PANEL_COLOR, TEXT_COLOR, ACCENT_COLOR
)

__all__ = [
    "SnakeApp",
    "PygameSurface",
    "Button",
    "NameEntryDialog",
    "BG_COLOR",
    "PANEL_COLOR",
    "TEXT_COLOR",
    "ACCENT_COLOR",
]
