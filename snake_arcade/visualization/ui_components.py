"""
Reusable UI components for the Snake window.

Provides a Button with an enabled flag and a modal NameEntryDialog used
when a new high score is set.
"""
import pygame
from typing import Callable, Optional


# UI Theme Colors
BG_COLOR = (11, 17, 32)
PANEL_COLOR = (30, 41, 59)
TEXT_COLOR = (226, 232, 240)
MUTED_TEXT = (100, 116, 139)
ACCENT_COLOR = (34, 197, 94)
OVERLAY_COLOR = (2, 6, 23, 190)
BUTTON_COLOR = (30, 41, 59)
BUTTON_HOVER = (51, 65, 85)
BUTTON_DISABLED = (22, 30, 46)
BORDER_COLOR = (71, 85, 105)


class Button:
    """Clickable button with hover effects; ignores clicks when disabled."""

    def __init__(
        self,
        x: int,
        y: int,
        width: int,
        height: int,
        text: str,
        callback: Optional[Callable] = None,
        font_size: int = 28
    ):
        self.rect = pygame.Rect(x, y, width, height)
        self.text = text
        self.callback = callback
        self.font_size = font_size
        self.hovered = False
        self.enabled = True
        self._font = None

    @property
    def font(self):
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    def draw(self, surface: pygame.Surface):
        """Draw the button."""
        if not self.enabled:
            color, text_color = BUTTON_DISABLED, MUTED_TEXT
        elif self.hovered:
            color, text_color = BUTTON_HOVER, TEXT_COLOR
        else:
            color, text_color = BUTTON_COLOR, TEXT_COLOR

        pygame.draw.rect(surface, color, self.rect, border_radius=8)
        pygame.draw.rect(surface, BORDER_COLOR, self.rect, 2, border_radius=8)

        text_surf = self.font.render(self.text, True, text_color)
        text_rect = text_surf.get_rect(center=self.rect.center)
        surface.blit(text_surf, text_rect)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle pygame event.

        Returns:
            True if button was clicked, False otherwise
        """
        if event.type == pygame.MOUSEMOTION:
            self.hovered = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.enabled and self.rect.collidepoint(event.pos):
                if self.callback:
                    self.callback()
                return True
        return False


class NameEntryDialog:
    """
    Modal single-line text prompt.

    open() shows the dialog; Enter submits the typed text and Escape
    submits nothing. Either way the callback fires exactly once.
    """

    MAX_LENGTH = 16

    def __init__(self, width: int = 320, height: int = 140, font_size: int = 28):
        self.width = width
        self.height = height
        self.font_size = font_size
        self.prompt = ""
        self.text = ""
        self.active = False
        self._on_submit: Optional[Callable[[Optional[str]], None]] = None
        self._font = None

    @property
    def font(self):
        if self._font is None:
            self._font = pygame.font.Font(None, self.font_size)
        return self._font

    def open(self, on_submit: Callable[[Optional[str]], None], prompt: str = "Enter your name"):
        """Show the dialog and remember where to deliver the name."""
        self.prompt = prompt
        self.text = ""
        self.active = True
        self._on_submit = on_submit

    def cancel(self):
        """Close without a name; the callback still fires with None."""
        if self.active:
            self._submit(None)

    def _submit(self, value: Optional[str]):
        callback = self._on_submit
        self.active = False
        self._on_submit = None
        if callback:
            callback(value)

    def handle_event(self, event: pygame.event.Event) -> bool:
        """
        Handle pygame event while open.

        Returns:
            True if the event was consumed
        """
        if not self.active or event.type != pygame.KEYDOWN:
            return False

        if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
            self._submit(self.text)
        elif event.key == pygame.K_ESCAPE:
            self.cancel()
        elif event.key == pygame.K_BACKSPACE:
            self.text = self.text[:-1]
        elif event.unicode and event.unicode.isprintable() and len(self.text) < self.MAX_LENGTH:
            self.text += event.unicode

        return True

    def draw(self, surface: pygame.Surface):
        """Draw the dialog centered on the surface."""
        if not self.active:
            return

        screen_w, screen_h = surface.get_size()
        overlay = pygame.Surface((screen_w, screen_h), pygame.SRCALPHA)
        overlay.fill(OVERLAY_COLOR)
        surface.blit(overlay, (0, 0))

        panel = pygame.Rect(
            (screen_w - self.width) // 2,
            (screen_h - self.height) // 2,
            self.width,
            self.height
        )
        pygame.draw.rect(surface, PANEL_COLOR, panel, border_radius=10)
        pygame.draw.rect(surface, ACCENT_COLOR, panel, 2, border_radius=10)

        prompt_surf = self.font.render(self.prompt, True, TEXT_COLOR)
        surface.blit(prompt_surf, prompt_surf.get_rect(center=(panel.centerx, panel.y + 30)))

        field = pygame.Rect(panel.x + 20, panel.y + 55, panel.width - 40, 36)
        pygame.draw.rect(surface, BG_COLOR, field, border_radius=6)
        pygame.draw.rect(surface, BORDER_COLOR, field, 2, border_radius=6)

        text_surf = self.font.render(self.text + "_", True, TEXT_COLOR)
        surface.blit(text_surf, (field.x + 10, field.y + 8))

        hint_surf = self.font.render("Enter to save", True, MUTED_TEXT)
        surface.blit(hint_surf, hint_surf.get_rect(center=(panel.centerx, panel.bottom - 20)))
