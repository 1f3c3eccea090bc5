"""
Snake App - the pygame window.

Layout:
+------------------------------------+
|  Score: 40           Best: 120 Ada |
|  +------------------------------+  |
|  |                              |  |
|  |          20 x 20 board       |  |
|  |                              |  |
|  +------------------------------+  |
|   [Start]    [Pause]    [Reset]    |
+------------------------------------+
"""
import logging
from typing import Callable, Optional

import pygame

from ..audio.munch import MunchSound
from ..games.snake.config import SnakeConfig
from ..games.snake.game import SnakeGame
from ..games.snake.high_score import HighScoreStore
from ..games.snake.renderer import SnakeRenderer
from ..games.snake.session import SnakeSession
from ..utils.config_loader import Config
from ..utils.storage import JsonKeyValueStore
from .pygame_surface import PygameSurface
from .ui_components import (
    Button, NameEntryDialog, BG_COLOR, TEXT_COLOR, MUTED_TEXT, ACCENT_COLOR
)

logger = logging.getLogger(__name__)


class SnakeApp:
    """
    Owns the window, the frame loop and the buttons.

    Every frame: handle events, let the session run due ticks, redraw
    everything from the game's state snapshot.
    """

    HEADER_HEIGHT = 56
    FOOTER_HEIGHT = 76
    BUTTON_WIDTH = 110
    BUTTON_HEIGHT = 40

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize the app and open the window.

        Args:
            config: Application configuration (defaults if omitted)
        """
        self.config = config or Config()
        snake_config = SnakeConfig.from_dict({"style": self.config.game.style})

        self.game = SnakeGame(snake_config)
        self.renderer = SnakeRenderer(
            cell_size=snake_config.cell_size,
            grid_width=snake_config.board_cells,
            grid_height=snake_config.board_cells,
            style=snake_config.style
        )
        self.high_scores = HighScoreStore(
            JsonKeyValueStore(self.config.high_score.path),
            key=self.config.high_score.key
        )
        self.sound = MunchSound(
            enabled=self.config.audio.enabled,
            volume=self.config.audio.volume
        )
        self.name_dialog = NameEntryDialog()
        self.session = SnakeSession(
            self.game,
            self.high_scores,
            request_name=self._request_name,
            sound=self.sound
        )

        padding = self.config.display.padding
        board_w, board_h = self.renderer.get_preferred_size()
        self.board_origin = (padding, self.HEADER_HEIGHT)
        self.window_width = board_w + padding * 2
        self.window_height = self.HEADER_HEIGHT + board_h + self.FOOTER_HEIGHT

        pygame.init()
        self.screen = pygame.display.set_mode((self.window_width, self.window_height))
        pygame.display.set_caption(self.config.display.title)

        self.board_surface = pygame.Surface((board_w, board_h))
        self.board = PygameSurface(self.board_surface)
        self.font = pygame.font.Font(None, 32)
        self.small_font = pygame.font.Font(None, 24)
        self.clock = pygame.time.Clock()
        self.running = False

        self._create_buttons()
        self._sync_buttons()

    def _create_buttons(self):
        gap = 20
        total = self.BUTTON_WIDTH * 3 + gap * 2
        x = (self.window_width - total) // 2
        y = self.window_height - self.FOOTER_HEIGHT + (self.FOOTER_HEIGHT - self.BUTTON_HEIGHT) // 2

        self.btn_start = Button(x, y, self.BUTTON_WIDTH, self.BUTTON_HEIGHT,
                                "Start", callback=self._on_start)
        x += self.BUTTON_WIDTH + gap
        self.btn_pause = Button(x, y, self.BUTTON_WIDTH, self.BUTTON_HEIGHT,
                                "Pause", callback=self._on_pause)
        x += self.BUTTON_WIDTH + gap
        self.btn_reset = Button(x, y, self.BUTTON_WIDTH, self.BUTTON_HEIGHT,
                                "Reset", callback=self._on_reset)
        self.buttons = [self.btn_start, self.btn_pause, self.btn_reset]

    # ------------------------------------------------------------------
    # Callbacks
    # ------------------------------------------------------------------

    def _now(self) -> int:
        return pygame.time.get_ticks()

    def _on_start(self):
        self.session.start(self._now())

    def _on_pause(self):
        self.session.toggle_pause(self._now())

    def _on_reset(self):
        self.session.reset()

    def _request_name(self, on_name: Callable[[Optional[str]], None]):
        self.name_dialog.open(on_name, prompt=f"New high score: {self.game.score}!")

    def _sync_buttons(self):
        """Mirror the session's control availability onto the buttons."""
        controls = self.session.controls
        self.btn_start.enabled = controls.start_enabled
        self.btn_start.text = controls.start_label
        self.btn_pause.enabled = controls.pause_enabled
        self.btn_pause.text = controls.pause_label
        self.btn_reset.enabled = controls.reset_enabled

    # ------------------------------------------------------------------
    # Frame
    # ------------------------------------------------------------------

    def handle_event(self, event: pygame.event.Event):
        """Route one pygame event."""
        if event.type == pygame.QUIT:
            # Closing the window still records a pending high score
            self.name_dialog.cancel()
            self.running = False
            return

        if self.name_dialog.active:
            self.name_dialog.handle_event(event)
            return

        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
                return
            self.session.handle_key(pygame.key.name(event.key), self._now())

        for button in self.buttons:
            if button.handle_event(event):
                break

        self._sync_buttons()

    def draw(self):
        """Redraw the whole window."""
        self.screen.fill(BG_COLOR)
        padding = self.config.display.padding
        header_y = self.HEADER_HEIGHT // 2

        score_surf = self.font.render(f"Score: {self.game.score}", True, TEXT_COLOR)
        self.screen.blit(score_surf, score_surf.get_rect(midleft=(padding, header_y)))

        best = self.session.high_score
        best_surf = self.small_font.render(f"Best: {best.score} ({best.name})", True, ACCENT_COLOR)
        self.screen.blit(best_surf, best_surf.get_rect(midright=(self.window_width - padding, header_y)))

        self.renderer.render(self.game.get_state(), self.board)
        self.screen.blit(self.board_surface, self.board_origin)

        if not self.game.has_started:
            hint = self.small_font.render("Arrows / WASD to steer, Space to pause", True, MUTED_TEXT)
            self.screen.blit(hint, hint.get_rect(midtop=(self.window_width // 2, self.HEADER_HEIGHT - 18)))

        for button in self.buttons:
            button.draw(self.screen)

        self.name_dialog.draw(self.screen)
        pygame.display.flip()

    def tick(self):
        """Process one frame."""
        for event in pygame.event.get():
            self.handle_event(event)

        if self.session.update(self._now()):
            self._sync_buttons()

        self.draw()

    def run(self):
        """Run until the window is closed."""
        self.running = True
        logger.info("Snake window open (%dx%d)", self.window_width, self.window_height)

        try:
            while self.running:
                self.tick()
                self.clock.tick(self.config.display.fps)
        finally:
            pygame.quit()

        logger.info("Best score this run: %d (%s)",
                    self.session.high_score.score, self.session.high_score.name)
