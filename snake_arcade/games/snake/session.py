"""
Snake Session - wires the game to its tick source, input, sound cue and
high score.

The session is display-agnostic. The front end feeds it key names,
button presses and the current time; it asks the front end for a player
name through an injected callback when a record is beaten.
"""
import logging
from typing import Callable, Optional

from ...audio.munch import MunchSound
from ...core.scheduler import IntervalTimer
from .controls import ControlState, direction_for_key, is_toggle_key
from .game import SnakeGame, StepResult
from .high_score import HighScore, HighScoreStore

logger = logging.getLogger(__name__)

# Called with a single argument: the function to invoke with the entered name
NameRequest = Callable[[Callable[[Optional[str]], None]], None]


class SnakeSession:
    """
    Drives one SnakeGame.

    Ticks only happen from update(); pausing cancels the timer and
    resuming starts a new one.
    """

    def __init__(
        self,
        game: SnakeGame,
        high_scores: HighScoreStore,
        request_name: Optional[NameRequest] = None,
        sound: Optional[MunchSound] = None
    ):
        """
        Initialize the session.

        Args:
            game: The game to drive
            high_scores: Persisted best score
            request_name: Asks the player for a name; records immediately
                under "Anonymous" when not given
            sound: Cue to play when food is eaten
        """
        self.game = game
        self.high_scores = high_scores
        self.request_name = request_name
        self.sound = sound
        self.timer = IntervalTimer(game.config.tick_ms, self._on_tick)
        self.awaiting_name = False
        self.last_result: Optional[StepResult] = None

    @property
    def controls(self) -> ControlState:
        return ControlState.from_game(self.game)

    @property
    def high_score(self) -> HighScore:
        return self.high_scores.current

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def start(self, now_ms: int) -> bool:
        """Start (or start again after a game over)."""
        if self.sound is not None:
            self.sound.unlock()
        if not self.game.start():
            return False
        self.timer.start(now_ms)
        return True

    def pause(self) -> bool:
        if not self.game.pause():
            return False
        self.timer.stop()
        return True

    def resume(self, now_ms: int) -> bool:
        if self.sound is not None:
            self.sound.unlock()
        if not self.game.resume():
            return False
        self.timer.start(now_ms)
        return True

    def toggle_pause(self, now_ms: int) -> bool:
        if self.game.is_running:
            return self.pause()
        return self.resume(now_ms)

    def reset(self) -> bool:
        self.timer.stop()
        return self.game.reset()

    def handle_key(self, key_name: str, now_ms: int) -> bool:
        """
        Apply a key press.

        Args:
            key_name: Key name as reported by pygame.key.name
            now_ms: Current time in milliseconds

        Returns:
            True if the key changed anything
        """
        if self.sound is not None:
            self.sound.unlock()

        if is_toggle_key(key_name):
            return self.toggle_pause(now_ms)

        direction = direction_for_key(key_name)
        if direction is None:
            return False

        return self.game.change_direction(direction)

    def update(self, now_ms: int) -> int:
        """
        Run any ticks that are due.

        Returns:
            Number of ticks executed
        """
        return self.timer.poll(now_ms)

    # ------------------------------------------------------------------
    # Tick
    # ------------------------------------------------------------------

    def _on_tick(self):
        result = self.game.step()
        self.last_result = result

        if result.ate_food and self.sound is not None:
            self.sound.play()

        if result.game_over:
            self._handle_game_over(result.score)

    def _handle_game_over(self, score: int):
        self.timer.stop()

        if not self.high_scores.is_new_record(score):
            return

        if self.request_name is None:
            self.high_scores.record(score, None)
            return

        self.awaiting_name = True

        def on_name(name: Optional[str]) -> None:
            self.awaiting_name = False
            self.high_scores.record(score, name)

        logger.debug("Requesting name for score %d", score)
        self.request_name(on_name)
