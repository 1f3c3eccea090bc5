"""
Tests for key mapping and derived button availability.
"""

import pytest


class TestKeyMapping:
    """Tests for direction_for_key and is_toggle_key."""

    @pytest.mark.parametrize("key,expected", [
        ("up", "UP"), ("down", "DOWN"), ("left", "LEFT"), ("right", "RIGHT"),
        ("w", "UP"), ("s", "DOWN"), ("a", "LEFT"), ("d", "RIGHT"),
        ("W", "UP"), ("D", "RIGHT"),
    ])
    def test_direction_keys(self, key, expected):
        from snake_arcade.games.snake.controls import direction_for_key
        from snake_arcade.games.snake.game import Direction

        assert direction_for_key(key) == Direction[expected]

    @pytest.mark.parametrize("key", ["x", "return", "space", "escape", ""])
    def test_unbound_keys_ignored(self, key):
        from snake_arcade.games.snake.controls import direction_for_key

        assert direction_for_key(key) is None

    def test_toggle_key(self):
        from snake_arcade.games.snake.controls import is_toggle_key

        assert is_toggle_key("space") is True
        assert is_toggle_key("p") is False


class TestControlState:
    """Tests for Start/Pause/Reset availability in each run state."""

    def test_not_started(self, game):
        from snake_arcade.games.snake.controls import ControlState

        controls = ControlState.from_game(game)

        assert controls.start_enabled is True
        assert controls.start_label == "Start"
        assert controls.pause_enabled is False
        assert controls.pause_label == "Pause"
        assert controls.reset_enabled is False

    def test_running(self, game):
        from snake_arcade.games.snake.controls import ControlState

        game.start()
        controls = ControlState.from_game(game)

        assert controls.start_enabled is False
        assert controls.pause_enabled is True
        assert controls.pause_label == "Pause"
        assert controls.reset_enabled is False

    def test_paused(self, game):
        from snake_arcade.games.snake.controls import ControlState

        game.start()
        game.pause()
        controls = ControlState.from_game(game)

        assert controls.start_enabled is False
        assert controls.pause_enabled is True
        assert controls.pause_label == "Resume"
        assert controls.reset_enabled is True

    def test_game_over(self, game):
        from snake_arcade.games.snake.controls import ControlState
        from snake_arcade.games.snake.game import Point

        game.start()
        game.snake = [Point(19, 10), Point(18, 10), Point(17, 10)]
        game.step()
        controls = ControlState.from_game(game)

        assert controls.start_enabled is True
        assert controls.start_label == "Play Again"
        assert controls.pause_enabled is False
        assert controls.pause_label == "Pause"
        assert controls.reset_enabled is True
