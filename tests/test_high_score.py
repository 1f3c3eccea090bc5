"""
Tests for the JSON key-value store and the high score record.
"""

import json

import pytest


class TestJsonKeyValueStore:
    """Tests for JsonKeyValueStore."""

    def test_missing_file_reads_none(self, scores_path):
        from snake_arcade.utils.storage import JsonKeyValueStore

        store = JsonKeyValueStore(str(scores_path))

        assert store.get("anything") is None

    def test_set_creates_file_and_parents(self, scores_path):
        from snake_arcade.utils.storage import JsonKeyValueStore

        store = JsonKeyValueStore(str(scores_path))

        assert store.set("a", {"score": 1}) is True
        assert json.loads(scores_path.read_text()) == {"a": {"score": 1}}

    def test_set_keeps_other_keys(self, scores_path):
        from snake_arcade.utils.storage import JsonKeyValueStore

        store = JsonKeyValueStore(str(scores_path))
        store.set("a", 1)
        store.set("b", 2)

        assert store.get("a") == 1
        assert store.get("b") == 2

    def test_corrupt_file_reads_empty(self, scores_path):
        from snake_arcade.utils.storage import JsonKeyValueStore

        scores_path.parent.mkdir(parents=True)
        scores_path.write_text("{not json")

        assert JsonKeyValueStore(str(scores_path)).get("a") is None

    def test_non_object_file_reads_empty(self, scores_path):
        from snake_arcade.utils.storage import JsonKeyValueStore

        scores_path.parent.mkdir(parents=True)
        scores_path.write_text("[1, 2, 3]")

        assert JsonKeyValueStore(str(scores_path)).get("a") is None

    def test_unwritable_location_returns_false(self, tmp_path):
        from snake_arcade.utils.storage import JsonKeyValueStore

        # A file where a directory is needed
        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = JsonKeyValueStore(str(blocker / "scores.json"))

        assert store.set("a", 1) is False

    def test_unserializable_value_returns_false(self, scores_path):
        from snake_arcade.utils.storage import JsonKeyValueStore

        store = JsonKeyValueStore(str(scores_path))

        assert store.set("a", object()) is False


class TestHighScoreValidation:
    """Tests for HighScore.from_dict."""

    def test_valid_record(self):
        from snake_arcade.games.snake.high_score import HighScore

        assert HighScore.from_dict({"score": 120, "name": " Ada "}) == HighScore(120, "Ada")

    @pytest.mark.parametrize("record", [
        None,
        "120",
        {"score": -5, "name": "X"},
        {"score": float("inf"), "name": "X"},
        {"score": float("nan"), "name": "X"},
        {"score": 10 ** 400, "name": "X"},
        {"score": "100", "name": "X"},
        {"score": True, "name": "X"},
        {"score": 10, "name": "   "},
        {"score": 10, "name": 42},
        {"score": 10},
        {"name": "X"},
    ])
    def test_invalid_records(self, record):
        from snake_arcade.games.snake.high_score import HighScore

        assert HighScore.from_dict(record) is None


class TestHighScoreStore:
    """Tests for HighScoreStore."""

    def _store_with(self, scores_path, record):
        from snake_arcade.games.snake.high_score import HighScoreStore, STORAGE_KEY
        from snake_arcade.utils.storage import JsonKeyValueStore

        storage = JsonKeyValueStore(str(scores_path))
        storage.set(STORAGE_KEY, record)
        return HighScoreStore(storage)

    def test_default_when_absent(self, high_scores):
        from snake_arcade.games.snake.high_score import HighScore, PLACEHOLDER_NAME

        assert high_scores.current == HighScore(0, PLACEHOLDER_NAME)

    def test_negative_score_loads_default(self, scores_path):
        """Test a stored negative score falls back to the default record."""
        from snake_arcade.games.snake.high_score import HighScore

        store = self._store_with(scores_path, {"score": -5, "name": "X"})

        assert store.current == HighScore()

    def test_oversized_score_loads_default(self, scores_path):
        """Test a stored integer too large for a float does not break loading."""
        from snake_arcade.games.snake.high_score import HighScore

        store = self._store_with(scores_path, {"score": 10 ** 400, "name": "X"})

        assert store.current == HighScore()

    def test_loads_valid_record(self, scores_path):
        store = self._store_with(scores_path, {"score": 90, "name": "Bo"})

        assert store.current.score == 90
        assert store.current.name == "Bo"

    def test_strictly_greater_required(self, scores_path):
        store = self._store_with(scores_path, {"score": 90, "name": "Bo"})

        assert store.is_new_record(90) is False
        assert store.record(90, "Cy") is False
        assert store.current.name == "Bo"
        assert store.is_new_record(100) is True

    def test_record_persists(self, high_scores, scores_path):
        from snake_arcade.games.snake.high_score import HighScoreStore
        from snake_arcade.utils.storage import JsonKeyValueStore

        assert high_scores.record(40, "Ada") is True

        reloaded = HighScoreStore(JsonKeyValueStore(str(scores_path)))
        assert reloaded.current.score == 40
        assert reloaded.current.name == "Ada"

    @pytest.mark.parametrize("name", [None, "", "   "])
    def test_blank_name_becomes_anonymous(self, high_scores, name):
        high_scores.record(30, name)

        assert high_scores.current.name == "Anonymous"

    def test_write_failure_is_ignored(self, tmp_path):
        """Test a failed save keeps the record in memory without raising."""
        from snake_arcade.games.snake.high_score import HighScoreStore
        from snake_arcade.utils.storage import JsonKeyValueStore

        blocker = tmp_path / "blocker"
        blocker.write_text("")
        store = HighScoreStore(JsonKeyValueStore(str(blocker / "scores.json")))

        assert store.record(50, "Ada") is True
        assert store.current.score == 50
