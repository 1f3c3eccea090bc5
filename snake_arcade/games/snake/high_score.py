"""
High Score - the single persisted best score and the name behind it.
"""
import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional

from ...utils.storage import JsonKeyValueStore

logger = logging.getLogger(__name__)

STORAGE_KEY = "snakeHighScore"
PLACEHOLDER_NAME = "Nobody"
ANONYMOUS_NAME = "Anonymous"


@dataclass(frozen=True)
class HighScore:
    """Best score so far and who set it."""
    score: int = 0
    name: str = PLACEHOLDER_NAME

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return {"score": self.score, "name": self.name}

    @classmethod
    def from_dict(cls, data: Any) -> Optional["HighScore"]:
        """
        Validate a stored record.

        Args:
            data: Whatever was read from storage

        Returns:
            HighScore, or None if the record is malformed
        """
        if not isinstance(data, dict):
            return None

        score = data.get("score")
        name = data.get("name")

        # bool is an int subclass; a stored true/false is not a score
        if isinstance(score, bool) or not isinstance(score, (int, float)):
            return None
        # An int too large for a float counts as infinite
        try:
            finite = math.isfinite(score)
        except OverflowError:
            return None
        if not finite or score < 0:
            return None
        if not isinstance(name, str) or not name.strip():
            return None

        return cls(score=int(score), name=name.strip())


class HighScoreStore:
    """
    Loads, compares and saves the high score.

    Persistence is best effort: a failed save keeps the new record in
    memory and the game carries on.
    """

    def __init__(self, storage: JsonKeyValueStore, key: str = STORAGE_KEY):
        self.storage = storage
        self.key = key
        self.current = self.load()

    def load(self) -> HighScore:
        """Read the persisted record, falling back to the default."""
        record = HighScore.from_dict(self.storage.get(self.key))
        if record is None:
            logger.debug("No valid high score under %r, using default", self.key)
            return HighScore()
        return record

    def is_new_record(self, score: int) -> bool:
        """True only for a strictly greater score."""
        return score > self.current.score

    def record(self, score: int, name: Optional[str]) -> bool:
        """
        Store a new high score.

        Args:
            score: The achieved score
            name: Player name; blank or None becomes "Anonymous"

        Returns:
            True if the record was replaced
        """
        if not self.is_new_record(score):
            return False

        clean_name = (name or "").strip() or ANONYMOUS_NAME
        previous = self.current.score
        self.current = HighScore(score=score, name=clean_name)
        logger.info("New high score: %d by %s (previous: %d)", score, clean_name, previous)

        if not self.storage.set(self.key, self.current.to_dict()):
            logger.warning("High score kept in memory only")

        return True
