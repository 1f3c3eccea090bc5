"""
Key-Value Storage - A small JSON file used like browser localStorage.

Every read and write goes to disk. Failures never propagate: a missing
or corrupt file reads as empty and a failed write returns False.
"""
import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)


class JsonKeyValueStore:
    """
    Persist JSON-serializable values under string keys in one file.
    """

    def __init__(self, path: str):
        """
        Initialize the store.

        Args:
            path: JSON file to read and write (created on first write)
        """
        self.path = Path(path).expanduser()

    def _read_all(self) -> Dict[str, Any]:
        """Load the whole file, returning an empty dict if unusable."""
        if not self.path.exists():
            return {}

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}

        if not isinstance(data, dict):
            logger.warning("Ignoring store %s: top level is not an object", self.path)
            return {}

        return data

    def get(self, key: str) -> Optional[Any]:
        """
        Read a value.

        Args:
            key: Entry name

        Returns:
            The stored value, or None if absent
        """
        return self._read_all().get(key)

    def set(self, key: str, value: Any) -> bool:
        """
        Write a value, keeping the other entries.

        Args:
            key: Entry name
            value: JSON-serializable value

        Returns:
            True if the write reached disk
        """
        data = self._read_all()
        data[key] = value

        try:
            # Serialize before opening so a bad value cannot truncate the file
            text = json.dumps(data, indent=2)
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "w", encoding="utf-8") as f:
                f.write(text)
        except (OSError, TypeError, ValueError) as e:
            logger.warning("Could not write %s to %s: %s", key, self.path, e)
            return False

        return True
