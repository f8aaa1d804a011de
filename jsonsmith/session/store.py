"""
Key-value stores used to persist tool session state between runs.
"""

import json
import logging
import os
from typing import Any, Optional, Protocol

logger = logging.getLogger(__name__)


class KeyValueStore(Protocol):
    """Protocol for the persistent store a tool session writes its state to."""

    def get(self, key: str, default: Any = None) -> Any:
        """Return the stored value or default."""
        ...

    def set(self, key: str, value: Any) -> None:
        """Store a JSON-serializable value under key."""
        ...


class MemoryStore:
    """In-process store; state lives as long as the object."""

    def __init__(self, initial: Optional[dict[str, Any]] = None):
        self._data: dict[str, Any] = dict(initial or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value


class JsonFileStore:
    """
    Store backed by a single JSON file.

    The whole file is rewritten on every set(). A missing file starts empty; an
    unreadable one is logged and also starts empty, mirroring how browser storage
    falls back to defaults.
    """

    def __init__(self, path: str):
        self.path = path
        self._data = self._load()

    def _load(self) -> dict[str, Any]:
        if not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.warning("Ignoring unreadable store %s: %s", self.path, e)
            return {}
        if not isinstance(data, dict):
            logger.warning("Ignoring store %s: top level is not an object", self.path)
            return {}
        return data

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        tmp_path = f"{self.path}.tmp"
        with open(tmp_path, "w", encoding="utf-8") as f:
            json.dump(self._data, f, ensure_ascii=False)
        os.replace(tmp_path, self.path)
