"""Local storage abstraction - durable key/value blobs for snapshots and preferences."""

import json
import logging
import os
import threading
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the durable store cannot be read or written."""


class LocalStorage(ABC):
    """
    Abstract key/value blob store.

    Values are opaque strings (callers serialize). Implementations handle
    where the blobs live.
    """

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored value for key, or None if absent."""
        pass

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store or overwrite the value for key."""
        pass

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key if present."""
        pass


class InMemoryStorage(LocalStorage):
    """Process-local storage for tests. No persistence."""

    def __init__(self):
        self._items: dict[str, str] = {}

    def get_item(self, key: str) -> Optional[str]:
        return self._items.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._items[key] = value

    def remove_item(self, key: str) -> None:
        self._items.pop(key, None)


class JsonFileStorage(LocalStorage):
    """
    File-based storage keeping every key in one JSON document.

    Format:
    {
        "version": 1,
        "items": {
            "translationCache": "{...serialized snapshot...}",
            "eduniverse-theme": "{\"language\": \"es\"}"
        }
    }

    The whole document is rewritten on every set/remove, through a temporary
    file that replaces the original. An unreadable document is logged and
    replaced on the next write.
    """

    STORAGE_VERSION = 1

    def __init__(self, path: Path):
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get_item(self, key: str) -> Optional[str]:
        with self._lock:
            return self._read_items().get(key)

    def set_item(self, key: str, value: str) -> None:
        with self._lock:
            items = self._read_items_or_reset()
            items[key] = value
            self._write_items(items)

    def remove_item(self, key: str) -> None:
        with self._lock:
            items = self._read_items_or_reset()
            if key not in items:
                return
            del items[key]
            self._write_items(items)

    def _read_items_or_reset(self) -> dict[str, str]:
        try:
            return self._read_items()
        except StorageError as e:
            logger.warning("Discarding unreadable storage file: %s", e)
            return {}

    def _read_items(self) -> dict[str, str]:
        if not self._path.exists():
            return {}
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise StorageError(f"Error reading storage file {self._path}: {e}") from e

        items = data.get("items", {}) if isinstance(data, dict) else None
        if not isinstance(items, dict):
            raise StorageError(f"Unexpected storage layout in {self._path}")
        return items

    def _write_items(self, items: dict[str, str]) -> None:
        data = {"version": self.STORAGE_VERSION, "items": items}
        tmp_path = self._path.with_name(self._path.name + ".tmp")
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_text(
                json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8"
            )
            os.replace(tmp_path, self._path)
        except OSError as e:
            raise StorageError(f"Error writing storage file {self._path}: {e}") from e
