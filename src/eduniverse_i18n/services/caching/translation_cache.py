"""Translation cache - (text, language) memoization persisted to local storage."""

import json
import logging
import threading
from dataclasses import dataclass
from typing import Optional

from eduniverse_i18n.services.caching.local_storage import LocalStorage, StorageError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CacheKey:
    """Exact-match cache key. No case or whitespace folding."""

    text: str
    lang: str

    SEPARATOR = "|"

    def serialize(self) -> str:
        return f"{self.text}{self.SEPARATOR}{self.lang}"

    @classmethod
    def deserialize(cls, raw: str) -> Optional["CacheKey"]:
        """Split on the last separator so texts containing '|' survive."""
        text, sep, lang = raw.rpartition(cls.SEPARATOR)
        if not sep:
            return None
        return cls(text=text, lang=lang)


@dataclass(frozen=True)
class CacheStats:
    """Snapshot of cache usage for diagnostics."""

    size: int
    hits: int
    misses: int

    @property
    def hit_rate(self) -> float:
        total = self.hits + self.misses
        return self.hits / total if total > 0 else 0.0


class TranslationCache:
    """
    Memoizes translations keyed by (source text, target language).

    Entries never expire; clear() is the only eviction. When a storage backend
    is given, the snapshot is loaded once on construction and fully rewritten
    on every put. Storage failures are logged and the in-memory map stays
    authoritative.
    """

    STORAGE_KEY = "translationCache"

    def __init__(self, storage: Optional[LocalStorage] = None):
        self._storage = storage
        self._entries: dict[CacheKey, str] = {}
        self._lock = threading.RLock()
        self._hits = 0
        self._misses = 0
        self._load_snapshot()

    def get(self, text: str, lang: str) -> Optional[str]:
        """Look up a cached translation. Returns None on a miss."""
        with self._lock:
            translated = self._entries.get(CacheKey(text, lang))
            if translated is None:
                self._misses += 1
            else:
                self._hits += 1
            return translated

    def put(self, text: str, lang: str, translated: str) -> None:
        """Store a translation unless it merely echoes the input."""
        if not translated or translated == text:
            return
        with self._lock:
            self._entries[CacheKey(text, lang)] = translated
            self._save_snapshot()

    def clear(self) -> None:
        """Drop every entry, in memory and in durable storage."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            if self._storage is None:
                return
            try:
                self._storage.remove_item(self.STORAGE_KEY)
            except StorageError as e:
                logger.warning("Failed to clear translation cache from storage: %s", e)

    def keys(self) -> list[tuple[str, str]]:
        """List all (text, lang) keys. Useful for diagnostics and testing."""
        with self._lock:
            return [(key.text, key.lang) for key in self._entries]

    @property
    def size(self) -> int:
        with self._lock:
            return len(self._entries)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(size=len(self._entries), hits=self._hits, misses=self._misses)

    def _load_snapshot(self) -> None:
        if self._storage is None:
            return
        try:
            raw = self._storage.get_item(self.STORAGE_KEY)
            if not raw:
                return
            snapshot = json.loads(raw)
        except (StorageError, json.JSONDecodeError) as e:
            logger.warning("Failed to load translation cache: %s", e)
            return

        if not isinstance(snapshot, dict):
            logger.warning("Ignoring translation cache snapshot of type %s", type(snapshot).__name__)
            return

        for raw_key, value in snapshot.items():
            key = CacheKey.deserialize(raw_key)
            if key is None or not isinstance(value, str):
                continue
            self._entries[key] = value
        logger.info("Loaded %d cached translations", len(self._entries))

    def _save_snapshot(self) -> None:
        if self._storage is None:
            return
        snapshot = {key.serialize(): value for key, value in self._entries.items()}
        try:
            self._storage.set_item(self.STORAGE_KEY, json.dumps(snapshot, ensure_ascii=False))
        except StorageError as e:
            logger.warning("Failed to save translation cache: %s", e)
