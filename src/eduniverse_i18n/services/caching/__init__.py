"""Caching services - local storage backends and the translation cache."""

from eduniverse_i18n.services.caching.local_storage import (
    InMemoryStorage,
    JsonFileStorage,
    LocalStorage,
    StorageError,
)
from eduniverse_i18n.services.caching.translation_cache import CacheKey, CacheStats, TranslationCache

__all__ = [
    "CacheKey",
    "CacheStats",
    "InMemoryStorage",
    "JsonFileStorage",
    "LocalStorage",
    "StorageError",
    "TranslationCache",
]
