"""Services layer - configuration, caching and external translation integration."""

from eduniverse_i18n.services.settings_manager import SettingsManager

# Caching services
from eduniverse_i18n.services.caching import (
    CacheKey,
    CacheStats,
    InMemoryStorage,
    JsonFileStorage,
    LocalStorage,
    StorageError,
    TranslationCache,
)

# Translation services
from eduniverse_i18n.services.translation import (
    DeepTranslateClient,
    TranslationService,
    extract_translation,
    parse_response_body,
)

__all__ = [
    "SettingsManager",
    "CacheKey",
    "CacheStats",
    "InMemoryStorage",
    "JsonFileStorage",
    "LocalStorage",
    "StorageError",
    "TranslationCache",
    "DeepTranslateClient",
    "TranslationService",
    "extract_translation",
    "parse_response_body",
]
