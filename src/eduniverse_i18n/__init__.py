"""
EdUniverse i18n - UI string translation for the EdUniverse learning platform.

This package provides:
- A persistent (text, language) translation cache
- A best-effort client for the Deep Translate API
- Debounced per-string bindings with stale-response suppression
"""

__version__ = "0.1.0"

from eduniverse_i18n.core import TranslationRequest, CancellationToken, LanguageOption
from eduniverse_i18n.services import DeepTranslateClient, TranslationCache

__all__ = [
    "TranslationRequest",
    "CancellationToken",
    "LanguageOption",
    "DeepTranslateClient",
    "TranslationCache",
]
