"""Domain layer - Pure entities for translation requests and languages."""

from .cancellation_token import CancellationToken
from .language_option import SUPPORTED_LANGUAGES, LanguageOption, find_language
from .translation_request import (
    AUTO_DETECT,
    BASE_LANGUAGE,
    TranslationRequest,
    normalize_language_code,
)

__all__ = [
    "AUTO_DETECT",
    "BASE_LANGUAGE",
    "CancellationToken",
    "LanguageOption",
    "SUPPORTED_LANGUAGES",
    "TranslationRequest",
    "find_language",
    "normalize_language_code",
]
