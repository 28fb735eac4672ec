"""Translation services - abstract interface and Deep Translate implementation."""

from eduniverse_i18n.services.translation.translation_service import TranslationService
from eduniverse_i18n.services.translation.deep_translate_client import DeepTranslateClient
from eduniverse_i18n.services.translation.response_shapes import (
    RESPONSE_SHAPES,
    ShapeMatcher,
    extract_translation,
    parse_response_body,
)

__all__ = [
    "TranslationService",
    "DeepTranslateClient",
    "RESPONSE_SHAPES",
    "ShapeMatcher",
    "extract_translation",
    "parse_response_body",
]
