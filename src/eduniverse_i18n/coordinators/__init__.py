"""Coordinators - Orchestration layer connecting displayed strings with translation."""

from .translated_text_binding import BindingState, TranslatedTextBinding
from .language_coordinator import LanguageCoordinator

__all__ = [
    "BindingState",
    "LanguageCoordinator",
    "TranslatedTextBinding",
]
