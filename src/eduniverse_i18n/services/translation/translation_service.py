"""Translation Service - abstract interface for best-effort UI string translation."""

from abc import ABC, abstractmethod
from typing import List

from eduniverse_i18n.core import AUTO_DETECT


class TranslationService(ABC):
    """
    Abstract service translating UI strings.

    Implementations never raise to the caller: on any failure they return the
    original text unchanged.
    """

    @abstractmethod
    def translate(self, text: str, target_lang: str, source_lang: str = AUTO_DETECT) -> str:
        """
        Translate one string.

        Args:
            text: Text to translate.
            target_lang: Target language code (e.g. "es", "zh-Hans").
            source_lang: Source language code, "auto" for the base language.

        Returns:
            The translation, or text itself when translation is skipped or fails.
        """
        pass

    def translate_batch(
        self, texts: List[str], target_lang: str, source_lang: str = AUTO_DETECT
    ) -> List[str]:
        """Translate several strings, preserving order and length."""
        return [self.translate(text, target_lang, source_lang) for text in texts]
