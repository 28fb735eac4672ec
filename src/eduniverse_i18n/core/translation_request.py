"""Translation request entity - one (text, language) pair to translate."""

from dataclasses import dataclass

BASE_LANGUAGE = "en"
AUTO_DETECT = "auto"


def normalize_language_code(code: str) -> str:
    """
    Strip regional subtags from a language code.

    Vendor APIs reject or mishandle subtagged codes, so "zh-Hans" becomes "zh"
    and "pt_BR" becomes "pt". Case is preserved.
    """
    return code.replace("_", "-").split("-")[0]


@dataclass(frozen=True)
class TranslationRequest:
    """A single text to translate into a target language."""

    source_text: str
    target_language: str
    source_language: str = AUTO_DETECT

    @property
    def resolved_source_language(self) -> str:
        """Source code sent to the vendor ("auto" means the base language)."""
        if self.source_language == AUTO_DETECT:
            return BASE_LANGUAGE
        return normalize_language_code(self.source_language)

    @property
    def resolved_target_language(self) -> str:
        return normalize_language_code(self.target_language)

    @property
    def is_same_language(self) -> bool:
        return self.resolved_source_language == self.resolved_target_language

    @property
    def is_short_circuit(self) -> bool:
        """True when no remote call is needed and the source text is the answer."""
        if not self.source_text or not self.target_language:
            return True
        return self.is_same_language
