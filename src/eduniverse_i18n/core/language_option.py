"""Language option entity and the list of languages offered in settings."""

from dataclasses import dataclass
from typing import List, Optional


@dataclass(frozen=True)
class LanguageOption:
    """A selectable UI language."""

    code: str
    name: str


SUPPORTED_LANGUAGES: List[LanguageOption] = [
    LanguageOption("en", "English"),
    LanguageOption("es", "Spanish"),
    LanguageOption("fr", "French"),
    LanguageOption("de", "German"),
    LanguageOption("it", "Italian"),
    LanguageOption("pt", "Portuguese"),
    LanguageOption("ru", "Russian"),
    LanguageOption("ja", "Japanese"),
    LanguageOption("ko", "Korean"),
    LanguageOption("zh-Hans", "Chinese (Simplified)"),
    LanguageOption("zh-Hant", "Chinese (Traditional)"),
    LanguageOption("ar", "Arabic"),
    LanguageOption("hi", "Hindi"),
    LanguageOption("nl", "Dutch"),
    LanguageOption("pl", "Polish"),
    LanguageOption("tr", "Turkish"),
    LanguageOption("vi", "Vietnamese"),
    LanguageOption("th", "Thai"),
    LanguageOption("id", "Indonesian"),
    LanguageOption("cs", "Czech"),
    LanguageOption("sv", "Swedish"),
    LanguageOption("da", "Danish"),
    LanguageOption("fi", "Finnish"),
    LanguageOption("no", "Norwegian"),
    LanguageOption("he", "Hebrew"),
    LanguageOption("uk", "Ukrainian"),
    LanguageOption("ro", "Romanian"),
    LanguageOption("bg", "Bulgarian"),
    LanguageOption("hr", "Croatian"),
    LanguageOption("sk", "Slovak"),
    LanguageOption("sl", "Slovenian"),
    LanguageOption("el", "Greek"),
    LanguageOption("hu", "Hungarian"),
]


def find_language(code: str) -> Optional[LanguageOption]:
    """Return the supported language with this exact code, if any."""
    for option in SUPPORTED_LANGUAGES:
        if option.code == code:
            return option
    return None
