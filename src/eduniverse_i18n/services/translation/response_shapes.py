"""Normalization of polymorphic vendor response bodies to a plain string."""

import json
from dataclasses import dataclass
from typing import Any, Callable, List, Optional


@dataclass(frozen=True)
class ShapeMatcher:
    """A named extractor for one known response shape."""

    name: str
    extract: Callable[[Any], Optional[str]]


def _non_empty_str(value: Any) -> Optional[str]:
    if isinstance(value, str) and value:
        return value
    return None


def _first(value: Any) -> Any:
    if isinstance(value, list) and value:
        return value[0]
    return None


def _field(payload: Any, *path: str) -> Any:
    """Walk nested dicts along path; None when any step is missing."""
    current = payload
    for name in path:
        if not isinstance(current, dict):
            return None
        current = current.get(name)
    return current


def _nested_translated_text_list(payload: Any) -> Optional[str]:
    value = _field(payload, "data", "translations", "translatedText")
    if isinstance(value, list):
        return _non_empty_str(_first(value))
    return _non_empty_str(value)


def _nested_translations_list(payload: Any) -> Optional[str]:
    item = _first(_field(payload, "data", "translations"))
    return _non_empty_str(_field(item, "translatedText"))


def _top_level(name: str) -> Callable[[Any], Optional[str]]:
    return lambda payload: _non_empty_str(_field(payload, name))


def _array(payload: Any) -> Optional[str]:
    item = _first(payload)
    if isinstance(item, str):
        return _non_empty_str(item)
    return _non_empty_str(_field(item, "text")) or _non_empty_str(_field(item, "translatedText"))


# Priority order matters: nested vendor formats are checked before the
# generic single-field shapes.
RESPONSE_SHAPES: List[ShapeMatcher] = [
    ShapeMatcher("string", _non_empty_str),
    ShapeMatcher("data.translations.translatedText[]", _nested_translated_text_list),
    ShapeMatcher("data.translations[].translatedText", _nested_translations_list),
    ShapeMatcher("translatedText", _top_level("translatedText")),
    ShapeMatcher("text", _top_level("text")),
    ShapeMatcher("result", _top_level("result")),
    ShapeMatcher("translation", _top_level("translation")),
    ShapeMatcher("translated_text", _top_level("translated_text")),
    ShapeMatcher("data.translatedText", lambda p: _non_empty_str(_field(p, "data", "translatedText"))),
    ShapeMatcher("data.text", lambda p: _non_empty_str(_field(p, "data", "text"))),
    ShapeMatcher("array", _array),
]


def extract_translation(payload: Any) -> Optional[str]:
    """Return the translation from the first matching shape, or None."""
    for matcher in RESPONSE_SHAPES:
        result = matcher.extract(payload)
        if result is not None:
            return result
    return None


def parse_response_body(body: str) -> Optional[str]:
    """
    Turn a raw response body into a translation.

    Bodies that are not JSON are taken verbatim (stripped) when non-empty.
    Returns None for empty bodies and unrecognized shapes.
    """
    try:
        payload = json.loads(body)
    except ValueError:
        stripped = body.strip()
        return stripped or None
    return extract_translation(payload)


def describe_shape(body: str) -> str:
    """Short structural description of a body, for logging unknown formats."""
    try:
        payload = json.loads(body)
    except ValueError:
        return f"non-JSON body of {len(body)} chars"
    if isinstance(payload, dict):
        return "object with keys " + ", ".join(sorted(str(k) for k in payload))
    if isinstance(payload, list):
        return f"array of {len(payload)} items"
    return type(payload).__name__
