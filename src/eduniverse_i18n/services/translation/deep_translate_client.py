"""Deep Translate client - translation via the RapidAPI request broker."""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

import requests

from eduniverse_i18n.core import AUTO_DETECT, SUPPORTED_LANGUAGES, LanguageOption, TranslationRequest
from eduniverse_i18n.services.caching import CacheStats, TranslationCache
from eduniverse_i18n.services.translation.response_shapes import describe_shape, parse_response_body
from eduniverse_i18n.services.translation.translation_service import TranslationService

logger = logging.getLogger(__name__)


class DeepTranslateClient(TranslationService):
    """
    Best-effort translation through Deep Translate on RapidAPI.

    One remote call per (text, language) pair not already cached. Every
    failure (missing key, network error, timeout, non-2xx, 429, unknown body)
    degrades to returning the input text, which is never cached.
    """

    DEFAULT_HOST = "deep-translate1.p.rapidapi.com"
    TRANSLATE_PATH = "/language/translate/v2"
    DEFAULT_TIMEOUT = 10.0
    MAX_BATCH_WORKERS = 4

    def __init__(
        self,
        cache: TranslationCache,
        api_key: Optional[str],
        api_host: str = DEFAULT_HOST,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        if cache is None:
            raise ValueError("TranslationCache must not be None")

        self._cache = cache
        self._api_key = api_key.strip() if api_key and api_key.strip() else None
        self._api_host = api_host
        self._timeout = timeout
        self._session = session or requests.Session()
        self._warned_missing_key = False

    @property
    def api_url(self) -> str:
        return f"https://{self._api_host}{self.TRANSLATE_PATH}"

    @property
    def is_enabled(self) -> bool:
        """True when an API credential is configured."""
        return self._api_key is not None

    def translate(self, text: str, target_lang: str, source_lang: str = AUTO_DETECT) -> str:
        request = TranslationRequest(text, target_lang, source_lang)
        if request.is_short_circuit:
            return text

        if not self._check_enabled():
            return text

        cached = self._cache.get(text, target_lang)
        if cached is not None:
            logger.debug("Translation cache hit for %r (%s)", text[:60], target_lang)
            return cached

        translated = self._fetch(request)
        if translated is None:
            return text

        self._cache.put(text, target_lang, translated)
        return translated

    def translate_batch(
        self, texts: List[str], target_lang: str, source_lang: str = AUTO_DETECT
    ) -> List[str]:
        """Fan out one translate() per text; each element fails independently."""
        if not texts or not target_lang:
            return list(texts)
        if TranslationRequest("", target_lang, source_lang).is_same_language:
            return list(texts)
        if not self._check_enabled():
            return list(texts)

        workers = min(self.MAX_BATCH_WORKERS, len(texts))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(lambda t: self.translate(t, target_lang, source_lang), texts))

    def supported_languages(self) -> List[LanguageOption]:
        return list(SUPPORTED_LANGUAGES)

    def cache_stats(self) -> CacheStats:
        return self._cache.stats()

    def clear_cache(self) -> None:
        self._cache.clear()

    def _check_enabled(self) -> bool:
        if self._api_key is not None:
            return True
        if not self._warned_missing_key:
            logger.warning(
                "RapidAPI key not configured. Set RAPIDAPI_KEY in .env to enable translation."
            )
            self._warned_missing_key = True
        return False

    def _fetch(self, request: TranslationRequest) -> Optional[str]:
        """Issue the remote call. Returns None on any failure."""
        headers = {
            "Content-Type": "application/json",
            "x-rapidapi-key": self._api_key,
            "x-rapidapi-host": self._api_host,
        }
        payload = {
            "q": request.source_text,
            "source": request.resolved_source_language,
            "target": request.resolved_target_language,
        }

        try:
            response = self._session.post(
                self.api_url, json=payload, headers=headers, timeout=self._timeout
            )
            # Body is read exactly once.
            body = response.text
        except requests.Timeout:
            logger.warning("Translation request timed out after %.1fs", self._timeout)
            return None
        except requests.RequestException as e:
            logger.error("Translation request failed: %s", e)
            return None

        if response.status_code == 429:
            logger.warning("Translation API quota exceeded. Using original text.")
            return None

        if not response.ok:
            logger.error(
                "Translation API error: %s %s - %s",
                response.status_code,
                response.reason,
                body[:200],
            )
            return None

        translated = parse_response_body(body)
        if translated is None:
            if body.strip():
                logger.warning("Unknown translation response format: %s", describe_shape(body))
            else:
                logger.warning("Empty response from translation API")
            return None

        logger.debug("Translation [%s] -> [%s]", request.source_text[:60], translated[:60])
        return translated
