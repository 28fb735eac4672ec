"""Language Coordinator - preferred language state and translated string bindings."""

import json
import logging
from typing import Any, Callable, List, Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from eduniverse_i18n.core import BASE_LANGUAGE, LanguageOption, SUPPORTED_LANGUAGES, find_language
from eduniverse_i18n.services import LocalStorage, StorageError, TranslationService
from eduniverse_i18n.services.api_workers import BatchTranslationWorker, TranslationWorker
from eduniverse_i18n.coordinators.translated_text_binding import TranslatedTextBinding

logger = logging.getLogger(__name__)


class _CallbackRequest(QObject):
    """Helper delivering one ad-hoc translation result to its callback on the UI thread."""

    def __init__(self, on_done: Callable[[Any], None], fallback: Any, parent: "LanguageCoordinator"):
        super().__init__()
        self.on_done = on_done
        self.fallback = fallback
        self.parent_ref = parent

    @Slot(str)
    def on_translation_result(self, translated: str):
        self.on_done(translated)

    @Slot(object)
    def on_batch_result(self, translated: list):
        self.on_done(translated)

    @Slot(str)
    def on_error(self, error: str):
        logger.warning("Translation worker failed: %s", error)
        self.on_done(self.fallback)

    @Slot()
    def on_finished(self):
        coordinator = self.parent_ref
        if coordinator:
            coordinator._release_request(self)


class LanguageCoordinator(QObject):
    """
    Orchestrates UI translation for the current preferred language.

    Responsibilities:
    - Hold the preferred language and persist it across sessions.
    - Hand out bindings that follow language changes.
    - Translate ad-hoc strings and lists in the current language.
    """

    language_changed = Signal(str)

    PREFERENCES_KEY = "eduniverse-theme"

    def __init__(
        self,
        translation_service: TranslationService,
        storage: Optional[LocalStorage] = None,
        debounce_ms: int = TranslatedTextBinding.DEFAULT_DEBOUNCE_MS,
        thread_pool: Optional[QThreadPool] = None,
    ) -> None:
        super().__init__()

        if translation_service is None:
            raise ValueError("TranslationService must not be None")

        self._translation_service = translation_service
        self._storage = storage
        self._debounce_ms = debounce_ms
        self._thread_pool = thread_pool
        self._bindings: set[TranslatedTextBinding] = set()
        self._requests: set[_CallbackRequest] = set()
        self._language = self._load_language()

    @property
    def language(self) -> str:
        return self._language

    @property
    def active_bindings(self) -> int:
        return len(self._bindings)

    def supported_languages(self) -> List[LanguageOption]:
        return list(SUPPORTED_LANGUAGES)

    def set_language(self, code: str) -> None:
        """Switch the preferred language and re-arm every live binding."""
        if find_language(code) is None:
            raise ValueError(f"Unsupported language code: {code}")
        if code == self._language:
            return

        self._language = code
        self._save_language()
        self.language_changed.emit(code)

    def create_binding(self, text: str) -> TranslatedTextBinding:
        """Create a binding for text that tracks the preferred language."""
        binding = TranslatedTextBinding(
            translation_service=self._translation_service,
            debounce_ms=self._debounce_ms,
            thread_pool=self._thread_pool,
            parent=self,
        )
        self.language_changed.connect(binding.set_language)
        self._bindings.add(binding)
        binding.bind(text, self._language)
        return binding

    def release_binding(self, binding: TranslatedTextBinding) -> None:
        """Tear down a binding whose string left view."""
        if binding not in self._bindings:
            return
        self._bindings.discard(binding)
        self.language_changed.disconnect(binding.set_language)
        binding.teardown()
        binding.setParent(None)

    def translate(self, text: str, on_done: Callable[[str], None]) -> None:
        """
        Translate text in the current language off the UI thread.

        on_done receives the translation (or text itself) on the UI thread.
        Base-language and empty inputs complete synchronously.
        """
        if not text or self._language == BASE_LANGUAGE:
            on_done(text)
            return

        worker = TranslationWorker(
            translation_service=self._translation_service,
            text=text,
            target_lang=self._language,
        )
        request_helper = _CallbackRequest(on_done, text, self)
        worker.signals.translation_result.connect(request_helper.on_translation_result)
        self._start(worker, request_helper)

    def translate_many(self, texts: List[str], on_done: Callable[[List[str]], None]) -> None:
        """Translate a list off the UI thread; order and length are preserved."""
        if not texts or self._language == BASE_LANGUAGE:
            on_done(list(texts))
            return

        worker = BatchTranslationWorker(
            translation_service=self._translation_service,
            texts=texts,
            target_lang=self._language,
        )
        request_helper = _CallbackRequest(on_done, list(texts), self)
        worker.signals.batch_result.connect(request_helper.on_batch_result)
        self._start(worker, request_helper)

    @property
    def pending_requests(self) -> int:
        return len(self._requests)

    def _start(self, worker, request_helper: "_CallbackRequest") -> None:
        # Keep the helper alive while its worker runs in a background thread
        self._requests.add(request_helper)
        worker.signals.error.connect(request_helper.on_error)
        worker.signals.finished.connect(request_helper.on_finished)
        (self._thread_pool or QThreadPool.globalInstance()).start(worker)

    def _release_request(self, request_helper: "_CallbackRequest") -> None:
        self._requests.discard(request_helper)

    def _load_language(self) -> str:
        preferences = self._read_preferences()
        code = preferences.get("language")
        if isinstance(code, str) and find_language(code) is not None:
            return code
        if code is not None:
            logger.warning("Ignoring unsupported stored language %r", code)
        return BASE_LANGUAGE

    def _save_language(self) -> None:
        if self._storage is None:
            return
        preferences = self._read_preferences()
        preferences["language"] = self._language
        try:
            self._storage.set_item(self.PREFERENCES_KEY, json.dumps(preferences))
        except StorageError as e:
            logger.warning("Failed to save language preference: %s", e)

    def _read_preferences(self) -> dict:
        if self._storage is None:
            return {}
        try:
            raw = self._storage.get_item(self.PREFERENCES_KEY)
            preferences = json.loads(raw) if raw else {}
        except (StorageError, json.JSONDecodeError) as e:
            logger.warning("Failed to read preferences: %s", e)
            return {}
        return preferences if isinstance(preferences, dict) else {}
