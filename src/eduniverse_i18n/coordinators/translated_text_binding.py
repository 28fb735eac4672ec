"""Translated Text Binding - debounced translation of one displayed UI string."""

import logging
from enum import Enum
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, QTimer, Signal, Slot

from eduniverse_i18n.core import BASE_LANGUAGE, CancellationToken, TranslationRequest
from eduniverse_i18n.services import TranslationService
from eduniverse_i18n.services.api_workers import TranslationWorker

logger = logging.getLogger(__name__)


class BindingState(Enum):
    IDLE = "idle"
    PENDING = "pending"
    RESOLVED = "resolved"
    TORN_DOWN = "torn_down"


class _BindingRequest(QObject):
    """Helper holding the token of one dispatched request and routing its result."""

    def __init__(self, token: CancellationToken, parent: "TranslatedTextBinding"):
        super().__init__()
        self.token = token
        self.parent_ref = parent

    @Slot(str)
    def on_translation_result(self, translated: str):
        binding = self.parent_ref
        if binding:
            try:
                binding._apply_result(self.token, translated)
            except RuntimeError:
                # Binding might be destroyed, ignore
                pass

    @Slot(str)
    def on_translation_error(self, error: str):
        binding = self.parent_ref
        if binding:
            try:
                binding._apply_error(self.token, error)
            except RuntimeError:
                pass

    @Slot()
    def on_finished(self):
        binding = self.parent_ref
        if binding:
            binding._release_request(self)


class TranslatedTextBinding(QObject):
    """
    Live association between one displayed string and its translation.

    Every change of text or language cancels the previous request and shows the
    original text right away. After a short debounce a worker asks the
    translation service; its result is applied only if the token armed for it
    is still current, so the latest arming always wins regardless of response
    order. teardown() makes every later response a no-op.
    """

    text_changed = Signal(str)
    state_changed = Signal(object)

    DEFAULT_DEBOUNCE_MS = 100

    def __init__(
        self,
        translation_service: TranslationService,
        debounce_ms: int = DEFAULT_DEBOUNCE_MS,
        thread_pool: Optional[QThreadPool] = None,
        parent: Optional[QObject] = None,
    ):
        super().__init__(parent)

        if translation_service is None:
            raise ValueError("TranslationService must not be None")

        self._translation_service = translation_service
        self._thread_pool = thread_pool or QThreadPool.globalInstance()

        self._original_text = ""
        self._displayed_text = ""
        self._language = BASE_LANGUAGE
        self._state = BindingState.IDLE
        self._token: Optional[CancellationToken] = None

        # Keep helpers alive while their workers run in background threads
        self._requests: set[_BindingRequest] = set()

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.setInterval(debounce_ms)
        self._timer.timeout.connect(self._dispatch)

    @property
    def original_text(self) -> str:
        return self._original_text

    @property
    def displayed_text(self) -> str:
        return self._displayed_text

    @property
    def language(self) -> str:
        return self._language

    @property
    def state(self) -> BindingState:
        return self._state

    @property
    def is_torn_down(self) -> bool:
        return self._state is BindingState.TORN_DOWN

    def bind(self, text: str, language: str) -> None:
        """(Re)arm the binding for text in language."""
        if self.is_torn_down:
            raise RuntimeError("Cannot bind a torn down TranslatedTextBinding")

        self._cancel_pending()
        self._original_text = text
        self._language = language
        self._set_displayed(text)

        if TranslationRequest(text, language).is_short_circuit:
            self._set_state(BindingState.IDLE)
            return

        self._token = CancellationToken(label=f"{language}:{text[:40]}")
        self._set_state(BindingState.PENDING)
        self._timer.start()

    @Slot(str)
    def set_text(self, text: str) -> None:
        if self.is_torn_down or text == self._original_text:
            return
        self.bind(text, self._language)

    @Slot(str)
    def set_language(self, language: str) -> None:
        if self.is_torn_down or language == self._language:
            return
        self.bind(self._original_text, language)

    def teardown(self) -> None:
        """Detach from view: stop the timer and invalidate any in-flight request."""
        if self.is_torn_down:
            return
        self._cancel_pending()
        self._set_state(BindingState.TORN_DOWN)

    def _cancel_pending(self) -> None:
        self._timer.stop()
        if self._token is not None:
            self._token.cancel()
            self._token = None

    @Slot()
    def _dispatch(self) -> None:
        token = self._token
        if token is None or token.is_cancelled:
            return

        worker = TranslationWorker(
            translation_service=self._translation_service,
            text=self._original_text,
            target_lang=self._language,
        )

        request_helper = _BindingRequest(token, self)
        self._requests.add(request_helper)

        worker.signals.translation_result.connect(request_helper.on_translation_result)
        worker.signals.error.connect(request_helper.on_translation_error)
        worker.signals.finished.connect(request_helper.on_finished)

        self._thread_pool.start(worker)

    def _apply_result(self, token: CancellationToken, translated: str) -> None:
        if token is not self._token or token.is_cancelled:
            logger.debug("Ignoring stale translation result for %r", token)
            return

        self._token = None
        self._set_displayed(translated)
        if translated != self._original_text:
            self._set_state(BindingState.RESOLVED)
        else:
            self._set_state(BindingState.IDLE)

    def _apply_error(self, token: CancellationToken, error: str) -> None:
        if token is not self._token or token.is_cancelled:
            return

        logger.warning("Translation worker failed: %s", error)
        self._token = None
        self._set_displayed(self._original_text)
        self._set_state(BindingState.IDLE)

    def _release_request(self, request_helper: _BindingRequest) -> None:
        self._requests.discard(request_helper)

    def _set_displayed(self, text: str) -> None:
        if text == self._displayed_text:
            return
        self._displayed_text = text
        self.text_changed.emit(text)

    def _set_state(self, state: BindingState) -> None:
        if state is self._state:
            return
        self._state = state
        self.state_changed.emit(state)
