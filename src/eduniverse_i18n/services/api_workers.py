"""Async workers for non-blocking translation calls using Qt threading."""

from typing import List

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from eduniverse_i18n.services.translation import TranslationService


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(str)
    batch_result = Signal(object)  # list[str]


class TranslationWorker(QRunnable):
    """
    Worker that runs one translate call in a background thread.

    Uses Qt's thread pool for efficient thread management. The result
    is delivered to the owning thread through translation_result.
    """

    def __init__(
        self,
        translation_service: TranslationService,
        text: str,
        target_lang: str,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.text = text
        self.target_lang = target_lang
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation call in background thread."""
        try:
            result = self.translation_service.translate(self.text, self.target_lang)
            self.signals.translation_result.emit(result)
        except Exception as e:
            # Services never raise; this guards against unexpected bugs
            self.signals.error.emit(f"Unexpected translation error: {str(e)}")
        finally:
            self.signals.finished.emit()


class BatchTranslationWorker(QRunnable):
    """Worker that translates a list of texts in a background thread."""

    def __init__(
        self,
        translation_service: TranslationService,
        texts: List[str],
        target_lang: str,
    ):
        super().__init__()
        self.translation_service = translation_service
        self.texts = list(texts)
        self.target_lang = target_lang
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the batch translation call in background thread."""
        try:
            results = self.translation_service.translate_batch(self.texts, self.target_lang)
            self.signals.batch_result.emit(list(results))
        except Exception as e:
            self.signals.error.emit(f"Unexpected batch translation error: {str(e)}")
        finally:
            self.signals.finished.emit()
