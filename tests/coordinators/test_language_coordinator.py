"""Unit tests for LanguageCoordinator."""

import json
import threading
from unittest.mock import MagicMock

import pytest
from PySide6.QtCore import QTimer

from eduniverse_i18n.coordinators import BindingState, LanguageCoordinator
from eduniverse_i18n.services import InMemoryStorage, TranslationService


@pytest.fixture
def storage():
    return InMemoryStorage()


@pytest.fixture
def mock_translation_service():
    """Provide a mocked TranslationService translating into '<text>@<lang>'."""
    service = MagicMock(spec=TranslationService)
    service.translate.side_effect = lambda text, lang, source="auto": f"{text}@{lang}"
    service.translate_batch.side_effect = lambda texts, lang, source="auto": [
        f"{t}@{lang}" for t in texts
    ]
    return service


@pytest.fixture
def coordinator(qt_app, mock_translation_service, storage, thread_pool):
    return LanguageCoordinator(
        translation_service=mock_translation_service,
        storage=storage,
        debounce_ms=10,
        thread_pool=thread_pool,
    )


class TestLanguagePreference:
    """Tests for preferred language state and persistence."""

    def test_defaults_to_english(self, coordinator):
        assert coordinator.language == "en"

    def test_requires_translation_service(self, qt_app):
        with pytest.raises(ValueError):
            LanguageCoordinator(translation_service=None)

    def test_restores_stored_language(self, qt_app, mock_translation_service, storage):
        storage.set_item("eduniverse-theme", json.dumps({"mode": "dark", "language": "es"}))
        coordinator = LanguageCoordinator(mock_translation_service, storage)
        assert coordinator.language == "es"

    def test_unsupported_stored_language_falls_back(self, qt_app, mock_translation_service, storage):
        storage.set_item("eduniverse-theme", json.dumps({"language": "xx"}))
        coordinator = LanguageCoordinator(mock_translation_service, storage)
        assert coordinator.language == "en"

    def test_corrupted_preferences_fall_back(self, qt_app, mock_translation_service, storage):
        storage.set_item("eduniverse-theme", "{ invalid json }")
        coordinator = LanguageCoordinator(mock_translation_service, storage)
        assert coordinator.language == "en"

    def test_set_language_persists_and_keeps_other_preferences(self, coordinator, storage):
        storage.set_item("eduniverse-theme", json.dumps({"mode": "dark"}))

        coordinator.set_language("zh-Hant")

        stored = json.loads(storage.get_item("eduniverse-theme"))
        assert stored == {"mode": "dark", "language": "zh-Hant"}

    def test_set_language_emits_signal_once(self, coordinator):
        spy = MagicMock()
        coordinator.language_changed.connect(spy)

        coordinator.set_language("fr")
        coordinator.set_language("fr")

        spy.assert_called_once_with("fr")

    def test_unsupported_language_raises(self, coordinator):
        with pytest.raises(ValueError):
            coordinator.set_language("klingon")
        assert coordinator.language == "en"

    def test_supported_languages_listed(self, coordinator):
        assert len(coordinator.supported_languages()) == 33


class TestCoordinatorTranslation:
    """Tests for ad-hoc translation in the current language."""

    def test_translate_in_english_completes_synchronously(self, coordinator, mock_translation_service):
        single = MagicMock()
        many = MagicMock()

        coordinator.translate("Hello", single)
        coordinator.translate_many(["a", "b"], many)

        single.assert_called_once_with("Hello")
        many.assert_called_once_with(["a", "b"])
        mock_translation_service.translate.assert_not_called()
        mock_translation_service.translate_batch.assert_not_called()

    def test_translate_uses_current_language(self, coordinator, wait_until):
        coordinator.set_language("es")
        results = []

        coordinator.translate("Hello", results.append)
        coordinator.translate_many(["a", "b"], results.append)

        assert wait_until(lambda: len(results) == 2)
        assert "Hello@es" in results
        assert ["a@es", "b@es"] in results
        assert wait_until(lambda: coordinator.pending_requests == 0)

    def test_slow_service_does_not_block_event_loop(self, qt_app, storage, thread_pool, wait_until):
        gate = threading.Event()

        def slow_translate(text, lang, source="auto"):
            gate.wait(5)
            return f"{text}@{lang}"

        service = MagicMock(spec=TranslationService)
        service.translate.side_effect = slow_translate
        coordinator = LanguageCoordinator(service, storage, thread_pool=thread_pool)
        coordinator.set_language("fr")

        results = []
        ticks = []
        timer = QTimer()
        timer.timeout.connect(lambda: ticks.append(1))
        timer.start(5)

        coordinator.translate("Hello", results.append)
        assert results == []

        # Timers keep firing while the translation is still outstanding
        assert wait_until(lambda: len(ticks) >= 3)
        assert results == []

        gate.set()
        assert wait_until(lambda: results == ["Hello@fr"])
        timer.stop()

    def test_worker_error_delivers_original_text(self, qt_app, storage, thread_pool, wait_until):
        service = MagicMock(spec=TranslationService)
        service.translate_batch.side_effect = RuntimeError("unexpected")
        coordinator = LanguageCoordinator(service, storage, thread_pool=thread_pool)
        coordinator.set_language("de")

        results = []
        coordinator.translate_many(["a", "b"], results.append)

        assert wait_until(lambda: results == [["a", "b"]])


class TestCoordinatorBindings:
    """Bindings follow the preferred language until released."""

    def test_binding_follows_language_changes(self, coordinator, wait_until):
        coordinator.set_language("es")
        binding = coordinator.create_binding("Progress")
        assert binding.displayed_text == "Progress"
        assert coordinator.active_bindings == 1

        assert wait_until(lambda: binding.displayed_text == "Progress@es")

        coordinator.set_language("fr")
        assert binding.state is BindingState.PENDING
        assert wait_until(lambda: binding.displayed_text == "Progress@fr")

        coordinator.set_language("en")
        assert binding.state is BindingState.IDLE
        assert binding.displayed_text == "Progress"

    def test_release_tears_down_and_stops_following(self, coordinator, mock_translation_service, pump_events):
        binding = coordinator.create_binding("Progress")
        coordinator.release_binding(binding)

        coordinator.set_language("de")
        pump_events(0.1)

        assert binding.is_torn_down
        assert coordinator.active_bindings == 0
        mock_translation_service.translate.assert_not_called()

    def test_release_unknown_binding_is_noop(self, coordinator):
        binding = coordinator.create_binding("Progress")
        coordinator.release_binding(binding)
        coordinator.release_binding(binding)
        assert coordinator.active_bindings == 0
