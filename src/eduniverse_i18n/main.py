"""Main entry point for the eduniverse-i18n command line tool."""

import argparse
import logging
import sys
from typing import List, Optional

from PySide6.QtCore import QCoreApplication, QTimer

from eduniverse_i18n.coordinators import BindingState, LanguageCoordinator
from eduniverse_i18n.services import (
    DeepTranslateClient,
    JsonFileStorage,
    SettingsManager,
    TranslationCache,
)


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="eduniverse-i18n",
        description="Translate UI strings through the EdUniverse translation layer.",
    )
    parser.add_argument("texts", nargs="*", help="Strings to translate")
    parser.add_argument("--lang", help="Set the preferred language (persisted)")
    parser.add_argument("--clear-cache", action="store_true", help="Clear the translation cache first")
    parser.add_argument("--stats", action="store_true", help="Print cache statistics and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """
    Bootstrap following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1. Initialize Application
    app = QCoreApplication.instance() or QCoreApplication(sys.argv[:1])
    app.setApplicationName("EdUniverse i18n")

    # 2. Initialize Infrastructure
    settings = SettingsManager()
    storage = JsonFileStorage(settings.get_storage_path())
    cache = TranslationCache(storage)
    client = DeepTranslateClient(
        cache=cache,
        api_key=settings.get_translation_api_key(),
        api_host=settings.get_translation_api_host(),
        timeout=settings.get_request_timeout(),
    )

    # 3. Instantiate Coordinator (Dependency Injection)
    coordinator = LanguageCoordinator(
        translation_service=client,
        storage=storage,
        debounce_ms=settings.get_debounce_ms(),
    )

    if args.clear_cache:
        client.clear_cache()
    if args.lang:
        try:
            coordinator.set_language(args.lang)
        except ValueError as e:
            print(f"error: {e}", file=sys.stderr)
            return 2

    if args.stats:
        stats = client.cache_stats()
        print(f"language={coordinator.language} entries={stats.size}")
        return 0

    if not args.texts:
        return 0

    # 4. Bind every string and run the event loop until none is pending
    bindings = [coordinator.create_binding(text) for text in args.texts]

    def report() -> None:
        for binding in bindings:
            print(binding.displayed_text)

    def finish_if_settled(_state=None) -> None:
        if all(b.state is not BindingState.PENDING for b in bindings):
            app.quit()

    for binding in bindings:
        binding.state_changed.connect(finish_if_settled)

    if any(b.state is BindingState.PENDING for b in bindings):
        # Upper bound in case a worker never reports back
        guard = QTimer()
        guard.setSingleShot(True)
        guard.timeout.connect(app.quit)
        guard.start(int((settings.get_request_timeout() + 2) * 1000))
        app.exec()
        guard.stop()

    report()
    for binding in bindings:
        coordinator.release_binding(binding)
    return 0


if __name__ == "__main__":
    sys.exit(main())
