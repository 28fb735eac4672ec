"""Shared fixtures for Qt-driven tests."""

import time

import pytest
from PySide6.QtCore import QCoreApplication, QThreadPool


@pytest.fixture(scope="session")
def qt_app():
    """Provide the process-wide QCoreApplication."""
    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    return app


@pytest.fixture
def thread_pool(qt_app):
    """Provide a private thread pool so tests never share workers."""
    pool = QThreadPool()
    pool.setMaxThreadCount(4)
    yield pool
    pool.waitForDone(5000)


@pytest.fixture
def wait_until(qt_app):
    """Pump the event loop until predicate() holds or the timeout elapses."""

    def _wait(predicate, timeout: float = 3.0) -> bool:
        deadline = time.monotonic() + timeout
        while not predicate():
            if time.monotonic() > deadline:
                return False
            QCoreApplication.processEvents()
            time.sleep(0.005)
        return True

    return _wait


@pytest.fixture
def pump_events(qt_app):
    """Process pending events for a short period."""

    def _pump(duration: float = 0.05) -> None:
        deadline = time.monotonic() + duration
        while time.monotonic() < deadline:
            QCoreApplication.processEvents()
            time.sleep(0.005)

    return _pump
