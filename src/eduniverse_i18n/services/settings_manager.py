"""Settings Manager - Handles translation credential and tuning configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

logger = logging.getLogger(__name__)

DEFAULT_API_HOST = "deep-translate1.p.rapidapi.com"
DEFAULT_TIMEOUT_SECONDS = 10.0
DEFAULT_DEBOUNCE_MS = 100


class SettingsManager:
    """
    Manages settings and API key configuration.

    Reads values from the environment after loading a .env file in the
    project root.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_translation_api_key(self) -> Optional[str]:
        """Get the RapidAPI key from environment."""
        key = os.getenv("RAPIDAPI_KEY")
        return key.strip() if key and key.strip() else None

    def get_translation_api_host(self) -> str:
        host = os.getenv("TRANSLATION_API_HOST", "").strip()
        return host or DEFAULT_API_HOST

    def get_request_timeout(self) -> float:
        """Outbound call timeout in seconds."""
        return self._read_number("TRANSLATION_TIMEOUT_SECONDS", DEFAULT_TIMEOUT_SECONDS, float)

    def get_debounce_ms(self) -> int:
        """Delay before a binding issues its request."""
        return self._read_number("TRANSLATION_DEBOUNCE_MS", DEFAULT_DEBOUNCE_MS, int)

    def get_storage_path(self) -> Path:
        """Location of the local storage file holding the cache snapshot."""
        raw = os.getenv("EDUNIVERSE_STORAGE_PATH", "").strip()
        if raw:
            return Path(raw).expanduser()
        return Path.home() / ".eduniverse" / "local_storage.json"

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    def _read_number(self, name: str, default, cast):
        raw = os.getenv(name, "").strip()
        if not raw:
            return default
        try:
            value = cast(raw)
        except ValueError:
            logger.warning("Ignoring malformed %s=%r, using %s", name, raw, default)
            return default
        if value < 0:
            logger.warning("Ignoring negative %s=%r, using %s", name, raw, default)
            return default
        return value
