"""JSON-backed application settings."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

from .config import get_settings_path

logger = logging.getLogger(__name__)


class SettingsStore:
    """Settings persisted as a JSON object in the config directory."""

    _instance: SettingsStore | None = None

    def __init__(self, path: str | Path | None = None) -> None:
        self._path = Path(path) if path is not None else None
        self._settings: dict | None = None

    @classmethod
    def get_instance(cls) -> SettingsStore:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        cls._instance = None

    @property
    def path(self) -> Path:
        # Resolved lazily so the config directory can change before first use.
        return self._path if self._path is not None else get_settings_path()

    def load_all(self) -> dict:
        """Load all settings, returning an empty dict if the file is missing or invalid."""
        if self._settings is not None:
            return self._settings

        try:
            payload = json.loads(self.path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            payload = {}
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable settings file %s: %s", self.path, exc)
            payload = {}

        self._settings = payload if isinstance(payload, dict) else {}
        return self._settings

    def save_all(self, settings: dict) -> None:
        self._settings = dict(settings)
        self.save()

    def get(self, key: str, default: Any = None) -> Any:
        return self.load_all().get(key, default)

    def set(self, key: str, value: Any) -> None:
        self.load_all()[key] = value

    def save(self) -> bool:
        """Write settings to disk.

        Returns:
            True on success, False if the file could not be written.
        """
        settings = self.load_all()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(settings, indent=2, sort_keys=True), encoding="utf-8")
        except OSError as exc:
            logger.warning("Failed to save settings to %s: %s", self.path, exc)
            return False
        return True
