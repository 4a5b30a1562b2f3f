"""Pytest fixtures for gamekeys tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from gamekeys.core.binding_store import reset_binding_store
from gamekeys.core.input_state import reset_input_frame
from gamekeys.settings import SettingsStore
from gamekeys.shared.core.display import reset_display_engine
from gamekeys.shared.core.store import CONFIG_DIR_ENV


@pytest.fixture(autouse=True)
def config_dir(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the config directory at a temp dir so tests never touch ~/.config."""
    path = tmp_path / "config"
    monkeypatch.setenv(CONFIG_DIR_ENV, str(path))
    return path


@pytest.fixture(autouse=True)
def reset_global_state():
    """Reset process-wide hotkey state after each test to avoid cross-test pollution."""
    yield
    reset_binding_store()
    reset_input_frame()
    reset_display_engine()
    SettingsStore.reset_instance()


class MockSettingsStore:
    """Mock settings store for testing."""

    def __init__(self, settings: dict | None = None):
        self.settings = settings or {}
        self.save_count = 0

    def load_all(self) -> dict:
        return self.settings

    def save_all(self, settings: dict) -> None:
        self.settings = settings
        self.save()

    def get(self, key: str, default=None):
        return self.settings.get(key, default)

    def set(self, key: str, value) -> None:
        self.settings[key] = value

    def save(self) -> bool:
        self.save_count += 1
        return True


@pytest.fixture
def settings_store() -> MockSettingsStore:
    return MockSettingsStore()
