"""Application constants and config file locations."""

from __future__ import annotations

from pathlib import Path

from .shared.core.store import concat_path, get_config_directory

APP_NAME = "fheroes2"
HOTKEY_FILE_NAME = f"{APP_NAME}.key"
SETTINGS_FILE_NAME = "settings.json"

# Settings keys
FULLSCREEN_SETTINGS_KEY = "fullscreen"


def get_hotkey_file_path() -> Path:
    """Fallback location of the hotkey file, written when no user file loads."""
    return concat_path(get_config_directory(APP_NAME), HOTKEY_FILE_NAME)


def get_settings_path() -> Path:
    return concat_path(get_config_directory(APP_NAME), SETTINGS_FILE_NAME)
