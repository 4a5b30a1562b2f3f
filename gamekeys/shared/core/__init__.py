"""Shared collaborators: filesystem helpers, config codec, display and protocols."""

from .display import HeadlessDisplayEngine, get_display_engine, reset_display_engine, set_display_engine
from .protocols import DisplayEngineProtocol, SettingsStoreProtocol
from .store import CONFIG_DIR_ENV, concat_path, get_config_directory, is_file
from .tinyconfig import TinyConfig

__all__ = [
    "CONFIG_DIR_ENV",
    "DisplayEngineProtocol",
    "HeadlessDisplayEngine",
    "SettingsStoreProtocol",
    "TinyConfig",
    "concat_path",
    "get_config_directory",
    "get_display_engine",
    "is_file",
    "reset_display_engine",
    "set_display_engine",
]
