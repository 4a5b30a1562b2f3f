"""Protocols for the collaborators the hotkey core talks to."""

from __future__ import annotations

from typing import Any, Protocol


class SettingsStoreProtocol(Protocol):
    """Persisted application settings."""

    def load_all(self) -> dict: ...

    def save_all(self, settings: dict) -> None: ...

    def get(self, key: str, default: Any = None) -> Any: ...

    def set(self, key: str, value: Any) -> None: ...

    def save(self) -> bool: ...


class DisplayEngineProtocol(Protocol):
    """Display mode control."""

    def toggle_fullscreen(self) -> bool: ...

    def is_fullscreen(self) -> bool: ...

    def render(self) -> None: ...
