"""Hotkey input mixin for Textual apps."""

from __future__ import annotations

from typing import Any

from ...core.hotkeys import keyboard_global_filter
from ...core.input_state import get_input_frame
from ...core.keys import Key, key_from_platform, split_platform_key
from ...shared.core.protocols import DisplayEngineProtocol, SettingsStoreProtocol


class HotkeysMixin:
    """Mixin feeding Textual key events into the hotkey input frame.

    System hotkeys are filtered before anything else so they work even while
    a modal screen is open. Every other key is recorded as a fresh press,
    ``handle_hotkeys`` runs, then the frame is cleared (terminals report no
    key releases).
    """

    display_engine: DisplayEngineProtocol | None = None
    settings_store: SettingsStoreProtocol | None = None

    def on_key(self, event: Any) -> None:
        platform_key, modifiers = split_platform_key(event.key)

        if keyboard_global_filter(
            platform_key,
            modifiers,
            display=self.display_engine,
            settings=self.settings_store,
        ):
            event.prevent_default()
            event.stop()
            return

        key = key_from_platform(platform_key)
        if key != Key.NONE:
            frame = get_input_frame()
            frame.press(key)
            try:
                if self.handle_hotkeys():
                    event.prevent_default()
                    event.stop()
                    return
            finally:
                frame.release()

        # Pass to next mixin in chain if it has on_key
        parent = super()
        if hasattr(parent, "on_key"):
            parent.on_key(event)  # type: ignore[misc]

    def handle_hotkeys(self) -> bool:
        """React to the current input frame.

        Returns:
            True if a hotkey was consumed.
        """
        return False
