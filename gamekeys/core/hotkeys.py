"""Hotkey queries and the always-on system hotkey filter."""

from __future__ import annotations

from ..config import FULLSCREEN_SETTINGS_KEY
from ..shared.core.display import get_display_engine
from ..shared.core.protocols import DisplayEngineProtocol, SettingsStoreProtocol
from .binding_store import get_binding_store
from .events import HotKeyEvent
from .input_state import get_input_frame
from .keys import Key, Modifier, key_from_platform, key_sym_get_name


def hotkey_press_event(event: HotKeyEvent) -> bool:
    """Check whether the key of an event was just pressed."""
    frame = get_input_frame()
    return frame.key_pressed and frame.key == get_binding_store().get(event)


def hotkey_hold_event(event: HotKeyEvent) -> bool:
    """Check whether the key of an event is held down."""
    frame = get_input_frame()
    return frame.key_held and frame.key == get_binding_store().get(event)


def get_hotkey_name_by_event_id(event: HotKeyEvent) -> str:
    """Uppercase name of the key bound to an event, for on-screen hints."""
    return key_sym_get_name(get_binding_store().get(event)).upper()


_in_global_filter = False


def keyboard_global_filter(
    platform_key: str,
    modifiers: Modifier | int = Modifier.NONE,
    *,
    display: DisplayEngineProtocol | None = None,
    settings: SettingsStoreProtocol | None = None,
) -> bool:
    """Handle system hotkeys ahead of normal hotkey polling.

    Toggles fullscreen when the platform key matches the fullscreen hotkey
    and neither Alt nor Ctrl is held, then saves the new display mode.
    Calls made while a toggle is rendering are ignored.

    Returns:
        True if the display mode was toggled.
    """
    global _in_global_filter
    if _in_global_filter:
        return False

    key = key_from_platform(platform_key)
    if key == Key.NONE or key != get_binding_store().get(HotKeyEvent.SYSTEM_FULLSCREEN):
        return False
    if modifiers & (Modifier.ALT | Modifier.CTRL):
        return False

    if display is None:
        display = get_display_engine()
    if settings is None:
        from ..settings import SettingsStore

        settings = SettingsStore.get_instance()

    _in_global_filter = True
    try:
        display.toggle_fullscreen()
        display.render()

        settings.set(FULLSCREEN_SETTINGS_KEY, display.is_fullscreen())
        settings.save()
    finally:
        _in_global_filter = False
    return True
