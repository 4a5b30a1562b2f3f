"""Core, UI-agnostic hotkey registry for gamekeys."""

from .binding_store import (
    BindingStore,
    get_binding_store,
    initialize_binding_store,
    reset_binding_store,
    set_binding_store,
)
from .catalog import DEFAULT_HOTKEYS, HotKeyCatalogError, HotKeyEventInfo, build_catalog, verify_catalog
from .events import HotKeyCategory, HotKeyEvent, get_hotkey_category_name, iter_hotkey_events
from .hotkey_file import apply_hotkey_config, get_hotkey_file_content, load_hotkeys, save_hotkeys
from .hotkeys import (
    get_hotkey_name_by_event_id,
    hotkey_hold_event,
    hotkey_press_event,
    keyboard_global_filter,
)
from .input_state import InputFrame, get_input_frame, reset_input_frame, set_input_frame
from .keys import Key, Modifier, build_name_to_key, key_from_platform, key_sym_get_name, split_platform_key

__all__ = [
    "DEFAULT_HOTKEYS",
    "BindingStore",
    "HotKeyCatalogError",
    "HotKeyCategory",
    "HotKeyEvent",
    "HotKeyEventInfo",
    "InputFrame",
    "Key",
    "Modifier",
    "apply_hotkey_config",
    "build_catalog",
    "build_name_to_key",
    "get_binding_store",
    "get_hotkey_category_name",
    "get_hotkey_file_content",
    "get_hotkey_name_by_event_id",
    "get_input_frame",
    "hotkey_hold_event",
    "hotkey_press_event",
    "initialize_binding_store",
    "iter_hotkey_events",
    "key_from_platform",
    "key_sym_get_name",
    "keyboard_global_filter",
    "load_hotkeys",
    "reset_binding_store",
    "reset_input_frame",
    "save_hotkeys",
    "set_binding_store",
    "set_input_frame",
    "split_platform_key",
    "verify_catalog",
]
