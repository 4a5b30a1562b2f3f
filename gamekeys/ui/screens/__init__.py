"""Modal screens for gamekeys."""

from .hotkey_help import HotkeyHelpScreen

__all__ = [
    "HotkeyHelpScreen",
]
