"""Textual app mixins for gamekeys."""

from .hotkeys import HotkeysMixin

__all__ = [
    "HotkeysMixin",
]
