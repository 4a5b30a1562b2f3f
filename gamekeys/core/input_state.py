"""Snapshot of the keyboard state for the current input cycle."""

from __future__ import annotations

from dataclasses import dataclass

from .keys import Key


@dataclass
class InputFrame:
    """Keyboard state seen by hotkey queries during one input cycle."""

    key: Key = Key.NONE
    key_pressed: bool = False  # Fresh press this cycle
    key_held: bool = False  # Key is down

    def press(self, key: Key) -> None:
        """Record a fresh key press. A pressed key also counts as held."""
        self.key = key
        self.key_pressed = True
        self.key_held = True

    def hold(self, key: Key) -> None:
        """Record a key that stays down without a fresh press."""
        self.key = key
        self.key_pressed = False
        self.key_held = True

    def release(self) -> None:
        self.key = Key.NONE
        self.key_pressed = False
        self.key_held = False

    def end_cycle(self) -> None:
        """Finish an input cycle: the press is no longer fresh, the key stays held."""
        self.key_pressed = False


_input_frame: InputFrame | None = None


def get_input_frame() -> InputFrame:
    global _input_frame
    if _input_frame is None:
        _input_frame = InputFrame()
    return _input_frame


def set_input_frame(frame: InputFrame) -> None:
    global _input_frame
    _input_frame = frame


def reset_input_frame() -> None:
    global _input_frame
    _input_frame = None
