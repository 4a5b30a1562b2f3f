"""Process-wide display engine used by the system hotkey filter."""

from __future__ import annotations

from .protocols import DisplayEngineProtocol


class HeadlessDisplayEngine:
    """Display engine that only tracks the display mode.

    Used until a UI installs its own engine.
    """

    def __init__(self, fullscreen: bool = False) -> None:
        self._fullscreen = fullscreen
        self.render_count = 0

    def toggle_fullscreen(self) -> bool:
        self._fullscreen = not self._fullscreen
        return True

    def is_fullscreen(self) -> bool:
        return self._fullscreen

    def render(self) -> None:
        self.render_count += 1


_display_engine: DisplayEngineProtocol | None = None


def get_display_engine() -> DisplayEngineProtocol:
    global _display_engine
    if _display_engine is None:
        _display_engine = HeadlessDisplayEngine()
    return _display_engine


def set_display_engine(engine: DisplayEngineProtocol) -> None:
    global _display_engine
    _display_engine = engine


def reset_display_engine() -> None:
    global _display_engine
    _display_engine = None
