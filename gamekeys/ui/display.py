"""Display engine for Textual apps."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from textual.app import App

FULLSCREEN_CLASS = "-fullscreen"


class TextualDisplayEngine:
    """Fullscreen mode of a Textual app, shown through the ``-fullscreen`` CSS class."""

    def __init__(self, app: App, fullscreen: bool = False) -> None:
        self._app = app
        self._fullscreen = fullscreen

    def apply(self) -> None:
        """Sync the app's CSS class with the current mode."""
        self._app.set_class(self._fullscreen, FULLSCREEN_CLASS)

    def toggle_fullscreen(self) -> bool:
        self._fullscreen = not self._fullscreen
        self.apply()
        return True

    def is_fullscreen(self) -> bool:
        return self._fullscreen

    def render(self) -> None:
        self._app.refresh(layout=True)
