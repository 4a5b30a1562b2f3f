"""Textual application showing hotkeys in action."""

from __future__ import annotations

from pathlib import Path

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Static

from .config import FULLSCREEN_SETTINGS_KEY, get_hotkey_file_path
from .core.binding_store import get_binding_store
from .core.events import HotKeyEvent
from .core.hotkey_file import load_hotkeys
from .core.hotkeys import get_hotkey_name_by_event_id, hotkey_press_event
from .settings import SettingsStore
from .ui.display import TextualDisplayEngine
from .ui.mixins.hotkeys import HotkeysMixin
from .ui.screens.hotkey_help import HotkeyHelpScreen


class HotkeysApp(HotkeysMixin, App):
    """Shows which hotkey events fire for each key press."""

    TITLE = "gamekeys"

    CSS = """
    Screen {
        background: $surface;
    }

    #hints {
        height: auto;
        padding: 0 1;
        color: $text-muted;
    }

    #triggered {
        height: 1fr;
        padding: 1;
        border: solid $primary;
    }

    App.-fullscreen #triggered {
        border: none;
    }
    """

    BINDINGS = [
        Binding("f1", "show_hotkeys", "Hotkeys"),
    ]

    def __init__(
        self,
        hotkey_file: str | Path | None = None,
        settings_store: SettingsStore | None = None,
    ) -> None:
        super().__init__()
        self.hotkey_file = Path(hotkey_file) if hotkey_file else get_hotkey_file_path()
        self.settings_store = settings_store or SettingsStore.get_instance()
        self.display_engine = TextualDisplayEngine(
            self,
            fullscreen=bool(self.settings_store.get(FULLSCREEN_SETTINGS_KEY, False)),
        )
        self.last_triggered: list[HotKeyEvent] = []

    def compose(self) -> ComposeResult:
        yield Static(self._hints_text(), id="hints")
        yield Static("Press a key.", id="triggered")
        yield Footer()

    def on_mount(self) -> None:
        load_hotkeys(self.hotkey_file)
        self.display_engine.apply()
        self.query_one("#hints", Static).update(self._hints_text())

    def _hints_text(self) -> str:
        fullscreen = get_hotkey_name_by_event_id(HotKeyEvent.SYSTEM_FULLSCREEN)
        cancel = get_hotkey_name_by_event_id(HotKeyEvent.DEFAULT_EXIT)
        return f"{fullscreen}: toggle fullscreen   {cancel}: quit   F1: hotkeys"

    def handle_hotkeys(self) -> bool:
        # Don't react to game hotkeys while a modal screen is open
        if len(self.screen_stack) > 1:
            return False

        if hotkey_press_event(HotKeyEvent.DEFAULT_EXIT):
            self.exit()
            return True

        store = get_binding_store()
        self.last_triggered = [event for event in store.events() if hotkey_press_event(event)]
        if self.last_triggered:
            names = "\n".join(store.name(event) for event in self.last_triggered)
        else:
            names = "No hotkey bound to this key."
        self.query_one("#triggered", Static).update(names)
        return False

    def action_show_hotkeys(self) -> None:
        if isinstance(self.screen, HotkeyHelpScreen):
            return
        self.push_screen(HotkeyHelpScreen())
