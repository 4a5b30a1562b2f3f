"""Modal screen listing every hotkey binding."""

from __future__ import annotations

from rich.text import Text
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

from ...core.binding_store import get_binding_store
from ...core.events import get_hotkey_category_name
from ...core.hotkeys import get_hotkey_name_by_event_id


def build_hotkey_help_text() -> Text:
    """All bindings as styled text, one section per category."""
    store = get_binding_store()
    text = Text()
    current_category = None
    for event in store.events():
        category = store.category(event)
        if category != current_category:
            if current_category is not None:
                text.append("\n")
            text.append(get_hotkey_category_name(category), style="bold")
            text.append("\n")
            current_category = category

        text.append("  ")
        text.append(get_hotkey_name_by_event_id(event), style="bold yellow")
        text.append(f" {store.name(event)}\n")
    return text


class HotkeyHelpScreen(ModalScreen):
    """Modal screen showing the current hotkey bindings."""

    BINDINGS = [
        Binding("escape", "dismiss", "Close", show=False),
        Binding("f1", "dismiss", "Close", show=False),
    ]

    CSS = """
    HotkeyHelpScreen {
        align: center middle;
    }

    #hotkey-help {
        width: 60;
        height: 80%;
        background: $surface;
        border: solid $primary;
        padding: 1;
    }
    """

    def compose(self) -> ComposeResult:
        text = build_hotkey_help_text()
        text.append("\nClose: <esc>", style="dim")
        with VerticalScroll(id="hotkey-help"):
            yield Static(text, id="hotkey-help-content")
