"""Tests for the Textual hotkey integration."""

from __future__ import annotations

import asyncio
from pathlib import Path

from gamekeys.app import HotkeysApp
from gamekeys.core.binding_store import get_binding_store
from gamekeys.core.events import HotKeyEvent
from gamekeys.core.input_state import get_input_frame
from gamekeys.core.keys import Key
from gamekeys.settings import SettingsStore
from gamekeys.ui.display import FULLSCREEN_CLASS
from gamekeys.ui.screens.hotkey_help import HotkeyHelpScreen, build_hotkey_help_text


def _make_app(tmp_path: Path, hotkeys: str | None = None) -> HotkeysApp:
    hotkey_file = tmp_path / "user.key"
    if hotkeys is not None:
        hotkey_file.write_text(hotkeys, encoding="utf-8")
    return HotkeysApp(hotkey_file=hotkey_file, settings_store=SettingsStore(tmp_path / "settings.json"))


class TestHotkeysApp:
    """Tests for the Textual hotkey app."""

    def test_fullscreen_hotkey_toggles_and_persists(self, tmp_path: Path):
        """Should toggle fullscreen with F4 and save the mode."""
        async def run() -> None:
            app = _make_app(tmp_path)
            async with app.run_test() as pilot:
                await pilot.press("f4")
                await pilot.pause()
                assert app.display_engine.is_fullscreen() is True
                assert app.has_class(FULLSCREEN_CLASS)

                await pilot.press("f4")
                await pilot.pause()
                assert app.display_engine.is_fullscreen() is False
                assert not app.has_class(FULLSCREEN_CLASS)

        asyncio.run(run())
        assert SettingsStore(tmp_path / "settings.json").get("fullscreen") is False

    def test_ctrl_fullscreen_key_does_not_toggle(self, tmp_path: Path):
        """Should ignore ctrl+F4."""
        async def run() -> None:
            app = _make_app(tmp_path)
            async with app.run_test() as pilot:
                await pilot.press("ctrl+f4")
                await pilot.pause()
                assert app.display_engine.is_fullscreen() is False

        asyncio.run(run())

    def test_fullscreen_setting_is_restored(self, tmp_path: Path):
        """Should start in the saved display mode."""
        settings = SettingsStore(tmp_path / "settings.json")
        settings.set("fullscreen", True)
        settings.save()

        async def run() -> None:
            app = _make_app(tmp_path)
            async with app.run_test() as pilot:
                await pilot.pause()
                assert app.display_engine.is_fullscreen() is True
                assert app.has_class(FULLSCREEN_CLASS)

        asyncio.run(run())

    def test_loads_user_hotkey_file_on_mount(self, tmp_path: Path):
        """Should apply the user hotkey file on mount."""
        async def run() -> None:
            app = _make_app(tmp_path, "toggle fullscreen = F11\n")
            async with app.run_test() as pilot:
                await pilot.pause()
                assert get_binding_store().get(HotKeyEvent.SYSTEM_FULLSCREEN) is Key.KEY_F11

                await pilot.press("f4")
                await pilot.pause()
                assert app.display_engine.is_fullscreen() is False

                await pilot.press("f11")
                await pilot.pause()
                assert app.display_engine.is_fullscreen() is True

        asyncio.run(run())

    def test_key_press_reports_triggered_events(self, tmp_path: Path):
        """Should report events bound to the pressed key."""
        async def run() -> None:
            app = _make_app(tmp_path)
            async with app.run_test() as pilot:
                await pilot.press("e")
                await pilot.pause()
                assert HotKeyEvent.END_TURN in app.last_triggered
                # The frame is cleared once the key is handled
                assert get_input_frame().key is Key.NONE

        asyncio.run(run())

    def test_help_screen_and_fullscreen_under_modal(self, tmp_path: Path):
        """Should toggle fullscreen while the help screen is open."""
        async def run() -> None:
            app = _make_app(tmp_path)
            exits = []
            app.exit = lambda *args, **kwargs: exits.append(args)
            async with app.run_test() as pilot:
                await pilot.press("f1")
                await pilot.pause()
                assert isinstance(app.screen, HotkeyHelpScreen)

                await pilot.press("f4")
                await pilot.pause()
                assert app.display_engine.is_fullscreen() is True

                await pilot.press("escape")
                await pilot.pause()
                assert not isinstance(app.screen, HotkeyHelpScreen)
                assert exits == []

        asyncio.run(run())

    def test_cancel_hotkey_exits(self, tmp_path: Path):
        """Should exit on the cancel hotkey."""
        async def run() -> None:
            app = _make_app(tmp_path)
            exits = []
            app.exit = lambda *args, **kwargs: exits.append(args)
            async with app.run_test() as pilot:
                await pilot.press("escape")
                await pilot.pause()
                assert exits == [()]

        asyncio.run(run())


class TestHotkeyHelpText:
    """Tests for the hotkey help listing."""

    def test_lists_every_event_under_its_category(self):
        """Should list every event under its category."""
        store = get_binding_store()
        lines = build_hotkey_help_text().plain.splitlines()
        assert lines[0] == "Main Menu"
        entries = [line for line in lines if line.startswith("  ")]
        assert len(entries) == len(list(store.events()))
        assert "  F4 toggle fullscreen" in lines
        assert "Castle" in lines

    def test_follows_current_bindings(self):
        """Should show the current bindings."""
        get_binding_store().set(HotKeyEvent.END_TURN, Key.KEY_LEFT_BRACKET)
        assert "  [ end turn" in build_hotkey_help_text().plain.splitlines()
