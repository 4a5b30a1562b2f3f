"""Runtime table of the key bound to each hotkey event."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import replace

from .catalog import HotKeyEventInfo, build_catalog, verify_catalog
from .events import HotKeyCategory, HotKeyEvent, iter_hotkey_events
from .keys import Key


class BindingStore:
    """Fixed-size store of binding records indexed by event id.

    The structure never changes after construction; only the bound key of a
    record can be replaced. Access is confined to the control thread.
    """

    def __init__(self, records: list[HotKeyEventInfo] | None = None) -> None:
        if records is None:
            records = build_catalog()
        else:
            verify_catalog(records)
            records = [replace(record) for record in records]
        self._records = records
        self._events_by_name = {records[event].name: event for event in iter_hotkey_events()}

    def _record(self, event: HotKeyEvent | int) -> HotKeyEventInfo:
        if not HotKeyEvent.NONE < event < HotKeyEvent.NO_EVENT:
            raise IndexError(f"Hotkey event id out of range: {int(event)}")
        return self._records[event]

    def get(self, event: HotKeyEvent | int) -> Key:
        """Get the key currently bound to an event."""
        return self._record(event).key

    def set(self, event: HotKeyEvent | int, key: Key) -> None:
        """Bind a key to an event. ``Key.NONE`` unbinds it."""
        self._record(event).key = Key(key)

    def name(self, event: HotKeyEvent | int) -> str:
        return self._record(event).name

    def category(self, event: HotKeyEvent | int) -> HotKeyCategory:
        return self._record(event).category

    def find_event(self, name: str) -> HotKeyEvent | None:
        """Find the event with exactly this name (case-sensitive)."""
        return self._events_by_name.get(name)

    def events(self) -> Iterator[HotKeyEvent]:
        """Iterate the real events in id order."""
        return iter_hotkey_events()

    def snapshot(self) -> dict[HotKeyEvent, Key]:
        """Copy of the current event -> key mapping."""
        return {event: self._records[event].key for event in iter_hotkey_events()}

    def __len__(self) -> int:
        return len(self._records)


_binding_store: BindingStore | None = None


def get_binding_store() -> BindingStore:
    """Get the process-wide binding store, building the defaults on first use."""
    global _binding_store
    if _binding_store is None:
        _binding_store = BindingStore()
    return _binding_store


def initialize_binding_store() -> BindingStore:
    """Rebuild the process-wide binding store from the catalog defaults."""
    global _binding_store
    _binding_store = BindingStore()
    return _binding_store


def set_binding_store(store: BindingStore) -> None:
    global _binding_store
    _binding_store = store


def reset_binding_store() -> None:
    """Drop the process-wide binding store (mainly for tests)."""
    global _binding_store
    _binding_store = None
