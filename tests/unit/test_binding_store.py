"""Tests for the runtime binding store."""

from __future__ import annotations

import pytest

from gamekeys.core.binding_store import (
    BindingStore,
    get_binding_store,
    initialize_binding_store,
    reset_binding_store,
)
from gamekeys.core.catalog import HotKeyCatalogError, build_catalog
from gamekeys.core.events import HotKeyCategory, HotKeyEvent
from gamekeys.core.keys import Key


class TestBindingStore:
    """Tests for reading and rebinding event keys."""

    def test_get_default(self):
        """Should start with the default key."""
        store = BindingStore()
        assert store.get(HotKeyEvent.END_TURN) is Key.KEY_E

    def test_set_overrides_key(self):
        """Should return the key set last."""
        store = BindingStore()
        store.set(HotKeyEvent.END_TURN, Key.KEY_Q)
        assert store.get(HotKeyEvent.END_TURN) is Key.KEY_Q

    def test_set_accepts_no_key(self):
        """Should allow unbinding an event."""
        store = BindingStore()
        store.set(HotKeyEvent.END_TURN, Key.NONE)
        assert store.get(HotKeyEvent.END_TURN) is Key.NONE

    def test_set_accepts_plain_int(self):
        """Should coerce plain integers to events and keys."""
        store = BindingStore()
        store.set(int(HotKeyEvent.END_TURN), int(Key.KEY_Q))
        assert store.get(HotKeyEvent.END_TURN) is Key.KEY_Q

    @pytest.mark.parametrize("event", [HotKeyEvent.NONE, HotKeyEvent.NO_EVENT, -1, 10_000])
    def test_out_of_range_ids(self, event):
        """Should raise IndexError for ids outside the real events."""
        store = BindingStore()
        with pytest.raises(IndexError):
            store.get(event)
        with pytest.raises(IndexError):
            store.set(event, Key.KEY_A)

    def test_name_and_category(self):
        """Should expose the catalog name and category of an event."""
        store = BindingStore()
        assert store.name(HotKeyEvent.BATTLE_WAIT) == "wait in battle"
        assert store.category(HotKeyEvent.BATTLE_WAIT) is HotKeyCategory.BATTLE

    def test_find_event_is_exact(self):
        """Should find events by their exact name only."""
        store = BindingStore()
        assert store.find_event("end turn") is HotKeyEvent.END_TURN
        assert store.find_event("End Turn") is None
        assert store.find_event("") is None

    def test_events_are_in_id_order(self):
        """Should iterate every real event in id order."""
        events = list(BindingStore().events())
        assert events[0] == HotKeyEvent.NONE + 1
        assert events[-1] == HotKeyEvent.NO_EVENT - 1
        assert events == sorted(events)

    def test_len_counts_sentinel_slot(self):
        """Should count the sentinel slot in its length."""
        assert len(BindingStore()) == HotKeyEvent.NO_EVENT

    def test_snapshot_is_a_copy(self):
        """Should not change a snapshot when the store changes."""
        store = BindingStore()
        snapshot = store.snapshot()
        store.set(HotKeyEvent.END_TURN, Key.KEY_Q)
        assert snapshot[HotKeyEvent.END_TURN] is Key.KEY_E

    def test_invalid_records_are_rejected(self):
        """Should reject records that break the catalog rules."""
        records = build_catalog()
        records[HotKeyEvent.SAVE_GAME].name = records[HotKeyEvent.NEXT_HERO].name
        with pytest.raises(HotKeyCatalogError):
            BindingStore(records)

    def test_records_are_copied(self):
        """Should not share records with the caller's list."""
        records = build_catalog()
        store = BindingStore(records)

        records[HotKeyEvent.END_TURN].key = Key.KEY_Q
        records[HotKeyEvent.END_TURN].name = "renamed"
        assert store.get(HotKeyEvent.END_TURN) is Key.KEY_E
        assert store.name(HotKeyEvent.END_TURN) == "end turn"

        store.set(HotKeyEvent.SAVE_GAME, Key.KEY_F2)
        assert records[HotKeyEvent.SAVE_GAME].key is Key.KEY_S


class TestProcessWideStore:
    """Tests for the process-wide store accessors."""

    def test_lazy_store_has_defaults(self):
        """Should build the defaults on first access."""
        assert get_binding_store().get(HotKeyEvent.SYSTEM_FULLSCREEN) is Key.KEY_F4

    def test_same_instance(self):
        """Should return the same store on every call."""
        assert get_binding_store() is get_binding_store()

    def test_initialize_restores_defaults(self):
        """Should replace the store with fresh defaults."""
        get_binding_store().set(HotKeyEvent.END_TURN, Key.KEY_Q)
        store = initialize_binding_store()
        assert store is get_binding_store()
        assert store.get(HotKeyEvent.END_TURN) is Key.KEY_E

    def test_reset(self):
        """Should build a new store after a reset."""
        first = get_binding_store()
        reset_binding_store()
        assert get_binding_store() is not first
