"""CLI command implementations."""

from __future__ import annotations

import argparse
import sys

from rich.console import Console
from rich.table import Table

from .config import get_hotkey_file_path
from .core.binding_store import BindingStore
from .core.events import get_hotkey_category_name
from .core.hotkey_file import get_hotkey_file_content, load_hotkeys, save_hotkeys
from .core.hotkeys import get_hotkey_name_by_event_id


def _load(args: argparse.Namespace) -> BindingStore:
    filename = args.file or get_hotkey_file_path()
    return load_hotkeys(filename)


def cmd_show(args: argparse.Namespace) -> int:
    """List the current bindings."""
    store = _load(args)

    if args.format == "file":
        sys.stdout.write(get_hotkey_file_content(store))
        return 0

    table = Table(title="Hotkeys")
    table.add_column("Category")
    table.add_column("Event")
    table.add_column("Key")
    for event in store.events():
        table.add_row(
            get_hotkey_category_name(store.category(event)),
            store.name(event),
            get_hotkey_name_by_event_id(event),
        )
    Console().print(table)
    return 0


def cmd_dump(args: argparse.Namespace) -> int:
    """Print the hotkey file of the default bindings."""
    sys.stdout.write(get_hotkey_file_content(BindingStore()))
    return 0


def cmd_write(args: argparse.Namespace) -> int:
    """Write the loaded bindings to a file."""
    store = _load(args)
    if not save_hotkeys(args.path, store):
        print(f"[gamekeys] Failed to write hotkey file '{args.path}'", file=sys.stderr)
        return 1
    print(f"Hotkeys written to {args.path}")
    return 0


def cmd_name(args: argparse.Namespace) -> int:
    """Print the key bound to one event."""
    store = _load(args)
    event = store.find_event(args.event_name)
    if event is None:
        print(f"[gamekeys] Unknown hotkey event '{args.event_name}'", file=sys.stderr)
        return 1
    print(get_hotkey_name_by_event_id(event))
    return 0
