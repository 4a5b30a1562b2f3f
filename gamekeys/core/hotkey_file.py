"""Load and save the user hotkey file.

The file is a flat ``<event name> = <KEY NAME>`` list grouped under one
comment header per category::

    # fheroes2 hotkey file (saved by version 1.0.0)

    # Main Menu:
    new game = N
    ...

Event names are matched exactly; key names are case-insensitive.
Nothing here raises for a missing, unreadable or unwritable file: hotkeys
fall back to their defaults.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ..config import APP_NAME, get_hotkey_file_path
from ..shared.core.store import is_file
from ..shared.core.tinyconfig import TinyConfig
from .binding_store import BindingStore, get_binding_store, initialize_binding_store
from .events import get_hotkey_category_name
from .keys import build_name_to_key, key_sym_get_name

logger = logging.getLogger(__name__)


def _get_version() -> str:
    from .. import __version__

    return __version__


def get_hotkey_file_content(store: BindingStore | None = None, version: str | None = None) -> str:
    """Render the bindings of a store in hotkey file format."""
    if store is None:
        store = get_binding_store()
    if version is None:
        version = _get_version()

    lines = [f"# {APP_NAME} hotkey file (saved by version {version})", ""]

    current_category = None
    for event in store.events():
        category = store.category(event)
        if category != current_category:
            if current_category is not None:
                lines.append("")
            lines.append(f"# {get_hotkey_category_name(category)}:")
            current_category = category

        key_name = key_sym_get_name(store.get(event)).upper()
        lines.append(f"{store.name(event)} = {key_name}")

    return "\n".join(lines) + "\n"


def apply_hotkey_config(store: BindingStore, config: TinyConfig) -> int:
    """Overwrite store bindings with the keys named in a parsed hotkey file.

    Events missing from the file, or naming an unknown key, keep their
    current binding.

    Returns:
        Number of bindings applied.
    """
    name_to_key = build_name_to_key()
    applied = 0
    for event in store.events():
        value = config.str_params(store.name(event))
        if not value:
            continue

        value = value.upper()
        key = name_to_key.get(value)
        if key is None:
            logger.debug("Event '%s' has unknown key '%s', keeping default", store.name(event), value)
            continue

        store.set(event, key)
        applied += 1
        logger.debug("Event '%s' has key '%s'", store.name(event), value)
    return applied


def save_hotkeys(path: str | Path, store: BindingStore | None = None) -> bool:
    """Write the bindings of a store to a hotkey file.

    Returns:
        True on success, False if the file could not be written.
    """
    path = Path(path).expanduser()
    data = get_hotkey_file_content(store)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(data, encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to write hotkey file %s: %s", path, exc)
        return False
    return True


def load_hotkeys(filename: str | Path | None, fallback_path: str | Path | None = None) -> BindingStore:
    """Reset bindings to their defaults and apply a user hotkey file.

    If ``filename`` is missing or cannot be read, the default bindings are
    written to ``fallback_path`` (the hotkey file in the config directory
    by default) so the user has a file to edit.

    Returns:
        The process-wide binding store.
    """
    store = initialize_binding_store()

    is_loaded = False
    if filename and is_file(filename):
        config = TinyConfig("=", "#")
        is_loaded = config.load(Path(filename).expanduser())
        if is_loaded:
            apply_hotkey_config(store, config)

    if not is_loaded:
        if fallback_path is None:
            fallback_path = get_hotkey_file_path()
        logger.debug("Hotkey file %s not loaded, writing defaults to %s", filename, fallback_path)
        save_hotkeys(fallback_path, store)

    return store
