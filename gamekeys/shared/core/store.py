"""Filesystem helpers for config storage."""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_DIR_ENV = "GAMEKEYS_CONFIG_DIR"


def get_config_directory(app_name: str) -> Path:
    """Resolve the per-user config directory for an application.

    ``GAMEKEYS_CONFIG_DIR`` overrides everything, then ``XDG_CONFIG_HOME``,
    then ``~/.config``. The directory is not created.
    """
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()

    xdg_home = os.environ.get("XDG_CONFIG_HOME")
    base = Path(xdg_home).expanduser() if xdg_home else Path.home() / ".config"
    return base / app_name


def concat_path(*parts: str | Path) -> Path:
    """Join path components."""
    if not parts:
        raise ValueError("concat_path() needs at least one path component")
    return Path(*parts)


def is_file(path: str | Path) -> bool:
    """Check whether a path names an existing regular file."""
    if not path:
        return False
    return Path(path).expanduser().is_file()
