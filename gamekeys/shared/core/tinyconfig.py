"""Line-oriented ``name = value`` config reader."""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)


class TinyConfig:
    """Reader for flat ``name <separator> value`` files with comment lines."""

    def __init__(self, separator: str = "=", comment: str = "#") -> None:
        self._separator = separator
        self._comment = comment
        self._params: dict[str, str] = {}

    def load(self, path: str | Path) -> bool:
        """Load parameters from a file.

        Bytes that are not valid UTF-8 are replaced, so they only spoil the
        line they appear on. A leading byte order mark is dropped.

        Returns:
            True if the file was read, False if it is missing or unreadable.
        """
        try:
            text = Path(path).read_text(encoding="utf-8-sig", errors="replace")
        except OSError as exc:
            logger.debug("Cannot read config file %s: %s", path, exc)
            return False

        self.parse(text)
        return True

    def parse(self, text: str) -> None:
        """Parse config text, replacing any previously loaded parameters."""
        self._params = {}
        for line in text.splitlines():
            stripped = line.strip()
            if not stripped or stripped.startswith(self._comment):
                continue

            name, sep, value = stripped.partition(self._separator)
            if not sep:
                continue

            name = name.strip()
            if name:
                # First definition wins.
                self._params.setdefault(name, value.strip())

    def str_params(self, name: str) -> str:
        """Get a parameter value, or an empty string if it is not set."""
        return self._params.get(name, "")

    def exists(self, name: str) -> bool:
        return name in self._params

    def names(self) -> list[str]:
        return list(self._params)
