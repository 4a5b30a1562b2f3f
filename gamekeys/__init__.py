"""gamekeys - hotkey bindings for fheroes2."""

__version__ = "1.0.0"
