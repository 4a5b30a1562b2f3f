"""Key codes, display names and platform key translation.

Keys are a dense integer enumeration so the full set of representable keys
can be walked from ``Key.NONE`` up to (not including) ``Key.LAST_KEY``.
"""

from __future__ import annotations

from enum import IntEnum, IntFlag, auto


class Key(IntEnum):
    """Every key a hotkey can be bound to."""

    NONE = 0

    KEY_BACKSPACE = auto()
    KEY_TAB = auto()
    KEY_RETURN = auto()
    KEY_ESCAPE = auto()
    KEY_SPACE = auto()
    KEY_DELETE = auto()
    KEY_INSERT = auto()

    KEY_0 = auto()
    KEY_1 = auto()
    KEY_2 = auto()
    KEY_3 = auto()
    KEY_4 = auto()
    KEY_5 = auto()
    KEY_6 = auto()
    KEY_7 = auto()
    KEY_8 = auto()
    KEY_9 = auto()

    KEY_A = auto()
    KEY_B = auto()
    KEY_C = auto()
    KEY_D = auto()
    KEY_E = auto()
    KEY_F = auto()
    KEY_G = auto()
    KEY_H = auto()
    KEY_I = auto()
    KEY_J = auto()
    KEY_K = auto()
    KEY_L = auto()
    KEY_M = auto()
    KEY_N = auto()
    KEY_O = auto()
    KEY_P = auto()
    KEY_Q = auto()
    KEY_R = auto()
    KEY_S = auto()
    KEY_T = auto()
    KEY_U = auto()
    KEY_V = auto()
    KEY_W = auto()
    KEY_X = auto()
    KEY_Y = auto()
    KEY_Z = auto()

    KEY_MINUS = auto()
    KEY_EQUALS = auto()
    KEY_COMMA = auto()
    KEY_PERIOD = auto()
    KEY_SLASH = auto()
    KEY_SEMICOLON = auto()
    KEY_QUOTE = auto()
    KEY_LEFT_BRACKET = auto()
    KEY_RIGHT_BRACKET = auto()
    KEY_BACKSLASH = auto()
    KEY_BACKQUOTE = auto()

    KEY_UP = auto()
    KEY_DOWN = auto()
    KEY_LEFT = auto()
    KEY_RIGHT = auto()
    KEY_HOME = auto()
    KEY_END = auto()
    KEY_PAGE_UP = auto()
    KEY_PAGE_DOWN = auto()

    KEY_F1 = auto()
    KEY_F2 = auto()
    KEY_F3 = auto()
    KEY_F4 = auto()
    KEY_F5 = auto()
    KEY_F6 = auto()
    KEY_F7 = auto()
    KEY_F8 = auto()
    KEY_F9 = auto()
    KEY_F10 = auto()
    KEY_F11 = auto()
    KEY_F12 = auto()

    KEY_KP_0 = auto()
    KEY_KP_1 = auto()
    KEY_KP_2 = auto()
    KEY_KP_3 = auto()
    KEY_KP_4 = auto()
    KEY_KP_5 = auto()
    KEY_KP_6 = auto()
    KEY_KP_7 = auto()
    KEY_KP_8 = auto()
    KEY_KP_9 = auto()
    KEY_KP_ENTER = auto()

    KEY_SHIFT = auto()
    KEY_CONTROL = auto()
    KEY_ALT = auto()

    # Exclusive upper bound, not a real key.
    LAST_KEY = auto()


class Modifier(IntFlag):
    """Modifier mask reported alongside a platform key."""

    NONE = 0
    SHIFT = auto()
    CTRL = auto()
    ALT = auto()
    META = auto()


_SPECIAL_KEY_NAMES: dict[Key, str] = {
    Key.NONE: "None",
    Key.KEY_BACKSPACE: "Backspace",
    Key.KEY_TAB: "Tab",
    Key.KEY_RETURN: "Return",
    Key.KEY_ESCAPE: "Escape",
    Key.KEY_SPACE: "Space",
    Key.KEY_DELETE: "Delete",
    Key.KEY_INSERT: "Insert",
    Key.KEY_MINUS: "-",
    Key.KEY_EQUALS: "=",
    Key.KEY_COMMA: ",",
    Key.KEY_PERIOD: ".",
    Key.KEY_SLASH: "/",
    Key.KEY_SEMICOLON: ";",
    Key.KEY_QUOTE: "'",
    Key.KEY_LEFT_BRACKET: "[",
    Key.KEY_RIGHT_BRACKET: "]",
    Key.KEY_BACKSLASH: "\\",
    Key.KEY_BACKQUOTE: "`",
    Key.KEY_UP: "Up",
    Key.KEY_DOWN: "Down",
    Key.KEY_LEFT: "Left",
    Key.KEY_RIGHT: "Right",
    Key.KEY_HOME: "Home",
    Key.KEY_END: "End",
    Key.KEY_PAGE_UP: "Page Up",
    Key.KEY_PAGE_DOWN: "Page Down",
    Key.KEY_KP_ENTER: "KP Enter",
    Key.KEY_SHIFT: "Shift",
    Key.KEY_CONTROL: "Control",
    Key.KEY_ALT: "Alt",
}


def key_sym_get_name(key: Key) -> str:
    """Get the display name of a key.

    Letters and digits are named by their character, function keys as
    ``F<n>`` and keypad keys as ``KP <n>``. Anything outside the enumeration
    has an empty name.
    """
    name = _SPECIAL_KEY_NAMES.get(key)
    if name is not None:
        return name
    if not isinstance(key, Key):
        try:
            key = Key(key)
        except ValueError:
            return ""
    if key is Key.LAST_KEY:
        return ""

    suffix = key.name[len("KEY_"):]
    if suffix.startswith("KP_"):
        return f"KP {suffix[len('KP_'):]}"
    return suffix


def build_name_to_key() -> dict[str, Key]:
    """Map every uppercase key name to its key.

    Walks the whole key range; on a name collision the lowest key wins.
    """
    name_to_key: dict[str, Key] = {}
    for value in range(Key.NONE, Key.LAST_KEY):
        key = Key(value)
        name_to_key.setdefault(key_sym_get_name(key).upper(), key)
    return name_to_key


# Textual key strings -> Key. Letters, digits and F-keys are derived below.
_PLATFORM_KEYS: dict[str, Key] = {
    "backspace": Key.KEY_BACKSPACE,
    "tab": Key.KEY_TAB,
    "enter": Key.KEY_RETURN,
    "escape": Key.KEY_ESCAPE,
    "space": Key.KEY_SPACE,
    "delete": Key.KEY_DELETE,
    "insert": Key.KEY_INSERT,
    "minus": Key.KEY_MINUS,
    "equals_sign": Key.KEY_EQUALS,
    "comma": Key.KEY_COMMA,
    "full_stop": Key.KEY_PERIOD,
    "slash": Key.KEY_SLASH,
    "semicolon": Key.KEY_SEMICOLON,
    "apostrophe": Key.KEY_QUOTE,
    "left_square_bracket": Key.KEY_LEFT_BRACKET,
    "right_square_bracket": Key.KEY_RIGHT_BRACKET,
    "backslash": Key.KEY_BACKSLASH,
    "grave_accent": Key.KEY_BACKQUOTE,
    "up": Key.KEY_UP,
    "down": Key.KEY_DOWN,
    "left": Key.KEY_LEFT,
    "right": Key.KEY_RIGHT,
    "home": Key.KEY_HOME,
    "end": Key.KEY_END,
    "pageup": Key.KEY_PAGE_UP,
    "pagedown": Key.KEY_PAGE_DOWN,
}
_PLATFORM_KEYS.update({str(digit): Key[f"KEY_{digit}"] for digit in range(10)})
_PLATFORM_KEYS.update({chr(code): Key[f"KEY_{chr(code).upper()}"] for code in range(ord("a"), ord("z") + 1)})
_PLATFORM_KEYS.update({f"f{number}": Key[f"KEY_F{number}"] for number in range(1, 13)})

_PLATFORM_MODIFIERS: dict[str, Modifier] = {
    "shift": Modifier.SHIFT,
    "ctrl": Modifier.CTRL,
    "alt": Modifier.ALT,
    "meta": Modifier.META,
    "super": Modifier.META,
}


def key_from_platform(platform_key: str) -> Key:
    """Translate a platform (Textual) key string to a Key.

    Unknown keys translate to ``Key.NONE``.
    """
    if not platform_key:
        return Key.NONE
    key = _PLATFORM_KEYS.get(platform_key)
    if key is None and len(platform_key) == 1:
        # Shifted letters arrive as the uppercase character.
        key = _PLATFORM_KEYS.get(platform_key.lower())
    return key if key is not None else Key.NONE


def split_platform_key(event_key: str) -> tuple[str, Modifier]:
    """Split a combined key string like ``ctrl+f4`` into key and modifiers."""
    parts = event_key.split("+")
    modifiers = Modifier.NONE
    while len(parts) > 1 and parts[0] in _PLATFORM_MODIFIERS:
        modifiers |= _PLATFORM_MODIFIERS[parts.pop(0)]
    return "+".join(parts), modifiers
