"""Static lookup tables shared by the notation parser and stringifier."""

from __future__ import annotations

from types import MappingProxyType

ALIASES = MappingProxyType(
    {
        "left": "ArrowLeft",
        "right": "ArrowRight",
        "up": "ArrowUp",
        "down": "ArrowDown",
        "bs": "Backspace",
        "menu": "ContextMenu",
        "apps": "ContextMenu",
        "del": "Delete",
        "return": "Enter",
        "cr": "Enter",
        "esc": "Escape",
        "pgup": "PageUp",
        "pgdn": "PageDown",
        "lt": "<",
        "less": "<",
        "lesser": "<",
        "gt": ">",
        "greater": ">",
    }
)

# Iteration order is the canonical output order.
MODIFIERS = MappingProxyType(
    {
        "a": "alt",
        "c": "ctrl",
        "m": "meta",
        "s": "shift",
    }
)

LETTER_CODE_PREFIX = "Key"

# US QWERTY: code -> (unshifted, shifted)
CODE_TRANSLATIONS = MappingProxyType(
    {
        "Backquote": ("`", "~"),
        "Digit1": ("1", "!"),
        "Digit2": ("2", "@"),
        "Digit3": ("3", "#"),
        "Digit4": ("4", "$"),
        "Digit5": ("5", "%"),
        "Digit6": ("6", "^"),
        "Digit7": ("7", "&"),
        "Digit8": ("8", "*"),
        "Digit9": ("9", "("),
        "Digit0": ("0", ")"),
        "Minus": ("-", "_"),
        "Equal": ("=", "+"),
        "Backslash": ("\\", "|"),
        "BracketLeft": ("[", "{"),
        "BracketRight": ("]", "}"),
        "Semicolon": (";", ":"),
        "Quote": ("'", '"'),
        "Comma": (",", "<"),
        "Period": (".", ">"),
        "Slash": ("/", "?"),
    }
)

SPECIAL_CASES = MappingProxyType({"<": "lt", ">": "gt"})

UNIDENTIFIED = "Unidentified"
IGNORED_LABELS = frozenset({"", UNIDENTIFIED, "Dead"})
IGNORED_PREFIXES = ("Alt", "Control", "Hyper", "Meta", "Shift", "Super", "OS")


def is_ignored(label: str) -> bool:
    """Return True for labels that have no notation (pure modifiers, dead keys)."""
    return label in IGNORED_LABELS or label.startswith(IGNORED_PREFIXES)

# Whitespace as understood by key notation (the ECMAScript ``\s`` class).
WHITESPACE = frozenset(
    "\t\n\v\f\r \xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000\ufeff"
)
