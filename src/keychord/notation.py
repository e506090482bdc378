"""Conversion between key events and the bracketed key notation.

A chord is written either as a bare character (``a``, ``A``, ``/``) or as a
bracketed form with single-letter modifiers, e.g. ``<c-s-enter>``. Modifier
letters are ``a`` (alt), ``c`` (ctrl), ``m`` (meta) and ``s`` (shift), always
emitted in that order. Shift is never written for single characters because
the character already encodes it.
"""

from __future__ import annotations

import logging
import string

from .tables import (
    ALIASES,
    CODE_TRANSLATIONS,
    LETTER_CODE_PREFIX,
    MODIFIERS,
    SPECIAL_CASES,
    UNIDENTIFIED,
    WHITESPACE,
    is_ignored,
)
from .types import (
    DisallowedModifierError,
    DuplicateModifierError,
    Err,
    InvalidKeyError,
    Key,
    KeyEvent,
    NotationError,
    Ok,
    Result,
    UnknownModifierError,
)

logger = logging.getLogger(__name__)

_ASCII_LETTERS = frozenset(string.ascii_letters)
_ASCII_ALNUM = frozenset(string.ascii_letters + string.digits)


def alias(label: str) -> str:
    """Resolve a short alias (``esc``, ``cr``, ``lt``) to its canonical label."""
    return ALIASES.get(label.lower(), label)


def from_code(code: str, shift: bool = False) -> str:
    """Translate a physical key code to a character on a US QWERTY layout.

    Unknown codes are returned unchanged.
    """
    if code.startswith(LETTER_CODE_PREFIX):
        letter = code[len(LETTER_CODE_PREFIX) :]
        return letter if shift else letter.lower()

    pair = CODE_TRANSLATIONS.get(code)
    if pair is not None:
        return pair[1] if shift else pair[0]

    return code


def stringify(event: KeyEvent | Key) -> str:
    """Render an event as notation.

    Returns an empty string when the event has no notation (a bare modifier
    press, a dead key); callers should ignore such events.
    """
    shift = event.shift
    label = event.key or UNIDENTIFIED
    if label == UNIDENTIFIED:
        label = from_code(getattr(event, "code", None) or "", shift)
    else:
        label = alias(label)
        if label == " ":
            label = "Space"

    if is_ignored(label):
        return ""

    if len(label) == 1:
        shift = False
    else:
        label = label.lower()

    active = {"alt": event.alt, "ctrl": event.ctrl, "meta": event.meta, "shift": shift}
    prefix = "".join(f"{letter}-" for letter, name in MODIFIERS.items() if active[name])

    label = SPECIAL_CASES.get(label, label)

    if prefix or len(label) > 1:
        return f"<{prefix}{label}>"
    return label


def parse(text: str) -> Result[Key, NotationError]:
    """Parse one notation unit into a ``Key``."""
    if len(text) == 1:
        if text in WHITESPACE:
            return _reject(InvalidKeyError(text))
        return Ok(Key(text))

    scanned = _scan(text)
    if scanned is None:
        return _reject(InvalidKeyError(text))
    modifiers, body = scanned

    label = alias(body)
    flags: dict[str, bool] = {}
    for letter in modifiers:
        name = MODIFIERS.get(letter.lower())
        if name is None:
            return _reject(UnknownModifierError(letter, text))
        if name in flags:
            return _reject(DuplicateModifierError(letter, text))
        flags[name] = True
        if name == "shift" and len(label) == 1:
            return _reject(DisallowedModifierError(letter, text))

    return Ok(Key(label, **flags))


def normalize(text: str) -> Result[str, NotationError]:
    """Canonicalize a notation unit, e.g. ``<C-ESC>`` becomes ``<c-escape>``."""
    result = parse(text)
    if not result.ok:
        return result
    return Ok(stringify(result.value))


def _scan(text: str) -> tuple[list[str], str] | None:
    """Split ``<x-y-body>`` into its modifier letters and key body."""
    if len(text) < 3 or text[0] != "<" or text[-1] != ">":
        return None

    inner = text[1:-1]
    modifiers: list[str] = []
    pos = 0
    while pos + 1 < len(inner) and inner[pos] in _ASCII_LETTERS and inner[pos + 1] == "-":
        modifiers.append(inner[pos])
        pos += 2

    body = inner[pos:]
    if not _is_key_body(body):
        return None
    return modifiers, body


def _is_key_body(body: str) -> bool:
    if body and all(ch in _ASCII_ALNUM for ch in body):
        return True
    return len(body) == 1 and body not in "<>" and body not in WHITESPACE


def _reject(error: NotationError) -> Err[NotationError]:
    logger.debug("rejected key notation: %s", error.message)
    return Err(error)
