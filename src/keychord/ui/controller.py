"""UI adapter that turns Textual key presses into key notation."""

from __future__ import annotations

import logging
from collections import deque
from dataclasses import dataclass

from ..notation import parse, stringify
from ..types import KeyEvent

logger = logging.getLogger(__name__)

HISTORY_LIMIT = 20
QUIT_KEY = "ctrl+q"
CLEAR_KEY = "ctrl+l"

# Textual modifier names -> KeyEvent fields
TEXTUAL_MODIFIERS: dict[str, str] = {
    "ctrl": "ctrl",
    "alt": "alt",
    "shift": "shift",
    "meta": "meta",
    "super": "meta",
}

TEXTUAL_KEY_LABELS: dict[str, str] = {
    "escape": "Escape",
    "enter": "Enter",
    "tab": "Tab",
    "backspace": "Backspace",
    "delete": "Delete",
    "insert": "Insert",
    "home": "Home",
    "end": "End",
    "pageup": "PageUp",
    "pagedown": "PageDown",
    "up": "ArrowUp",
    "down": "ArrowDown",
    "left": "ArrowLeft",
    "right": "ArrowRight",
    "space": " ",
    "shift": "Shift",
    "ctrl": "Control",
    "alt": "Alt",
    "meta": "Meta",
    "super": "Super",
}


def textual_key_to_event(key: str, character: str | None = None) -> KeyEvent:
    """Build a KeyEvent from a Textual key name such as ``ctrl+shift+enter``."""
    *mods, base = key.split("+")
    flags = {TEXTUAL_MODIFIERS[mod]: True for mod in mods if mod in TEXTUAL_MODIFIERS}

    if character and len(character) == 1 and character.isprintable():
        label = character
    elif len(base) <= 1:
        label = base
    elif base in TEXTUAL_KEY_LABELS:
        label = TEXTUAL_KEY_LABELS[base]
    elif base[0] == "f" and base[1:].isdigit():
        label = base.upper()
    else:
        label = base
    return KeyEvent(key=label, **flags)


@dataclass(frozen=True)
class InspectorSnapshot:
    """Immutable inspector state for rendering."""

    last: str
    history: tuple[str, ...]
    key: dict[str, object] | None
    status: str


class InspectorController:
    """Stateful adapter between UI key events and the notation core."""

    def __init__(self, history_limit: int = HISTORY_LIMIT) -> None:
        self._history: deque[str] = deque(maxlen=history_limit)
        self._last = ""
        self._status = "press any key"

    def snapshot(self) -> InspectorSnapshot:
        key = None
        if self._last:
            result = parse(self._last)
            if result.ok:
                key = result.value.as_dict()
        return InspectorSnapshot(
            last=self._last,
            history=tuple(self._history),
            key=key,
            status=self._status,
        )

    def handle_key(self, key: str, character: str | None = None) -> str:
        event = textual_key_to_event(key, character)
        notation = stringify(event)
        if not notation:
            logger.debug("suppressed key %r (%s)", key, event.key)
            return self._set_status(f"ignored {key}")

        self._last = notation
        self._history.append(notation)
        return self._set_status(f"{key} -> {notation}")

    def clear(self) -> str:
        self._history.clear()
        self._last = ""
        return self._set_status("cleared")

    def _set_status(self, status: str) -> str:
        self._status = status
        return status
