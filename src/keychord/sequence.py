"""Key sequence helpers built on the single-chord notation."""

from __future__ import annotations

from collections.abc import Iterable

from .notation import parse, stringify
from .tables import WHITESPACE
from .types import Key, NotationError, Ok, Result


def parse_sequence(text: str) -> list[str]:
    """Split text into notation units without validating them.

    A ``<...>`` run containing no ``<``, ``>`` or whitespace is one unit; every
    other character is its own unit. Empty text yields ``[""]``.
    """
    if not text:
        return [""]

    tokens: list[str] = []
    pos = 0
    while pos < len(text):
        end = _bracket_end(text, pos)
        if end is None:
            tokens.append(text[pos])
            pos += 1
        else:
            tokens.append(text[pos:end])
            pos = end
    return tokens


def parse_key_sequence(text: str) -> Result[tuple[Key, ...], NotationError]:
    """Tokenize and parse every unit; the first failing unit's error is returned."""
    keys: list[Key] = []
    for token in parse_sequence(text):
        result = parse(token)
        if not result.ok:
            return result
        keys.append(result.value)
    return Ok(tuple(keys))


def format_key_sequence(keys: Iterable[Key]) -> str:
    """Render keys back to a single notation string."""
    return "".join(stringify(key) for key in keys)


def normalize_sequence(text: str) -> Result[str, NotationError]:
    result = parse_key_sequence(text)
    if not result.ok:
        return result
    return Ok(format_key_sequence(result.value))


def _bracket_end(text: str, start: int) -> int | None:
    """Return the index just past a ``<...>`` run starting at ``start``."""
    if text[start] != "<":
        return None
    pos = start + 1
    while pos < len(text) and text[pos] not in "<>" and text[pos] not in WHITESPACE:
        pos += 1
    if pos == start + 1 or pos >= len(text) or text[pos] != ">":
        return None
    return pos + 1
