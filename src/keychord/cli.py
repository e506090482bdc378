"""Minimal interactive shell for trying key notation."""

from __future__ import annotations

import json

from .notation import normalize, parse
from .sequence import normalize_sequence, parse_sequence


def _print_help() -> None:
    print("Commands:")
    print("  <keys>                   normalize a key sequence, e.g. <C-x><c-S-ESC>")
    print("  :parse <key>             show the parsed key as JSON")
    print("  :normalize <key>         normalize a single key")
    print("  :split <text>            show the notation units of text")
    print("  :quit                    exit shell")


def _parse_key(payload: str) -> None:
    result = parse(payload)
    print(json.dumps(result.value.as_dict()))


def _normalize_key(payload: str) -> None:
    result = normalize(payload)
    print(result.value if result.ok else result.value.message)


def _split_text(payload: str) -> None:
    for token in parse_sequence(payload):
        print(json.dumps(token))


def _normalize_keys(raw: str) -> None:
    result = normalize_sequence(raw)
    print(result.value if result.ok else result.value.message)


def _handle_input(raw: str) -> bool:
    if not raw:
        return True
    if raw in {":q", ":quit", ":exit"}:
        return False
    if raw == ":help":
        _print_help()
        return True
    if raw == ":parse":
        print("usage: :parse <key>")
        return True
    if raw.startswith(":parse "):
        _parse_key(raw[len(":parse ") :])
        return True
    if raw == ":normalize":
        print("usage: :normalize <key>")
        return True
    if raw.startswith(":normalize "):
        _normalize_key(raw[len(":normalize ") :])
        return True
    if raw == ":split":
        print("usage: :split <text>")
        return True
    if raw.startswith(":split "):
        _split_text(raw[len(":split ") :])
        return True
    if raw.startswith(":"):
        print("unknown input. use :help")
        return True

    _normalize_keys(raw)
    return True


def main() -> None:
    print("keychord shell. Type: :help")
    while True:
        try:
            raw = input("keychord> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not _handle_input(raw):
            break


if __name__ == "__main__":
    main()
