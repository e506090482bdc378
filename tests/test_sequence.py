import pytest

from keychord.sequence import (
    format_key_sequence,
    normalize_sequence,
    parse_key_sequence,
    parse_sequence,
)
from keychord.types import DisallowedModifierError, Err, InvalidKeyError, Key, Ok, UnknownModifierError


@pytest.mark.parametrize("char", ["a", "<", ">", "/", "1", " ", "\t", "\n"])
def test_parse_sequence_single_characters(char: str) -> None:
    assert parse_sequence(char) == [char]


def test_parse_sequence_runs_of_characters() -> None:
    assert parse_sequence("a<>/1 \t\n") == ["a", "<", ">", "/", "1", " ", "\t", "\n"]
    assert parse_sequence(">>") == [">", ">"]
    assert parse_sequence("<2j") == ["<", "2", "j"]


@pytest.mark.parametrize(
    "token",
    ["<a>", "<A>", "</>", "<Escape>", "<c-a-m-Escape>", "<s-K1>", "<-a>", "<x-esc>", "<shift-esc>", "<s-++>"],
)
def test_parse_sequence_keeps_bracketed_runs_unvalidated(token: str) -> None:
    assert parse_sequence(token) == [token]


def test_parse_sequence_mixed() -> None:
    assert parse_sequence("a<a><c-a><esc><c-esc>b<Del>") == [
        "a",
        "<a>",
        "<c-a>",
        "<esc>",
        "<c-esc>",
        "b",
        "<Del>",
    ]
    assert parse_sequence("<c-<>") == ["<", "c", "-", "<", ">"]
    assert parse_sequence("<c->>") == ["<c->", ">"]
    assert parse_sequence("<c- >") == ["<", "c", "-", " ", ">"]


def test_parse_sequence_empty_string() -> None:
    assert parse_sequence("") == [""]


def test_parse_key_sequence() -> None:
    assert parse_key_sequence("g<c-W><left>") == Ok(
        (Key("g"), Key("W", ctrl=True), Key("ArrowLeft"))
    )
    assert parse_key_sequence("a<x-b>c") == Err(UnknownModifierError("x", "<x-b>"))
    assert parse_key_sequence("a b") == Err(InvalidKeyError(" "))
    assert parse_key_sequence("") == Err(InvalidKeyError(""))


def test_format_key_sequence_round_trips_through_tokenizer() -> None:
    keys = (Key("<"), Key("a"), Key(">"), Key("Enter", shift=True))
    text = format_key_sequence(keys)
    assert text == "<lt>a<gt><s-enter>"
    assert parse_key_sequence(text) == Ok((Key("<"), Key("a"), Key(">"), Key("enter", shift=True)))


def test_normalize_sequence() -> None:
    assert normalize_sequence("<C-x><C-S-ESC>q") == Ok("<c-x><c-s-escape>q")
    assert normalize_sequence("<s-a>") == Err(DisallowedModifierError("s", "<s-a>"))


def test_parse_sequence_breaks_runs_on_notation_whitespace() -> None:
    assert parse_sequence("<a\ufeffb>") == ["<", "a", "\ufeff", "b", ">"]
    assert parse_sequence("<a\x1fb>") == ["<a\x1fb>"]
    assert parse_sequence("<a\x85b>") == ["<a\x85b>"]
