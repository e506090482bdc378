import pytest

from keychord.types import KeyEvent
from keychord.ui.controller import InspectorController, textual_key_to_event


@pytest.mark.parametrize(
    ("key", "character", "expected"),
    [
        ("a", "a", KeyEvent("a")),
        ("A", "A", KeyEvent("A")),
        ("ctrl+a", "\x01", KeyEvent("a", ctrl=True)),
        ("ctrl+shift+enter", None, KeyEvent("Enter", ctrl=True, shift=True)),
        ("enter", "\r", KeyEvent("Enter")),
        ("left", None, KeyEvent("ArrowLeft")),
        ("alt+pagedown", None, KeyEvent("PageDown", alt=True)),
        ("super+f5", None, KeyEvent("F5", meta=True)),
        ("space", " ", KeyEvent(" ")),
        ("full_stop", ".", KeyEvent(".")),
    ],
)
def test_textual_key_to_event(key: str, character: str | None, expected: KeyEvent) -> None:
    assert textual_key_to_event(key, character) == expected


def test_handle_key_records_history() -> None:
    controller = InspectorController()

    snap = controller.snapshot()
    assert snap.last == ""
    assert snap.history == ()
    assert snap.key is None

    assert controller.handle_key("ctrl+shift+enter") == "ctrl+shift+enter -> <c-s-enter>"
    controller.handle_key("x", "x")
    controller.handle_key("less_than_sign", "<")

    snap = controller.snapshot()
    assert snap.history == ("<c-s-enter>", "x", "<lt>")
    assert snap.last == "<lt>"
    assert snap.key == {"key": "<"}


def test_handle_key_parses_last_notation() -> None:
    controller = InspectorController()
    controller.handle_key("ctrl+left")
    assert controller.snapshot().key == {"key": "arrowleft", "ctrl": True}


def test_unrepresentable_keys_are_ignored(caplog: pytest.LogCaptureFixture) -> None:
    controller = InspectorController()
    controller.handle_key("a", "a")

    with caplog.at_level("DEBUG", logger="keychord.ui.controller"):
        status = controller.handle_key("shift")

    assert status == "ignored shift"
    assert controller.snapshot().history == ("a",)
    assert "suppressed key" in caplog.text


def test_history_is_bounded_and_clearable() -> None:
    controller = InspectorController(history_limit=2)
    for char in "abc":
        controller.handle_key(char, char)
    assert controller.snapshot().history == ("b", "c")

    assert controller.clear() == "cleared"
    assert controller.snapshot().history == ()
    assert controller.snapshot().last == ""
