"""TUI entrypoint."""

from __future__ import annotations

from .ui.app import KeyInspectorApp


def run_tui() -> None:
    app = KeyInspectorApp()
    app.run()
