"""Textual key inspector for keychord."""

from __future__ import annotations

import json

from rich.panel import Panel
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.events import Key
from textual.widgets import Static

from .controller import CLEAR_KEY, QUIT_KEY, InspectorController, InspectorSnapshot


class KeyView(Static):
    can_focus = True


class KeyInspectorApp(App[None]):
    """Shows the notation of every key pressed."""

    BINDINGS = [
        Binding(QUIT_KEY, "request_quit", "Quit", priority=True),
        Binding(CLEAR_KEY, "clear_history", "Clear", priority=True),
    ]

    CSS = """
    Screen {
        layout: vertical;
    }

    #last {
        height: 1fr;
        border: round $accent;
        padding: 0 1;
    }

    #history {
        height: 5;
        padding: 0 1;
    }

    #status {
        height: 1;
        padding: 0 1;
        background: $panel;
        color: $text;
    }
    """

    def __init__(self, controller: InspectorController | None = None) -> None:
        super().__init__()
        self.controller = controller or InspectorController()
        self._quit_requested = False

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def compose(self) -> ComposeResult:
        yield KeyView(id="last")
        yield Static(id="history")
        yield Static(id="status")

    def on_mount(self) -> None:
        self.query_one("#last", KeyView).focus()
        self._refresh_view()

    def on_key(self, event: Key) -> None:
        self.controller.handle_key(event.key, event.character)
        self._refresh_view()
        event.stop()

    def action_request_quit(self) -> None:
        self._quit_requested = True
        self.exit()

    def action_clear_history(self) -> None:
        self.controller.clear()
        self._refresh_view()

    def _refresh_view(self) -> None:
        snapshot = self.controller.snapshot()
        self.query_one("#last", KeyView).update(self._render_last(snapshot))
        self.query_one("#history", Static).update(Text(" ".join(snapshot.history)))
        self.query_one("#status", Static).update(
            Text(
                f"keys={len(snapshot.history)} | {snapshot.status} "
                f"| {CLEAR_KEY} to clear, {QUIT_KEY} to quit"
            )
        )

    def _render_last(self, snapshot: InspectorSnapshot) -> Panel:
        if not snapshot.last:
            return Panel(Text("-", style="dim"), title="Last key")

        body = Text(snapshot.last, style="bold")
        if snapshot.key is not None:
            body.append("\n")
            body.append(json.dumps(snapshot.key), style="dim")
        return Panel(body, title="Last key", border_style="bright_green")
