"""
Syntax highlighted JSON viewer for plan nodes.

Usage:
    uv run python main.py view plan.json --node 3
"""

import json

from rich.syntax import Syntax
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import ScrollableContainer
from textual.reactive import reactive
from textual.widgets import Footer, Header, Static

from constants import JSON_THEME
from localtypes import Json


def format_json(value: Json) -> str:
    """Pretty print a JSON value the way the viewer expects it."""
    return json.dumps(value, indent=2, ensure_ascii=False)


def render_json(node_json: str, theme: str = JSON_THEME) -> Syntax:
    """
    Highlight a JSON string.

    Lines are not soft wrapped: long lines scroll horizontally inside JsonView.
    """
    return Syntax(
        node_json,
        "json",
        theme=theme,
        word_wrap=False,
        line_numbers=False,
    )


class JsonView(ScrollableContainer):
    """Widget filling its parent with a highlighted, scrollable JSON string."""

    DEFAULT_CSS = """
    JsonView {
        width: 100%;
        height: 100%;
        overflow: auto auto;
    }

    JsonView > .json-code {
        width: auto;
        height: auto;
    }
    """

    node_json: reactive[str] = reactive("")

    def __init__(self, node_json: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self.set_reactive(JsonView.node_json, node_json)

    def compose(self) -> ComposeResult:
        yield Static(render_json(self.node_json), classes="json-code")

    def watch_node_json(self, node_json: str) -> None:
        if self.is_mounted:
            self.query_one(".json-code", Static).update(render_json(node_json))


class JsonViewerApp(App):
    """TUI application showing one JSON document."""

    TITLE = "JSON Viewer"

    BINDINGS = [
        Binding("q", "quit", "Quit", show=True),
        Binding("d", "toggle_dark", "Toggle Dark Mode"),
    ]

    CSS = """
    Screen {
        background: $surface;
    }
    """

    def __init__(self, node_json: str, sub_title: str = "", **kwargs) -> None:
        super().__init__(**kwargs)
        self.node_json = node_json
        self.node_title = sub_title

    def compose(self) -> ComposeResult:
        yield Header()
        yield JsonView(self.node_json, id="json-view")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self.node_title

    def action_toggle_dark(self) -> None:
        """Toggle dark mode."""
        self.theme = "textual-light" if self.theme == "textual-dark" else "textual-dark"

