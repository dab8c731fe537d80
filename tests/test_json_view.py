"""Tests for utils/io/json_view.py"""

import asyncio

from rich.syntax import Syntax
from textual.widgets import Static

from utils.io.json_view import JsonView, JsonViewerApp, format_json, render_json


class TestFormatJson:
    def test_indent(self):
        assert format_json({"a": [1, 2]}) == '{\n  "a": [\n    1,\n    2\n  ]\n}'

    def test_keeps_unicode(self):
        assert format_json("é") == '"é"'


class TestRenderJson:
    def test_json_syntax(self):
        syntax = render_json('{"a": 1}')
        assert isinstance(syntax, Syntax)
        assert syntax.code == '{"a": 1}'
        assert "json" in syntax.lexer.aliases

    def test_no_line_numbers_no_soft_wrap(self):
        syntax = render_json("[]")
        assert syntax.line_numbers is False
        assert syntax.word_wrap is False


class TestJsonViewerApp:
    def test_mounts_view(self):
        async def run() -> None:
            app = JsonViewerApp('{"a": 1}', sub_title="node")
            async with app.run_test() as pilot:
                view = app.query_one(JsonView)
                assert view.node_json == '{"a": 1}'

                code = view.query_one(".json-code", Static)
                assert isinstance(code.renderable, Syntax)
                assert code.renderable.code == '{"a": 1}'

        asyncio.run(run())

    def test_updating_json_re_renders(self):
        async def run() -> None:
            app = JsonViewerApp('{"a": 1}')
            async with app.run_test() as pilot:
                view = app.query_one("#json-view", JsonView)
                view.node_json = "[1, 2]"
                await pilot.pause()

                code = view.query_one(".json-code", Static)
                assert isinstance(code.renderable, Syntax)
                assert code.renderable.code == "[1, 2]"

        asyncio.run(run())

    def test_fills_parent_and_scrolls(self):
        async def run() -> None:
            app = JsonViewerApp("{}")
            async with app.run_test():
                styles = app.query_one(JsonView).styles
                assert str(styles.width) == "100%"
                assert str(styles.height) == "100%"
                assert styles.overflow_x == "auto"
                assert styles.overflow_y == "auto"

        asyncio.run(run())
