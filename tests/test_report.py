"""Tests for routescope.report: table, JSON, and HTML output."""

import json

from routescope.endpoint import Endpoint
from routescope.report import format_json, format_table, render_html

ENDPOINTS = [
    Endpoint(path="/users/:id", methods=("GET", "PUT"), middlewares=("auth", "load_user")),
    Endpoint(path="/health", methods=("GET",)),
    Endpoint(path=""),
]


class TestFormatTable:
    def test_header_and_rows(self) -> None:
        lines = format_table(ENDPOINTS).splitlines()
        assert lines[0].split() == ["METHOD", "PATH", "MIDDLEWARE"]
        assert set(lines[1]) == {"-"}
        assert len(lines) == 2 + len(ENDPOINTS)

    def test_row_content(self) -> None:
        lines = format_table(ENDPOINTS).splitlines()
        assert "GET, PUT" in lines[2]
        assert "/users/:id" in lines[2]
        assert lines[2].endswith("auth, load_user")

    def test_placeholder_row(self) -> None:
        last = format_table(ENDPOINTS).splitlines()[-1]
        assert last.split() == ["-", "/"]

    def test_columns_aligned(self) -> None:
        lines = format_table(ENDPOINTS).splitlines()
        column = lines[0].index("PATH")
        assert all(line[column] == "/" for line in lines[2:])

    def test_empty(self) -> None:
        assert format_table([]).splitlines()[0].split() == ["METHOD", "PATH", "MIDDLEWARE"]


class TestFormatJson:
    def test_round_trips_as_dicts(self) -> None:
        data = json.loads(format_json(ENDPOINTS))
        assert data[0] == {
            "path": "/users/:id",
            "methods": ["GET", "PUT"],
            "middlewares": ["auth", "load_user"],
        }
        assert [d["path"] for d in data] == ["/users/:id", "/health", ""]

    def test_compact(self) -> None:
        assert "\n" not in format_json(ENDPOINTS, indent=None)


class TestRenderHtml:
    def test_table_rows(self) -> None:
        html = render_html(ENDPOINTS)
        assert '<table class="routescope">' in html
        assert html.count("<tr><td>") == len(ENDPOINTS)
        assert "<td>/users/:id</td>" in html
        assert "<td>auth, load_user</td>" in html

    def test_escapes_path_text(self) -> None:
        html = render_html([Endpoint(path="/<script>", methods=("GET",))])
        assert "<script>" not in html
        assert "&lt;script&gt;" in html
