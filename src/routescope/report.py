"""Endpoint listing output: plain table, JSON, and an HTML report.

The HTML report is rendered with kida, autoescaped, so path text taken
from the routing tree cannot inject markup.
"""

import json
from collections.abc import Sequence
from dataclasses import dataclass

from kida import Environment

from routescope.endpoint import Endpoint

_HTML_TEMPLATE = """\
<table class="routescope">
  <thead>
    <tr><th>Method</th><th>Path</th><th>Middleware</th></tr>
  </thead>
  <tbody>
{% for row in rows %}    <tr><td>{{ row.methods }}</td><td>{{ row.path }}</td><td>{{ row.middlewares }}</td></tr>
{% end %}  </tbody>
</table>
"""


@dataclass(frozen=True, slots=True)
class _Row:
    methods: str
    path: str
    middlewares: str


def _rows(endpoints: Sequence[Endpoint]) -> list[_Row]:
    return [
        _Row(
            methods=", ".join(endpoint.methods) or "-",
            path=endpoint.path or "/",
            middlewares=", ".join(endpoint.middlewares),
        )
        for endpoint in endpoints
    ]


def format_table(endpoints: Sequence[Endpoint]) -> str:
    """Format endpoints as a METHOD / PATH / MIDDLEWARE table."""
    rows = _rows(endpoints)

    # Column widths, never narrower than the headers
    max_methods = max((len(r.methods) for r in rows), default=0)
    max_path = max((len(r.path) for r in rows), default=0)
    max_methods = max(max_methods, 6)  # "METHOD" header
    max_path = max(max_path, 4)  # "PATH" header

    fmt = f"{{:<{max_methods}}}  {{:<{max_path}}}  {{}}"
    sep_len = max_methods + max_path + 4 + max((len(r.middlewares) for r in rows), default=10)

    lines = [fmt.format("METHOD", "PATH", "MIDDLEWARE"), "-" * min(sep_len, 80)]
    lines.extend(fmt.format(r.methods, r.path, r.middlewares).rstrip() for r in rows)
    return "\n".join(lines)


def format_json(endpoints: Sequence[Endpoint], *, indent: int | None = 2) -> str:
    """Serialize endpoints as a JSON array of ``{path, methods, middlewares}``."""
    return json.dumps([endpoint.to_dict() for endpoint in endpoints], indent=indent)


def render_html(endpoints: Sequence[Endpoint], *, env: Environment | None = None) -> str:
    """Render endpoints as an HTML table.

    Uses a fresh autoescaping kida Environment unless *env* is given.
    """
    env = env or Environment(autoescape=True)
    template = env.from_string(_HTML_TEMPLATE)
    return template.render({"rows": _rows(endpoints)})
