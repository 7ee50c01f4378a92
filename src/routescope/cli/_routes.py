"""``routescope routes``: list the endpoints of an application.

Resolves an import string to a routing tree, walks it, and prints every
endpoint with its methods and middleware.
"""

import argparse
import logging
import sys

from routescope.cli._resolve import resolve_app
from routescope.config import ListOptions
from routescope.errors import RouteScopeError
from routescope.report import format_json, format_table, render_html
from routescope.routing.walker import list_endpoints


def run_routes(args: argparse.Namespace) -> None:
    """List endpoints for the app named by ``args.app``."""
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        app = resolve_app(args.app)
    except (ModuleNotFoundError, AttributeError, TypeError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    options = ListOptions(include_middleware_routes=not args.no_middleware_routes)
    try:
        endpoints = list_endpoints(app, options)
    except RouteScopeError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    if args.format == "json":
        print(format_json(endpoints))
        return

    if not endpoints:
        print("No endpoints found.")
        return

    if args.format == "html":
        print(render_html(endpoints))
    else:
        print(format_table(endpoints))
