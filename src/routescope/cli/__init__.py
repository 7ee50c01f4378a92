"""Routescope CLI: list the endpoints of an application.

Entry point registered as ``routescope`` in ``pyproject.toml``::

    [project.scripts]
    routescope = "routescope.cli:main"
"""

import argparse
import sys


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routescope`` command."""
    parser = argparse.ArgumentParser(
        prog="routescope",
        description="Routescope: list the endpoints mounted in a routing tree.",
    )
    subparsers = parser.add_subparsers(dest="command")

    # -- routescope routes ------------------------------------------------
    routes_parser = subparsers.add_parser("routes", help="List registered endpoints")
    routes_parser.add_argument(
        "app",
        help="Import string (e.g. myapp:app)",
    )
    routes_parser.add_argument(
        "--format",
        choices=("table", "json", "html"),
        default="table",
        help="Output format (default: table)",
    )
    routes_parser.add_argument(
        "--no-middleware-routes",
        action="store_true",
        help="Do not descend into anonymous middleware layers",
    )
    routes_parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log the walk to stderr",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "routes":
        from routescope.cli._routes import run_routes

        run_routes(args)
