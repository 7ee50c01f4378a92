"""Terminal route extraction: one Endpoint per literal path."""

from typing import Any

from routescope.endpoint import Endpoint
from routescope.routing.layer import RouteInfo, adapt_route
from routescope.routing.pattern import join_path

# Method-table entry meaning "responds to any method"
WILDCARD_METHOD = "_all"


def route_methods(route: RouteInfo) -> tuple[str, ...]:
    """Upper-cased methods in table order, wildcard excluded."""
    return tuple(
        dict.fromkeys(m.upper() for m in route.methods if m != WILDCARD_METHOD)
    )


def extract_route(route: RouteInfo | Any, base_path: str) -> list[Endpoint]:
    """Build the endpoints a terminal route contributes under *base_path*.

    Accepts an adapted ``RouteInfo`` or a raw host route.  A route declared
    on several paths yields one endpoint per path, all sharing the same
    methods and middlewares.
    """
    info = route if isinstance(route, RouteInfo) else adapt_route(route)
    methods = route_methods(info)

    return [
        Endpoint(
            path=join_path(base_path, path),
            methods=methods,
            middlewares=info.handler_names,
        )
        for path in info.paths
    ]
