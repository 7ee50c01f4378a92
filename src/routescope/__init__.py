"""Routescope: list the endpoints mounted in a routing tree.

Walks an already-built tree of routers, sub-routers, and middleware
layers and flattens it into deduplicated endpoints, decoding compiled
mount patterns back into path templates along the way.

Basic usage::

    from routescope import list_endpoints

    for endpoint in list_endpoints(app):
        print(endpoint.path, endpoint.methods, endpoint.middlewares)

Skip anonymous middleware layers::

    from routescope import ListOptions
    list_endpoints(app, ListOptions(include_middleware_routes=False))
"""

__version__ = "0.1.0-dev"
__all__ = [
    "CycleDetectedError",
    "Endpoint",
    "ListOptions",
    "MalformedTreeError",
    "RouteScopeError",
    "UnrecognizedPatternError",
    "decode_path",
    "list_endpoints",
    "merge_endpoints",
    "walk_stack",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import routescope`` fast while providing a clean top-level API.
    """
    if name in ("list_endpoints", "walk_stack"):
        from routescope.routing import walker as _walker

        return getattr(_walker, name)

    if name == "decode_path":
        from routescope.routing.pattern import decode_path

        return decode_path

    if name in ("Endpoint", "merge_endpoints"):
        from routescope import endpoint as _endpoint

        return getattr(_endpoint, name)

    if name == "ListOptions":
        from routescope.config import ListOptions

        return ListOptions

    if name in (
        "CycleDetectedError",
        "MalformedTreeError",
        "RouteScopeError",
        "UnrecognizedPatternError",
    ):
        from routescope import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
