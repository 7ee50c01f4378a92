"""Layer variants and the host-tree adapter.

Host routers expose duck-typed layer records: a ``route`` attribute marks
a terminal layer, a ``name`` identifies the mount kind, and ``regexp`` /
``keys`` / ``path`` describe how the mount narrows the request path.
Each record is resolved once into one of four frozen variants so the
walker never re-inspects optional fields.
"""

from collections.abc import Collection, Sequence
from dataclasses import dataclass
from typing import Any

from routescope.errors import MalformedTreeError
from routescope.routing.pattern import (
    decode_path,
    is_path_pattern,
    is_root_pattern,
    serialize_pattern,
)

ANONYMOUS_HANDLER = "anonymous"

# Names Python gives callables that were never named
_UNNAMED = frozenset({"", "<lambda>", "<anonymous>"})


@dataclass(frozen=True, slots=True)
class RouteInfo:
    """A terminal route as seen by the extractor.

    ``methods`` are the raw method-table keys in table order, wildcard
    included.  ``paths`` holds every literal path the route answers on.
    """

    methods: tuple[str, ...]
    paths: tuple[str, ...]
    handler_names: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class TerminalRoute:
    route: RouteInfo


@dataclass(frozen=True, slots=True)
class PatternMount:
    """Mount narrowed by a compiled pattern, already decoded to a template."""

    template: str
    handle: Any


@dataclass(frozen=True, slots=True)
class LiteralMount:
    """Mount at a literal path.  An empty path mounts at the current base."""

    path: str
    handle: Any


@dataclass(frozen=True, slots=True)
class OpaqueMount:
    """Mount narrowed by a pattern neither encoding can decode."""

    pattern_text: str
    handle: Any


type Layer = TerminalRoute | PatternMount | LiteralMount | OpaqueMount


def handler_name(handle: Any) -> str:
    """Declared name of a handler, or ``"anonymous"``."""
    name = getattr(handle, "__name__", None) or getattr(handle, "name", None)
    if not isinstance(name, str) or name in _UNNAMED:
        return ANONYMOUS_HANDLER
    return name


def adapt_route(route: Any) -> RouteInfo:
    """Read a host route's method table, path(s), and handler stack.

    Raises ``MalformedTreeError`` if the route has neither a single path
    nor a list of paths.
    """
    raw_path = getattr(route, "path", None)
    if isinstance(raw_path, str):
        paths: tuple[str, ...] = (raw_path,)
    elif isinstance(raw_path, (list, tuple)) and all(isinstance(p, str) for p in raw_path):
        paths = tuple(raw_path)
    else:
        msg = f"Route {route!r} has no path or list of paths (got {raw_path!r})"
        raise MalformedTreeError(msg)

    table = getattr(route, "methods", None) or {}
    methods = tuple(table)
    stack = getattr(route, "stack", None) or ()

    return RouteInfo(
        methods=methods,
        paths=paths,
        handler_names=tuple(handler_name(getattr(item, "handle", None)) for item in stack),
    )


def adapt_layer(layer: Any, mount_names: Collection[str]) -> Layer | None:
    """Resolve a host layer into its variant.

    Returns ``None`` for layers that are neither terminal nor a recognized
    mount kind; those contribute nothing to the listing.
    """
    route = getattr(layer, "route", None)
    if route is not None:
        return TerminalRoute(adapt_route(route))

    if getattr(layer, "name", None) not in mount_names:
        return None

    handle = getattr(layer, "handle", None)
    pattern = getattr(layer, "regexp", None)

    if pattern is None or is_root_pattern(pattern):
        return LiteralMount(_mount_path(getattr(layer, "path", None)), handle)

    if is_path_pattern(pattern):
        keys = getattr(layer, "keys", None) or ()
        return PatternMount(decode_path(pattern, keys), handle)

    raw_path = getattr(layer, "path", None)
    if isinstance(raw_path, str) and raw_path:
        return LiteralMount(_mount_path(raw_path), handle)

    return OpaqueMount(serialize_pattern(pattern), handle)


def _mount_path(path: Any) -> str:
    # "/" mounts at the current base, same as no path at all
    if not isinstance(path, str) or path == "/":
        return ""
    return path


def find_stack(node: Any) -> Sequence[Any] | None:
    """The layer stack of a router or app, or ``None`` if it exposes none."""
    stack = getattr(node, "stack", None)
    if stack is None:
        inner = getattr(node, "_router", None)
        stack = getattr(inner, "stack", None) if inner is not None else None
    if stack is None or isinstance(stack, (str, bytes)):
        return None
    return stack
