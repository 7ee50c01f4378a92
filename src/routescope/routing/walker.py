"""Depth-first walk over a routing tree's layer stacks.

Terminal layers are handed to the route extractor; mount layers extend the
base path and are walked recursively.  Everything discovered is merged
into one accumulator, private to a single ``list_endpoints()`` call.
"""

import logging
from typing import Any

from routescope.config import ListOptions
from routescope.endpoint import Endpoint, merge_endpoints
from routescope.errors import CycleDetectedError
from routescope.routing.extract import extract_route
from routescope.routing.layer import (
    LiteralMount,
    OpaqueMount,
    PatternMount,
    TerminalRoute,
    adapt_layer,
    find_stack,
)
from routescope.routing.pattern import join_path

logger = logging.getLogger("routescope.walker")


class _StackWalker:
    """Walks one routing tree into one accumulator.

    Tracks the stacks on the current descent path by identity, so a router
    mounted inside itself fails with ``CycleDetectedError`` instead of
    recursing forever.  The same router mounted at two sibling paths is
    not a cycle.
    """

    __slots__ = ("_active", "_endpoints", "_mount_names")

    def __init__(self, endpoints: list[Endpoint], options: ListOptions) -> None:
        self._endpoints = endpoints
        self._mount_names = options.mount_names
        self._active: set[int] = set()

    def walk(self, node: Any, base_path: str) -> list[Endpoint]:
        stack = find_stack(node)

        if stack is None:
            # Opaque leaf: placeholder only once something was found
            if self._endpoints:
                merge_endpoints(self._endpoints, [Endpoint(path=base_path)])
            return self._endpoints

        key = id(stack)
        if key in self._active:
            raise CycleDetectedError(base_path)

        self._active.add(key)
        try:
            for item in stack:
                self._visit(item, base_path)
        finally:
            self._active.discard(key)

        return self._endpoints

    def _visit(self, item: Any, base_path: str) -> None:
        layer = adapt_layer(item, self._mount_names)

        match layer:
            case None:
                logger.debug(
                    "Skipping layer %r under %r", getattr(item, "name", None), base_path
                )
            case TerminalRoute(route=route):
                merge_endpoints(self._endpoints, extract_route(route, base_path))
            case PatternMount(template=template, handle=handle):
                new_base = f"{base_path}/{template}" if template else base_path
                self._descend(handle, new_base)
            case LiteralMount(path=path, handle=handle):
                new_base = join_path(base_path, path) if path else base_path
                self._descend(handle, new_base)
            case OpaqueMount(pattern_text=text, handle=handle):
                logger.debug("Undecodable mount pattern %s under %r", text, base_path)
                self._descend(handle, f"{base_path}/ RegExp({text}) ")

    def _descend(self, handle: Any, base_path: str) -> None:
        logger.debug("Descending into %r at %r", handle, base_path)
        self.walk(handle, base_path)


def walk_stack(
    node: Any,
    base_path: str = "",
    endpoints: list[Endpoint] | None = None,
    options: ListOptions | None = None,
) -> list[Endpoint]:
    """Walk *node*'s layer stack, merging discovered endpoints.

    *node* is a router or app exposing ``stack`` directly or through
    ``_router.stack``.  A node exposing neither is an opaque leaf: it adds
    a placeholder endpoint at *base_path* when *endpoints* is non-empty,
    and nothing otherwise.

    Mutates and returns *endpoints* (a fresh list when omitted).
    """
    if endpoints is None:
        endpoints = []
    walker = _StackWalker(endpoints, options or ListOptions())
    return walker.walk(node, base_path)


def list_endpoints(app: Any, options: ListOptions | None = None) -> list[Endpoint]:
    """List every endpoint reachable from *app*, deduplicated by path.

    Endpoints come back in first-discovery order (depth-first, stack
    declaration order)::

        for endpoint in list_endpoints(app):
            print(endpoint.path, endpoint.methods)

    Raises ``MalformedTreeError`` if the tree violates an invariant.
    """
    return walk_stack(app, "", [], options)
