"""Routescope exception hierarchy.

Shared across the pattern decoder, layer adapter, and walker so every
module raises and catches the same types.
"""


class RouteScopeError(Exception):
    """Base for all routescope-specific errors."""


class MalformedTreeError(RouteScopeError):
    """Raised when the routing tree violates an invariant.

    A missing parameter descriptor or a route without any path means the
    host framework handed us something it could never have built itself.
    Producing a wrong path is worse than failing, so this is never
    recovered.
    """


class UnrecognizedPatternError(RouteScopeError):
    """Raised when ``decode_path()`` is given a pattern outside both grammars.

    The walker checks ``is_path_pattern()`` first and falls back to a raw
    pattern segment, so this only surfaces on direct decoder calls.
    """

    def __init__(self, serialized: str) -> None:
        self.serialized = serialized
        super().__init__(f"Not a compiled mount path pattern: {serialized}")


class CycleDetectedError(MalformedTreeError):
    """A router is mounted inside itself, directly or transitively."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"Routing tree is cyclic: a stack re-enters itself at {path or '/'!r}"
        )
