"""Locate the routing tree named on the command line."""

import importlib
from typing import Any

from routescope.routing.layer import find_stack


def resolve_app(import_string: str) -> Any:
    """Import ``module[:attribute]`` and return the object holding a layer stack.

    The attribute defaults to ``app``.  An attribute that has no stack of
    its own but can be called is treated as a factory and called once with
    no arguments; whatever it returns must have a stack.

    Raises ``ModuleNotFoundError`` or ``AttributeError`` when the name
    does not resolve, and ``TypeError`` when the factory fails or the
    result has no stack to walk.
    """
    module_name, _, attr = import_string.partition(":")
    target = getattr(importlib.import_module(module_name), attr or "app")

    if callable(target) and find_stack(target) is None:
        try:
            target = target()
        except Exception as exc:
            msg = f"Factory function {import_string!r} raised an error: {exc}"
            raise TypeError(msg) from exc

    if find_stack(target) is None:
        msg = f"{import_string!r} resolved to {type(target).__name__}, which exposes no layer stack"
        raise TypeError(msg)

    return target
