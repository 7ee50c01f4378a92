"""Compiled mount pattern decoding.

Host routers compile a mount path such as ``/orgs/:orgId`` into a regular
expression for dispatch.  This module inverts that compilation, recovering
the template from the pattern's text and its ordered parameter keys.

Two capture-group encodings are understood::

    legacy:  ^\\/orgs\\/(?:([^\\/]+?))\\/?(?=\\/|$)     separator outside the group
    modern:  ^\\/orgs(?:\\/([^\\/]+?))\\/?(?=\\/|$)     group starts with the separator

Patterns are matched in regex-literal notation (``/<source>/<flags>``), the
canonical text form produced by ``serialize_pattern()``.
"""

import re
from collections.abc import Mapping, Sequence
from typing import Any

from routescope.errors import MalformedTreeError, UnrecognizedPatternError

# Mount pattern that matches everything from the root
ROOT_PATTERN = "/^\\/?(?=\\/|$)/i"

# A raw parameter capture group in either encoding
_PARAM_FRAGMENT = re.compile(r"\(\?:(?:\\/)?\([^)]+\)\)")

_MODERN_PARAM_PREFIX = "(?:\\/"

_PATH_GRAMMAR = re.compile(
    r"""
    ^/\^                            # opening delimiter, start anchor
    (?:\\/)?                        # leading separator
    (?P<template>
        (?:
            \(\?:(?:\\/)?\([^)]+\)\)    # parameter capture group
          | \\[^\w\s]                   # escaped separator or punctuation
          | [\w.:~-]                    # literal text or substituted :name
        )*?
    )
    \\/\?(?:\(\?=\\/\|\$\)|\$)      # closing anchor
    /[a-z]*$                        # closing delimiter, flags
    """,
    re.VERBOSE,
)

_ESCAPED_CHAR = re.compile(r"\\([^\w\s])")

# ":name(<custom matcher>)" written inline in a literal path
_INLINE_PARAM_SUFFIX = re.compile(r"(:[^)]+)\([^)]+\)")


def serialize_pattern(pattern: Any) -> str:
    """Return the canonical ``/<source>/<flags>`` text of a compiled pattern.

    Strings are assumed to be serialized already.
    """
    if isinstance(pattern, re.Pattern):
        flags = "i" if pattern.flags & re.IGNORECASE else ""
        return f"/{pattern.pattern}/{flags}"
    if isinstance(pattern, str):
        return pattern
    return str(pattern)


def is_root_pattern(pattern: Any) -> bool:
    """True if *pattern* is the mount-everything root matcher."""
    return serialize_pattern(pattern) == ROOT_PATTERN


def is_path_pattern(pattern: Any) -> bool:
    """True if *pattern* has the shape of a compiled mount path."""
    return _PATH_GRAMMAR.match(serialize_pattern(pattern)) is not None


def _param_name(descriptor: Any) -> str:
    if isinstance(descriptor, Mapping):
        return str(descriptor["name"])
    return str(descriptor.name)


def decode_path(pattern: Any, params: Sequence[Any]) -> str:
    """Recover the path template from a compiled mount pattern.

    Each parameter capture group is replaced, leftmost first, by ``:name``
    taken from the next entry of *params*.  A modern-encoding group carries
    its own separator, which is written back exactly once.

    Returns the template relative to the mount point, without a leading
    separator::

        decode_path(re.compile(r"^\\/orgs(?:\\/([^\\/]+?))\\/?(?=\\/|$)", re.I),
                    [{"name": "orgId"}])
        # -> "orgs/:orgId"

    Raises ``UnrecognizedPatternError`` if *pattern* is not a compiled
    mount path, and ``MalformedTreeError`` if *params* runs out before the
    capture groups do.
    """
    serialized = serialize_pattern(pattern)
    if _PATH_GRAMMAR.match(serialized) is None:
        raise UnrecognizedPatternError(serialized)

    text = serialized
    consumed = 0
    while (fragment := _PARAM_FRAGMENT.search(text)) is not None:
        if consumed >= len(params):
            msg = (
                f"Pattern {serialized} has more capture groups than the "
                f"{len(params)} parameter key(s) supplied"
            )
            raise MalformedTreeError(msg)

        placeholder = f":{_param_name(params[consumed])}"
        if fragment.group().startswith(_MODERN_PARAM_PREFIX):
            placeholder = "\\/" + placeholder
        text = text[: fragment.start()] + placeholder + text[fragment.end():]
        consumed += 1

    match = _PATH_GRAMMAR.match(text)
    if match is None:
        # Only reachable if a parameter name breaks the literal alphabet
        msg = f"Parameter names in {serialized} do not form a valid path: {text}"
        raise MalformedTreeError(msg)

    return _ESCAPED_CHAR.sub(r"\1", match.group("template"))


def strip_param_suffix(path: str) -> str:
    """Drop inline custom matchers: ``/users/:id(\\d+)`` -> ``/users/:id``."""
    return _INLINE_PARAM_SUFFIX.sub(r"\1", path)


def join_path(base: str, literal: str) -> str:
    """Append a literal path to *base*.

    A literal ``/`` under a non-empty base adds nothing, so a route at a
    sub-router's root does not gain a trailing separator.
    """
    if base and literal == "/":
        return base
    return strip_param_suffix(f"{base}{literal}")
