"""Endpoint record and the path-keyed merge."""

from collections.abc import Iterable
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Endpoint:
    """A flattened endpoint discovered in a routing tree.

    ``path`` is fully qualified from the application root with parameters
    rendered as ``:name``.  ``methods`` keeps first-encounter order and is
    always upper-case.  ``middlewares`` names each handler attached to the
    route, ``"anonymous"`` for unnamed ones.
    """

    path: str
    methods: tuple[str, ...] = ()
    middlewares: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.path,
            "methods": list(self.methods),
            "middlewares": list(self.middlewares),
        }


def merge_endpoints(current: list[Endpoint], new: Iterable[Endpoint]) -> list[Endpoint]:
    """Merge *new* endpoints into *current*, keyed by path.

    An endpoint whose path is already present contributes only the methods
    the existing entry lacks, appended at the end.  Middleware attribution
    stays with the first discovery.  Unknown paths are appended.

    Mutates and returns *current*.  Idempotent: merging the same list twice
    gives the same result as merging it once.
    """
    index = {endpoint.path: i for i, endpoint in enumerate(current)}

    for candidate in new:
        position = index.get(candidate.path)
        if position is None:
            index[candidate.path] = len(current)
            current.append(candidate)
            continue

        existing = current[position]
        added = tuple(
            m for m in dict.fromkeys(candidate.methods) if m not in existing.methods
        )
        if added:
            current[position] = replace(existing, methods=existing.methods + added)

    return current
