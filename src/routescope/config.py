"""Traversal configuration.

ListOptions is a frozen dataclass, immutable after creation, no string-key
dict lookups.
"""

from dataclasses import dataclass

# Layer names the host framework gives to mounts that carry a nested stack
MOUNT_NAMES: frozenset[str] = frozenset({"router", "bound dispatch", "mounted_app"})

# Plain middleware functions without a name; some frameworks attach a
# router this way, so they are worth descending into
ANONYMOUS_LAYER_NAME = "<anonymous>"

MOUNT_NAMES_WITH_MIDDLEWARE: frozenset[str] = MOUNT_NAMES | {ANONYMOUS_LAYER_NAME}


@dataclass(frozen=True, slots=True)
class ListOptions:
    """Options for ``list_endpoints()``. Immutable after creation.

    Override what you need::

        options = ListOptions(include_middleware_routes=False)
    """

    include_middleware_routes: bool = True

    @property
    def mount_names(self) -> frozenset[str]:
        """Layer names the walker descends into under these options."""
        if self.include_middleware_routes:
            return MOUNT_NAMES_WITH_MIDDLEWARE
        return MOUNT_NAMES
