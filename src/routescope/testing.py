"""Fixture builders for routescope tests.

Builds in-memory routing trees with the same layer shape host routers
expose, and compiles mount paths into either pattern encoding::

    api = FakeRouter()
    api.get("/members", list_members)

    app = FakeApp()
    app.use("/orgs/:orgId", api)

    list_endpoints(app)
"""

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Literal

type Encoding = Literal["legacy", "modern"]

_DEFAULT_CAPTURE = r"[^\/]+?"

_PARAM_SEGMENT = re.compile(r"^:(?P<name>\w+)(?:\((?P<capture>[^)]+)\))?$")
_PARAM_NAME = re.compile(r":(\w+)")
_SPECIAL = re.compile(r"([.+*?=^!${}()\[\]|\\])")


def compile_path(template: str, *, encoding: Encoding = "modern", end: bool = False) -> re.Pattern[str]:
    """Compile a path template the way host routers compile mount paths.

    ``legacy`` keeps the separator outside the capture group;
    ``modern`` moves it inside.  ``end=False`` (the default) builds a
    prefix matcher, as used for mounts.
    """
    if encoding not in ("legacy", "modern"):
        msg = f"Unknown pattern encoding {encoding!r}"
        raise ValueError(msg)

    parts: list[str] = []
    for segment in template.strip("/").split("/"):
        if not segment:
            continue
        param = _PARAM_SEGMENT.match(segment)
        if param is None:
            parts.append("\\/" + _SPECIAL.sub(r"\\\1", segment))
            continue
        capture = f"({param.group('capture') or _DEFAULT_CAPTURE})"
        if encoding == "legacy":
            parts.append(f"\\/(?:{capture})")
        else:
            parts.append(f"(?:\\/{capture})")

    suffix = "\\/?$" if end else "\\/?(?=\\/|$)"
    return re.compile("^" + "".join(parts) + suffix, re.IGNORECASE)


def param_keys(template: str) -> list[dict[str, str]]:
    """Parameter descriptors for *template*, in declaration order."""
    return [{"name": name} for name in _PARAM_NAME.findall(template)]


def _layer_name(fn: Any) -> str:
    name = getattr(fn, "__name__", "")
    if not name or name == "<lambda>":
        return "<anonymous>"
    return name


@dataclass(slots=True)
class FakeRoute:
    """A terminal route: method table, path(s), and attached handlers."""

    path: Any
    methods: dict[str, bool] = field(default_factory=dict)
    stack: list["FakeLayer"] = field(default_factory=list)


@dataclass(slots=True)
class FakeLayer:
    """One entry in a fake routing stack."""

    handle: Any
    name: str = "<anonymous>"
    regexp: Any = None
    keys: list[Any] = field(default_factory=list)
    path: str | None = None
    route: FakeRoute | None = None


class FakeRouter:
    """A router whose ``stack`` is built by registration calls."""

    __slots__ = ("encoding", "stack")

    def __init__(self, *, encoding: Encoding = "modern") -> None:
        self.encoding: Encoding = encoding
        self.stack: list[FakeLayer] = []

    def route(self, path: Any, methods: Iterable[str], *handlers: Callable[..., Any]) -> FakeRoute:
        """Register a terminal route.  ``"_all"`` in *methods* is the wildcard."""
        route = FakeRoute(
            path=path,
            methods={method.lower(): True for method in methods},
            stack=[FakeLayer(handle=h, name=_layer_name(h)) for h in handlers],
        )
        self.stack.append(FakeLayer(handle=route, name="bound dispatch", route=route))
        return route

    def get(self, path: Any, *handlers: Callable[..., Any]) -> FakeRoute:
        return self.route(path, ["get"], *handlers)

    def post(self, path: Any, *handlers: Callable[..., Any]) -> FakeRoute:
        return self.route(path, ["post"], *handlers)

    def all(self, path: Any, *handlers: Callable[..., Any]) -> FakeRoute:
        return self.route(path, ["_all"], *handlers)

    def use(self, path: str, child: Any, *, encoding: Encoding | None = None) -> FakeLayer:
        """Mount *child* under *path*, compiled in this router's encoding."""
        if isinstance(child, FakeRouter):
            name = "router"
        elif isinstance(child, FakeApp):
            name = "mounted_app"
        else:
            name = _layer_name(child)
        layer = FakeLayer(
            handle=child,
            name=name,
            regexp=compile_path(path, encoding=encoding or self.encoding),
            keys=param_keys(path),
        )
        self.stack.append(layer)
        return layer

    def use_middleware(self, fn: Callable[..., Any]) -> FakeLayer:
        """Attach a plain middleware function at the root."""
        layer = FakeLayer(handle=fn, name=_layer_name(fn), regexp=compile_path("/"))
        self.stack.append(layer)
        return layer


class FakeApp:
    """An application that keeps its router in ``_router``."""

    __slots__ = ("_router",)

    def __init__(self, *, encoding: Encoding = "modern") -> None:
        self._router = FakeRouter(encoding=encoding)

    def route(self, path: Any, methods: Iterable[str], *handlers: Callable[..., Any]) -> FakeRoute:
        return self._router.route(path, methods, *handlers)

    def get(self, path: Any, *handlers: Callable[..., Any]) -> FakeRoute:
        return self._router.get(path, *handlers)

    def post(self, path: Any, *handlers: Callable[..., Any]) -> FakeRoute:
        return self._router.post(path, *handlers)

    def use(self, path: str, child: Any, *, encoding: Encoding | None = None) -> FakeLayer:
        return self._router.use(path, child, encoding=encoding)

    def use_middleware(self, fn: Callable[..., Any]) -> FakeLayer:
        return self._router.use_middleware(fn)
