"""Route and RouteMatch frozen dataclasses, plus per-verb constructors."""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from restive.routing.pattern import CompiledPattern, compile_path

GET = "GET"
POST = "POST"
PUT = "PUT"
DELETE = "DELETE"

METHODS: frozenset[str] = frozenset({GET, POST, PUT, DELETE})

# (params) -> (status, data)
RetrieveHandler = Callable[..., Any]
# (body, params) -> (status, data)
SaveHandler = Callable[..., Any]
# (params) -> status
DeleteHandler = Callable[..., Any]


class RouteKind(Enum):
    """How the dispatcher calls a route's handler."""

    RETRIEVE = "retrieve"
    SAVE = "save"
    DELETE = "delete"


@dataclass(frozen=True, slots=True)
class Route:
    """A (method, compiled pattern, handler) triple.

    Created once during resource registration and immutable afterwards.
    ``Route()`` with no path and no method is the empty route, which
    endpoints refuse to register.
    """

    path: str = ""
    method: str = ""
    handler: Callable[..., Any] | None = None
    kind: RouteKind | None = None
    pattern: CompiledPattern | None = field(init=False, default=None, compare=False)

    def __post_init__(self) -> None:
        if self.path:
            object.__setattr__(self, "pattern", compile_path(self.path))

    @property
    def is_empty(self) -> bool:
        """True for a route with neither path nor method set."""
        return not self.path and not self.method

    def match(self, path: str) -> dict[str, str] | None:
        """Match a request path, returning the extracted parameters.

        A single trailing slash is stripped from *path* first (``/`` itself
        is kept). Returns ``None`` when the path does not match.
        """
        if self.pattern is None:
            return None
        if len(path) > 1 and path.endswith("/"):
            path = path[:-1]
        return self.pattern.match(path)


@dataclass(frozen=True, slots=True)
class RouteMatch:
    """Result of a successful route lookup."""

    route: Route
    path_params: dict[str, str]


def retrieve_route(path: str, method: str, handler: RetrieveHandler) -> Route:
    """Build a route whose handler takes ``params`` and returns ``(status, data)``."""
    return Route(path=path, method=method, handler=handler, kind=RouteKind.RETRIEVE)


def save_route(path: str, method: str, handler: SaveHandler) -> Route:
    """Build a route whose handler takes ``(body, params)`` and returns ``(status, data)``."""
    return Route(path=path, method=method, handler=handler, kind=RouteKind.SAVE)


def delete_route(path: str, method: str, handler: DeleteHandler) -> Route:
    """Build a route whose handler takes ``params`` and returns a status code."""
    return Route(path=path, method=method, handler=handler, kind=RouteKind.DELETE)
