"""Endpoint table — the ordered routes of one resource.

Routes are registered during setup and the endpoint is frozen before
the server accepts connections. After that it is read-only, so any
number of request threads can call ``find_route`` concurrently.
"""

import logging

from restive.errors import ConfigurationError
from restive.resource import (
    DeleteSupported,
    GetSupported,
    ListSupported,
    PostSupported,
    PutSupported,
)
from restive.routing.route import (
    DELETE,
    GET,
    POST,
    PUT,
    Route,
    RouteMatch,
    delete_route,
    retrieve_route,
    save_route,
)

logger = logging.getLogger("restive.routing")


class Endpoint:
    """An ordered collection of routes sharing a root path.

    Usage::

        endpoint = Endpoint("/books")
        endpoint.add_route(retrieve_route("/books", GET, books.list))
        endpoint.add_route(retrieve_route("/books/:id", GET, books.get))
        endpoint.freeze()
        match = endpoint.find_route("/books/42", GET)
    """

    __slots__ = ("_frozen", "_routes", "root")

    def __init__(self, root: str) -> None:
        self.root = root
        self._routes: list[Route] = []
        self._frozen = False

    def __len__(self) -> int:
        return len(self._routes)

    def __repr__(self) -> str:
        return f"Endpoint({self.root!r}, routes={len(self._routes)})"

    @property
    def routes(self) -> tuple[Route, ...]:
        """Registered routes in insertion (and matching) order."""
        return tuple(self._routes)

    @property
    def methods(self) -> frozenset[str]:
        """Every method at least one route accepts."""
        return frozenset(route.method for route in self._routes)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def add_route(self, route: Route) -> bool:
        """Append *route*. Must be called before ``freeze()``.

        The empty route (no path, no method) is rejected with a warning
        and ``False`` is returned; registration carries on.
        """
        if self._frozen:
            msg = f"Cannot add routes to endpoint {self.root!r} after it is frozen."
            raise RuntimeError(msg)
        if route.is_empty:
            logger.warning("Ignoring empty route registered on endpoint %r", self.root)
            return False
        logger.debug("%s %s", route.method, route.path)
        self._routes.append(route)
        return True

    def freeze(self) -> None:
        """Make the endpoint read-only. No more routes can be added."""
        self._frozen = True

    def find_route(self, path: str, method: str) -> RouteMatch | None:
        """Return the first route accepting *method* and *path*.

        Routes are tried in insertion order. ``None`` means either no
        route has this method or none of those routes matches the path;
        the two cases are deliberately not told apart.
        """
        for route in self._routes:
            if route.method != method:
                continue
            params = route.match(path)
            if params is not None:
                return RouteMatch(route=route, path_params=params)
        return None


def normalize_root(root: str) -> str:
    """Drop trailing slashes from *root*, keeping ``/`` itself."""
    return root.rstrip("/") or "/"


def item_path(root: str) -> str:
    """Path template for single-item routes under *root*."""
    return f"{root.rstrip('/')}/:id"


def build_endpoint(resource: object, root: str) -> Endpoint:
    """Build a frozen endpoint from the capabilities *resource* declares.

    ============================  =========================
    capability                    route
    ============================  =========================
    ``ListSupported``             ``GET root``
    ``GetSupported``              ``GET root/:id``
    ``PostSupported``             ``POST root/:id``
    ``PutSupported``              ``PUT root/:id``
    ``DeleteSupported``           ``DELETE root/:id``
    ============================  =========================

    Handlers are the resource's bound methods, captured here once.
    Trailing slashes on *root* are dropped, so ``/items/`` and ``/items``
    build the same routes.

    Raises:
        ConfigurationError: If the resource supports none of the verbs.
        CompileError: If *root* does not compile as a path template.
    """
    root = normalize_root(root)
    endpoint = Endpoint(root)
    item = item_path(root)

    if isinstance(resource, ListSupported):
        endpoint.add_route(retrieve_route(root, GET, resource.list))
    if isinstance(resource, GetSupported):
        endpoint.add_route(retrieve_route(item, GET, resource.get))
    if isinstance(resource, PostSupported):
        endpoint.add_route(save_route(item, POST, resource.post))
    if isinstance(resource, PutSupported):
        endpoint.add_route(save_route(item, PUT, resource.put))
    if isinstance(resource, DeleteSupported):
        endpoint.add_route(delete_route(item, DELETE, resource.delete))

    if not len(endpoint):
        msg = (
            f"Resource {type(resource).__name__} mounted at {root!r} implements none of "
            "list, get, post, put or delete."
        )
        raise ConfigurationError(msg)

    endpoint.freeze()
    return endpoint
