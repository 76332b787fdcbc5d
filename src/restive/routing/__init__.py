"""Routing — path template compiler, routes, and per-resource endpoint tables.

Routes are registered during setup and frozen into read-only endpoints
before the API serves its first request.
"""

from restive.routing.endpoint import Endpoint, build_endpoint
from restive.routing.pattern import CompiledPattern, compile_path
from restive.routing.route import (
    DELETE,
    GET,
    METHODS,
    POST,
    PUT,
    Route,
    RouteKind,
    RouteMatch,
    delete_route,
    retrieve_route,
    save_route,
)

__all__ = [
    "DELETE",
    "GET",
    "METHODS",
    "POST",
    "PUT",
    "CompiledPattern",
    "Endpoint",
    "Route",
    "RouteKind",
    "RouteMatch",
    "build_endpoint",
    "compile_path",
    "delete_route",
    "retrieve_route",
    "save_route",
]
