"""Restive — route HTTP verbs to resource methods and answer in JSON.

A resource is any object; the verbs it supports are the methods it
defines (``list``, ``get``, ``post``, ``put``, ``delete``). Mounting it
at a root builds the routes once::

    from restive import API

    class Books:
        def list(self, params):
            return 200, [{"id": 1, "title": "Dune"}]

        def get(self, params):
            return 200, {"id": params["id"], "title": "Dune"}

    api = API()
    api.add_resource(Books(), "/books")
    api.run(port=3000)

``GET /books`` calls ``list``; ``GET /books/1`` calls ``get`` with
``params["id"] == "1"``.
"""

__version__ = "0.1.0"
__all__ = [
    "API",
    "APIConfig",
    "BadRequest",
    "CompileError",
    "ConfigurationError",
    "DeleteSupported",
    "Endpoint",
    "GetSupported",
    "HTTPError",
    "ListSupported",
    "MethodNotAllowed",
    "NotFound",
    "Params",
    "PostSupported",
    "PutSupported",
    "Request",
    "Response",
    "RestiveError",
    "Restful",
    "Route",
    "build_endpoint",
    "compile_path",
    "delete_route",
    "retrieve_route",
    "save_route",
]


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import restive`` fast while providing a clean top-level API.
    """
    if name == "API":
        from restive.api import API

        return API

    if name == "APIConfig":
        from restive.config import APIConfig

        return APIConfig

    if name == "Params":
        from restive.http.params import Params

        return Params

    if name == "Request":
        from restive.http.request import Request

        return Request

    if name == "Response":
        from restive.http.response import Response

        return Response

    if name in (
        "DeleteSupported",
        "GetSupported",
        "ListSupported",
        "PostSupported",
        "PutSupported",
        "Restful",
    ):
        from restive import resource as _resource

        return getattr(_resource, name)

    if name in (
        "Endpoint",
        "Route",
        "build_endpoint",
        "compile_path",
        "delete_route",
        "retrieve_route",
        "save_route",
    ):
        from restive import routing as _routing

        return getattr(_routing, name)

    if name in (
        "BadRequest",
        "CompileError",
        "ConfigurationError",
        "HTTPError",
        "MethodNotAllowed",
        "NotFound",
        "RestiveError",
    ):
        from restive import errors as _errors

        return getattr(_errors, name)

    msg = f"module {__name__!r} has no attribute {name!r}"
    raise AttributeError(msg)
