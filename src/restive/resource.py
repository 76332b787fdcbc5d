"""Resource capabilities — one structural protocol per HTTP verb.

A resource opts into a verb by defining the matching method. The API
checks these protocols once, when the resource is registered, and
binds the methods into routes; nothing is looked up by name while
serving.

Usage::

    class Books:
        def list(self, params: Params) -> tuple[int, Any]:
            return 200, list(store.values())

        def get(self, params: Params) -> tuple[int, Any]:
            return 200, store[params["id"]]

        def delete(self, params: Params) -> int:
            store.pop(params["id"], None)
            return 204

Handlers may also be ``async def``.
"""

from typing import Any, Protocol, runtime_checkable

from restive.http.params import Params


@runtime_checkable
class ListSupported(Protocol):
    """A resource that can list its collection (``GET /root``)."""

    def list(self, params: Params) -> tuple[int, Any]: ...


@runtime_checkable
class GetSupported(Protocol):
    """A resource that can return a single item (``GET /root/:id``)."""

    def get(self, params: Params) -> tuple[int, Any]: ...


@runtime_checkable
class PostSupported(Protocol):
    """A resource that accepts ``POST /root/:id`` with a JSON body."""

    def post(self, body: Any, params: Params) -> tuple[int, Any]: ...


@runtime_checkable
class PutSupported(Protocol):
    """A resource that accepts ``PUT /root/:id`` with a JSON body."""

    def put(self, body: Any, params: Params) -> tuple[int, Any]: ...


@runtime_checkable
class DeleteSupported(Protocol):
    """A resource that can delete a single item (``DELETE /root/:id``)."""

    def delete(self, params: Params) -> int: ...


@runtime_checkable
class Restful(Protocol):
    """A resource that declares the model its request bodies decode into.

    ``get_resource()`` returns a dataclass type; POST and PUT bodies are
    bound into an instance of it before the handler is called.
    """

    def get_resource(self) -> Any: ...
