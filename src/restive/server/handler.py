"""ASGI handler — translates ASGI scope/messages to restive types.

The only component that touches raw ASGI directly. Converts the scope
to a typed Request, finds the mounted resource and its route, calls
the handler captured for that route, and sends the JSON result back
through ASGI ``send()``.
"""

from collections.abc import Mapping
from typing import Any

from restive._internal.asgi import Receive, Scope, Send
from restive._internal.invoke import invoke
from restive.config import APIConfig
from restive.errors import BadRequest, HTTPError, MethodNotAllowed, NotFound
from restive.extraction import extract_dataclass, is_extractable_dataclass
from restive.http.params import Params
from restive.http.request import Request
from restive.http.response import Response, json_response
from restive.resource import Restful
from restive.routing.mount import Mount, MountTable
from restive.routing.route import POST, PUT, RouteKind, RouteMatch
from restive.server.errors import handle_http_error, handle_internal_error
from restive.server.sender import send_response

# Methods whose URL-encoded body is merged into the handler params.
FORM_METHODS = frozenset({POST, PUT})


async def handle_request(
    scope: Scope,
    receive: Receive,
    send: Send,
    *,
    mounts: MountTable,
    config: APIConfig,
) -> None:
    """Process a single HTTP request through the full pipeline."""
    if scope["type"] != "http":
        return

    request = Request.from_asgi(scope, receive)

    try:
        response = await dispatch(request, mounts, config)
    except HTTPError as exc:
        response = handle_http_error(exc, request)
    except Exception as exc:
        response = handle_internal_error(exc, request, debug=config.debug)

    await send_response(response, send)


async def dispatch(request: Request, mounts: MountTable, config: APIConfig) -> Response:
    """Route *request* to its resource handler and marshal the result."""
    mount = mounts.resolve(request.path)
    if mount is None:
        raise NotFound(f"No resource mounted at {request.path!r}")

    form = await _read_form(request, config)

    match = mount.endpoint.find_route(request.path, request.method)
    if match is None:
        raise MethodNotAllowed(mount.endpoint.methods)

    params = form.extend(request.query).replace(match.path_params)
    status, data = await _invoke_route(match, mount, request, form, params, config)
    return json_response(data, status=status)


async def _invoke_route(
    match: RouteMatch,
    mount: Mount,
    request: Request,
    form: Params,
    params: Params,
    config: APIConfig,
) -> tuple[int, Any]:
    """Call the matched route's handler according to its kind.

    Dispatch follows the route object that matched, never the number of
    extracted parameters.
    """
    route = match.route
    handler = route.handler

    if route.kind is RouteKind.RETRIEVE:
        return _status_and_data(await invoke(handler, params), route.path)

    if route.kind is RouteKind.SAVE:
        body = await _read_save_body(request, form, mount.resource, config)
        return _status_and_data(await invoke(handler, body, params), route.path)

    if route.kind is RouteKind.DELETE:
        status = await invoke(handler, params)
        if not isinstance(status, int):
            msg = f"Delete handler for {route.path!r} returned {status!r}, expected a status code"
            raise TypeError(msg)
        return status, None

    msg = f"Route {route.method} {route.path!r} has no handler kind"
    raise TypeError(msg)


def _status_and_data(result: Any, path: str) -> tuple[int, Any]:
    """Unpack a handler's ``(status, data)`` return value."""
    if isinstance(result, tuple) and len(result) == 2 and isinstance(result[0], int):
        return result[0], result[1]
    msg = f"Handler for {path!r} returned {result!r}, expected (status, data)"
    raise TypeError(msg)


async def _read_body(request: Request, config: APIConfig) -> bytes:
    """Read the body, enforcing ``config.max_content_length``."""
    length = request.content_length
    if length is not None and length > config.max_content_length:
        raise HTTPError(status=413, detail="Request body too large")
    body = await request.body()
    if len(body) > config.max_content_length:
        raise HTTPError(status=413, detail="Request body too large")
    return body


async def _read_form(request: Request, config: APIConfig) -> Params:
    """Decode a URL-encoded POST/PUT body; empty params otherwise."""
    if request.method not in FORM_METHODS or not request.is_form:
        return Params()
    await _read_body(request, config)
    try:
        return await request.form()
    except (UnicodeDecodeError, ValueError) as exc:
        raise BadRequest(f"Malformed form body: {exc}") from exc


async def _read_save_body(
    request: Request, form: Params, resource: object, config: APIConfig
) -> Any:
    """Decode the body handed to a save handler.

    A URL-encoded body becomes a ``{name: first value}`` dict, an empty
    body becomes ``None``, anything else must be JSON. The result is
    bound to the resource's model when it declares one.
    """
    if request.is_form:
        data: Any = dict(form)
    else:
        raw = await _read_body(request, config)
        if not raw.strip():
            return None
        try:
            data = await request.json()
        except ValueError as exc:
            raise BadRequest(f"Malformed JSON body: {exc}") from exc

    if isinstance(resource, Restful):
        model = resource.get_resource()
        if is_extractable_dataclass(model):
            if not isinstance(data, Mapping):
                raise BadRequest("Expected a JSON object")
            return extract_dataclass(model, data)
    return data
