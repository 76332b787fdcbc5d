"""Error handling pipeline for restive requests.

Maps HTTPError exceptions and unexpected failures to JSON error
responses of the form ``{"error": "..."}``.
"""

import logging

from restive.errors import HTTPError
from restive.http.request import Request
from restive.http.response import Response, json_response

logger = logging.getLogger("restive.server")


def error_response(status: int, detail: str) -> Response:
    """JSON error body with *status*."""
    return json_response({"error": detail}, status=status)


def handle_http_error(exc: HTTPError, request: Request) -> Response:
    """Map an HTTPError to a Response, carrying over its headers."""
    logger.debug("%d %s %s — %s", exc.status, request.method, request.path, exc.detail)

    response = error_response(exc.status, exc.detail or f"Error {exc.status}")
    for name, value in exc.headers:
        response = response.with_header(name, value)
    return response


def handle_internal_error(exc: Exception, request: Request, *, debug: bool) -> Response:
    """Handle unexpected exceptions as 500 errors."""
    logger.exception("500 %s %s", request.method, request.path)

    if debug:
        return error_response(500, f"{type(exc).__name__}: {exc}")
    return error_response(500, "Internal Server Error")
