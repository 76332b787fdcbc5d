"""Restive exception hierarchy.

Shared across the pattern compiler, endpoints, API, and dispatcher so
every module raises and catches the same types.
"""

from dataclasses import dataclass


class RestiveError(Exception):
    """Base for all restive-specific errors."""


class ConfigurationError(RestiveError):
    """Raised when API setup is invalid.

    Typically surfaces from ``API.add_resource()`` or ``API._freeze()``
    at startup, never while serving.
    """


class CompileError(ConfigurationError):
    """A path template could not be compiled into a matcher.

    Raised synchronously from ``compile_path()`` and therefore from every
    route constructor, so a bad template aborts resource registration.
    """

    def __init__(self, template: str, reason: str) -> None:
        self.template = template
        self.reason = reason
        super().__init__(f"Cannot compile path template {template!r}: {reason}")


@dataclass(frozen=True, slots=True)
class HTTPError(RestiveError):
    """An error that maps directly to an HTTP status code.

    Raised by the dispatcher or by resource handlers. The ASGI handler
    catches these and turns them into a JSON error response.
    """

    status: int
    detail: str = ""
    headers: tuple[tuple[str, str], ...] = ()

    def __str__(self) -> str:
        if self.detail:
            return f"{self.status}: {self.detail}"
        return str(self.status)


class BadRequest(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """400 — the request body or form could not be decoded."""

    def __init__(self, detail: str = "Bad Request") -> None:
        super().__init__(status=400, detail=detail)


class NotFound(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """404 — no resource is mounted under the request path."""

    def __init__(self, detail: str = "Not Found") -> None:
        super().__init__(status=404, detail=detail)


class MethodNotAllowed(HTTPError):  # noqa: N818 — conventional name in web frameworks
    """405 — no route of the resource accepts this method and path.

    Wrong verb and wrong path are reported the same way. The ``Allow``
    header lists every method the resource registered.
    """

    def __init__(self, allowed: frozenset[str], detail: str = "") -> None:
        allow_value = ", ".join(sorted(allowed))
        default_detail = f"Method not allowed. Allowed methods: {allow_value}"
        super().__init__(
            status=405,
            detail=detail or default_detail,
            headers=(("Allow", allow_value),),
        )
