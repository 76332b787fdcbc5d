"""Async test client for restive APIs.

Uses the same Response type as production. Requests go through the
ASGI interface directly, without sockets.
"""

import json as json_module
from typing import Any
from urllib.parse import urlencode

from restive.api import API
from restive.http.response import Response


class TestClient:
    __test__ = False  # Tell pytest this is not a test class
    """Async test client for restive APIs.

    Usage::

        async with TestClient(api) as client:
            response = await client.get("/books/1")
            assert response.status == 200
            assert response.json() == {"title": "Dune"}
    """

    __slots__ = ("api",)

    def __init__(self, api: API) -> None:
        self.api = api

    async def __aenter__(self) -> "TestClient":
        self.api._ensure_frozen()
        return self

    async def __aexit__(self, *args: object) -> None:
        return None

    async def get(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        query: dict[str, str] | None = None,
    ) -> Response:
        """Send a GET request."""
        return await self.request("GET", _with_query(path, query), headers=headers)

    async def post(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
        form: dict[str, str] | None = None,
    ) -> Response:
        """Send a POST request."""
        return await self._send_body("POST", path, headers, body, json, form)

    async def put(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
        json: Any = None,
        form: dict[str, str] | None = None,
    ) -> Response:
        """Send a PUT request."""
        return await self._send_body("PUT", path, headers, body, json, form)

    async def delete(
        self,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        query: dict[str, str] | None = None,
    ) -> Response:
        """Send a DELETE request."""
        return await self.request("DELETE", _with_query(path, query), headers=headers)

    async def _send_body(
        self,
        method: str,
        path: str,
        headers: dict[str, str] | None,
        body: bytes | None,
        json: Any,
        form: dict[str, str] | None,
    ) -> Response:
        extra_headers: dict[str, str] = {}
        request_body = body or b""

        if json is not None:
            request_body = json_module.dumps(json).encode("utf-8")
            extra_headers["content-type"] = "application/json"
        elif form is not None:
            request_body = urlencode(form).encode("utf-8")
            extra_headers["content-type"] = "application/x-www-form-urlencoded"

        merged = {**extra_headers, **(headers or {})}
        return await self.request(method, path, headers=merged, body=request_body)

    async def request(
        self,
        method: str,
        path: str,
        *,
        headers: dict[str, str] | None = None,
        body: bytes | None = None,
    ) -> Response:
        """Send an arbitrary request through the ASGI app."""
        path_part, _, query_string = path.partition("?")

        request_body = body or b""
        raw_headers: list[tuple[bytes, bytes]] = [
            (name.lower().encode("latin-1"), value.encode("latin-1"))
            for name, value in (headers or {}).items()
        ]
        if request_body:
            raw_headers.append((b"content-length", str(len(request_body)).encode("latin-1")))

        scope: dict[str, Any] = {
            "type": "http",
            "asgi": {"version": "3.0"},
            "http_version": "1.1",
            "method": method.upper(),
            "path": path_part,
            "raw_path": path_part.encode("latin-1"),
            "query_string": query_string.encode("latin-1"),
            "root_path": "",
            "headers": raw_headers,
            "server": ("testserver", 80),
            "client": ("127.0.0.1", 0),
        }

        body_sent = False

        async def receive() -> dict[str, Any]:
            nonlocal body_sent
            if not body_sent:
                body_sent = True
                return {"type": "http.request", "body": request_body, "more_body": False}
            return {"type": "http.disconnect"}

        response_status = 200
        response_headers: list[tuple[bytes, bytes]] = []
        response_body_parts: list[bytes] = []

        async def send(message: dict[str, Any]) -> None:
            nonlocal response_status, response_headers
            if message["type"] == "http.response.start":
                response_status = message["status"]
                response_headers = list(message.get("headers", []))
            elif message["type"] == "http.response.body":
                response_body_parts.append(message.get("body", b""))

        await self.api(scope, receive, send)

        content_type = ""
        extra_headers: list[tuple[str, str]] = []
        for name_b, value_b in response_headers:
            name_str = name_b.decode("latin-1")
            value_str = value_b.decode("latin-1")
            if name_str == "content-type":
                content_type = value_str
            elif name_str != "content-length":
                extra_headers.append((name_str, value_str))

        return Response(
            body=b"".join(response_body_parts),
            status=response_status,
            content_type=content_type,
            headers=tuple(extra_headers),
        )


def _with_query(path: str, query: dict[str, str] | None) -> str:
    if not query:
        return path
    sep = "&" if "?" in path else "?"
    return f"{path}{sep}{urlencode(query)}"
