"""Tests for restive.server.errors — error responses."""

import logging

import pytest

from restive.errors import MethodNotAllowed, NotFound
from restive.http.headers import Headers
from restive.http.params import Params
from restive.http.request import Request
from restive.server.errors import error_response, handle_http_error, handle_internal_error


async def _receive() -> dict:
    return {"type": "http.request", "body": b"", "more_body": False}


def _request(method: str = "GET", path: str = "/items") -> Request:
    return Request(
        method=method,
        path=path,
        headers=Headers(),
        query=Params(),
        http_version="1.1",
        client=None,
        _receive=_receive,
    )


class TestErrorResponse:
    def test_body(self) -> None:
        response = error_response(404, "gone")
        assert response.status == 404
        assert response.json() == {"error": "gone"}


class TestHandleHTTPError:
    def test_detail(self) -> None:
        response = handle_http_error(NotFound("No resource"), _request())
        assert response.status == 404
        assert response.json() == {"error": "No resource"}

    def test_headers_carried(self) -> None:
        exc = MethodNotAllowed(frozenset({"GET"}))
        response = handle_http_error(exc, _request("PUT"))
        assert response.status == 405
        assert response.header("Allow") == "GET"


class TestHandleInternalError:
    def test_hidden_by_default(self, caplog: pytest.LogCaptureFixture) -> None:
        try:
            raise RuntimeError("secret")
        except RuntimeError as exc:
            with caplog.at_level(logging.ERROR, logger="restive.server"):
                response = handle_internal_error(exc, _request(), debug=False)
        assert response.status == 500
        assert response.json() == {"error": "Internal Server Error"}
        assert "500 GET /items" in caplog.text
        assert "RuntimeError: secret" in caplog.text

    def test_debug_shows_exception(self) -> None:
        response = handle_internal_error(ValueError("boom"), _request(), debug=True)
        assert response.json() == {"error": "ValueError: boom"}
