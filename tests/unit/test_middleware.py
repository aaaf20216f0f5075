"""Tests for raw ASGI middleware (timeout, request ID)."""

import asyncio

from httpx import ASGITransport, AsyncClient

from sportsdb.middleware import RequestIDMiddleware, TimeoutMiddleware
from sportsdb.middleware.request_id import sanitize_request_id


async def _ok_app(scope, receive, send) -> None:
    await send({"type": "http.response.start", "status": 200, "headers": []})
    await send({"type": "http.response.body", "body": b"ok"})


async def _slow_app(scope, receive, send) -> None:
    await asyncio.sleep(1)
    await _ok_app(scope, receive, send)


async def test_timeout_returns_504() -> None:
    app = TimeoutMiddleware(_slow_app, timeout_seconds=0.01)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/api/v1/search")
    assert response.status_code == 504
    assert response.json()["error"] == "GATEWAY_TIMEOUT"


async def test_fast_request_passes_through_timeout() -> None:
    app = TimeoutMiddleware(_ok_app, timeout_seconds=5)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/")
    assert response.status_code == 200
    assert response.text == "ok"


async def test_request_id_generated_when_missing() -> None:
    app = RequestIDMiddleware(_ok_app)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        response = await ac.get("/")
    assert len(response.headers["X-Request-ID"]) == 36


class TestSanitizeRequestId:
    def test_valid_kept(self) -> None:
        assert sanitize_request_id("req_42-a") == "req_42-a"

    def test_too_long_replaced(self) -> None:
        assert sanitize_request_id("a" * 65) != "a" * 65

    def test_none_replaced(self) -> None:
        assert len(sanitize_request_id(None)) == 36
