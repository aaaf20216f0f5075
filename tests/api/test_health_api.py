"""Tests for liveness and readiness endpoints."""

from contextlib import asynccontextmanager
from unittest.mock import AsyncMock

import pytest
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError

from sportsdb.api.v1.endpoints import health


def _factory(session: AsyncMock):
    @asynccontextmanager
    async def open_session():
        yield session

    return open_session


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


class TestReadiness:
    async def test_ready_when_store_answers(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        session = AsyncMock()
        monkeypatch.setattr(health, "session_factory", lambda: _factory(session))
        response = await client.get("/api/v1/health/ready")
        assert response.status_code == 200
        assert response.json() == {"status": "ok"}
        session.execute.assert_awaited_once()

    async def test_not_ready_when_store_down(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        session = AsyncMock()
        session.execute.side_effect = OperationalError("SELECT 1", {}, Exception("refused"))
        monkeypatch.setattr(health, "session_factory", lambda: _factory(session))
        response = await client.get("/api/v1/health/ready")
        assert response.status_code == 503
        body = response.json()
        assert body["status"] == "not_ready"
        assert "ping" in body["message"]

    async def test_not_ready_without_database(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(health, "session_factory", lambda: None)
        response = await client.get("/api/v1/health/ready")
        assert response.status_code == 503
        assert response.json()["message"] == "DATABASE_URL is not configured"
