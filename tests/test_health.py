"""Tests for health endpoints"""

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(client: AsyncClient):
    response = await client.get("/api/health")

    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "healthy"
    assert data["message"] == "Brew Bliss Cafe API is running"
    assert data["timestamp"]


@pytest.mark.asyncio
async def test_ready_checks_database(client: AsyncClient):
    response = await client.get("/api/health/ready")

    assert response.status_code == 200
    assert response.json() == {"status": "ready", "checks": {"database": "ok"}}


@pytest.mark.asyncio
async def test_logging_configured_by_lifespan_not_factory(monkeypatch):
    from brewbliss import main
    from brewbliss.config import Settings

    calls = []
    monkeypatch.setattr(main, "configure_logging", calls.append)

    settings = Settings(database_url="sqlite+aiosqlite:///:memory:")
    application = main.create_app(settings)
    assert calls == []

    async with application.router.lifespan_context(application):
        assert calls == [settings]
        await application.state.db.ping()
