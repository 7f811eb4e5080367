"""Health endpoint tests."""

from datetime import datetime

import pytest
from httpx import AsyncClient


@pytest.mark.asyncio
async def test_health(anon_client: AsyncClient) -> None:
    """GET /health needs no key and returns ok with an ISO timestamp."""
    response = await anon_client.get("/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert datetime.fromisoformat(data["timestamp"]).tzinfo is not None


@pytest.mark.asyncio
async def test_readiness(anon_client: AsyncClient) -> None:
    """GET /ready checks the database."""
    response = await anon_client.get("/ready")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ready"
    assert data["checks"]["database"] == "ok"


@pytest.mark.asyncio
async def test_version(anon_client: AsyncClient) -> None:
    """GET /version returns version and environment."""
    response = await anon_client.get("/version")
    assert response.status_code == 200
    data = response.json()
    assert data["version"] == "0.1.0"
    assert data["environment"] == "development"
