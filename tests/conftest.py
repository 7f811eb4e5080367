"""Shared test fixtures.

Tests run against a throwaway SQLite database (aiosqlite) per test, created
from the ORM metadata.
"""

from __future__ import annotations

import os
from collections.abc import AsyncGenerator, Iterator
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from coins_api.config import get_settings
from coins_api.database import close_db, get_engine, get_session, init_db
from coins_api.db.base import Base
from coins_api.main import create_app

API_KEY = "test-shared-api-key"
JWT_SECRET = "test-jwt-secret-0123456789abcdef0123456789abcdef"
ADMIN_EMAIL = "admin@coins.test"
ADMIN_PASSWORD = "S3cret-admin-pass"

_TEST_ENV = {
    "COINS_API_KEY": API_KEY,
    "COINS_JWT_SECRET": JWT_SECRET,
    "COINS_ADMIN_EMAIL": ADMIN_EMAIL,
    "COINS_ADMIN_PASSWORD": ADMIN_PASSWORD,
    "COINS_LOG_FORMAT": "console",
    "COINS_BALANCE_VARIANT": "detailed",
}


@pytest.fixture(autouse=True)
def _test_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Point settings at test secrets and reset the settings cache around each test."""
    for key in list(os.environ):
        if key.startswith("COINS_"):
            monkeypatch.delenv(key, raising=False)
    for key, value in _TEST_ENV.items():
        monkeypatch.setenv(key, value)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest_asyncio.fixture
async def database(tmp_path: Path) -> AsyncGenerator[None, None]:
    """Initialize a fresh SQLite database with the coins table."""
    await init_db(f"sqlite+aiosqlite:///{tmp_path / 'coins.db'}")
    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield
    await close_db()


@pytest_asyncio.fixture
async def client(database: None) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client with the shared API key set."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test", headers={"x-api-key": API_KEY}) as ac:
        yield ac


@pytest_asyncio.fixture
async def anon_client(database: None) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client without any credentials."""
    app = create_app()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_client(client: AsyncClient) -> AsyncClient:
    """Client carrying the shared key and an admin session token obtained via /admin/login."""
    response = await client.post("/admin/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
    assert response.status_code == 200, response.text
    client.headers["Authorization"] = f"Bearer {response.json()['token']}"
    return client


@pytest_asyncio.fixture
async def db_session(database: None) -> AsyncGenerator[AsyncSession, None]:
    """Direct database session for test assertions."""
    async for session in get_session():
        yield session
        break


async def create_record(client: AsyncClient, email: str, coins: int = 0, name: str = "Test User") -> dict:
    """Helper to create a record through the admin API."""
    response = await client.post("/admin/coins", json={"name": name, "email": email, "coins": coins})
    assert response.status_code == 201, response.text
    return response.json()
