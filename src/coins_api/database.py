"""Async SQLAlchemy engine and session management."""

from collections.abc import AsyncGenerator
from typing import Any

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


def _engine_options(
    url: str,
    pool_size: int,
    max_overflow: int,
    statement_timeout_ms: int,
    *,
    ssl: bool = False,
) -> dict[str, Any]:
    """Pool and driver options for the given URL."""
    options: dict[str, Any] = {"pool_pre_ping": True, "echo": False}
    if url.startswith("sqlite"):
        return options
    options["pool_size"] = pool_size
    options["max_overflow"] = max_overflow
    if url.startswith("postgresql+asyncpg"):
        connect_args: dict[str, Any] = {
            "server_settings": {"statement_timeout": str(statement_timeout_ms)},
        }
        if ssl:
            # asyncpg "require": encrypted, server certificate not verified.
            connect_args["ssl"] = "require"
        options["connect_args"] = connect_args
    return options


async def init_db(
    url: str,
    *,
    pool_size: int = 10,
    max_overflow: int = 5,
    statement_timeout_ms: int = 5000,
    ssl: bool = False,
) -> None:
    """Initialize the database engine and session factory."""
    global _engine, _session_factory  # noqa: PLW0603
    _engine = create_async_engine(
        url,
        **_engine_options(url, pool_size, max_overflow, statement_timeout_ms, ssl=ssl),
    )
    _session_factory = async_sessionmaker(
        _engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def close_db() -> None:
    """Dispose of the database engine."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine:
        await _engine.dispose()
        _engine = None
        _session_factory = None


def get_engine() -> AsyncEngine:
    """Get the async engine instance."""
    if _engine is None:
        msg = "Database not initialized. Call init_db() first."
        raise RuntimeError(msg)
    return _engine


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session (FastAPI dependency)."""
    if _session_factory is None:
        msg = "Database not initialized. Call init_db() first."
        raise RuntimeError(msg)
    async with _session_factory() as session:
        yield session
