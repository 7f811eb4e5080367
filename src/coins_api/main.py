"""FastAPI application factory."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import structlog
from fastapi import FastAPI

from coins_api.admin.router import router as admin_router
from coins_api.auth.router import router as auth_router
from coins_api.coins.router import router as coins_router
from coins_api.config import get_settings
from coins_api.database import close_db, init_db
from coins_api.health.router import router as health_router
from coins_api.middleware import setup_middleware

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Create the process-wide connection pool on startup and dispose it on shutdown."""
    settings = get_settings()
    # Raises ServerConfigError on incomplete datastore settings, aborting startup.
    url = settings.resolved_database_url()
    await init_db(
        url,
        pool_size=settings.db_pool_size,
        max_overflow=settings.db_max_overflow,
        statement_timeout_ms=settings.db_statement_timeout_ms,
        ssl=settings.database_ssl(),
    )
    logger.info("coins_api_started", environment=settings.environment, variant=settings.balance_variant)

    yield

    await close_db()


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="Coins API",
        description="Coin balance lookup for users and balance management for administrators",
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    setup_middleware(app, settings)
    app.include_router(health_router, tags=["Health"])
    app.include_router(auth_router)
    app.include_router(admin_router)
    app.include_router(coins_router)

    return app
