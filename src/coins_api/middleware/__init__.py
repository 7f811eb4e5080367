"""Middleware registration."""

from fastapi import FastAPI

from coins_api.config import Settings
from coins_api.middleware.cors import setup_cors
from coins_api.middleware.error_handler import setup_error_handlers
from coins_api.middleware.logging import setup_logging
from coins_api.middleware.request_id import RequestIdMiddleware


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """Register all middleware in the correct order.

    FastAPI/Starlette executes middleware in reverse-add order (last added = outermost).
    CORS must be outermost so it also wraps error responses.
    """
    setup_logging(settings)
    setup_error_handlers(app)
    app.add_middleware(RequestIdMiddleware)
    setup_cors(app, settings)
