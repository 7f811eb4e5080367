"""CORS middleware configuration."""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from coins_api.auth.api_key import API_KEY_HEADER
from coins_api.config import Settings


def setup_cors(app: FastAPI, settings: Settings) -> None:
    """Allow the balance and admin front-ends to call the API."""
    wildcard = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        # Browsers reject credentials with a wildcard origin.
        allow_credentials=not wildcard,
        allow_methods=["GET", "POST", "PATCH", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", API_KEY_HEADER],
        expose_headers=["X-Request-Id"],
    )
