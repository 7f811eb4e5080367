"""Shared API key check applied to every non-probe route."""

from __future__ import annotations

import secrets

import structlog
from fastapi import Depends, Header

from coins_api.config import Settings, get_settings
from coins_api.errors import SERVER_CONFIG_MESSAGE, AuthError, ServerConfigError

logger = structlog.get_logger()

API_KEY_HEADER = "x-api-key"


def verify_api_key(provided: str | None, expected: str) -> bool:
    """Constant-time comparison of the provided key with the expected one."""
    if not provided:
        return False
    return secrets.compare_digest(provided.encode(), expected.encode())


async def require_api_key(
    x_api_key: str | None = Header(None, alias=API_KEY_HEADER),
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> None:
    """
    Reject the request unless it carries the configured shared key.

    Raises:
        ServerConfigError: If no key is configured on the server.
        AuthError: If the header is missing or does not match.
    """
    if not settings.api_key:
        logger.error("api_key_not_configured")
        raise ServerConfigError(SERVER_CONFIG_MESSAGE)
    if not verify_api_key(x_api_key, settings.api_key):
        msg = "Invalid API key"
        raise AuthError(msg)
