"""FastAPI authentication dependencies."""

from __future__ import annotations

import jwt
import structlog
from fastapi import Depends, Security
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from coins_api.auth.api_key import require_api_key
from coins_api.auth.jwt import verify_session_token
from coins_api.auth.schemas import AdminIdentity
from coins_api.config import Settings, get_settings
from coins_api.errors import SERVER_CONFIG_MESSAGE, AuthError, ServerConfigError

logger = structlog.get_logger()

_bearer = HTTPBearer(auto_error=False)

INVALID_TOKEN_MESSAGE = "Invalid or expired token"


async def get_current_admin(
    credentials: HTTPAuthorizationCredentials | None = Security(_bearer),
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> AdminIdentity:
    """
    Extract and verify the admin session token.

    Every failure (missing header, wrong scheme, bad signature, expiry) yields the
    same generic 401.
    """
    if not settings.jwt_secret:
        logger.error("jwt_secret_not_configured")
        raise ServerConfigError(SERVER_CONFIG_MESSAGE)
    if credentials is None or not credentials.credentials:
        raise AuthError(INVALID_TOKEN_MESSAGE)
    try:
        payload = verify_session_token(credentials.credentials, settings.jwt_secret, algorithm=settings.jwt_algorithm)
    except jwt.InvalidTokenError as e:
        logger.info("admin_token_rejected", reason=str(e))
        raise AuthError(INVALID_TOKEN_MESSAGE) from e
    return AdminIdentity(email=payload["email"], role=payload["role"])


# Ordered capability checks for admin routes: shared key first, then session.
ADMIN_GUARDS = [Depends(require_api_key), Depends(get_current_admin)]
