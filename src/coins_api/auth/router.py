"""Admin authentication router: /admin/login and /admin/me."""

from __future__ import annotations

import secrets

import structlog
from fastapi import APIRouter, Depends

from coins_api.auth.api_key import require_api_key
from coins_api.auth.dependencies import get_current_admin
from coins_api.auth.jwt import create_session_token
from coins_api.auth.schemas import AdminIdentity, LoginRequest, LoginResponse
from coins_api.coins.emails import normalize_email
from coins_api.config import Settings, get_settings
from coins_api.errors import SERVER_CONFIG_MESSAGE, AuthError, ClientInputError, ServerConfigError

logger = structlog.get_logger()

router = APIRouter(prefix="/admin", tags=["Admin Auth"], dependencies=[Depends(require_api_key)])


def _credentials_match(email: str, password: str, admin_email: str, admin_password: str) -> bool:
    """Compare both credentials without short-circuiting on the first mismatch."""
    email_ok = secrets.compare_digest(normalize_email(email).encode(), normalize_email(admin_email).encode())
    password_ok = secrets.compare_digest(password.encode(), admin_password.encode())
    return email_ok and password_ok


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest | None = None,
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> LoginResponse:
    """Verify admin credentials and issue a session token."""
    body = body or LoginRequest()
    if not isinstance(body.email, str) or not body.email or not isinstance(body.password, str) or not body.password:
        msg = "Email and password are required"
        raise ClientInputError(msg)

    if not settings.admin_email or not settings.admin_password:
        logger.error("admin_credentials_not_configured")
        raise ServerConfigError(SERVER_CONFIG_MESSAGE)

    if not _credentials_match(body.email, body.password, settings.admin_email, settings.admin_password):
        logger.warning("admin_login_failed", email=normalize_email(body.email))
        msg = "Invalid credentials"
        raise AuthError(msg)

    if not settings.jwt_secret:
        logger.error("jwt_secret_not_configured")
        raise ServerConfigError(SERVER_CONFIG_MESSAGE)

    token = create_session_token(
        settings.admin_email,
        settings.jwt_secret,
        expire_minutes=settings.jwt_expire_minutes,
        algorithm=settings.jwt_algorithm,
    )
    logger.info("admin_login_succeeded", email=settings.admin_email)
    return LoginResponse(token=token, email=settings.admin_email)


@router.get("/me", response_model=AdminIdentity)
async def me(admin: AdminIdentity = Depends(get_current_admin)) -> AdminIdentity:  # noqa: B008
    """Return the identity asserted by the session token."""
    return admin
