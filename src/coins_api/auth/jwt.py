"""
HS256 admin session tokens.

Tokens carry the admin ``email`` and a fixed ``role`` claim. They are not stored
server-side: validity is the signature plus the ``exp`` claim.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any

import jwt

ADMIN_ROLE = "admin"


def create_session_token(
    email: str,
    secret: str,
    *,
    expire_minutes: int = 480,
    algorithm: str = "HS256",
) -> str:
    """
    Create a signed admin session token.

    Args:
        email: Canonical admin email.
        secret: Signing secret.
        expire_minutes: Lifetime of the token.
        algorithm: JWT signing algorithm.

    Returns:
        Encoded JWT string.
    """
    now = datetime.now(timezone.utc)
    payload: dict[str, Any] = {
        "email": email,
        "role": ADMIN_ROLE,
        "iat": now,
        "exp": now + timedelta(minutes=expire_minutes),
    }
    return jwt.encode(payload, secret, algorithm=algorithm)


def verify_session_token(token: str, secret: str, *, algorithm: str = "HS256") -> dict[str, Any]:
    """
    Verify and decode an admin session token.

    Returns:
        Decoded payload dictionary.

    Raises:
        jwt.InvalidTokenError: If the token is malformed, tampered with, expired,
            or does not assert the admin role.
    """
    payload: dict[str, Any] = jwt.decode(
        token,
        secret,
        algorithms=[algorithm],
        options={"require": ["exp", "email", "role"]},
    )
    if payload.get("role") != ADMIN_ROLE or not isinstance(payload.get("email"), str):
        msg = "Token does not assert an admin identity"
        raise jwt.InvalidTokenError(msg)
    return payload
