"""Request/response schemas for admin authentication endpoints."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class LoginRequest(BaseModel):
    """Admin login. Both fields are validated by the handler for precise messages."""

    email: Any = None
    password: Any = None


class LoginResponse(BaseModel):
    """Issued session token and the canonical admin email."""

    token: str
    email: str


class AdminIdentity(BaseModel):
    """Identity asserted by a verified session token."""

    email: str
    role: str
