"""Request/response schemas for the admin coin endpoints.

Request fields are typed ``Any`` so the service can tell "absent" from "present
but wrong" (via ``model_fields_set``) and answer with per-field messages.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from coins_api.coins.schemas import CoinRecordResponse


class CoinCreateRequest(BaseModel):
    """POST /admin/coins body."""

    name: Any = None
    email: Any = None
    coins: Any = None


class CoinUpdateRequest(BaseModel):
    """PATCH /admin/coins body."""

    email: Any = None
    coins: Any = None
    coins_delta: Any = Field(None, alias="coinsDelta")
    name: Any = None
    spend_history: Any = None


class CoinDeleteRequest(BaseModel):
    """DELETE /admin/coins body."""

    email: Any = None


class CoinListResponse(BaseModel):
    """Filtered listing."""

    items: list[CoinRecordResponse]
    count: int


class MessageResponse(BaseModel):
    """Plain confirmation."""

    message: str
