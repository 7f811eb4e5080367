"""Request/response schemas for coin records and the public balance lookup."""

from __future__ import annotations

import json
from datetime import datetime
from typing import Annotated, Any

import structlog
from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

logger = structlog.get_logger()


def coerce_spend_history(value: Any) -> list[Any]:  # noqa: ANN401
    """
    Deserialize a stored spend history into a list.

    Lists pass through, JSON text is decoded, and anything that does not end up
    as a list (NULL, malformed JSON, objects, scalars) becomes an empty list.
    """
    if isinstance(value, list):
        return value
    if isinstance(value, (str, bytes)):
        try:
            decoded = json.loads(value)
        except ValueError:
            logger.warning("spend_history_unparsable", length=len(value))
            return []
        return decoded if isinstance(decoded, list) else []
    return []


SpendHistory = Annotated[list[Any], BeforeValidator(coerce_spend_history)]


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------


class CoinRecordResponse(BaseModel):
    """Full persisted coin record."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str | None = None
    email: str
    coins: int
    user_consults_quantity: int | None = 0
    statement_consults_quantity: int | None = 0
    user_consulted_at: datetime | None = None
    admin_consulted_at: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
    spend_history: SpendHistory = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Public balance lookup
# ---------------------------------------------------------------------------


class BalanceRequest(BaseModel):
    """POST /coins body. Fields are checked by the service to produce precise messages."""

    email: Any = None
    consult_type: Any = Field(None, alias="consultType")


class BalanceResponse(BaseModel):
    """Balance only."""

    email: str
    coins: int


class DetailedBalanceResponse(BalanceResponse):
    """Balance plus spend history."""

    spend_history: SpendHistory = Field(default_factory=list)
