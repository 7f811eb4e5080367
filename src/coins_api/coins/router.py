"""Public balance router: POST /coins."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from coins_api.auth.api_key import require_api_key
from coins_api.coins.schemas import BalanceRequest
from coins_api.coins.service import lookup_balance
from coins_api.config import Settings, get_settings
from coins_api.database import get_session

router = APIRouter(tags=["Coins"], dependencies=[Depends(require_api_key)])


@router.post("/coins", response_model=None)
async def get_balance(
    body: BalanceRequest | None = None,
    db: AsyncSession = Depends(get_session),  # noqa: B008
    settings: Settings = Depends(get_settings),  # noqa: B008
) -> dict[str, Any]:
    """Return the caller's coin balance. The response shape depends on the deployment variant."""
    body = body or BalanceRequest()
    balance = await lookup_balance(db, settings, body.email, body.consult_type)
    return balance.model_dump(mode="json")
