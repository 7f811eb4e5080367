"""Admin coin management router: /admin/coins."""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from coins_api.admin.schemas import (
    CoinCreateRequest,
    CoinDeleteRequest,
    CoinListResponse,
    CoinUpdateRequest,
    MessageResponse,
)
from coins_api.admin.service import (
    create_coin_record,
    delete_coin_record,
    list_coin_records,
    update_coin_record,
)
from coins_api.auth.dependencies import ADMIN_GUARDS
from coins_api.coins.schemas import CoinRecordResponse
from coins_api.database import get_session

router = APIRouter(prefix="/admin", tags=["Admin Coins"], dependencies=ADMIN_GUARDS)


@router.get("/coins", response_model=CoinListResponse)
async def list_coins(
    name: str | None = Query(None),
    email: str | None = Query(None),
    db: AsyncSession = Depends(get_session),  # noqa: B008
) -> CoinListResponse:
    """List coin records, optionally filtered by name and/or email substring."""
    items = await list_coin_records(db, name=name, email=email)
    return CoinListResponse(items=items, count=len(items))


@router.post("/coins", response_model=CoinRecordResponse, status_code=201)
async def create_coins(
    body: CoinCreateRequest | None = None,
    db: AsyncSession = Depends(get_session),  # noqa: B008
) -> CoinRecordResponse:
    """Create a coin record."""
    return await create_coin_record(db, body or CoinCreateRequest())


@router.patch("/coins", response_model=CoinRecordResponse)
async def update_coins(
    body: CoinUpdateRequest | None = None,
    db: AsyncSession = Depends(get_session),  # noqa: B008
) -> CoinRecordResponse:
    """Set or adjust a balance and/or patch name and spend history."""
    return await update_coin_record(db, body or CoinUpdateRequest())


@router.delete("/coins", response_model=MessageResponse)
async def delete_coins(
    body: CoinDeleteRequest | None = None,
    db: AsyncSession = Depends(get_session),  # noqa: B008
) -> MessageResponse:
    """Delete a coin record by email."""
    await delete_coin_record(db, (body or CoinDeleteRequest()).email)
    return MessageResponse(message="User deleted successfully")
