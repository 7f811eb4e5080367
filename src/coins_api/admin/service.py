"""Admin coin record management business logic."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog
from sqlalchemy.exc import IntegrityError

from coins_api.admin.schemas import CoinCreateRequest, CoinUpdateRequest
from coins_api.admin.validation import parse_int, parse_non_negative_int
from coins_api.coins import store
from coins_api.coins.emails import require_email
from coins_api.coins.schemas import CoinRecordResponse
from coins_api.errors import ClientInputError, ConflictError, NotFoundError

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()

EMAIL_NOT_FOUND = "Email not found"
NEGATIVE_BALANCE = "Coins cannot be negative"
BALANCE_TOO_LARGE = "Coins exceed the maximum balance"
_MUTABLE_FIELDS = frozenset({"coins", "coins_delta", "name", "spend_history"})


async def list_coin_records(
    db: AsyncSession,
    name: str | None = None,
    email: str | None = None,
) -> list[CoinRecordResponse]:
    """List records filtered by case-insensitive name/email substrings, newest first."""
    name_filter = name.strip() if name and name.strip() else None
    email_filter = email.strip() if email and email.strip() else None
    rows = await store.list_records(db, name=name_filter, email=email_filter)
    return [CoinRecordResponse.model_validate(dict(row)) for row in rows]


async def create_coin_record(db: AsyncSession, body: CoinCreateRequest) -> CoinRecordResponse:
    """
    Create a record.

    Raises:
        ClientInputError: If name/email are missing or coins is not a non-negative integer.
        ConflictError: If the normalized email already exists.
    """
    if not isinstance(body.name, str) or not body.name.strip():
        msg = "Name is required"
        raise ClientInputError(msg)
    email = require_email(body.email)

    coins = 0
    if "coins" in body.model_fields_set:
        parsed = parse_non_negative_int(body.coins)
        if parsed is None:
            msg = "Coins must be a non-negative number"
            raise ClientInputError(msg)
        coins = parsed

    try:
        row = await store.insert_record(db, name=body.name.strip(), email=email, coins=coins)
        await db.commit()
    except IntegrityError as e:
        await db.rollback()
        logger.info("coin_record_duplicate", email=email)
        msg = "Email already exists"
        raise ConflictError(msg) from e

    logger.info("coin_record_created", email=email, coins=coins)
    return CoinRecordResponse.model_validate(dict(row))


def _update_arguments(body: CoinUpdateRequest) -> dict[str, Any]:
    """Validate the mutable fields of a PATCH body into ``store.patch_record`` kwargs."""
    fields = body.model_fields_set & _MUTABLE_FIELDS
    if not fields:
        msg = 'At least one of "coins", "coinsDelta", "name", or "spend_history" is required'
        raise ClientInputError(msg)

    kwargs: dict[str, Any] = {}
    if "name" in fields:
        if not isinstance(body.name, str):
            msg = "Name must be a string"
            raise ClientInputError(msg)
        kwargs["name"] = body.name.strip()

    if "spend_history" in fields:
        if not isinstance(body.spend_history, list):
            msg = "spend_history must be an array"
            raise ClientInputError(msg)
        kwargs["spend_history"] = body.spend_history

    # An absolute balance wins over a delta sent in the same call.
    if "coins" in fields:
        coins = parse_non_negative_int(body.coins)
        if coins is None:
            raise ClientInputError(NEGATIVE_BALANCE)
        kwargs["coins"] = coins
    elif "coins_delta" in fields:
        delta = parse_int(body.coins_delta)
        if delta is None:
            msg = "coinsDelta must be a valid number"
            raise ClientInputError(msg)
        kwargs["coins_delta"] = delta

    return kwargs


async def update_coin_record(db: AsyncSession, body: CoinUpdateRequest) -> CoinRecordResponse:
    """
    Partially update a record.

    The balance bounds are part of the UPDATE statement itself, so a delta that
    would go below zero or past MAX_COINS writes nothing.

    Raises:
        ClientInputError: On invalid input or a delta that would take the balance out of range.
        NotFoundError: If no record has that email.
    """
    email = require_email(body.email)
    kwargs = _update_arguments(body)

    row = await store.patch_record(db, email, **kwargs)
    if row is None:
        exists = await store.record_exists(db, email)
        await db.rollback()
        if not exists:
            raise NotFoundError(EMAIL_NOT_FOUND)
        delta = kwargs.get("coins_delta") or 0
        logger.info("coin_record_update_rejected", email=email, coins_delta=delta)
        raise ClientInputError(BALANCE_TOO_LARGE if delta > 0 else NEGATIVE_BALANCE)

    await db.commit()
    logger.info("coin_record_updated", email=email, fields=sorted(kwargs), coins=row["coins"])
    return CoinRecordResponse.model_validate(dict(row))


async def delete_coin_record(db: AsyncSession, raw_email: Any) -> None:  # noqa: ANN401
    """
    Delete a record by email.

    Raises:
        ClientInputError: If the email is missing.
        NotFoundError: If no record has that email.
    """
    email = require_email(raw_email)
    deleted = await store.delete_record(db, email)
    if not deleted:
        await db.rollback()
        raise NotFoundError(EMAIL_NOT_FOUND)
    await db.commit()
    logger.info("coin_record_deleted", email=email)
