"""Public balance lookup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import structlog

from coins_api.coins import store
from coins_api.coins.emails import is_valid_email, require_email
from coins_api.coins.schemas import BalanceResponse, DetailedBalanceResponse
from coins_api.config import Settings
from coins_api.errors import ClientInputError, NotFoundError

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

logger = structlog.get_logger()

STATEMENT_CONSULT = "statement"
BASIC_NOT_FOUND_MESSAGE = "Email not found"


def _validated_email(raw: Any) -> str:  # noqa: ANN401
    email = require_email(raw)
    if not is_valid_email(email):
        msg = "Invalid email format"
        raise ClientInputError(msg)
    return email


async def lookup_balance(
    db: AsyncSession,
    settings: Settings,
    raw_email: Any,  # noqa: ANN401
    consult_type: Any = None,  # noqa: ANN401
) -> BalanceResponse | DetailedBalanceResponse:
    """
    Look up a user's balance by email.

    The ``detailed`` variant bumps the statement counter when ``consult_type`` is
    ``"statement"`` (the general counter otherwise) in the same statement that
    reads the row, and returns the spend history. The ``basic`` variant is a
    plain read.

    Raises:
        ClientInputError: If the email is missing or malformed.
        NotFoundError: If no record has that email.
    """
    email = _validated_email(raw_email)

    if settings.balance_variant == "basic":
        row = await store.get_record(db, email)
        if row is None:
            raise NotFoundError(BASIC_NOT_FOUND_MESSAGE)
        return BalanceResponse(email=row["email"], coins=row["coins"])

    row = await store.bump_consult_counter(db, email, statement=consult_type == STATEMENT_CONSULT)
    if row is None:
        await db.rollback()
        raise NotFoundError(settings.balance_not_found_message)
    await db.commit()
    return DetailedBalanceResponse(
        email=row["email"],
        coins=row["coins"],
        spend_history=row["spend_history"],
    )
