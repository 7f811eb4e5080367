"""Query helpers for the ``coins`` table.

Every mutation is a single statement with ``RETURNING`` so that guards such as
the non-negative balance floor are evaluated by the store in the same
statement that writes.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from sqlalchemy import delete, func, insert, select, update

from coins_api.db.models import MAX_COINS, CoinRecord

if TYPE_CHECKING:
    from sqlalchemy.ext.asyncio import AsyncSession

_COLUMNS = tuple(CoinRecord.__table__.c)

Row = Mapping[str, Any]


async def get_record(db: AsyncSession, email: str) -> Row | None:
    """Fetch a full record by normalized email."""
    result = await db.execute(select(*_COLUMNS).where(CoinRecord.email == email))
    return result.mappings().one_or_none()


async def record_exists(db: AsyncSession, email: str) -> bool:
    """Check whether a record exists for the normalized email."""
    result = await db.execute(select(CoinRecord.id).where(CoinRecord.email == email))
    return result.scalar_one_or_none() is not None


async def list_records(
    db: AsyncSession,
    name: str | None = None,
    email: str | None = None,
) -> list[Row]:
    """List records, newest first, with optional case-insensitive substring filters."""
    stmt = select(*_COLUMNS)
    if name:
        stmt = stmt.where(func.lower(CoinRecord.name).contains(name.lower(), autoescape=True))
    if email:
        stmt = stmt.where(func.lower(CoinRecord.email).contains(email.lower(), autoescape=True))
    stmt = stmt.order_by(CoinRecord.created_at.desc(), CoinRecord.id.desc())
    result = await db.execute(stmt)
    return list(result.mappings().all())


async def insert_record(db: AsyncSession, name: str, email: str, coins: int) -> Row:
    """Insert a record. Raises ``IntegrityError`` on a duplicate email."""
    now = func.now()
    result = await db.execute(
        insert(CoinRecord)
        .values(name=name, email=email, coins=coins, created_at=now, updated_at=now)
        .returning(*_COLUMNS)
    )
    return result.mappings().one()


async def bump_consult_counter(db: AsyncSession, email: str, *, statement: bool) -> Row | None:
    """
    Increment one consult counter and stamp the user consult time.

    Returns:
        The updated record, or None if no record has that email.
    """
    counter = CoinRecord.statement_consults_quantity if statement else CoinRecord.user_consults_quantity
    now = func.now()
    result = await db.execute(
        update(CoinRecord)
        .where(CoinRecord.email == email)
        .values({counter.key: func.coalesce(counter, 0) + 1, "user_consulted_at": now, "updated_at": now})
        .returning(*_COLUMNS)
        .execution_options(synchronize_session=False)
    )
    return result.mappings().one_or_none()


async def patch_record(
    db: AsyncSession,
    email: str,
    *,
    coins: int | None = None,
    coins_delta: int | None = None,
    name: str | None = None,
    spend_history: list[Any] | None = None,
) -> Row | None:
    """
    Apply a partial update in one conditional statement.

    ``coins`` sets the balance absolutely and takes precedence over ``coins_delta``.
    A delta is only applied when the resulting balance stays within 0..MAX_COINS.

    Returns:
        The updated record, or None when no row matched (missing email or a delta
        that would take the balance out of range).
    """
    now = func.now()
    values: dict[str, Any] = {"admin_consulted_at": now, "updated_at": now}
    stmt = update(CoinRecord).where(CoinRecord.email == email)

    if name is not None:
        values["name"] = name
    if spend_history is not None:
        values["spend_history"] = spend_history
    if coins is not None:
        values["coins"] = coins
    elif coins_delta is not None:
        values["coins"] = CoinRecord.coins + coins_delta
        # Compare against a constant so the guard itself never overflows INTEGER.
        if coins_delta >= 0:
            stmt = stmt.where(CoinRecord.coins <= MAX_COINS - coins_delta)
        else:
            stmt = stmt.where(CoinRecord.coins >= -coins_delta)

    result = await db.execute(
        stmt.values(values).returning(*_COLUMNS).execution_options(synchronize_session=False)
    )
    return result.mappings().one_or_none()


async def delete_record(db: AsyncSession, email: str) -> bool:
    """Delete by normalized email. Returns True if a row was removed."""
    result = await db.execute(
        delete(CoinRecord)
        .where(CoinRecord.email == email)
        .returning(CoinRecord.email)
        .execution_options(synchronize_session=False)
    )
    return result.scalar_one_or_none() is not None
