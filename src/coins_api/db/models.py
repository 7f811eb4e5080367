"""ORM model for the ``coins`` table."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, CheckConstraint, DateTime, Index, Integer, String, Text, UniqueConstraint, func
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Mapped, mapped_column

from coins_api.db.base import Base

# Largest value the INTEGER ``coins`` column holds.
MAX_COINS = 2**31 - 1


class CoinRecord(Base):
    """One row per user: balance, consult counters and spend history."""

    __tablename__ = "coins"
    __table_args__ = (
        UniqueConstraint("email", name="uq_coins_email"),
        CheckConstraint("coins >= 0", name="ck_coins_non_negative"),
        Index("ix_coins_created_at", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str | None] = mapped_column(Text, nullable=True)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    coins: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")

    user_consults_quantity: Mapped[int | None] = mapped_column(Integer, default=0, server_default="0")
    statement_consults_quantity: Mapped[int | None] = mapped_column(Integer, default=0, server_default="0")
    user_consulted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    admin_consulted_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    # Legacy rows may hold JSON text instead of a JSON array; see coins.schemas.SpendHistory.
    spend_history: Mapped[Any | None] = mapped_column(JSON().with_variant(JSONB(), "postgresql"), nullable=True)
