"""Coins table.

One row per user email with balance, consult counters, audit timestamps
and the JSON spend history.

Revision ID: 001_coins_table
Revises: None
Create Date: 2026-10-19
"""

from collections.abc import Sequence

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from alembic import op

revision: str = "001_coins_table"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the coins table."""
    op.create_table(
        "coins",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.Text(), nullable=True),
        sa.Column("email", sa.String(320), nullable=False),
        sa.Column("coins", sa.Integer(), server_default="0", nullable=False),
        sa.Column("user_consults_quantity", sa.Integer(), server_default="0", nullable=True),
        sa.Column("statement_consults_quantity", sa.Integer(), server_default="0", nullable=True),
        sa.Column("user_consulted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("admin_consulted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("spend_history", sa.JSON().with_variant(postgresql.JSONB(), "postgresql"), nullable=True),
        sa.UniqueConstraint("email", name="uq_coins_email"),
        sa.CheckConstraint("coins >= 0", name="ck_coins_non_negative"),
    )
    op.create_index("ix_coins_created_at", "coins", ["created_at"])


def downgrade() -> None:
    """Drop the coins table."""
    op.drop_index("ix_coins_created_at", table_name="coins")
    op.drop_table("coins")
