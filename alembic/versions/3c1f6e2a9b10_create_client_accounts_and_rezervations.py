"""Create client_accounts and rezervations

Revision ID: 3c1f6e2a9b10
Revises:
Create Date: 2026-10-19 09:12:41.218305

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op


# revision identifiers, used by Alembic.
revision: str = "3c1f6e2a9b10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

MONEY = sa.Numeric(precision=18, scale=6)


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "client_accounts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("email", sa.String(length=255), nullable=False),
        sa.Column("full_name", sa.String(length=255), nullable=False),
        sa.Column("phone", sa.String(length=50), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    )
    op.create_table(
        "rezervations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("client_id", sa.Integer(), sa.ForeignKey("client_accounts.id"), nullable=False),
        sa.Column("car_plate_number", sa.String(length=20), nullable=False),
        sa.Column("car_type", sa.String(length=20), nullable=False),
        sa.Column("pick_up_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("return_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("rental_fee", MONEY, nullable=False),
        sa.Column("deposit_fee", MONEY, nullable=False),
        sa.Column("cancellation_fee_rate", MONEY, nullable=True),
        sa.Column("cancellation_fee", MONEY, nullable=True),
        sa.Column("is_picked_up", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_returned", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("is_cancelled", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False
        ),
    )
    op.create_index("ix_rezervations_client_id", "rezervations", ["client_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("ix_rezervations_client_id", table_name="rezervations")
    op.drop_table("rezervations")
    op.drop_table("client_accounts")
