from __future__ import annotations

from datetime import datetime
from decimal import Decimal

from sqlalchemy import Boolean, DateTime, ForeignKey, Integer, Numeric, String, func
from sqlalchemy.orm import Mapped, mapped_column

from car_rental.infra.db.models.base import Base

# Fees keep sub-cent precision: rental fees come from fractional hours.
MONEY = Numeric(precision=18, scale=6)


class RezervationRow(Base):
    __tablename__ = "rezervations"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    client_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("client_accounts.id"), nullable=False, index=True
    )
    car_plate_number: Mapped[str] = mapped_column(String(20), nullable=False)
    car_type: Mapped[str] = mapped_column(String(20), nullable=False)

    pick_up_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    return_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)

    rental_fee: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    deposit_fee: Mapped[Decimal] = mapped_column(MONEY, nullable=False)
    cancellation_fee_rate: Mapped[Decimal | None] = mapped_column(MONEY, nullable=True)
    cancellation_fee: Mapped[Decimal | None] = mapped_column(MONEY, nullable=True)

    is_picked_up: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_returned: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_cancelled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Optimistic concurrency token, bumped on every update
    version: Mapped[int] = mapped_column(Integer, nullable=False, default=1)

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )
