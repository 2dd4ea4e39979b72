"""Seeded in-memory repositories and services shared by the use case tests.

Clients:
    1  client1@mail.com / Client Name 1 / +11111
    2  client2@mail.com / Client Name 2 / +22222

Rezervations (D = 2026-01-01 10:00):
    1  client 1  family   D+1 -> D+5  booked
    2  client 1  economy  D+2 -> D+3  picked up
    3  client 1  economy  D+1 -> D+2  returned
    4  client 2  family   D+3 -> D+4  cancelled (rate 2.00, fee 50.00)
    5  client 2  premium  D+5 -> D+6  returned
"""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from car_rental.adapters.in_memory_client_account_repository import (
    InMemoryClientAccountRepository,
)
from car_rental.adapters.in_memory_rezervation_repository import InMemoryRezervationRepository
from car_rental.domain.car_type import CarTypeVariant
from car_rental.domain.client_account import ClientAccount
from car_rental.domain.rezervation import Rezervation
from car_rental.use_cases.client_accounts import ClientAccountService
from car_rental.use_cases.rezervations import RezervationService

D = datetime(2026, 1, 1, 10, 0)


def day(n: int) -> datetime:
    return D + timedelta(days=n)


@pytest.fixture()
def client_accounts() -> list[ClientAccount]:
    return [
        ClientAccount(1, "client1@mail.com", "Client Name 1", "+11111"),
        ClientAccount(2, "client2@mail.com", "Client Name 2", "+22222"),
    ]


@pytest.fixture()
def rezervations() -> list[Rezervation]:
    def rezervation(rezervation_id, client_id, car_type, start, end, rental_fee, **flags):
        return Rezervation(
            rezervation_id=rezervation_id,
            client_id=client_id,
            car_plate_number=f"CA{rezervation_id:04d}AC",
            car_type=car_type,
            pick_up_date=day(start),
            return_date=day(end),
            rental_fee=Decimal(rental_fee),
            deposit_fee=Decimal("0"),
            **flags,
        )

    return [
        rezervation(1, 1, CarTypeVariant.FAMILY, 1, 5, "2304.00"),
        rezervation(2, 1, CarTypeVariant.ECONOMY, 2, 3, "240.00", is_picked_up=True),
        rezervation(
            3, 1, CarTypeVariant.ECONOMY, 1, 2, "240.00", is_picked_up=True, is_returned=True
        ),
        rezervation(
            4,
            2,
            CarTypeVariant.FAMILY,
            3,
            4,
            "576.00",
            is_cancelled=True,
            cancellation_fee_rate=Decimal("2.00"),
            cancellation_fee=Decimal("50.00"),
        ),
        rezervation(
            5, 2, CarTypeVariant.PREMIUM, 5, 6, "960.00", is_picked_up=True, is_returned=True
        ),
    ]


@pytest.fixture()
def client_account_repository(
    client_accounts: list[ClientAccount],
) -> InMemoryClientAccountRepository:
    return InMemoryClientAccountRepository(client_accounts)


@pytest.fixture()
def rezervation_repository(rezervations: list[Rezervation]) -> InMemoryRezervationRepository:
    return InMemoryRezervationRepository(rezervations)


@pytest.fixture()
def client_account_service(
    client_account_repository: InMemoryClientAccountRepository,
    rezervation_repository: InMemoryRezervationRepository,
) -> ClientAccountService:
    return ClientAccountService(client_account_repository, rezervation_repository)


@pytest.fixture()
def rezervation_service(
    rezervation_repository: InMemoryRezervationRepository,
    client_account_service: ClientAccountService,
) -> RezervationService:
    return RezervationService(rezervation_repository, client_account_service)
