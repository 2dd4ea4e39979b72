"""PostgreSQL implementation of ClientAccountRepository."""

from __future__ import annotations

from sqlalchemy import select
from sqlalchemy.orm import Session

from car_rental.domain.client_account import ClientAccount
from car_rental.infra.db.models.client_account import ClientAccountRow
from car_rental.ports.client_account_repository import (
    ClientAccountPredicate,
    ClientAccountRepository,
)


class PostgresClientAccountRepository(ClientAccountRepository):
    """
    PostgreSQL implementation of ClientAccountRepository.

    - Uses the caller's session; commit/rollback belong to the unit of work
    - Converts ClientAccountRow (infrastructure) to ClientAccount (domain)
    """

    def __init__(self, session: Session) -> None:
        self._session = session

    def get_by_id(self, client_id: int) -> ClientAccount | None:
        row = self._session.get(ClientAccountRow, client_id)
        return self._to_domain(row) if row else None

    def add(self, client_account: ClientAccount) -> ClientAccount:
        row = ClientAccountRow(
            email=client_account.email,
            full_name=client_account.full_name,
            phone=client_account.phone,
        )
        self._session.add(row)
        self._session.flush()  # assigns row.id
        return self._to_domain(row)

    def update(self, client_account: ClientAccount) -> ClientAccount | None:
        row = self._session.get(ClientAccountRow, client_account.client_id)
        if row is None:
            return None

        row.email = client_account.email
        row.full_name = client_account.full_name
        row.phone = client_account.phone
        self._session.flush()
        return self._to_domain(row)

    def search(self, predicate: ClientAccountPredicate | None = None) -> list[ClientAccount]:
        rows = self._session.execute(
            select(ClientAccountRow).order_by(ClientAccountRow.id)
        ).scalars().all()
        accounts = [self._to_domain(row) for row in rows]
        return [a for a in accounts if predicate is None or predicate(a)]

    def _to_domain(self, row: ClientAccountRow) -> ClientAccount:
        return ClientAccount(
            client_id=row.id,
            email=row.email,
            full_name=row.full_name,
            phone=row.phone,
        )
