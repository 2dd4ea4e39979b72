from __future__ import annotations

from dataclasses import replace
from itertools import count
from threading import Lock

from car_rental.domain.client_account import ClientAccount
from car_rental.ports.client_account_repository import (
    ClientAccountPredicate,
    ClientAccountRepository,
)


class InMemoryClientAccountRepository(ClientAccountRepository):
    """
    Canonical contract implementation for tests.

    - Assigns sequential ids starting at 1
    - Returns search results ordered by client_id
    """

    def __init__(self, client_accounts: list[ClientAccount] | None = None) -> None:
        self._lock = Lock()
        self._accounts: dict[int, ClientAccount] = {}
        for account in client_accounts or []:
            if account.client_id is None:
                raise ValueError("Seeded client accounts must carry a client_id")
            self._accounts[account.client_id] = account
        self._ids = count(max(self._accounts, default=0) + 1)

    def get_by_id(self, client_id: int) -> ClientAccount | None:
        return self._accounts.get(client_id)

    def add(self, client_account: ClientAccount) -> ClientAccount:
        with self._lock:
            stored = replace(client_account, client_id=next(self._ids))
            self._accounts[stored.client_id] = stored
            return stored

    def update(self, client_account: ClientAccount) -> ClientAccount | None:
        with self._lock:
            if client_account.client_id not in self._accounts:
                return None
            self._accounts[client_account.client_id] = client_account
            return client_account

    def search(self, predicate: ClientAccountPredicate | None = None) -> list[ClientAccount]:
        with self._lock:
            snapshot = sorted(self._accounts.values(), key=lambda a: a.client_id)
        return [account for account in snapshot if predicate is None or predicate(account)]
