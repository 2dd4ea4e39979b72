from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable

from car_rental.domain.client_account import ClientAccount

ClientAccountPredicate = Callable[[ClientAccount], bool]


class ClientAccountRepository(ABC):
    """
    Port for client account storage.

    Contract (Preconditions):
        - Inputs are validated by the calling service
        - Implementations trust inputs are valid and do not re-validate
    """

    @abstractmethod
    def get_by_id(self, client_id: int) -> ClientAccount | None: ...

    @abstractmethod
    def add(self, client_account: ClientAccount) -> ClientAccount:
        """Persist a new account and return it with its assigned client_id."""
        ...

    @abstractmethod
    def update(self, client_account: ClientAccount) -> ClientAccount | None:
        """Overwrite an existing account. Returns None if it does not exist."""
        ...

    @abstractmethod
    def search(self, predicate: ClientAccountPredicate | None = None) -> list[ClientAccount]:
        """Return matching accounts ordered by client_id ascending."""
        ...
