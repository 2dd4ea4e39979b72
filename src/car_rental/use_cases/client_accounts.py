"""Client account use cases: add, update, get and balance aggregation."""

from __future__ import annotations

import logging
from decimal import Decimal

from car_rental.domain.client_account import (
    ClientAccount,
    ClientAccountBalance,
    ClientAccountCreationParams,
    ClientAccountModificationParams,
    is_positive_id,
)
from car_rental.domain.errors import NotFoundError, ValidationError
from car_rental.domain.result import Err, Ok, Result
from car_rental.ports.client_account_repository import (
    ClientAccountPredicate,
    ClientAccountRepository,
)
from car_rental.ports.rezervation_repository import RezervationRepository

logger = logging.getLogger(__name__)

ZERO = Decimal("0.00")


def invalid_id(field: str) -> Err:
    return Err(
        ValidationError(
            errors=[{"field": field, "message": "Must be a positive integer", "code": "INVALID_ID"}]
        )
    )


def missing_params(name: str) -> Err:
    return Err(ValidationError(f"{name} must be provided", parameter=name))


class ClientAccountService:
    """
    Client identity management and balance aggregation.

    Responsibilities:
    - Validate parameters before any repository access
    - Raise nothing for expected failures; return Err results instead
    """

    def __init__(
        self,
        client_account_repository: ClientAccountRepository,
        rezervation_repository: RezervationRepository,
    ) -> None:
        self._client_accounts = client_account_repository
        self._rezervations = rezervation_repository

    def add(self, params: ClientAccountCreationParams | None) -> Result[ClientAccount]:
        """
        Create a client account.

        Returns:
            Ok with the stored account (client_id assigned)
            Err(ValidationError) if params are missing or a field is blank
        """
        if params is None:
            return missing_params("ClientAccountCreationParams")
        errors = params.validate()
        if errors:
            return Err(ValidationError(errors=errors))

        account = self._client_accounts.add(
            ClientAccount(
                client_id=None,
                email=params.email,
                full_name=params.full_name,
                phone=params.phone,
            )
        )
        logger.info("Client account created", extra={"client_id": account.client_id})
        return Ok(account)

    def update(self, params: ClientAccountModificationParams | None) -> Result[ClientAccount]:
        """
        Overwrite email, full name and phone of an existing account.

        Returns:
            Ok with the updated account
            Err(ValidationError) if params are missing or invalid
            Err(NotFoundError) if no account has params.client_id
        """
        if params is None:
            return missing_params("ClientAccountModificationParams")
        errors = params.validate()
        if errors:
            return Err(ValidationError(errors=errors))

        updated = self._client_accounts.update(
            ClientAccount(
                client_id=params.client_id,
                email=params.email,
                full_name=params.full_name,
                phone=params.phone,
            )
        )
        if updated is None:
            return Err(NotFoundError(resource="ClientAccount", identifier=params.client_id))

        logger.info("Client account updated", extra={"client_id": updated.client_id})
        return Ok(updated)

    def get(self, client_id: int) -> Result[ClientAccount]:
        if not is_positive_id(client_id):
            return invalid_id("client_id")

        account = self._client_accounts.get_by_id(client_id)
        if account is None:
            return Err(NotFoundError(resource="ClientAccount", identifier=client_id))
        return Ok(account)

    def find(self, predicate: ClientAccountPredicate) -> list[ClientAccount]:
        return self._client_accounts.search(predicate)

    def get_client_account_balance(self, client_id: int) -> Result[ClientAccountBalance]:
        """
        Aggregate the fees of every rezervation the client ever made.

        - total_rental_fee: rental fees of rezervations that were not cancelled
        - total_cancellation_fee: cancellation fees of cancelled rezervations
        - total_fees: sum of both

        A client without rezervations (unknown ids included) gets zero
        aggregates rather than an error.
        """
        if not is_positive_id(client_id):
            return invalid_id("client_id")

        rezervations = self._rezervations.search(lambda r: r.client_id == client_id)

        total_rental_fee = sum(
            (r.rental_fee for r in rezervations if not r.is_cancelled), ZERO
        )
        total_cancellation_fee = sum(
            (r.cancellation_fee or ZERO for r in rezervations if r.is_cancelled), ZERO
        )

        return Ok(
            ClientAccountBalance(
                client_id=client_id,
                total_rental_fee=total_rental_fee,
                total_cancellation_fee=total_cancellation_fee,
                total_fees=total_rental_fee + total_cancellation_fee,
            )
        )
