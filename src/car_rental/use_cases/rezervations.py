"""Rezervation lifecycle use cases: booking, pick-up, return, cancellation, search."""

from __future__ import annotations

import logging
from collections.abc import Callable
from decimal import Decimal

from car_rental.domain.car_type import CAR_TYPES, CarTypeCatalog
from car_rental.domain.client_account import ClientAccount, is_positive_id
from car_rental.domain.errors import ConflictError, NotFoundError, ValidationError
from car_rental.domain.result import Err, Ok, Result
from car_rental.domain.rezervation import (
    Rezervation,
    RezervationBrowsingParams,
    RezervationCreationParams,
    as_utc,
    calculate_deposit_fee,
    calculate_rental_fee,
)
from car_rental.ports.rezervation_repository import RezervationRepository
from car_rental.use_cases.client_accounts import (
    ClientAccountService,
    invalid_id,
    missing_params,
)

logger = logging.getLogger(__name__)


class RezervationService:
    """
    Orchestrates rezervation creation, lifecycle transitions and search.

    Every operation validates eagerly and returns the most specific Err
    before touching storage. Transitions are read-validate-write with an
    optimistic version check, so two concurrent transitions on the same
    rezervation cannot both succeed.
    """

    def __init__(
        self,
        rezervation_repository: RezervationRepository,
        client_account_service: ClientAccountService,
        car_types: CarTypeCatalog = CAR_TYPES,
    ) -> None:
        self._rezervations = rezervation_repository
        self._client_accounts = client_account_service
        self._car_types = car_types

    def create_booking(self, params: RezervationCreationParams | None) -> Result[Rezervation]:
        """
        Book a car for a client.

        The client is either an existing one (``params.client_id``) or created
        on the fly from ``params.client_account``. A new client is only
        stored once every other check has passed. Dates are stored in UTC and
        fees are rounded to the stored scale.

        Returns:
            Ok with the stored rezervation
            Err(ValidationError) for missing/invalid params
            Err(NotFoundError) if client_id does not exist
            Err(ConfigurationError) if the car type has no pricing
        """
        if params is None:
            return missing_params("RezervationCreationParams")
        errors = params.validate()
        if errors:
            return Err(ValidationError(errors=errors))

        pricing_result = self._car_types.get_car_type(params.car_type)
        if not pricing_result.is_ok:
            logger.error(
                "Car type missing from catalog", extra={"car_type": params.car_type.value}
            )
            return pricing_result
        pricing = pricing_result.value

        client_result = self._resolve_client(params)
        if not client_result.is_ok:
            return client_result
        client = client_result.value

        rental_fee = calculate_rental_fee(pricing, params.pick_up_date, params.return_date)
        rezervation = self._rezervations.add(
            Rezervation(
                rezervation_id=None,
                client_id=client.client_id,
                car_plate_number=params.car_plate_number,
                car_type=params.car_type,
                pick_up_date=as_utc(params.pick_up_date),
                return_date=as_utc(params.return_date),
                rental_fee=rental_fee,
                deposit_fee=calculate_deposit_fee(pricing, rental_fee),
            )
        )

        logger.info(
            "Rezervation created",
            extra={
                "rezervation_id": rezervation.rezervation_id,
                "client_id": rezervation.client_id,
                "car_type": rezervation.car_type.value,
                "rental_fee": str(rezervation.rental_fee),
            },
        )
        return Ok(rezervation)

    def pick_up_car(self, rezervation_id: int) -> Result[bool]:
        return self._transition(rezervation_id, "picked up", Rezervation.pick_up)

    def return_car(self, rezervation_id: int) -> Result[bool]:
        return self._transition(rezervation_id, "returned", Rezervation.return_car)

    def cancel_rezervation(
        self, rezervation_id: int, cancellation_fee_rate: Decimal
    ) -> Result[bool]:
        """
        Cancel a rezervation that was not picked up yet.

        cancellation_fee = flat car type fee * cancellation_fee_rate. Both
        values are written once and never change afterwards.
        """
        # Guardrails: prevent float leakage past boundary
        if (
            not isinstance(cancellation_fee_rate, Decimal)
            or not cancellation_fee_rate.is_finite()
            or cancellation_fee_rate < 0
        ):
            return Err(
                ValidationError(
                    errors=[
                        {
                            "field": "cancellation_fee_rate",
                            "message": "Must be a finite Decimal >= 0",
                            "code": "INVALID_VALUE",
                        }
                    ]
                )
            )

        def cancel(rezervation: Rezervation) -> Result[Rezervation]:
            pricing_result = self._car_types.get_car_type(rezervation.car_type)
            if not pricing_result.is_ok:
                return pricing_result
            return rezervation.cancel(pricing_result.value, cancellation_fee_rate)

        return self._transition(rezervation_id, "cancelled", cancel)

    def find_rezervations(
        self, params: RezervationBrowsingParams | None
    ) -> Result[list[Rezervation]]:
        """
        Search rezervations.

        Client criteria are resolved to a set of client ids first, then the
        rezervation set is filtered, ordered by id and paged (skip, then take).
        An empty list is a normal outcome.
        """
        if params is None:
            return missing_params("RezervationBrowsingParams")
        errors = params.validate()
        if errors:
            return Err(ValidationError(errors=errors))

        client_ids: set[int] | None = None
        if params.has_client_filters:
            client_ids = {
                account.client_id
                for account in self._client_accounts.find(
                    lambda account: _client_matches(account, params)
                )
            }
            if not client_ids:
                return Ok([])

        def predicate(rezervation: Rezervation) -> bool:
            if client_ids is not None and rezervation.client_id not in client_ids:
                return False
            return params.matches(rezervation)

        return Ok(
            self._rezervations.search(
                predicate,
                offset=params.start_index or 0,
                limit=params.max_items,
            )
        )

    def _transition(
        self,
        rezervation_id: int,
        action: str,
        apply: Callable[[Rezervation], Result[Rezervation]],
    ) -> Result[bool]:
        if not is_positive_id(rezervation_id):
            return invalid_id("rezervation_id")

        current = self._rezervations.get_by_id(rezervation_id)
        if current is None:
            return Err(NotFoundError(resource="Rezervation", identifier=rezervation_id))

        match apply(current):
            case Err(error) as failure:
                logger.info(
                    "Rezervation transition rejected",
                    extra={
                        "rezervation_id": rezervation_id,
                        "action": action,
                        "error_code": error.error_code,
                    },
                )
                return failure
            case Ok(changed):
                stored = self._rezervations.update(changed)

        if stored is None:
            return Err(
                ConflictError(
                    "Rezervation was modified concurrently; retry the operation",
                    rezervation_id=rezervation_id,
                )
            )

        logger.info(
            "Rezervation %s", action, extra={"rezervation_id": rezervation_id}
        )
        return Ok(True)

    def _resolve_client(self, params: RezervationCreationParams) -> Result[ClientAccount]:
        if params.client_id is not None:
            return self._client_accounts.get(params.client_id)
        return self._client_accounts.add(params.client_account)


def _client_matches(account: ClientAccount, params: RezervationBrowsingParams) -> bool:
    for expected, actual in (
        (params.client_email, account.email),
        (params.client_full_name, account.full_name),
        (params.client_phone, account.phone),
    ):
        if expected is not None and expected.strip().casefold() != actual.strip().casefold():
            return False
    return True
