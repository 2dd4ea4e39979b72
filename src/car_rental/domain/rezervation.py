from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any

from car_rental.domain.car_type import CarTypePricing, CarTypeVariant
from car_rental.domain.client_account import (
    ClientAccountCreationParams,
    blank_field_errors,
    is_positive_id,
)
from car_rental.domain.errors import ConflictError, FieldError
from car_rental.domain.result import Err, Ok, Result

HOUR_IN_MICROSECONDS = Decimal(3600 * 10**6)

# Scale of the NUMERIC(18, 6) fee columns
MONEY_QUANTUM = Decimal("0.000001")


class RezervationState(str, Enum):
    BOOKED = "booked"
    PICKED_UP = "picked_up"
    RETURNED = "returned"
    CANCELLED = "cancelled"


# Forward-only lifecycle; RETURNED and CANCELLED are terminal.
ALLOWED_TRANSITIONS: dict[RezervationState, frozenset[RezervationState]] = {
    RezervationState.BOOKED: frozenset({RezervationState.PICKED_UP, RezervationState.CANCELLED}),
    RezervationState.PICKED_UP: frozenset({RezervationState.RETURNED}),
    RezervationState.RETURNED: frozenset(),
    RezervationState.CANCELLED: frozenset(),
}


def as_utc(value: datetime) -> datetime:
    """Naive datetimes are read as UTC; aware ones are converted to UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_money_scale(value: Decimal) -> Decimal:
    """Round half up to the stored fee scale, the same way PostgreSQL NUMERIC does."""
    return value.quantize(MONEY_QUANTUM, rounding=ROUND_HALF_UP)


def duration_in_hours(pick_up_date: datetime, return_date: datetime) -> Decimal:
    """Exact (fractional) number of hours between two instants."""
    delta: timedelta = as_utc(return_date) - as_utc(pick_up_date)
    microseconds = (delta.days * 86400 + delta.seconds) * 10**6 + delta.microseconds
    return Decimal(microseconds) / HOUR_IN_MICROSECONDS


def calculate_rental_fee(
    pricing: CarTypePricing, pick_up_date: datetime, return_date: datetime
) -> Decimal:
    return to_money_scale(pricing.rental_rate_fee * duration_in_hours(pick_up_date, return_date))


def calculate_deposit_fee(pricing: CarTypePricing, rental_fee: Decimal) -> Decimal:
    return to_money_scale(rental_fee * (pricing.deposit_fee_percentage / Decimal("100")))


def calculate_cancellation_fee(pricing: CarTypePricing, cancellation_fee_rate: Decimal) -> Decimal:
    return to_money_scale(pricing.cancellation_fee * cancellation_fee_rate)


@dataclass(frozen=True, slots=True)
class Rezervation:
    rezervation_id: int | None  # None until persisted
    client_id: int
    car_plate_number: str
    car_type: CarTypeVariant
    pick_up_date: datetime
    return_date: datetime
    rental_fee: Decimal
    deposit_fee: Decimal
    cancellation_fee_rate: Decimal | None = None
    cancellation_fee: Decimal | None = None
    is_picked_up: bool = False
    is_returned: bool = False
    is_cancelled: bool = False
    version: int = 1

    @property
    def state(self) -> RezervationState:
        if self.is_cancelled:
            return RezervationState.CANCELLED
        if self.is_returned:
            return RezervationState.RETURNED
        if self.is_picked_up:
            return RezervationState.PICKED_UP
        return RezervationState.BOOKED

    def transition_to(self, target: RezervationState, **changes: Any) -> Result[Rezervation]:
        """
        Move to ``target`` if the lifecycle allows it.

        Returns a new Rezervation with the matching flag (and any extra
        ``changes``) applied, or Err(ConflictError) for an illegal edge.
        The version is left untouched; the repository bumps it on write.
        """
        current = self.state
        if target not in ALLOWED_TRANSITIONS[current]:
            return Err(
                ConflictError(
                    f"Rezervation cannot move from '{current.value}' to '{target.value}'",
                    rezervation_id=self.rezervation_id,
                    state=current.value,
                    target_state=target.value,
                )
            )

        flag = {
            RezervationState.PICKED_UP: "is_picked_up",
            RezervationState.RETURNED: "is_returned",
            RezervationState.CANCELLED: "is_cancelled",
        }[target]
        return Ok(replace(self, **{flag: True}, **changes))

    def pick_up(self) -> Result[Rezervation]:
        return self.transition_to(RezervationState.PICKED_UP)

    def return_car(self) -> Result[Rezervation]:
        return self.transition_to(RezervationState.RETURNED)

    def cancel(self, pricing: CarTypePricing, cancellation_fee_rate: Decimal) -> Result[Rezervation]:
        rate = to_money_scale(cancellation_fee_rate)
        return self.transition_to(
            RezervationState.CANCELLED,
            cancellation_fee_rate=rate,
            cancellation_fee=calculate_cancellation_fee(pricing, rate),
        )


@dataclass(frozen=True, slots=True)
class RezervationCreationParams:
    pick_up_date: datetime | None = None
    return_date: datetime | None = None
    car_plate_number: str | None = None
    car_type: CarTypeVariant | None = None
    client_id: int | None = None
    client_account: ClientAccountCreationParams | None = None

    def validate(self) -> list[FieldError]:
        """Collect every field error; an empty list means the params are usable."""
        errors: list[FieldError] = []

        if self.client_id is None and self.client_account is None:
            errors.append(
                {
                    "field": "client_id",
                    "message": "Either client_id or client_account must be provided",
                    "code": "REQUIRED",
                }
            )
        elif self.client_id is None and self.client_account is not None:
            errors.extend(
                {**error, "field": f"client_account.{error['field']}"}
                for error in self.client_account.validate()
            )
        elif not is_positive_id(self.client_id):
            errors.append(
                {"field": "client_id", "message": "Must be a positive integer", "code": "INVALID_ID"}
            )

        errors.extend(blank_field_errors(car_plate_number=self.car_plate_number))

        if not isinstance(self.car_type, CarTypeVariant):
            errors.append(
                {
                    "field": "car_type",
                    "message": f"Must be one of {[v.value for v in CarTypeVariant]}",
                    "code": "INVALID_VALUE",
                }
            )

        errors.extend(self._date_errors())
        return errors

    def _date_errors(self) -> list[FieldError]:
        if not isinstance(self.pick_up_date, datetime):
            return [{"field": "pick_up_date", "message": "Must be a datetime", "code": "REQUIRED"}]
        if not isinstance(self.return_date, datetime):
            return [{"field": "return_date", "message": "Must be a datetime", "code": "REQUIRED"}]
        if as_utc(self.pick_up_date) >= as_utc(self.return_date):
            return [
                {
                    "field": "return_date",
                    "message": "Must be later than pick_up_date",
                    "code": "INVALID_RANGE",
                }
            ]
        return []


@dataclass(frozen=True, slots=True)
class RezervationBrowsingParams:
    """
    Search criteria. Every field is optional; set fields combine with AND.

    - client_email / client_full_name / client_phone: case-insensitive exact match
    - pick_up_date_from / pick_up_date_to: inclusive bounds on pick_up_date,
      compared in UTC (naive bounds are read as UTC)
    - is_booked / is_picked_up / is_returned / is_cancelled: must equal the
      given value when set (is_booked means not yet picked up nor cancelled)
    - start_index: number of matches to skip; max_items: page size cap
    """

    client_email: str | None = None
    client_full_name: str | None = None
    client_phone: str | None = None
    pick_up_date_from: datetime | None = None
    pick_up_date_to: datetime | None = None
    is_booked: bool | None = None
    is_picked_up: bool | None = None
    is_returned: bool | None = None
    is_cancelled: bool | None = None
    start_index: int | None = None
    max_items: int | None = None

    @property
    def has_client_filters(self) -> bool:
        return any(
            value is not None
            for value in (self.client_email, self.client_full_name, self.client_phone)
        )

    def validate(self) -> list[FieldError]:
        errors: list[FieldError] = []
        if self.start_index is not None and self.start_index < 0:
            errors.append(
                {"field": "start_index", "message": "Must be >= 0", "code": "INVALID_VALUE"}
            )
        if self.max_items is not None and self.max_items <= 0:
            errors.append({"field": "max_items", "message": "Must be > 0", "code": "INVALID_VALUE"})
        if (
            self.pick_up_date_from is not None
            and self.pick_up_date_to is not None
            and as_utc(self.pick_up_date_from) > as_utc(self.pick_up_date_to)
        ):
            errors.append(
                {
                    "field": "pick_up_date_from",
                    "message": "Must be earlier than or equal to pick_up_date_to",
                    "code": "INVALID_RANGE",
                }
            )
        return errors

    def matches(self, rezervation: Rezervation) -> bool:
        """Check the non-client criteria against a single rezervation."""
        pick_up_date = as_utc(rezervation.pick_up_date)
        if self.pick_up_date_from is not None and pick_up_date < as_utc(self.pick_up_date_from):
            return False
        if self.pick_up_date_to is not None and pick_up_date > as_utc(self.pick_up_date_to):
            return False

        is_booked = rezervation.state is RezervationState.BOOKED
        if self.is_booked is not None and is_booked != self.is_booked:
            return False
        if self.is_picked_up is not None and rezervation.is_picked_up != self.is_picked_up:
            return False
        if self.is_returned is not None and rezervation.is_returned != self.is_returned:
            return False
        if self.is_cancelled is not None and rezervation.is_cancelled != self.is_cancelled:
            return False
        return True
