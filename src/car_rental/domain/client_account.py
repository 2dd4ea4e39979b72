from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from car_rental.domain.errors import FieldError


def is_positive_id(value: object) -> bool:
    """bool is an int subclass but never a valid id."""
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def blank_field_errors(**values: object) -> list[FieldError]:
    """Report every value that is missing, not a string, or only whitespace."""
    errors: list[FieldError] = []
    for field, value in values.items():
        if not isinstance(value, str) or not value.strip():
            errors.append(
                {"field": field, "message": "Must be a non-empty string", "code": "REQUIRED"}
            )
    return errors


@dataclass(frozen=True, slots=True)
class ClientAccount:
    client_id: int | None  # None until persisted
    email: str
    full_name: str
    phone: str


@dataclass(frozen=True, slots=True)
class ClientAccountCreationParams:
    email: str | None = None
    full_name: str | None = None
    phone: str | None = None

    def validate(self) -> list[FieldError]:
        return blank_field_errors(email=self.email, full_name=self.full_name, phone=self.phone)


@dataclass(frozen=True, slots=True)
class ClientAccountModificationParams:
    client_id: int | None = None
    email: str | None = None
    full_name: str | None = None
    phone: str | None = None

    def validate(self) -> list[FieldError]:
        errors: list[FieldError] = []
        if not is_positive_id(self.client_id):
            errors.append(
                {"field": "client_id", "message": "Must be a positive integer", "code": "INVALID_ID"}
            )
        errors.extend(
            blank_field_errors(email=self.email, full_name=self.full_name, phone=self.phone)
        )
        return errors


@dataclass(frozen=True, slots=True)
class ClientAccountBalance:
    client_id: int
    total_rental_fee: Decimal
    total_cancellation_fee: Decimal
    total_fees: Decimal
