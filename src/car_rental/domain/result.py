"""Tagged success/failure values returned by the services.

Expected failures (bad input, missing records, illegal transitions) travel
as ``Err`` values instead of exceptions, so callers can pattern-match:

    match service.pick_up_car(rezervation_id):
        case Ok(value):
            ...
        case Err(error):
            ...

Adapters that prefer exceptions (the HTTP layer) call ``unwrap()``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, NoReturn, TypeVar

from car_rental.domain.errors import DomainError

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True, slots=True)
class Err:
    error: DomainError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise self.error


Result = Ok[T] | Err
