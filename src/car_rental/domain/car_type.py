from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from decimal import Decimal
from enum import Enum
from types import MappingProxyType

from car_rental.domain.errors import ConfigurationError
from car_rental.domain.result import Err, Ok, Result


class CarTypeVariant(str, Enum):
    ECONOMY = "economy"
    COMPACT = "compact"
    FAMILY = "family"
    PREMIUM = "premium"
    MINIVAN = "minivan"


@dataclass(frozen=True, slots=True)
class CarTypePricing:
    variant: CarTypeVariant
    rental_rate_fee: Decimal  # per hour
    deposit_fee_percentage: Decimal  # 0..100
    cancellation_fee: Decimal  # flat, scaled by the caller's rate

    def __post_init__(self) -> None:
        if self.rental_rate_fee < 0:
            raise ValueError(f"{self.variant.value}: rental_rate_fee must be >= 0")
        if not Decimal("0") <= self.deposit_fee_percentage <= Decimal("100"):
            raise ValueError(f"{self.variant.value}: deposit_fee_percentage must be in [0, 100]")
        if self.cancellation_fee < 0:
            raise ValueError(f"{self.variant.value}: cancellation_fee must be >= 0")


class CarTypeCatalog(Mapping[CarTypeVariant, CarTypePricing]):
    """
    Read-only pricing table keyed by car type.

    Built once and shared by reference; there is no way to mutate it after
    construction, so it needs no locking.
    """

    def __init__(self, pricings: list[CarTypePricing]) -> None:
        self._pricings = MappingProxyType({p.variant: p for p in pricings})

    def __getitem__(self, variant: CarTypeVariant) -> CarTypePricing:
        return self._pricings[variant]

    def __iter__(self) -> Iterator[CarTypeVariant]:
        return iter(self._pricings)

    def __len__(self) -> int:
        return len(self._pricings)

    def get_car_type(self, variant: CarTypeVariant) -> Result[CarTypePricing]:
        """
        Look up pricing parameters for a car type.

        Returns:
            Ok with the pricing, or Err(ConfigurationError) when the variant
            has no entry in this catalog.
        """
        pricing = self._pricings.get(variant)
        if pricing is None:
            return Err(
                ConfigurationError(
                    f"Car type '{getattr(variant, 'value', variant)}' is not configured",
                    car_type=str(getattr(variant, "value", variant)),
                )
            )
        return Ok(pricing)


CAR_TYPES = CarTypeCatalog(
    [
        CarTypePricing(CarTypeVariant.ECONOMY, Decimal("10.00"), Decimal("10"), Decimal("20.00")),
        CarTypePricing(CarTypeVariant.COMPACT, Decimal("15.00"), Decimal("10"), Decimal("20.00")),
        CarTypePricing(CarTypeVariant.FAMILY, Decimal("24.00"), Decimal("15"), Decimal("25.00")),
        CarTypePricing(CarTypeVariant.PREMIUM, Decimal("40.00"), Decimal("20"), Decimal("50.00")),
        CarTypePricing(CarTypeVariant.MINIVAN, Decimal("30.00"), Decimal("15"), Decimal("30.00")),
    ]
)


def get_car_type(variant: CarTypeVariant) -> Result[CarTypePricing]:
    """Look up a car type in the process-wide catalog."""
    return CAR_TYPES.get_car_type(variant)
