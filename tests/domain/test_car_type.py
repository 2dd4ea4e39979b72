"""Tests for the car type pricing catalog."""

from decimal import Decimal
from types import MappingProxyType

import pytest

from car_rental.domain.car_type import (
    CAR_TYPES,
    CarTypeCatalog,
    CarTypePricing,
    CarTypeVariant,
    get_car_type,
)
from car_rental.domain.errors import ConfigurationError
from car_rental.domain.result import Err, Ok


def test_every_variant_is_priced() -> None:
    assert set(CAR_TYPES) == set(CarTypeVariant)
    assert len(CAR_TYPES) == len(CarTypeVariant)


def test_get_car_type_returns_pricing() -> None:
    result = get_car_type(CarTypeVariant.FAMILY)

    assert result == Ok(
        CarTypePricing(CarTypeVariant.FAMILY, Decimal("24.00"), Decimal("15"), Decimal("25.00"))
    )


def test_unknown_variant_is_a_configuration_error() -> None:
    catalog = CarTypeCatalog([CAR_TYPES[CarTypeVariant.ECONOMY]])

    result = catalog.get_car_type(CarTypeVariant.PREMIUM)

    assert isinstance(result, Err)
    assert isinstance(result.error, ConfigurationError)
    assert result.error.context == {"car_type": "premium"}


def test_catalog_cannot_be_mutated() -> None:
    with pytest.raises(TypeError):
        CAR_TYPES[CarTypeVariant.ECONOMY] = CAR_TYPES[CarTypeVariant.PREMIUM]  # type: ignore[index]
    with pytest.raises(TypeError):
        CAR_TYPES._pricings[CarTypeVariant.ECONOMY] = None  # type: ignore[index]
    assert isinstance(CAR_TYPES._pricings, MappingProxyType)


@pytest.mark.parametrize(
    "rate, percentage, fee",
    [
        (Decimal("-1"), Decimal("10"), Decimal("0")),
        (Decimal("1"), Decimal("100.01"), Decimal("0")),
        (Decimal("1"), Decimal("-0.01"), Decimal("0")),
        (Decimal("1"), Decimal("10"), Decimal("-5")),
    ],
)
def test_pricing_rejects_out_of_range_values(
    rate: Decimal, percentage: Decimal, fee: Decimal
) -> None:
    with pytest.raises(ValueError):
        CarTypePricing(CarTypeVariant.ECONOMY, rate, percentage, fee)
