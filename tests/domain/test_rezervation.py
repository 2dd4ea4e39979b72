"""Tests for the Rezervation entity, its lifecycle and parameter validation."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from car_rental.domain.car_type import CAR_TYPES, CarTypeVariant
from car_rental.domain.client_account import ClientAccountCreationParams
from car_rental.domain.errors import ConflictError
from car_rental.domain.result import Err, Ok
from car_rental.domain.rezervation import (
    Rezervation,
    RezervationBrowsingParams,
    RezervationCreationParams,
    RezervationState,
    as_utc,
    calculate_cancellation_fee,
    calculate_deposit_fee,
    calculate_rental_fee,
    duration_in_hours,
    to_money_scale,
)

PICK_UP = datetime(2026, 1, 10, 10, 0)
FAMILY = CAR_TYPES[CarTypeVariant.FAMILY]


@pytest.fixture()
def booked() -> Rezervation:
    return Rezervation(
        rezervation_id=1,
        client_id=1,
        car_plate_number="CA1234AC",
        car_type=CarTypeVariant.FAMILY,
        pick_up_date=PICK_UP,
        return_date=PICK_UP + timedelta(days=4),
        rental_fee=Decimal("2304.00"),
        deposit_fee=Decimal("345.60"),
    )


# ==============================================================================
# Fee calculation
# ==============================================================================


def test_duration_in_hours_is_exact_for_fractions() -> None:
    assert duration_in_hours(PICK_UP, PICK_UP + timedelta(hours=2, minutes=30)) == Decimal("2.5")
    assert duration_in_hours(PICK_UP, PICK_UP + timedelta(days=4)) == Decimal("96")


def test_rental_and_deposit_fee() -> None:
    rental_fee = calculate_rental_fee(FAMILY, PICK_UP, PICK_UP + timedelta(days=4))

    assert rental_fee == Decimal("2304.00")
    assert calculate_deposit_fee(FAMILY, rental_fee) == Decimal("345.60")


def test_fees_with_non_terminating_expansion_are_rounded_half_up() -> None:
    economy = CAR_TYPES[CarTypeVariant.ECONOMY]

    rental_fee = calculate_rental_fee(economy, PICK_UP, PICK_UP + timedelta(minutes=10))

    assert rental_fee == Decimal("1.666667")
    assert calculate_deposit_fee(economy, rental_fee) == Decimal("0.166667")
    assert calculate_cancellation_fee(FAMILY, Decimal("1") / Decimal("3")) == Decimal("8.333333")


def test_to_money_scale() -> None:
    assert to_money_scale(Decimal("0.0000005")) == Decimal("0.000001")
    assert to_money_scale(Decimal("0.00000049")) == Decimal("0.000000")
    assert str(to_money_scale(Decimal("2304"))) == "2304.000000"


def test_as_utc() -> None:
    plus_two = timezone(timedelta(hours=2))

    assert as_utc(PICK_UP) == PICK_UP.replace(tzinfo=timezone.utc)
    assert as_utc(datetime(2026, 1, 10, 12, 0, tzinfo=plus_two)) == as_utc(PICK_UP)
    assert as_utc(datetime(2026, 1, 10, 12, 0, tzinfo=plus_two)).tzinfo is timezone.utc


def test_duration_across_naive_and_aware() -> None:
    aware_return = datetime(2026, 1, 10, 14, 0, tzinfo=timezone(timedelta(hours=2)))

    assert duration_in_hours(PICK_UP, aware_return) == Decimal("2")


# ==============================================================================
# Lifecycle
# ==============================================================================


def test_new_rezervation_is_booked(booked: Rezervation) -> None:
    assert booked.state is RezervationState.BOOKED
    assert booked.cancellation_fee_rate is None
    assert booked.cancellation_fee is None


def test_booked_to_picked_up_to_returned(booked: Rezervation) -> None:
    picked_up = booked.pick_up().unwrap()
    returned = picked_up.return_car().unwrap()

    assert picked_up.state is RezervationState.PICKED_UP
    assert returned.state is RezervationState.RETURNED
    assert returned.is_picked_up and returned.is_returned
    # Original is untouched
    assert booked.state is RezervationState.BOOKED


def test_cancel_sets_fee_from_flat_fee_and_rate(booked: Rezervation) -> None:
    cancelled = booked.cancel(FAMILY, Decimal("2.00")).unwrap()

    assert cancelled.state is RezervationState.CANCELLED
    assert cancelled.cancellation_fee_rate == Decimal("2.00")
    assert cancelled.cancellation_fee == Decimal("50.00")
    assert cancelled.rental_fee == booked.rental_fee


@pytest.mark.parametrize(
    "flags, action",
    [
        ({"is_picked_up": True}, "pick_up"),
        ({"is_picked_up": True, "is_returned": True}, "pick_up"),
        ({"is_cancelled": True}, "pick_up"),
        ({}, "return_car"),
        ({"is_picked_up": True, "is_returned": True}, "return_car"),
        ({"is_cancelled": True}, "return_car"),
        ({"is_picked_up": True}, "cancel"),
        ({"is_picked_up": True, "is_returned": True}, "cancel"),
        ({"is_cancelled": True}, "cancel"),
    ],
)
def test_illegal_transitions_are_conflicts(
    booked: Rezervation, flags: dict[str, bool], action: str
) -> None:
    rezervation = replace(booked, **flags)

    if action == "cancel":
        result = rezervation.cancel(FAMILY, Decimal("1"))
    else:
        result = getattr(rezervation, action)()

    assert isinstance(result, Err)
    assert isinstance(result.error, ConflictError)


# ==============================================================================
# Creation params
# ==============================================================================


def _creation_params(**overrides) -> RezervationCreationParams:
    values = {
        "pick_up_date": PICK_UP,
        "return_date": PICK_UP + timedelta(days=1),
        "car_plate_number": "CA1234AC",
        "car_type": CarTypeVariant.ECONOMY,
        "client_id": 1,
    }
    values.update(overrides)
    return RezervationCreationParams(**values)


def test_valid_creation_params_have_no_errors() -> None:
    assert _creation_params().validate() == []


def test_creation_params_require_a_client() -> None:
    errors = _creation_params(client_id=None).validate()

    assert [e["field"] for e in errors] == ["client_id"]


def test_embedded_client_errors_are_prefixed() -> None:
    params = _creation_params(
        client_id=None,
        client_account=ClientAccountCreationParams(email="a@mail.com", full_name=" ", phone=None),
    )

    fields = [e["field"] for e in params.validate()]

    assert fields == ["client_account.full_name", "client_account.phone"]


@pytest.mark.parametrize(
    "overrides, field",
    [
        ({"return_date": PICK_UP}, "return_date"),
        ({"return_date": PICK_UP - timedelta(hours=1)}, "return_date"),
        # 11:00+02:00 is 09:00 UTC, before the naive (UTC) pick-up
        (
            {"return_date": datetime(2026, 1, 10, 11, 0, tzinfo=timezone(timedelta(hours=2)))},
            "return_date",
        ),
        ({"pick_up_date": None}, "pick_up_date"),
        ({"car_plate_number": ""}, "car_plate_number"),
        ({"car_type": "family"}, "car_type"),
        ({"client_id": 0}, "client_id"),
        ({"client_id": True}, "client_id"),
    ],
)
def test_invalid_creation_params(overrides: dict, field: str) -> None:
    errors = _creation_params(**overrides).validate()

    assert field in [e["field"] for e in errors]


# ==============================================================================
# Browsing params
# ==============================================================================


def test_browsing_params_validation() -> None:
    params = RezervationBrowsingParams(
        start_index=-1,
        max_items=0,
        pick_up_date_from=PICK_UP,
        pick_up_date_to=PICK_UP - timedelta(days=1),
    )

    fields = [e["field"] for e in params.validate()]

    assert fields == ["start_index", "max_items", "pick_up_date_from"]


def test_browsing_matches_inclusive_date_range(booked: Rezervation) -> None:
    assert RezervationBrowsingParams(pick_up_date_from=PICK_UP, pick_up_date_to=PICK_UP).matches(
        booked
    )
    assert not RezervationBrowsingParams(pick_up_date_from=PICK_UP + timedelta(seconds=1)).matches(
        booked
    )


def test_browsing_compares_naive_and_aware_in_utc(booked: Rezervation) -> None:
    aware = replace(booked, pick_up_date=PICK_UP.replace(tzinfo=timezone.utc))
    plus_two = timezone(timedelta(hours=2))

    assert RezervationBrowsingParams(pick_up_date_from=PICK_UP).matches(aware)
    assert RezervationBrowsingParams(
        pick_up_date_to=datetime(2026, 1, 10, 12, 0, tzinfo=plus_two)
    ).matches(booked)
    assert not RezervationBrowsingParams(
        pick_up_date_from=datetime(2026, 1, 10, 12, 1, tzinfo=plus_two)
    ).matches(aware)


def test_browsing_validation_with_mixed_bounds() -> None:
    aware_later = datetime(2026, 1, 10, 13, 0, tzinfo=timezone(timedelta(hours=2)))

    assert RezervationBrowsingParams(
        pick_up_date_from=PICK_UP, pick_up_date_to=aware_later
    ).validate() == []
    errors = RezervationBrowsingParams(
        pick_up_date_from=aware_later, pick_up_date_to=PICK_UP
    ).validate()
    assert [e["field"] for e in errors] == ["pick_up_date_from"]


def test_browsing_is_booked_flag(booked: Rezervation) -> None:
    picked_up = replace(booked, is_picked_up=True)

    assert RezervationBrowsingParams(is_booked=True).matches(booked)
    assert not RezervationBrowsingParams(is_booked=True).matches(picked_up)
    assert RezervationBrowsingParams(is_booked=False).matches(picked_up)
    assert RezervationBrowsingParams(is_picked_up=True).matches(picked_up)


def test_transition_result_is_ok(booked: Rezervation) -> None:
    assert isinstance(booked.pick_up(), Ok)
