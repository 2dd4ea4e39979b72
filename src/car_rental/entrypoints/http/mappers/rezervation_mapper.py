from __future__ import annotations

from decimal import Decimal, InvalidOperation

from car_rental.domain.car_type import CarTypeVariant
from car_rental.domain.errors import ValidationError
from car_rental.domain.rezervation import (
    Rezervation,
    RezervationBrowsingParams,
    RezervationCreationParams,
)
from car_rental.entrypoints.http.dtos.rezervation import (
    RezervationCancellationRequestDTO,
    RezervationCreateRequestDTO,
    RezervationResponseDTO,
    RezervationSearchQueryDTO,
    RezervationSearchResponseDTO,
)
from car_rental.entrypoints.http.mappers.client_account_mapper import ClientAccountMapper


def _optional_str(value: Decimal | None) -> str | None:
    return None if value is None else str(value)


class RezervationMapper:
    """Maps between REST DTOs and domain models for rezervations."""

    @staticmethod
    def to_creation_params(dto: RezervationCreateRequestDTO) -> RezervationCreationParams:
        """
        Converts the booking payload to domain params.

        Raises:
            ValidationError: If car_type is not a known variant
        """
        try:
            car_type = CarTypeVariant(dto.car_type.lower())
        except ValueError:
            raise ValidationError(
                errors=[
                    {
                        "field": "car_type",
                        "message": f"Must be one of {[v.value for v in CarTypeVariant]}",
                        "code": "INVALID_VALUE",
                    }
                ]
            )

        return RezervationCreationParams(
            pick_up_date=dto.pick_up_date,
            return_date=dto.return_date,
            car_plate_number=dto.car_plate_number,
            car_type=car_type,
            client_id=dto.client_id,
            client_account=(
                ClientAccountMapper.to_creation_params(dto.client_account)
                if dto.client_account is not None
                else None
            ),
        )

    @staticmethod
    def to_browsing_params(dto: RezervationSearchQueryDTO) -> RezervationBrowsingParams:
        return RezervationBrowsingParams(**dto.model_dump())

    @staticmethod
    def to_cancellation_rate(dto: RezervationCancellationRequestDTO) -> Decimal:
        """
        Raises:
            ValidationError: If the rate cannot be parsed as a Decimal
        """
        try:
            return Decimal(dto.cancellation_fee_rate)
        except (InvalidOperation, ValueError):
            raise ValidationError(
                errors=[
                    {
                        "field": "cancellation_fee_rate",
                        "message": f"Must be a valid decimal: {dto.cancellation_fee_rate}",
                        "code": "INVALID_DECIMAL",
                    }
                ]
            )

    @staticmethod
    def to_response(rezervation: Rezervation) -> RezervationResponseDTO:
        """Decimal -> str at the boundary."""
        return RezervationResponseDTO(
            rezervation_id=rezervation.rezervation_id,
            client_id=rezervation.client_id,
            car_plate_number=rezervation.car_plate_number,
            car_type=rezervation.car_type.value,
            pick_up_date=rezervation.pick_up_date,
            return_date=rezervation.return_date,
            rental_fee=str(rezervation.rental_fee),
            deposit_fee=str(rezervation.deposit_fee),
            cancellation_fee_rate=_optional_str(rezervation.cancellation_fee_rate),
            cancellation_fee=_optional_str(rezervation.cancellation_fee),
            is_picked_up=rezervation.is_picked_up,
            is_returned=rezervation.is_returned,
            is_cancelled=rezervation.is_cancelled,
            state=rezervation.state.value,
        )

    @staticmethod
    def to_search_response(
        rezervations: list[Rezervation], query: RezervationSearchQueryDTO
    ) -> RezervationSearchResponseDTO:
        return RezervationSearchResponseDTO(
            rezervations=[RezervationMapper.to_response(r) for r in rezervations],
            start_index=query.start_index or 0,
            max_items=query.max_items,
        )
