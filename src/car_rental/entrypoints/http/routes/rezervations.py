from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from car_rental.entrypoints.http.dependencies import get_rezervation_service
from car_rental.entrypoints.http.dtos.rezervation import (
    RezervationCancellationRequestDTO,
    RezervationCreateRequestDTO,
    RezervationResponseDTO,
    RezervationSearchQueryDTO,
    RezervationSearchResponseDTO,
    RezervationTransitionResponseDTO,
)
from car_rental.entrypoints.http.error_responses import ERROR_RESPONSES
from car_rental.entrypoints.http.mappers.rezervation_mapper import RezervationMapper
from car_rental.use_cases.rezervations import RezervationService

router = APIRouter(prefix="/rezervations", tags=["Rezervations"], responses=ERROR_RESPONSES)


@router.post(
    "",
    response_model=RezervationResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Book a car",
    description="""
    Create a rezervation for an existing client (client_id) or for a new
    client created on the fly (client_account).

    ## Fees
    - rental_fee = hourly rate of the car type x rental duration in hours
    - deposit_fee = rental_fee x deposit percentage / 100
    """,
)
def create_rezervation(
    payload: RezervationCreateRequestDTO,
    service: RezervationService = Depends(get_rezervation_service),
) -> RezervationResponseDTO:
    """parse -> map -> execute -> map -> return"""
    params = RezervationMapper.to_creation_params(payload)
    rezervation = service.create_booking(params).unwrap()
    return RezervationMapper.to_response(rezervation)


@router.get(
    "",
    response_model=RezervationSearchResponseDTO,
    summary="Search rezervations",
    description="""
    Filter by client email/full name/phone (case-insensitive exact match),
    pick-up date range (inclusive) and state flags. Results are ordered by
    rezervation id; start_index skips matches, max_items caps the page.
    """,
)
def search_rezervations(
    query: Annotated[RezervationSearchQueryDTO, Query()],
    service: RezervationService = Depends(get_rezervation_service),
) -> RezervationSearchResponseDTO:
    rezervations = service.find_rezervations(RezervationMapper.to_browsing_params(query)).unwrap()
    return RezervationMapper.to_search_response(rezervations, query)


@router.post(
    "/{rezervation_id}/pick-up",
    response_model=RezervationTransitionResponseDTO,
    summary="Hand the car over to the client",
)
def pick_up_car(
    rezervation_id: int,
    service: RezervationService = Depends(get_rezervation_service),
) -> RezervationTransitionResponseDTO:
    success = service.pick_up_car(rezervation_id).unwrap()
    return RezervationTransitionResponseDTO(rezervation_id=rezervation_id, success=success)


@router.post(
    "/{rezervation_id}/return",
    response_model=RezervationTransitionResponseDTO,
    summary="Take the car back from the client",
)
def return_car(
    rezervation_id: int,
    service: RezervationService = Depends(get_rezervation_service),
) -> RezervationTransitionResponseDTO:
    success = service.return_car(rezervation_id).unwrap()
    return RezervationTransitionResponseDTO(rezervation_id=rezervation_id, success=success)


@router.post(
    "/{rezervation_id}/cancel",
    response_model=RezervationTransitionResponseDTO,
    summary="Cancel a rezervation before pick-up",
    description="cancellation_fee = flat fee of the car type x cancellation_fee_rate",
)
def cancel_rezervation(
    rezervation_id: int,
    payload: RezervationCancellationRequestDTO,
    service: RezervationService = Depends(get_rezervation_service),
) -> RezervationTransitionResponseDTO:
    rate = RezervationMapper.to_cancellation_rate(payload)
    success = service.cancel_rezervation(rezervation_id, rate).unwrap()
    return RezervationTransitionResponseDTO(rezervation_id=rezervation_id, success=success)
