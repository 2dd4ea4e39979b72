from fastapi import APIRouter, Depends, status

from car_rental.entrypoints.http.dependencies import get_client_account_service
from car_rental.entrypoints.http.dtos.client_account import (
    ClientAccountBalanceResponseDTO,
    ClientAccountRequestDTO,
    ClientAccountResponseDTO,
)
from car_rental.entrypoints.http.error_responses import ERROR_RESPONSES
from car_rental.entrypoints.http.mappers.client_account_mapper import ClientAccountMapper
from car_rental.use_cases.client_accounts import ClientAccountService

router = APIRouter(prefix="/client-accounts", tags=["Client accounts"], responses=ERROR_RESPONSES)


@router.post(
    "",
    response_model=ClientAccountResponseDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a client account",
)
def create_client_account(
    payload: ClientAccountRequestDTO,
    service: ClientAccountService = Depends(get_client_account_service),
) -> ClientAccountResponseDTO:
    account = service.add(ClientAccountMapper.to_creation_params(payload)).unwrap()
    return ClientAccountMapper.to_response(account)


@router.put(
    "/{client_id}",
    response_model=ClientAccountResponseDTO,
    summary="Update a client account",
)
def update_client_account(
    client_id: int,
    payload: ClientAccountRequestDTO,
    service: ClientAccountService = Depends(get_client_account_service),
) -> ClientAccountResponseDTO:
    params = ClientAccountMapper.to_modification_params(client_id, payload)
    account = service.update(params).unwrap()
    return ClientAccountMapper.to_response(account)


@router.get(
    "/{client_id}",
    response_model=ClientAccountResponseDTO,
    summary="Get a client account",
)
def get_client_account(
    client_id: int,
    service: ClientAccountService = Depends(get_client_account_service),
) -> ClientAccountResponseDTO:
    return ClientAccountMapper.to_response(service.get(client_id).unwrap())


@router.get(
    "/{client_id}/balance",
    response_model=ClientAccountBalanceResponseDTO,
    summary="Get the fee balance of a client",
    description="""
    Totals over every rezervation of the client.

    - total_rental_fee: rental fees of rezervations that were not cancelled
    - total_cancellation_fee: cancellation fees of cancelled rezervations
    - total_fees: sum of both

    A client without rezervations gets zero totals.
    """,
)
def get_client_account_balance(
    client_id: int,
    service: ClientAccountService = Depends(get_client_account_service),
) -> ClientAccountBalanceResponseDTO:
    balance = service.get_client_account_balance(client_id).unwrap()
    return ClientAccountMapper.to_balance_response(balance)
