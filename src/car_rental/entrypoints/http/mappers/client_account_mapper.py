from __future__ import annotations

from car_rental.domain.client_account import (
    ClientAccount,
    ClientAccountBalance,
    ClientAccountCreationParams,
    ClientAccountModificationParams,
)
from car_rental.entrypoints.http.dtos.client_account import (
    ClientAccountBalanceResponseDTO,
    ClientAccountRequestDTO,
    ClientAccountResponseDTO,
)


class ClientAccountMapper:
    """Maps between REST DTOs and domain models for client accounts."""

    @staticmethod
    def to_creation_params(dto: ClientAccountRequestDTO) -> ClientAccountCreationParams:
        return ClientAccountCreationParams(
            email=dto.email,
            full_name=dto.full_name,
            phone=dto.phone,
        )

    @staticmethod
    def to_modification_params(
        client_id: int, dto: ClientAccountRequestDTO
    ) -> ClientAccountModificationParams:
        return ClientAccountModificationParams(
            client_id=client_id,
            email=dto.email,
            full_name=dto.full_name,
            phone=dto.phone,
        )

    @staticmethod
    def to_response(account: ClientAccount) -> ClientAccountResponseDTO:
        return ClientAccountResponseDTO(
            client_id=account.client_id,
            email=account.email,
            full_name=account.full_name,
            phone=account.phone,
        )

    @staticmethod
    def to_balance_response(balance: ClientAccountBalance) -> ClientAccountBalanceResponseDTO:
        """Decimal -> str at the boundary."""
        return ClientAccountBalanceResponseDTO(
            client_id=balance.client_id,
            total_rental_fee=str(balance.total_rental_fee),
            total_cancellation_fee=str(balance.total_cancellation_fee),
            total_fees=str(balance.total_fees),
        )
