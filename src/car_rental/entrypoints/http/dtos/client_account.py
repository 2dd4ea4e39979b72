from pydantic import BaseModel, ConfigDict, Field


class ClientAccountRequestDTO(BaseModel):
    """Payload for creating or updating a client account."""

    email: str = Field(description="Contact email", examples=["jane@mail.com"])
    full_name: str = Field(description="Client full name", examples=["Jane Doe"])
    phone: str = Field(description="Contact phone", examples=["+12345"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "jane@mail.com",
                "full_name": "Jane Doe",
                "phone": "+12345",
            }
        }
    )


class ClientAccountResponseDTO(BaseModel):
    client_id: int
    email: str
    full_name: str
    phone: str


class ClientAccountBalanceResponseDTO(BaseModel):
    """Fee totals of a client across all rezervations, as decimal strings."""

    client_id: int
    total_rental_fee: str = Field(examples=["2304.00"])
    total_cancellation_fee: str = Field(examples=["0.00"])
    total_fees: str = Field(examples=["2304.00"])
