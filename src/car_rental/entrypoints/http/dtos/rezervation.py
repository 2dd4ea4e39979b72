from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from car_rental.entrypoints.http.dtos.client_account import ClientAccountRequestDTO

DECIMAL_PATTERN = r"^\d+(\.\d{1,6})?$"


class RezervationCreateRequestDTO(BaseModel):
    """Payload for booking a car. Give either client_id or client_account."""

    pick_up_date: datetime = Field(examples=["2026-01-10T10:00:00Z"])
    return_date: datetime = Field(examples=["2026-01-14T10:00:00Z"])
    car_plate_number: str = Field(examples=["CA1234AC"])
    car_type: str = Field(
        description="One of: economy, compact, family, premium, minivan",
        examples=["family"],
    )
    client_id: int | None = Field(default=None, description="Existing client account id")
    client_account: ClientAccountRequestDTO | None = Field(
        default=None, description="New client account created together with the rezervation"
    )

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "pick_up_date": "2026-01-10T10:00:00Z",
                "return_date": "2026-01-14T10:00:00Z",
                "car_plate_number": "CA1234AC",
                "car_type": "family",
                "client_account": {
                    "email": "jane@mail.com",
                    "full_name": "Jane Doe",
                    "phone": "+12345",
                },
            }
        }
    )


class RezervationResponseDTO(BaseModel):
    rezervation_id: int
    client_id: int
    car_plate_number: str
    car_type: str
    pick_up_date: datetime
    return_date: datetime
    rental_fee: str
    deposit_fee: str
    cancellation_fee_rate: str | None
    cancellation_fee: str | None
    is_picked_up: bool
    is_returned: bool
    is_cancelled: bool
    state: str


class RezervationSearchQueryDTO(BaseModel):
    """Query parameters for searching rezervations. All filters use AND semantics."""

    client_email: str | None = Field(
        default=None, description="Client email (case-insensitive exact match)"
    )
    client_full_name: str | None = Field(
        default=None, description="Client full name (case-insensitive exact match)"
    )
    client_phone: str | None = Field(
        default=None, description="Client phone (case-insensitive exact match)"
    )
    pick_up_date_from: datetime | None = Field(default=None, description="Inclusive lower bound")
    pick_up_date_to: datetime | None = Field(default=None, description="Inclusive upper bound")
    is_booked: bool | None = Field(default=None, description="Booked and not yet picked up")
    is_picked_up: bool | None = None
    is_returned: bool | None = None
    is_cancelled: bool | None = None
    start_index: int | None = Field(default=None, ge=0, description="Matches to skip")
    max_items: int | None = Field(default=None, ge=1, le=200, description="Page size cap")


class RezervationSearchResponseDTO(BaseModel):
    rezervations: list[RezervationResponseDTO]
    start_index: int
    max_items: int | None


class RezervationCancellationRequestDTO(BaseModel):
    cancellation_fee_rate: str = Field(
        description="Multiplier applied to the car type's flat cancellation fee",
        examples=["2.00"],
        pattern=DECIMAL_PATTERN,
    )


class RezervationTransitionResponseDTO(BaseModel):
    rezervation_id: int
    success: bool
