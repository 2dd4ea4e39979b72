"""REST API error response models, used to document error bodies in OpenAPI."""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error inside a validation failure."""

    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    """Structured error body returned for every non-2xx response.

    Examples:
        {"detail": "Rezervation with identifier '7' not found", "code": "NOT_FOUND"}
        {"detail": "Rezervation cannot move from 'cancelled' to 'picked_up'", "code": "CONFLICT"}
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Rezervation with identifier '7' not found", "code": "NOT_FOUND"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "return_date",
                            "message": "Must be later than pick_up_date",
                            "code": "INVALID_RANGE",
                        }
                    ],
                },
            ]
        }
    )


ERROR_RESPONSES: dict[int | str, dict] = {
    404: {"model": ErrorResponse, "description": "Referenced record does not exist"},
    409: {"model": ErrorResponse, "description": "Not allowed in the current state"},
    422: {"model": ErrorResponse, "description": "Validation error"},
}
