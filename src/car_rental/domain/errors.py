"""Domain error classes.

Protocol-agnostic errors that represent business failures.
Services hand them back inside ``Err`` results; the HTTP adapter translates
them into responses.
"""

from typing import Any

FieldError = dict[str, str]


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to HTTP (or any other transport) by an adapter.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Malformed, missing or out-of-range input.

    Examples:
        - Missing parameter object
        - pick_up_date not before return_date
        - Blank email, full name or phone
        - Negative cancellation fee rate

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[FieldError] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "email", "message": "Must not be empty"}]
            **context: Additional context
        """
        self.errors: list[FieldError] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Referenced identifier does not exist.

    Examples:
        - Rezervation with ID not found
        - Client account not found

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | int | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Rezervation", "ClientAccount")
            identifier: Resource identifier
            **context: Additional context
        """
        if identifier is not None:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Operation not allowed for the current lifecycle state.

    Examples:
        - Picking up a car twice
        - Returning a car that was never picked up
        - Cancelling after pick-up
        - Concurrent modification of the same rezervation

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"


class ConfigurationError(InternalError):
    """Static data is inconsistent, e.g. a car type missing from the catalog.

    A programming or data error rather than bad user input.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "CONFIGURATION_ERROR"
