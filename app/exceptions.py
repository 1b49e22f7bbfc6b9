from typing import Any, Mapping, Optional


class AppError(Exception):
    """Base class for errors raised by the service layer.

    Attributes:
        message: human-readable message, safe to return to the caller
        details: optional mapping with extra context (field errors, validation info)
        code: machine-readable error code
        http_status: suggested HTTP status code for handlers
    """

    http_status = 500
    default_message = "Internal server error"
    default_code = "INTERNAL_SERVER_ERROR"

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
        code: Optional[str] = None,
    ):
        message = message or self.default_message
        super().__init__(message)
        self.message = message
        self.details = details
        self.code = code or self.default_code

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload

    def __str__(self) -> str:
        return self.message


class ServiceValidationError(AppError):
    """Raised when input data is invalid or a precondition for a service call is not met."""

    http_status = 400
    default_message = "Invalid input"
    default_code = "SERVICE_VALIDATION_ERROR"


class InvalidSelectionError(ServiceValidationError):
    """Raised when an order request carries no usable meal identifiers."""

    default_message = "Please select at least one meal"
    default_code = "INVALID_SELECTION"


class UnauthorizedError(AppError):
    """Raised when authentication or authorization fails."""

    http_status = 401
    default_message = "Unauthorized"
    default_code = "UNAUTHORIZED"


class NotFoundError(AppError):
    """Raised when a requested resource was not found."""

    http_status = 404
    default_message = "Not found"
    default_code = "NOT_FOUND"


class ItemsUnavailableError(NotFoundError):
    """Raised when some requested meals no longer exist."""

    default_message = "Some selected meals are no longer available"
    default_code = "ITEMS_UNAVAILABLE"


class ConflictError(AppError):
    """Raised when a resource conflict occurs (e.g., duplicate entry)."""

    http_status = 409
    default_message = "Conflict"
    default_code = "CONFLICT"


class DuplicateOrderError(ConflictError):
    """Raised when the storage layer rejects an order as a duplicate."""

    default_message = "Duplicate order detected"
    default_code = "DUPLICATE_ORDER"


class StorageUnavailableError(AppError):
    """Raised when the backing store fails.

    The message never carries storage details; the underlying cause is logged
    where the error is raised.
    """

    http_status = 500
    default_message = "The service is temporarily unavailable. Please try again."
    default_code = "STORAGE_UNAVAILABLE"
