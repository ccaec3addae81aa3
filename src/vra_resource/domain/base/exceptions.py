"""Base domain exceptions."""

from typing import Any, Optional


class DomainException(Exception):
    """Base exception for all library errors."""

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error_type": self.__class__.__name__,
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(DomainException):
    """Raised when domain validation fails."""


class InvalidArgumentError(ValidationError, ValueError):
    """Raised when an operation is called with missing or conflicting arguments."""

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, error_code="INVALID_ARGUMENT", details=details)


class EntityNotFoundError(DomainException):
    """Raised when a platform entity cannot be found."""

    def __init__(self, entity_type: str, entity_id: str, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"{entity_type} ID {entity_id} does not exist",
            error_code="NOT_FOUND",
            details={"entity_type": entity_type, "entity_id": entity_id},
        )
        self.entity_type = entity_type
        self.entity_id = entity_id


class InfrastructureError(DomainException):
    """Raised when an infrastructure collaborator fails."""


class ConfigurationError(DomainException):
    """Raised when client configuration is invalid."""
