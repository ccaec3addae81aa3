"""Resource domain exceptions."""

from typing import Optional

from vra_resource.domain.base.exceptions import DomainException, EntityNotFoundError


class ResourceNotFoundError(EntityNotFoundError):
    """Raised when a resource ID does not exist on the platform."""

    def __init__(self, resource_id: str) -> None:
        super().__init__("Resource", resource_id, f"resource ID {resource_id} does not exist")
        self.resource_id = resource_id


class ActionNotFoundError(EntityNotFoundError):
    """Raised when a resource does not offer the requested action."""

    def __init__(self, resource_id: str, action_name: str, label: Optional[str] = None) -> None:
        super().__init__(
            "Action",
            action_name,
            f"No {label or action_name} action found for resource {resource_id}",
        )
        self.resource_id = resource_id
        self.action_name = action_name


class MalformedDescriptorError(DomainException):
    """Raised when a fetched descriptor lacks a structurally required field."""

    def __init__(self, resource_id: Optional[str], field: str, message: Optional[str] = None) -> None:
        super().__init__(
            message or f"No {field} entry available for resource {resource_id}",
            error_code="MALFORMED_DESCRIPTOR",
            details={"resource_id": resource_id, "field": field},
        )
        self.resource_id = resource_id
        self.field = field


class PollingTimeoutError(DomainException):
    """Raised when a bounded polling policy gives up."""

    def __init__(self, description: str, attempts: int, elapsed: float) -> None:
        super().__init__(
            f"Gave up waiting for {description} after {attempts} attempt(s) in {elapsed:.1f}s",
            error_code="POLLING_TIMEOUT",
            details={"attempts": attempts, "elapsed_seconds": elapsed},
        )
        self.attempts = attempts
        self.elapsed = elapsed


class PollingCancelledError(DomainException):
    """Raised when polling is cancelled through the policy's cancel event."""

    def __init__(self, description: str, attempts: int) -> None:
        super().__init__(
            f"Polling for {description} cancelled after {attempts} attempt(s)",
            error_code="POLLING_CANCELLED",
            details={"attempts": attempts},
        )
        self.attempts = attempts
