"""Request domain exceptions."""

from vra_resource.domain.base.exceptions import DomainException, EntityNotFoundError


class RequestNotFoundError(EntityNotFoundError):
    """Raised when a request ID does not exist on the platform."""

    def __init__(self, request_id: str) -> None:
        super().__init__("Request", request_id, f"request ID {request_id} does not exist")
        self.request_id = request_id


class ActionSubmissionError(DomainException):
    """Raised when the platform accepts an action request but returns no request reference."""
