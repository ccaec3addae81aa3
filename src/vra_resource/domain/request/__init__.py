"""Request domain - request handle and action payload."""

from .action_request import ActionRequestPayload
from .aggregate import Request
from .exceptions import ActionSubmissionError, RequestNotFoundError

__all__: list[str] = [
    "ActionRequestPayload",
    "ActionSubmissionError",
    "Request",
    "RequestNotFoundError",
]
