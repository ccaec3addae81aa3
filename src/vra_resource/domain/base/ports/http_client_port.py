"""Domain port for the platform HTTP transport.

The resource workflow never builds URLs or handles authentication itself. It
talks to the platform through this port, which exposes GET/POST with either
parsed JSON or raw responses, and signals HTTP failures with typed errors.
"""

import json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional

from vra_resource.domain.base.exceptions import InfrastructureError


class HttpError(InfrastructureError):
    """Raised when the platform answers with an HTTP error status."""

    def __init__(self, status_code: Optional[int], message: str, body: str = "") -> None:
        super().__init__(
            message,
            error_code="HTTP_ERROR",
            details={"status_code": status_code, "body": body},
        )
        self.status_code = status_code
        self.body = body


class HttpNotFoundError(HttpError):
    """Raised when the platform answers 404."""

    def __init__(self, message: str, body: str = "") -> None:
        super().__init__(404, message, body)
        self.error_code = "HTTP_NOT_FOUND"


class HttpTransportError(HttpError):
    """Raised when no HTTP response could be obtained at all."""

    def __init__(self, message: str) -> None:
        super().__init__(None, message)
        self.error_code = "HTTP_TRANSPORT_ERROR"


@dataclass(frozen=True)
class HttpResponse:
    """Raw platform response."""

    status_code: int
    body: str = ""
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def location(self) -> Optional[str]:
        """Return the Location header, matched case-insensitively."""
        for name, value in self.headers.items():
            if name.lower() == "location":
                return value
        return None

    def json(self) -> Any:
        """Decode the body as JSON."""
        return json.loads(self.body)


class HttpClientPort(ABC):
    """Transport interface for the catalog-service REST API."""

    @abstractmethod
    def get_parsed(self, path: str) -> dict[str, Any]:
        """GET *path* and return the decoded JSON body."""

    @abstractmethod
    def http_get(self, path: str) -> HttpResponse:
        """GET *path* and return the raw response."""

    @abstractmethod
    def http_post(self, path: str, payload: str) -> HttpResponse:
        """POST the serialized JSON *payload* to *path*."""

    @abstractmethod
    def http_get_paginated(self, path: str, page_size: Optional[int] = None) -> list[dict[str, Any]]:
        """GET every page of a collection endpoint and return the concatenated content."""
