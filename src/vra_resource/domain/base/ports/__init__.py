"""Domain ports - abstract collaborators injected into the domain."""

from .http_client_port import (
    HttpClientPort,
    HttpError,
    HttpNotFoundError,
    HttpResponse,
    HttpTransportError,
)
from .logging_port import LoggingPort

__all__: list[str] = [
    "HttpClientPort",
    "HttpError",
    "HttpNotFoundError",
    "HttpResponse",
    "HttpTransportError",
    "LoggingPort",
]
