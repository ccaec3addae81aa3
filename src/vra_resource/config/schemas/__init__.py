"""Configuration schemas."""

from .client_schema import ClientConfig

__all__: list[str] = ["ClientConfig"]
