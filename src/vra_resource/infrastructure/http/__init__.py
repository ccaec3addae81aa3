"""HTTP transport."""

from .client import VraHttpClient

__all__: list[str] = ["VraHttpClient"]
