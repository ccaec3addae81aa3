"""Client configuration."""

from .loader import load_config
from .schemas.client_schema import ClientConfig

__all__: list[str] = ["ClientConfig", "load_config"]
