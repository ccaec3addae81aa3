"""Loading of ClientConfig from settings files, environment and overrides."""

import os
from typing import Any, Optional

from dynaconf import Dynaconf
from pydantic import ValidationError as PydanticValidationError

from vra_resource.config.schemas.client_schema import ClientConfig
from vra_resource.domain.base.exceptions import ConfigurationError

ENV_PREFIX = "VRA"
SETTINGS_FILE_ENV = "VRA_SETTINGS_FILE"


def load_config(settings_file: Optional[str] = None, **overrides: Any) -> ClientConfig:
    """
    Load the client configuration.

    Priority, highest first:
    1. Keyword overrides that are not None
    2. VRA_* environment variables (VRA_BASE_URL, VRA_BEARER_TOKEN, ...)
    3. The settings file given as argument or through VRA_SETTINGS_FILE
    4. ClientConfig defaults
    """
    settings_file = settings_file or os.environ.get(SETTINGS_FILE_ENV)
    if settings_file and not os.path.exists(settings_file):
        raise ConfigurationError(f"Configuration file not found: {settings_file}")

    settings = Dynaconf(
        envvar_prefix=ENV_PREFIX,
        settings_files=[settings_file] if settings_file else [],
        environments=False,
        load_dotenv=False,
    )

    data: dict[str, Any] = {}
    for name in ClientConfig.model_fields:
        value = settings.get(name.upper())
        if value is not None:
            data[name] = value
    data.update({key: value for key, value in overrides.items() if value is not None})

    try:
        return ClientConfig(**data)
    except PydanticValidationError as e:
        raise ConfigurationError(
            f"Invalid client configuration: {e}",
            error_code="INVALID_CONFIGURATION",
            details={"errors": e.errors(include_url=False)},
        ) from e
