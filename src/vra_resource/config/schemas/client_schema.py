"""Client configuration schema."""

from typing import TYPE_CHECKING, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vra_resource.constants import DEFAULT_PAGE_SIZE, DEFAULT_POLL_INTERVAL

if TYPE_CHECKING:
    from vra_resource.application.services.ip_address_poller import PollingPolicy


class ClientConfig(BaseModel):
    """Connection, paging, polling and logging settings."""

    # Environment values arrive TOML-parsed, so a numeric token is read as int.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    base_url: str = Field(..., description="Base URL of the platform, e.g. https://vra.example.com")
    bearer_token: Optional[str] = Field(None, description="Bearer token sent with every request")
    verify_ssl: bool = Field(True, description="Verify the platform's TLS certificate")
    timeout: float = Field(30, gt=0, description="Per-request timeout in seconds")
    page_size: int = Field(DEFAULT_PAGE_SIZE, ge=1, description="Page size for collection listings")
    poll_interval: float = Field(
        DEFAULT_POLL_INTERVAL, ge=0, description="Seconds between IP address polling attempts"
    )
    poll_max_attempts: Optional[int] = Field(None, ge=1, description="Polling attempt limit; unset means unlimited")
    poll_timeout: Optional[float] = Field(None, ge=0, description="Polling deadline in seconds; unset means none")
    log_level: str = Field("INFO", description="Logging level")
    log_format: Literal["console", "json"] = Field("console", description="Log renderer")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        """Require an http(s) URL and drop the trailing slash."""
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"base_url must start with http:// or https://, got '{v}'")
        return v.rstrip("/")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
            raise ValueError(f"Invalid log level '{v}'")
        return level

    def polling_policy(self) -> "PollingPolicy":
        """Build the polling policy described by this configuration."""
        from vra_resource.application.services.ip_address_poller import PollingPolicy

        return PollingPolicy(
            interval=self.poll_interval,
            max_attempts=self.poll_max_attempts,
            timeout=self.poll_timeout,
        )
