"""
Shared configuration management for the Kong admin API access layer.
"""

from typing import Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class AdminApiConfig(BaseSettings):
    """Client configuration, constructed once at startup."""

    model_config = SettingsConfigDict(
        env_prefix="KONG_ADMIN_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore"
    )

    # Admin API location
    host: str = Field(default="localhost:8001")
    https: bool = Field(default=False)

    # Resource API behaviour
    ignore_consumers: bool = Field(default=False)
    cache: bool = Field(default=True)
    page_size: Optional[int] = Field(default=100, ge=1)

    # Transport
    timeout: float = Field(default=10.0, gt=0)

    # Observability
    log_level: Literal["debug", "info", "warning", "error", "critical"] = Field(default="info")

    @field_validator("log_level", mode="before")
    @classmethod
    def _lower_log_level(cls, value):
        return value.lower() if isinstance(value, str) else value


def get_config(**overrides) -> AdminApiConfig:
    """Get client configuration, environment first, then explicit overrides."""
    return AdminApiConfig(**overrides)
