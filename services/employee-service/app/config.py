"""Configuration for Employee Service."""

from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Employee service configuration.

    All settings can be overridden via environment variables.
    """

    # Service configuration
    SERVICE_NAME: str = Field(default="employee-service")
    SERVICE_HOST: str = Field(default="0.0.0.0")
    SERVICE_PORT: int = Field(default=8080, ge=1, le=65535)
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO"
    )
    LOG_JSON: bool = Field(default=False)

    # Authorization
    DELETE_AUTH_TOKEN: str = Field(
        default="frank",
        description="Exact Authorization header value required to delete",
    )

    # Repository behaviour
    ENFORCE_UNIQUE_IDS: bool = Field(
        default=False,
        description="Reject POSTed employees whose id already exists (409)",
    )

    # Routing
    ENABLE_HEADER_LOOKUP: bool = Field(
        default=True,
        description="Expose GET /employees keyed by the 'identity' header",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


settings = Settings()
