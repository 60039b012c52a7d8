from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service
    app_name: str = Field(
        default="checkout-gateway",
        description="Service name reported by health checks",
    )
    api_prefix: str = Field(
        default="/api",
        description="Path prefix for the payment API routes",
    )

    # Server
    host: str = Field(
        default="0.0.0.0",
        description="Bind address for uvicorn",
    )
    port: int = Field(
        default=8000,
        description="Bind port for uvicorn",
    )

    # Payment provider selection
    payment_default_provider: str = Field(
        default="stripe",
        min_length=1,
        description="Provider id used when checkout does not select one",
    )
    payment_extra_providers: list[str] = Field(
        default=[],
        description="Additional processors as 'package.module:ClassName' paths",
    )

    # Rate limiting
    rate_limit_enabled: bool = Field(
        default=True,
        description="Enable in-memory rate limiting for API routes",
    )
    rate_limit_calls: int = Field(
        default=100,
        description="Max API calls per period",
    )
    rate_limit_period: int = Field(
        default=60,
        description="Rate limit period in seconds",
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR)",
    )
    log_format: Literal["json", "standard"] = Field(
        default="standard",
        description="Log format (json for production, standard for dev)",
    )


settings = Settings()
