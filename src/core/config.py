"""
Core configuration module.

This module manages application settings using Pydantic Settings, providing
type-safe configuration with environment variable and ``.env`` support.
Engine tuning lives in ``src.genetic.core.config``; these settings cover the
process around it (environment, logging, observability).
"""

from typing import Any, Dict, Literal, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings with environment variable support.

    All settings can be overridden via environment variables of the same
    name (case-insensitive), e.g. ``LOGFIRE_TOKEN`` or ``LOG_LEVEL``.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = "Adaptive Genetic Algorithm"
    app_version: str = "1.0.0"
    environment: str = Field(default="development")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(default="INFO")

    # Logfire settings
    logfire_token: Optional[str] = Field(default=None)
    logfire_service_name: str = Field(default="genetic-engine")
    logfire_environment: str = Field(default="development")
    logfire_console: bool = Field(default=False)

    # Demo run settings
    demo_generations: int = Field(default=200, ge=1)
    demo_city_count: int = Field(default=12, ge=2)

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        """Accept lower-case level names from the environment."""
        if isinstance(v, str):
            return v.upper()
        return v

    def get_logfire_settings(self) -> Dict[str, Any]:
        """Get Logfire configuration."""
        return {
            "token": self.logfire_token or None,
            "service_name": self.logfire_service_name,
            "environment": self.logfire_environment,
            "send_to_logfire": "if-token-present",
            "console": None if self.logfire_console else False,
        }

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"


# Create global settings instance
settings = Settings()
