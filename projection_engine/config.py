"""Engine configuration management using Pydantic Settings."""

import logging
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False, extra="ignore"
    )

    # Application Environment
    app_env: str = Field(default="development", alias="APP_ENV")

    # Logging Configuration
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Cash-flow forecasting
    cashflow_default_horizon_months: int = Field(
        default=12, ge=1, alias="CASHFLOW_DEFAULT_HORIZON_MONTHS"
    )
    max_horizon_months: int = Field(default=600, ge=1, alias="MAX_HORIZON_MONTHS")

    @field_validator("app_env")
    @classmethod
    def validate_app_env(cls, v):
        """Validate application environment."""
        allowed_envs = {"development", "testing", "production"}
        if v not in allowed_envs:
            raise ValueError(f"APP_ENV must be one of {allowed_envs}")
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        allowed_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed_levels:
            raise ValueError(f"LOG_LEVEL must be one of {allowed_levels}")
        return v.upper()


def get_settings(env_file: Optional[str] = None) -> Settings:
    """Get engine settings instance."""
    if env_file is not None:
        return Settings(_env_file=env_file)
    return Settings()


_settings: Optional[Settings] = None


def get_global_settings() -> Settings:
    """Get or create global settings instance."""
    global _settings
    if _settings is None:
        _settings = get_settings()
    return _settings


def reset_global_settings() -> None:
    """Reset global settings instance (useful for testing)."""
    global _settings
    _settings = None


def configure_logging(settings: Optional[Settings] = None) -> logging.Logger:
    """Apply the configured log level to the package logger.

    Args:
        settings: Settings to read LOG_LEVEL from (defaults to global settings)

    Returns:
        The configured ``projection_engine`` logger
    """
    settings = settings or get_global_settings()
    package_logger = logging.getLogger("projection_engine")
    package_logger.setLevel(settings.log_level)
    return package_logger
