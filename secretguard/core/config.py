"""
Configuration management using Pydantic Settings.

Type-safe, validated configuration loaded from environment variables. The
Lambda function configuration (or a local .env exported into the shell)
supplies the values.

Architecture:
- Flat Settings structure (no nesting)
- All config loaded from environment variables
- Type validation via Pydantic
- Cached per process via get_settings(); nothing is read at import time

Usage:
    from secretguard.core.config import get_settings

    settings = get_settings()
    secret_id = settings.secret_id
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from secretguard.core.enums import Environment

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Process settings (flat structure).

    Configuration precedence:
        1. Environment variables (Lambda function configuration)
        2. Default values (only for non-sensitive config)
    """

    # Environment detection
    environment: Environment = Field(
        default=Environment.PRODUCTION,
        description="Runtime environment (development, testing, production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )
    log_json: bool | None = Field(
        default=None,
        description="Force JSON log rendering. Defaults to JSON outside development.",
    )

    # AWS
    aws_region: str = Field(
        default="us-east-1",
        description="AWS region for Secrets Manager and CloudFront clients",
    )
    secrets_manager_endpoint: str | None = Field(
        default=None,
        description="Custom Secrets Manager endpoint URL (e.g., a VPC endpoint)",
    )

    # Authorization
    secret_id: str | None = Field(
        default=None,
        description="ARN or name of the secret holding the API key",
    )
    cache_clear_interval_seconds: float = Field(
        default=20 * 60,
        description="Interval between wholesale clears of the secret cache and blacklist",
    )
    grace_period_seconds: float = Field(
        default=15,
        description="Window after a CURRENT refresh during which PREVIOUS/PENDING are tolerated",
    )
    cool_down_period_seconds: float = Field(
        default=15,
        description="Minimum interval between remote refreshes of one cached stage",
    )

    # Rotation downstream (CloudFront origin custom header)
    distribution_id: str | None = Field(
        default=None,
        description="CloudFront distribution whose origin header carries the API key",
    )
    custom_header_name: str | None = Field(
        default=None,
        description="Origin custom header name updated during the setSecret step",
    )

    model_config = SettingsConfigDict(
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """
        Normalize and validate the log level.

        Raises:
            ValueError: If the level is not one of the standard five.
        """
        level = v.upper()
        if level not in _LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(_LOG_LEVELS)}")
        return level

    @field_validator(
        "cache_clear_interval_seconds",
        "grace_period_seconds",
        "cool_down_period_seconds",
    )
    @classmethod
    def validate_positive(cls, v: float) -> float:
        """
        Reject zero and negative durations.

        Raises:
            ValueError: If the value is not strictly positive.
        """
        if v <= 0:
            raise ValueError("duration must be greater than zero")
        return v

    @property
    def is_development(self) -> bool:
        """True if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    @property
    def use_json_logs(self) -> bool:
        """JSON rendering unless explicitly disabled or running locally."""
        if self.log_json is not None:
            return self.log_json
        return not self.is_development

    @property
    def grace_period(self) -> timedelta:
        return timedelta(seconds=self.grace_period_seconds)

    @property
    def cool_down_period(self) -> timedelta:
        return timedelta(seconds=self.cool_down_period_seconds)


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Loaded once per process (Lambda execution environment).

    Returns:
        Settings: Cached settings instance.
    """
    return Settings()
