"""
Centralized settings configuration using Pydantic BaseSettings.

All environment variables are defined here with types, defaults, and validation.
Use get_settings() for a cached, process-wide instance.

Usage:
    from backend.settings import get_settings, Settings

    settings = get_settings()
    print(settings.timezone)

    # Tests: build an isolated instance that ignores .env
    settings = Settings(environment="test", _env_file=None)
"""

from datetime import tzinfo
from functools import lru_cache
from typing import Literal, Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from domain.models import TrainingStyle


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # -------------------------------------------------------------------------
    # Core Environment
    # -------------------------------------------------------------------------
    environment: str = Field(
        default="development",
        description="Runtime environment: development, staging, production",
    )

    # -------------------------------------------------------------------------
    # Supabase Database
    # -------------------------------------------------------------------------
    supabase_url: Optional[str] = Field(
        default=None,
        description="Supabase project URL",
    )
    supabase_service_role_key: Optional[str] = Field(
        default=None,
        description="Supabase service role key (full access)",
    )
    supabase_anon_key: Optional[str] = Field(
        default=None,
        description="Supabase anonymous key (limited access)",
    )

    @property
    def supabase_key(self) -> Optional[str]:
        """Get the best available Supabase key (service role preferred)."""
        return self.supabase_service_role_key or self.supabase_anon_key

    # -------------------------------------------------------------------------
    # Calendar
    # -------------------------------------------------------------------------
    timezone: str = Field(
        default="UTC",
        description="IANA zone defining the user's local calendar day",
    )

    # -------------------------------------------------------------------------
    # Analytics Windows
    # -------------------------------------------------------------------------
    pr_window_days: int = Field(
        default=7,
        ge=1,
        description="Trailing window for recent personal records",
    )
    pr_limit: int = Field(
        default=10,
        ge=1,
        description="Maximum recent personal records returned",
    )
    balance_window_days: int = Field(
        default=30,
        ge=1,
        description="Trailing window for muscle balance",
    )
    progression_window_days: int = Field(
        default=90,
        ge=1,
        description="Trailing window for exercise progression and frequency",
    )
    streak_lookback_sessions: int = Field(
        default=90,
        ge=1,
        description="Most recent sessions fetched when computing the streak",
    )

    # -------------------------------------------------------------------------
    # Progressive Overload
    # -------------------------------------------------------------------------
    default_training_style: TrainingStyle = Field(
        default=TrainingStyle.HYPERTROPHY,
        description="Training style used when the caller does not pass one",
    )
    weight_unit: Literal["lbs", "kg"] = Field(
        default="lbs",
        description="Unit shown in overload suggestion messages",
    )

    # -------------------------------------------------------------------------
    # Validators
    # -------------------------------------------------------------------------
    @field_validator("environment")
    @classmethod
    def validate_environment(cls, v: str) -> str:
        """Ensure environment is a valid value."""
        valid_environments = {"development", "staging", "production", "test"}
        if v.lower() not in valid_environments:
            raise ValueError(
                f"Invalid environment '{v}'. Must be one of: {valid_environments}"
            )
        return v.lower()

    @field_validator("timezone")
    @classmethod
    def validate_timezone(cls, v: str) -> str:
        """Ensure timezone names a zone known to zoneinfo."""
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown timezone '{v}'") from e
        return v

    # -------------------------------------------------------------------------
    # Helper Properties
    # -------------------------------------------------------------------------
    @property
    def tzinfo(self) -> tzinfo:
        """The configured zone as a tzinfo object."""
        return ZoneInfo(self.timezone)

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == "development"

    @property
    def is_test(self) -> bool:
        """Check if running in test environment."""
        return self.environment == "test"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    For testing, you can clear the cache with get_settings.cache_clear().

    Returns:
        Settings: Application settings instance
    """
    return Settings()
