"""
Configuration management for the analytics reporting service.

Values come from environment variables (or a local .env file) and are
validated once at import time.
"""

from typing import List, Optional, Union

import pytz
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache


class Settings(BaseSettings):
    """
    Application settings with environment variable support.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Environment Settings
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # API
    cors_origins: Union[List[str], str] = ["http://localhost:3000"]

    # Analytics reporting
    analytics_report_timezone: str = Field(
        default="UTC", description="Zone used for date ranges and bucket keys"
    )
    analytics_default_time_range: str = "last7Days"
    analytics_default_top_items: int = 10
    analytics_max_top_items: int = 100

    # Report cache
    analytics_report_cache_enabled: bool = True
    analytics_report_cache_ttl_seconds: int = 300  # 5 minutes
    analytics_report_cache_max_size: int = 256

    # Optional JSON file of normalized orders for the default repository
    analytics_orders_seed_file: Optional[str] = None

    @field_validator("cors_origins", mode="before")
    @classmethod
    def parse_cors_origins(cls, v):
        """Parse CORS origins from string or list."""
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(",") if origin.strip()]
        return v

    @field_validator("analytics_report_timezone")
    @classmethod
    def validate_timezone(cls, v):
        try:
            pytz.timezone(v)
        except pytz.UnknownTimeZoneError:
            raise ValueError(f"Unknown report timezone: {v}")
        return v

    @field_validator(
        "analytics_default_top_items",
        "analytics_max_top_items",
        "analytics_report_cache_ttl_seconds",
        "analytics_report_cache_max_size",
    )
    @classmethod
    def validate_positive(cls, v):
        if v < 1:
            raise ValueError("must be a positive integer")
        return v

    @model_validator(mode="after")
    def validate_top_items_bounds(self):
        if self.analytics_max_top_items < self.analytics_default_top_items:
            raise ValueError(
                "ANALYTICS_MAX_TOP_ITEMS must be >= ANALYTICS_DEFAULT_TOP_ITEMS"
            )
        return self

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment.lower() == "production"

    @property
    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment.lower() == "development"

    @property
    def report_tz(self):
        return pytz.timezone(self.analytics_report_timezone)


@lru_cache()
def get_settings() -> Settings:
    """
    Get application settings (cached).

    Returns:
        Settings instance with environment variables loaded
    """
    return Settings()


# Export settings instance for easy import
settings = get_settings()
