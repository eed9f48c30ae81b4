"""
Centralized configuration for the Storefront backend.

All settings are loaded from environment variables with sensible defaults.
Durations are written as "<int><unit>" strings (e.g. "10m", "1h") and are
validated when the settings are loaded.
"""

import re
from datetime import timedelta
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


_DURATION_PATTERN = re.compile(r"^(\d+)([smhd])$")

_UNIT_SECONDS = {
    "s": 1,
    "m": 60,
    "h": 60 * 60,
    "d": 24 * 60 * 60,
}


def parse_duration(value: str) -> timedelta:
    """
    Parse a duration string such as "10s", "5m", "1h" or "2d".

    Raises:
        ValueError: If the string is not a non-negative integer followed by
            one of the units s, m, h, d.
    """
    match = _DURATION_PATTERN.match(value.strip()) if isinstance(value, str) else None
    if not match:
        raise ValueError(f"Invalid duration format: {value!r}")

    amount, unit = match.groups()
    return timedelta(seconds=int(amount) * _UNIT_SECONDS[unit])


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Storefront API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Access tokens
    jwt_secret: str = "dev-secret-change-in-production"
    jwt_issuer: str = "storefront"
    jwt_audience: str = "storefront-app"
    jwt_expiration: str = "1h"

    # Authorization codes
    auth_code_expiration: str = "10m"
    auth_code_cleanup_interval: str = "5m"

    # Rate limiting (per client address)
    rate_limit_enabled: bool = True
    rate_limit_requests: int = 100
    rate_limit_window: str = "15m"

    # Checkout
    currency: str = "GBP"

    # Seed data
    products_file: str = "data/products.json"

    @field_validator(
        "jwt_expiration",
        "auth_code_expiration",
        "auth_code_cleanup_interval",
        "rate_limit_window",
    )
    @classmethod
    def _validate_duration(cls, value: str) -> str:
        parse_duration(value)
        return value

    @property
    def jwt_ttl(self) -> timedelta:
        return parse_duration(self.jwt_expiration)

    @property
    def auth_code_ttl(self) -> timedelta:
        return parse_duration(self.auth_code_expiration)

    @field_validator("rate_limit_requests")
    @classmethod
    def _validate_rate_limit_requests(cls, value: int) -> int:
        if value < 1:
            raise ValueError("rate_limit_requests must be at least 1")
        return value

    @property
    def cleanup_interval(self) -> timedelta:
        return parse_duration(self.auth_code_cleanup_interval)

    @property
    def rate_limit(self) -> str:
        """Limit in the "<count> per <n> seconds" notation of the limits library."""
        seconds = max(int(parse_duration(self.rate_limit_window).total_seconds()), 1)
        return f"{self.rate_limit_requests} per {seconds} seconds"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
