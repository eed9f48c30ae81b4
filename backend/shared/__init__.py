"""
Shared infrastructure for Storefront backend.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- store: Keyed entity storage with atomic primitives
- exceptions: Base exception classes

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings, parse_duration
from .store import EntityStore, InMemoryStore, KeyValueStore
from .repository import BaseRepository
from .exceptions import (
    StorefrontError,
    NotFoundError,
    ValidationError,
    AuthenticationError,
    AvailabilityError,
    RateLimitError,
    ServiceUnavailableError,
    InternalError,
)
from .models import AuthenticatedUser, CamelModel, Money
from .clock import Clock, utc_now

__all__ = [
    "Settings",
    "get_settings",
    "parse_duration",
    "EntityStore",
    "InMemoryStore",
    "KeyValueStore",
    "BaseRepository",
    "StorefrontError",
    "NotFoundError",
    "ValidationError",
    "AuthenticationError",
    "AvailabilityError",
    "RateLimitError",
    "ServiceUnavailableError",
    "InternalError",
    "AuthenticatedUser",
    "CamelModel",
    "Money",
    "Clock",
    "utc_now",
]
