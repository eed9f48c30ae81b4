"""
Per-client request rate limiting.

Every route shares one default limit, keyed by client address and kept in
process memory. Rejections are rendered by api.errors in the standard error
body with status 429.
"""

import logging

from fastapi import FastAPI
from slowapi import Limiter
from slowapi.middleware import SlowAPIMiddleware
from slowapi.util import get_remote_address

from shared.config import Settings

logger = logging.getLogger(__name__)


def create_limiter(settings: Settings) -> Limiter:
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit],
        enabled=settings.rate_limit_enabled,
        storage_uri="memory://",
    )


def install_rate_limiting(app: FastAPI, settings: Settings) -> Limiter:
    """Attach a fresh limiter and its middleware to the app."""
    limiter = create_limiter(settings)
    app.state.limiter = limiter
    app.add_middleware(SlowAPIMiddleware)

    if settings.rate_limit_enabled:
        logger.info(f"Rate limiting enabled: {settings.rate_limit} per client")
    return limiter
