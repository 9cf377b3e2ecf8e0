"""
Rate Limiting Configuration
Protects the login endpoint from brute-force attacks
"""
import os
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address
from flask import request
import logging

logger = logging.getLogger(__name__)

# Environment check
IS_DEVELOPMENT = os.getenv('FLASK_ENV') == 'development'


def get_identifier():
    """
    Get unique identifier for rate limiting.
    Uses the client IP address.
    """
    identifier = get_remote_address()

    logger.debug(f"Rate limit check for: {identifier}")

    return identifier


# Storage (RATELIMIT_STORAGE_URI) e ativação (RATELIMIT_ENABLED) vêm do app.config
limiter = Limiter(
    key_func=get_identifier,
    strategy="fixed-window",
)


def rate_limit_auth_strict():
    """
    Strict rate limit for authentication endpoints.

    Limits:
    - Development: 100/min, 1000/hour
    - Production: 5/min, 20/hour
    """
    if IS_DEVELOPMENT:
        return limiter.limit("100 per minute;1000 per hour")
    return limiter.limit("5 per minute;20 per hour")


@limiter.request_filter
def rate_limit_exempt():
    """Health checks are never rate limited."""
    return request.path == '/api/health'
