"""Shared rate limiter.

Uses client IP for rate limit tracking.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from core.config import RATE_LIMIT_DEFAULT, RATE_LIMIT_ENABLED


limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[RATE_LIMIT_DEFAULT],
    enabled=RATE_LIMIT_ENABLED,
)
