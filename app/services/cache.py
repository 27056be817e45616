"""
Score Cache Singleton - IIICI Certification Scoring Service
app/services/cache.py

One shared RedisCache for score results. When caching is disabled or
Redis cannot be reached, get_cache() returns None and callers compute
scores directly.
"""
import logging
from typing import Optional

import redis

from app.config import settings
from app.services.redis_cache import RedisCache

logger = logging.getLogger(__name__)

SCORE_KEY_PREFIX = "score:"

_cache: Optional[RedisCache] = None


def score_cache_key(input_hash: str) -> str:
    return f"{SCORE_KEY_PREFIX}{input_hash}"


def get_cache() -> Optional[RedisCache]:
    """
    Shared score cache, or None when caching is off or Redis is down.

    A failed connection is not remembered: the next call retries.
    """
    global _cache
    if not settings.CACHE_ENABLED:
        return None
    if _cache is None:
        candidate = RedisCache()
        try:
            candidate.ping()
        except redis.RedisError as e:
            logger.warning(f"Score cache unavailable, scoring without cache: {e}")
            return None
        _cache = candidate
    return _cache


def reset_cache() -> None:
    """Drop the shared instance so the next get_cache() reconnects."""
    global _cache
    _cache = None


def flush_scores() -> int:
    """Delete every cached score result. Returns the number removed."""
    cache = get_cache()
    if cache is None:
        return 0
    return cache.delete_pattern(f"{SCORE_KEY_PREFIX}*")
