"""
Services module for the IIICI Certification Scoring Service.

Scoring and validation service getters live in app.core.dependencies.
"""

from app.services.cache import flush_scores, get_cache, reset_cache
from app.services.redis_cache import RedisCache, content_hash


__all__ = [
    "RedisCache",
    "content_hash",
    "flush_scores",
    "get_cache",
    "reset_cache",
]
