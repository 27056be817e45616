"""
Redis-backed result cache.

Values are pydantic models stored as their JSON dump under
"<namespace>:<key>" with a TTL. Keys for score results are content
hashes of the submitted form data, so identical submissions share one
entry regardless of key order.
"""
import hashlib
import json
from typing import Any, Iterator, Optional, Type, TypeVar

import redis
from pydantic import BaseModel

from app.config import settings

M = TypeVar("M", bound=BaseModel)


def _stringify_keys(payload: Any) -> Any:
    if isinstance(payload, dict):
        return {str(k): _stringify_keys(v) for k, v in payload.items()}
    if isinstance(payload, (list, tuple)):
        return [_stringify_keys(v) for v in payload]
    return payload


def content_hash(payload: Any) -> str:
    """SHA-256 of the canonical JSON form of payload (sorted keys, compact)."""
    canonical = json.dumps(
        _stringify_keys(payload), sort_keys=True, separators=(",", ":"), default=str
    )
    return hashlib.sha256(canonical.encode("utf-8")).hexdigest()


class RedisCache:
    """Thin pydantic-aware wrapper over a redis client."""

    def __init__(self, url: Optional[str] = None):
        self.client = redis.from_url(
            url or settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=5,
        )

    def ping(self) -> bool:
        return bool(self.client.ping())

    def get(self, key: str, model: Type[M]) -> Optional[M]:
        """Load a cached model; None on miss."""
        raw = self.client.get(key)
        if not raw:
            return None
        return model.model_validate_json(raw)

    def set(self, key: str, value: BaseModel, ttl_seconds: int) -> None:
        """Store a model; JSON uses field names so it reloads without aliases."""
        self.client.setex(key, ttl_seconds, value.model_dump_json())

    def delete(self, key: str) -> None:
        self.client.delete(key)

    def keys(self, pattern: str) -> Iterator[str]:
        return self.client.scan_iter(match=pattern)

    def delete_pattern(self, pattern: str) -> int:
        """Remove every key matching pattern; returns how many were removed."""
        removed = 0
        for key in self.keys(pattern):
            self.client.delete(key)
            removed += 1
        return removed
