"""
Health Check Router - IIICI Certification Scoring Service
app/routers/health.py

The scoring engine has no hard dependencies; Redis only backs the
optional result cache, so an unreachable Redis reports "degraded"
without failing the health check.
"""
from fastapi import APIRouter
from pydantic import BaseModel
from typing import Dict
from datetime import datetime, timezone

import redis

from app.config import settings
from app.core.dependencies import get_scoring_engine
from app.services.cache import flush_scores

router = APIRouter(tags=["Health"])


#  Schemas


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]


#  Dependency Health Checks


def check_redis() -> str:
    """Check Redis connection health for the score cache."""
    if not settings.CACHE_ENABLED:
        return "disabled"
    try:
        client = redis.from_url(
            settings.REDIS_URL,
            decode_responses=True,
            socket_connect_timeout=5,
        )
        client.ping()
        client.close()
        return "healthy"
    except redis.RedisError as e:
        error_msg = str(e)[:100] + "..." if len(str(e)) > 100 else str(e)
        return f"unavailable: {error_msg}"


def check_engine() -> str:
    """Engine is healthy when its static catalog and structure loaded."""
    engine = get_scoring_engine()
    return f"healthy ({len(engine.catalog)} indicators, {len(engine.structure.pillars)} pillars)"


#  Main Health Check Route


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Service status plus the state of the engine and the optional Redis cache.",
)
async def health_check():
    dependencies = {
        "engine": check_engine(),
        "redis": check_redis(),
    }
    cache_ok = dependencies["redis"] in ("healthy", "disabled")

    return HealthResponse(
        status="healthy" if cache_ok else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=settings.APP_VERSION,
        dependencies=dependencies,
    )


@router.get("/health/redis", summary="Check Redis connection")
async def health_redis():
    result = check_redis()
    return {
        "service": "redis",
        "status": result,
        "url": settings.REDIS_URL,
    }


@router.delete("/health/cache", summary="Flush cached score results")
async def cache_flush():
    deleted = flush_scores()
    return {"deleted": deleted}
