"""
Scoring Service — Certification Calculation Orchestrator
app/services/scoring_service.py

Wraps the pure ScoringEngine for callers that want:

  1. Result caching keyed by a content hash of the form data and thresholds (Redis, TTL)
  2. Single-pillar previews while a form is being filled in
  3. Audit-record snapshots of a calculation, ready to be persisted

The engine stays stateless; the cache lives here and is optional.
"""

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

import redis
from pydantic import ValidationError

from app.config import settings
from app.core.dependencies import get_scoring_engine
from app.core.exceptions import InvalidPillarException
from app.models.audit import ScoreAuditRecord
from app.models.scoring import (
    IndicatorPreview,
    OverallResult,
    PillarPreview,
    PillarPreviewResponse,
)
from app.scoring.pillar_structure import PILLAR_IDS
from app.scoring.scoring_engine import ScoringEngine
from app.services.cache import get_cache, score_cache_key
from app.services.redis_cache import RedisCache, content_hash

logger = logging.getLogger(__name__)


class ScoringService:
    """
    Orchestrates score calculation around the engine.

    Reads from / writes to:
      - Redis key  score:<sha256 of form data + certification thresholds>  (TTL CACHE_TTL_SCORES)
    """

    def __init__(
        self,
        engine: Optional[ScoringEngine] = None,
        cache: Optional[RedisCache] = None,
        use_default_cache: bool = True,
        ttl_seconds: Optional[int] = None,
    ):
        self.engine = engine or get_scoring_engine()
        self._cache = cache
        self._use_default_cache = use_default_cache
        self.ttl_seconds = ttl_seconds or settings.CACHE_TTL_SCORES

    @property
    def cache(self) -> Optional[RedisCache]:
        if self._cache is not None:
            return self._cache
        if self._use_default_cache:
            return get_cache()
        return None

    def cache_key(self, form_data: Any) -> str:
        """Key covering the form data and the engine settings that decide the result."""
        t = self.engine.thresholds
        return score_cache_key(content_hash({
            "form": form_data,
            "thresholds": [t.gold, t.certified, self.engine.improvement_threshold],
        }))

    # ------------------------------------------------------------------
    # Full calculation
    # ------------------------------------------------------------------

    def calculate(self, form_data: Any, use_cache: bool = True) -> OverallResult:
        """Score a full application, serving repeated inputs from cache."""
        cache = self.cache if use_cache else None
        if cache is None:
            return self.engine.process_form_data(form_data)

        key = self.cache_key(form_data)

        try:
            cached = cache.get(key, OverallResult)
        except (redis.RedisError, ValidationError) as e:
            logger.warning(f"Score cache read failed for {key}: {e}")
            cached = None
        if cached is not None:
            logger.debug(f"Score cache hit: {key}")
            return cached

        result = self.engine.process_form_data(form_data)

        try:
            cache.set(key, result, self.ttl_seconds)
        except redis.RedisError as e:
            logger.warning(f"Score cache write failed for {key}: {e}")

        return result

    def invalidate(self, form_data: Any) -> None:
        cache = self.cache
        if cache is None:
            return
        try:
            cache.delete(self.cache_key(form_data))
        except redis.RedisError as e:
            logger.warning(f"Score cache invalidation failed: {e}")

    # ------------------------------------------------------------------
    # Pillar preview
    # ------------------------------------------------------------------

    def preview_pillar(self, pillar_id: int, pillar_data: Dict[str, Any]) -> PillarPreviewResponse:
        """Score one pillar without touching the cache."""
        if pillar_id not in PILLAR_IDS:
            raise InvalidPillarException(pillar_id)

        pillar = self.engine.process_pillar_data(pillar_id, pillar_data)
        return PillarPreviewResponse(
            success=True,
            data=PillarPreview(
                pillar_score=pillar.average_score,
                indicators=[
                    IndicatorPreview(
                        id=r.id,
                        normalized_score=r.normalized_score,
                        has_evidence=r.has_evidence,
                    )
                    for r in pillar.indicators
                ],
            ),
        )

    # ------------------------------------------------------------------
    # Audit snapshot
    # ------------------------------------------------------------------

    @staticmethod
    def build_audit_record(
        result: OverallResult,
        form_data: Any,
        application_id: Optional[str] = None,
    ) -> ScoreAuditRecord:
        """Full copy of a calculation for the caller to persist."""
        return ScoreAuditRecord(
            application_id=application_id,
            input_hash=content_hash(form_data),
            overall_score=result.overall_score,
            certification_level=result.certification_level.audit_code,
            rating_level=result.rating.level if result.rating else None,
            snapshot=result.model_copy(deep=True),
        )


@lru_cache
def get_scoring_service() -> ScoringService:
    return ScoringService()
