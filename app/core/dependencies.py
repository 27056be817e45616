"""
Dependencies - IIICI Certification Scoring Service
app/core/dependencies.py

FastAPI dependency injection for the engine and services.
"""

from functools import lru_cache

from app.config import get_settings
from app.scoring.certification import CertificationThresholds
from app.scoring.scoring_engine import ScoringEngine


@lru_cache()
def get_scoring_engine() -> ScoringEngine:
    """Get cached ScoringEngine configured from settings."""
    settings = get_settings()
    return ScoringEngine(
        thresholds=CertificationThresholds(
            gold=settings.GOLD_THRESHOLD,
            certified=settings.CERTIFIED_THRESHOLD,
        ),
        improvement_threshold=settings.IMPROVEMENT_THRESHOLD,
    )


def get_scoring_service():
    """Lazy import to avoid circular dependency."""
    from app.services.scoring_service import get_scoring_service as _get
    return _get()


def get_validation_service():
    """Lazy import to avoid circular dependency."""
    from app.services.validation_service import get_validation_service as _get
    return _get()
