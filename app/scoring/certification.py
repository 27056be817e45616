# app/scoring/certification.py
"""
Certification Tiers
-------------------
Single home for every threshold applied to the overall score.

Certification decision (persisted):
    score >= 80  → Gold
    score >= 60  → Certified
    otherwise    → Not Certified

Presentation rating (display only, same input score):
    90-100 ★★★★★ Leading
    80-89  ★★★★☆ Optimizing
    70-79  ★★★☆☆ Structured
    60-69  ★★☆☆☆ Developing
    < 60   ★☆☆☆☆ Initiating
"""

import math
from dataclasses import dataclass
from typing import Optional, Tuple

from app.models.enumerations import CertificationLevel, RatingLevel
from app.models.scoring import RatingInfo


@dataclass(frozen=True)
class CertificationThresholds:
    gold: float = 80.0
    certified: float = 60.0

    def __post_init__(self):
        if not 0 <= self.certified < self.gold <= 100:
            raise ValueError(
                f"thresholds must satisfy 0 <= certified < gold <= 100, "
                f"got certified={self.certified}, gold={self.gold}"
            )


DEFAULT_THRESHOLDS = CertificationThresholds()


def determine_certification_level(
    score: float,
    thresholds: Optional[CertificationThresholds] = None,
) -> CertificationLevel:
    """
    Map an overall score to its certification level.

    Examples:
        >>> determine_certification_level(79.9)
        <CertificationLevel.CERTIFIED: 'Certified'>
        >>> determine_certification_level(80.0)
        <CertificationLevel.GOLD: 'Gold'>
    """
    t = thresholds or DEFAULT_THRESHOLDS
    if score is None or math.isnan(score):
        return CertificationLevel.NOT_CERTIFIED
    if score >= t.gold:
        return CertificationLevel.GOLD
    if score >= t.certified:
        return CertificationLevel.CERTIFIED
    return CertificationLevel.NOT_CERTIFIED


# (lower bound, stars, range label, level, description)
_RATING_BANDS: Tuple[Tuple[float, int, str, RatingLevel, str], ...] = (
    (90.0, 5, "90 - 100", RatingLevel.LEADING,
     "Innovation is deeply embedded in the organization's culture and strategy. "
     "The organization is a recognized leader, consistently driving value through innovation."),
    (80.0, 4, "80 - 89", RatingLevel.OPTIMIZING,
     "Innovation is a strategic priority with robust, integrated processes. The organization "
     "uses data for continuous improvement and actively collaborates externally."),
    (70.0, 3, "70 - 79", RatingLevel.STRUCTURED,
     "Innovation management is systematic and proactive. Formal processes are consistently "
     "followed, and the organization is beginning to see measurable results."),
    (60.0, 2, "60 - 69", RatingLevel.DEVELOPING,
     "Basic innovation processes are in place but are inconsistent and not fully integrated. "
     "The organization is building a foundation but lacks strategic coherence."),
    (0.0, 1, "0 - 59", RatingLevel.INITIATING,
     "The organization has ad-hoc and reactive innovation practices. Foundational elements "
     "are largely missing, and there is a significant opportunity for growth."),
)


def get_rating_info(score: float) -> RatingInfo:
    """Five-tier star rating for display."""
    if score is None or math.isnan(score):
        score = 0.0
    for lower, stars, label, level, description in _RATING_BANDS:
        if score >= lower:
            return RatingInfo(stars=stars, range=label, level=level, description=description)
    lower, stars, label, level, description = _RATING_BANDS[-1]
    return RatingInfo(stars=stars, range=label, level=level, description=description)
