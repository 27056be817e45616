# app/scoring/recommendations.py
"""
Improvement Recommendations
---------------------------
Turns pillar scores into short, templated suggestions. Wording is
business content; the only rules are:

  1. overall score below the Certified threshold → a leading summary line
  2. one suggestion per pillar below the improvement threshold,
     weakest pillar first (ties broken by pillar id)
  3. nothing flagged → a single "keep it up" line
"""

from typing import Dict, List, Optional, Sequence

from app.models.scoring import PillarScore
from app.scoring.certification import CertificationThresholds, DEFAULT_THRESHOLDS

DEFAULT_IMPROVEMENT_THRESHOLD = 60.0

PILLAR_SUGGESTIONS: Dict[int, str] = {
    1: "Strengthen strategic foundation by formalizing innovation intent and improving leadership engagement.",
    2: "Increase resource allocation for innovation activities and improve infrastructure support.",
    3: "Enhance innovation processes and foster a more supportive innovation culture.",
    4: "Improve IP management strategy and knowledge sharing systems.",
    5: "Strengthen external intelligence gathering and partnership management.",
    6: "Implement better performance measurement and continuous improvement processes.",
}

EXCELLENT_MESSAGE = "Excellent performance! Continue maintaining high standards across all pillars."


def score_band(score: float) -> str:
    if score < 20:
        return "critical"
    if score < 40:
        return "weak"
    return "developing"


def below_threshold_message(certified_threshold: float) -> str:
    return (
        f"Overall score below certification threshold ({certified_threshold:g}). "
        "Focus on improving lowest-scoring pillars."
    )


def generate_recommendations(
    pillars: Sequence[PillarScore],
    overall_score: float,
    thresholds: Optional[CertificationThresholds] = None,
    improvement_threshold: float = DEFAULT_IMPROVEMENT_THRESHOLD,
) -> List[str]:
    t = thresholds or DEFAULT_THRESHOLDS
    recommendations: List[str] = []

    if overall_score < t.certified:
        recommendations.append(below_threshold_message(t.certified))

    weakest = sorted(
        (p for p in pillars if p.average_score < improvement_threshold),
        key=lambda p: (p.average_score, p.id),
    )
    for pillar in weakest:
        suggestion = PILLAR_SUGGESTIONS.get(
            pillar.id, "Review the indicators of this pillar and close the largest gaps."
        )
        recommendations.append(
            f"{pillar.name} ({pillar.average_score:.1f}/100, {score_band(pillar.average_score)}): "
            f"{suggestion}"
        )

    if not recommendations:
        recommendations.append(EXCELLENT_MESSAGE)

    return recommendations
