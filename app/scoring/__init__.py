"""
scoring/ — IIICI Certification Scoring Engine

Modules:
    utils.py               - NaN-safe clamp / mean helpers
    values.py              - Tagged raw indicator values
    indicator_catalog.py   - Indicator metadata (unit, max score, evidence policy)
    pillar_structure.py    - Pillar → sub-pillar → indicator grouping
    normalization.py       - Raw response → 0-100 indicator score
    evidence_rules.py      - Evidence requirement and evidence validation
    certification.py       - Certification level and presentation rating
    recommendations.py     - Improvement suggestions per weak pillar
    scoring_engine.py      - Pillar and overall aggregation
"""

from app.scoring.scoring_engine import ScoringEngine

__all__ = ["ScoringEngine"]
