# app/scoring/scoring_engine.py
"""
Scoring Engine
--------------
Pure transformation from indicator responses to a certification result:

    responses ──► normalized indicator scores (0-100)
              ──► pillar averages (mean of that pillar's indicators)
              ──► overall score  (sum of the six pillar averages / 6)
              ──► certification level + rating + recommendations

Input shape (FormData):
    {
        "pillar_1": {"1.1.1": {"value": 75, "evidence": {...}}, ...},
        ...
        "pillar_6": {...},
    }

Entries may also be bare scalars ({"1.1.1": 75}). A missing pillar is an
empty pillar and scores 0; every pillar always counts toward the overall
mean. Malformed input degrades to zero scores instead of raising.

The engine keeps no state between calls: the catalog, structure and
thresholds are fixed at construction, so one instance can serve
concurrent callers.
"""

from typing import Any, Dict, List, Mapping, Optional

import structlog

from app.models.scoring import (
    IndicatorResult,
    OverallResult,
    PillarScore,
    SubPillarScore,
)
from app.scoring.certification import (
    CertificationThresholds,
    DEFAULT_THRESHOLDS,
    determine_certification_level,
    get_rating_info,
)
from app.scoring.evidence_rules import has_evidence, is_evidence_required, validate_evidence
from app.scoring.indicator_catalog import IndicatorCatalog, get_indicator_catalog
from app.scoring.normalization import normalize, normalize_value
from app.scoring.pillar_structure import (
    PILLAR_IDS,
    PillarStructure,
    get_pillar_structure,
)
from app.scoring.recommendations import (
    DEFAULT_IMPROVEMENT_THRESHOLD,
    generate_recommendations,
)
from app.scoring.utils import fixed_mean, safe_mean
from app.scoring.values import coerce_value, to_raw

logger = structlog.get_logger(__name__)

# Legacy pillar payloads carry per-indicator evidence under this key
# and/or wrap entries in an "indicators" mapping.
_EVIDENCE_KEY = "evidence"
_INDICATORS_KEY = "indicators"


def pillar_key(pillar_id: int) -> str:
    return f"pillar_{pillar_id}"


class ScoringEngine:
    """Compute pillar and overall scores from raw indicator responses."""

    def __init__(
        self,
        catalog: Optional[IndicatorCatalog] = None,
        structure: Optional[PillarStructure] = None,
        thresholds: Optional[CertificationThresholds] = None,
        improvement_threshold: float = DEFAULT_IMPROVEMENT_THRESHOLD,
    ):
        self.catalog = catalog or get_indicator_catalog()
        self.structure = structure or get_pillar_structure()
        self.thresholds = thresholds or DEFAULT_THRESHOLDS
        self.improvement_threshold = improvement_threshold

    # ------------------------------------------------------------------
    # Per-indicator helpers bound to this engine's catalog
    # ------------------------------------------------------------------

    def normalize(self, indicator_id: str, raw_value: Any) -> float:
        return normalize(indicator_id, raw_value, self.catalog)

    def is_evidence_required(self, indicator_id: str, raw_value: Any) -> bool:
        return is_evidence_required(indicator_id, raw_value, self.catalog)

    @staticmethod
    def validate_evidence(bundle: Any) -> bool:
        return validate_evidence(bundle)

    # ------------------------------------------------------------------
    # Aggregation
    # ------------------------------------------------------------------

    @staticmethod
    def pillar_entries(pillar_data: Any) -> Dict[str, Any]:
        """Flatten a pillar payload to {indicator_id: entry} plus legacy evidence."""
        if not isinstance(pillar_data, Mapping):
            return {}
        entries = pillar_data
        nested = pillar_data.get(_INDICATORS_KEY)
        if isinstance(nested, Mapping):
            entries = nested

        legacy_evidence = pillar_data.get(_EVIDENCE_KEY)
        if not isinstance(legacy_evidence, Mapping):
            legacy_evidence = {}

        flat: Dict[str, Any] = {}
        for key, entry in entries.items():
            indicator_id = str(key).strip()
            if indicator_id in (_EVIDENCE_KEY, _INDICATORS_KEY):
                continue
            if not isinstance(entry, Mapping):
                entry = {"value": entry}
            if entry.get("evidence") is None and indicator_id in legacy_evidence:
                entry = {**entry, "evidence": legacy_evidence[indicator_id]}
            flat[indicator_id] = entry
        return flat

    def score_indicator(self, indicator_id: str, entry: Mapping) -> IndicatorResult:
        value = coerce_value(entry.get("value"))
        metadata = self.catalog.get(indicator_id)
        return IndicatorResult(
            id=indicator_id,
            raw_value=to_raw(value),
            normalized_score=normalize_value(metadata, value),
            measurement_unit=metadata.measurement_unit if metadata else None,
            evidence_required=self.is_evidence_required(indicator_id, value),
            has_evidence=has_evidence(entry),
        )

    def _sub_pillar_scores(
        self, pillar_id: int, indicators: List[IndicatorResult]
    ) -> List[SubPillarScore]:
        pillar = self.structure.get_pillar(pillar_id)
        if pillar is None:
            return []
        by_id = {r.id: r for r in indicators}
        sub_scores = []
        for sp in pillar.sub_pillars:
            present = [by_id[i] for i in sp.indicators if i in by_id]
            sub_scores.append(SubPillarScore(
                id=sp.id,
                name=sp.name,
                average_score=safe_mean(r.normalized_score for r in present),
                indicators=[r.id for r in present],
            ))
        return sub_scores

    def process_pillar_data(self, pillar_id: int, pillar_data: Any) -> PillarScore:
        """
        Score one pillar.

        Args:
            pillar_id: Pillar number 1-6.
            pillar_data: Mapping of indicator id → {value, evidence} (or bare value).
                         Anything that is not a mapping counts as an empty pillar.

        Returns:
            PillarScore whose average_score is the mean over every indicator
            entry supplied, 0 when none were supplied.

        Raises:
            ValueError: pillar_id is not one of 1-6.
        """
        if pillar_id not in PILLAR_IDS:
            raise ValueError(f"pillar_id must be one of {PILLAR_IDS}, got {pillar_id!r}")

        indicators = [
            self.score_indicator(indicator_id, entry)
            for indicator_id, entry in self.pillar_entries(pillar_data).items()
        ]
        average = safe_mean(r.normalized_score for r in indicators)

        logger.debug(
            "pillar_processed",
            pillar_id=pillar_id,
            indicator_count=len(indicators),
            average_score=average,
        )

        return PillarScore(
            id=pillar_id,
            name=self.structure.pillar_name(pillar_id),
            average_score=average,
            sub_pillars=self._sub_pillar_scores(pillar_id, indicators),
            indicators=indicators,
        )

    def process_form_data(self, form_data: Any) -> OverallResult:
        """
        Score a full application.

        All six pillars are always scored and always weigh 1/6 of the
        overall score, whether or not the form supplied them.

        Examples:
            >>> engine = ScoringEngine()
            >>> engine.process_form_data({"pillar_1": {"1.1.1": {"value": 75}}}).overall_score
            12.5
        """
        if not isinstance(form_data, Mapping):
            form_data = {}

        pillars = [
            self.process_pillar_data(pillar_id, form_data.get(pillar_key(pillar_id)))
            for pillar_id in PILLAR_IDS
        ]
        overall = fixed_mean((p.average_score for p in pillars), len(PILLAR_IDS))

        level = determine_certification_level(overall, self.thresholds)
        recommendations = generate_recommendations(
            pillars, overall, self.thresholds, self.improvement_threshold
        )

        logger.info(
            "form_scored",
            pillar_scores={p.id: round(p.average_score, 2) for p in pillars},
            indicator_count=sum(len(p.indicators) for p in pillars),
            overall_score=round(overall, 2),
            certification_level=level.value,
        )

        return OverallResult(
            overall_score=overall,
            pillars=pillars,
            certification_level=level,
            rating=get_rating_info(overall),
            recommendations=recommendations,
        )
