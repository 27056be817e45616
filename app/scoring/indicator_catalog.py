# app/scoring/indicator_catalog.py
"""
Indicator Catalog
-----------------
Static metadata for every assessed indicator, keyed by its hierarchical
code ("2.2.3"). The catalog is built once per process and is read-only.

Each entry carries:
    measurement_unit  — selects the normalization formula
    max_score         — ceiling for Score units, benchmark for Number units
    evidence_policy   — when a response must be substantiated by evidence

Default evidence policies by unit:
    Binary      value == 1
    Percentage  value > 90
    Score       value > 0.9 × max_score
    Number      value > 0.9 × max_score
    Hours       value > 35
    Ratio       never
"""

import math
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, Iterator, List, Mapping, Optional

from app.models.enumerations import MeasurementUnit

DEFAULT_SCORE_CEILING = 5.0
DEFAULT_NUMBER_BENCHMARK = 100.0
HOURS_EVIDENCE_THRESHOLD = 35.0
PERCENTAGE_EVIDENCE_THRESHOLD = 90.0
HIGH_PERFORMANCE_FRACTION = 0.9


@dataclass(frozen=True)
class EvidencePolicy:
    """Predicate deciding whether a numeric response needs evidence."""
    comparator: str          # "gt", "eq" or "never"
    threshold: float = 0.0

    def requires(self, value: float) -> bool:
        if math.isnan(value):
            return False
        if self.comparator == "gt":
            return value > self.threshold
        if self.comparator == "eq":
            return value == self.threshold
        return False


NEVER = EvidencePolicy("never")


@dataclass(frozen=True)
class IndicatorMetadata:
    indicator_id: str
    measurement_unit: MeasurementUnit
    max_score: Optional[float] = None
    evidence_policy: EvidencePolicy = NEVER

    @property
    def pillar_id(self) -> int:
        return int(self.indicator_id.split(".", 1)[0])

    @property
    def score_ceiling(self) -> float:
        """Ceiling used by the Score formula (metadata value or default 5)."""
        if self.max_score and self.max_score > 0:
            return self.max_score
        return DEFAULT_SCORE_CEILING


def default_evidence_policy(
    unit: MeasurementUnit, max_score: Optional[float] = None
) -> EvidencePolicy:
    """Evidence policy applied when an indicator does not override it."""
    if unit == MeasurementUnit.BINARY:
        return EvidencePolicy("eq", 1.0)
    if unit == MeasurementUnit.PERCENTAGE:
        return EvidencePolicy("gt", PERCENTAGE_EVIDENCE_THRESHOLD)
    if unit == MeasurementUnit.SCORE:
        ceiling = max_score or DEFAULT_SCORE_CEILING
        return EvidencePolicy("gt", ceiling * HIGH_PERFORMANCE_FRACTION)
    if unit == MeasurementUnit.NUMBER:
        benchmark = max_score or DEFAULT_NUMBER_BENCHMARK
        return EvidencePolicy("gt", benchmark * HIGH_PERFORMANCE_FRACTION)
    if unit == MeasurementUnit.HOURS:
        return EvidencePolicy("gt", HOURS_EVIDENCE_THRESHOLD)
    return NEVER


def make_indicator(
    indicator_id: str,
    unit: MeasurementUnit,
    max_score: Optional[float] = None,
    evidence_policy: Optional[EvidencePolicy] = None,
) -> IndicatorMetadata:
    return IndicatorMetadata(
        indicator_id=indicator_id,
        measurement_unit=unit,
        max_score=max_score,
        evidence_policy=evidence_policy or default_evidence_policy(unit, max_score),
    )


_S = MeasurementUnit.SCORE
_P = MeasurementUnit.PERCENTAGE
_B = MeasurementUnit.BINARY
_H = MeasurementUnit.HOURS
_N = MeasurementUnit.NUMBER
_R = MeasurementUnit.RATIO

# (indicator id, unit, max score)
_INDICATOR_ROWS = [
    # Pillar 1: Strategic Foundation & Leadership Commitment
    ("1.1.1", _P, None), ("1.1.2", _P, None), ("1.1.3", _S, 2), ("1.1.4", _S, 3),
    ("1.2.1", _B, 1), ("1.2.2", _P, None), ("1.2.3", _P, None), ("1.2.4", _S, 5),
    ("1.3.1", _S, 3), ("1.3.2", _P, None), ("1.3.3", _S, 2), ("1.3.4", _P, None),
    ("1.4.1", _S, 3), ("1.4.2", _P, None), ("1.4.3", _B, 1), ("1.4.4", _S, 2),
    # Pillar 2: Resource Allocation & Infrastructure
    ("2.1.1", _P, None), ("2.1.2", _P, None), ("2.1.3", _S, 5),
    ("2.2.1", _N, 200), ("2.2.2", _P, None), ("2.2.3", _H, 40), ("2.2.4", _S, 3),
    ("2.2.5", _S, 3),
    ("2.3.1", _S, 5), ("2.3.2", _S, 5), ("2.3.3", _S, 5), ("2.3.4", _S, 5),
    # Pillar 3: Innovation Processes & Culture
    ("3.1.1", _S, 5), ("3.1.2", _P, None), ("3.1.3", _S, 5), ("3.1.4", _S, 5),
    ("3.2.1", _P, None), ("3.2.2", _S, 5), ("3.2.3", _B, 1),
    ("3.3.1", _S, 5), ("3.3.2", _P, None), ("3.3.3", _P, None),
    ("3.4.1", _S, 5), ("3.4.2", _S, 5), ("3.4.3", _S, 3), ("3.4.4", _S, 5),
    ("3.5.1", _S, 5), ("3.5.2", _S, 5),
    # Pillar 4: Knowledge & IP Management
    ("4.1.1", _S, 5), ("4.1.2", _R, 1), ("4.1.3", _S, 5),
    ("4.2.1", _P, None), ("4.2.2", _S, 5), ("4.2.3", _P, None),
    ("4.3.1", _S, 3), ("4.3.2", _P, None),
    ("4.4.1", _P, None), ("4.4.2", _P, None), ("4.4.3", _P, None),
    # Pillar 5: Strategic Intelligence & Collaboration
    ("5.1.1", _S, 5), ("5.1.2", _P, None), ("5.1.3", _P, None), ("5.1.4", _N, 5),
    ("5.1.5", _S, 3),
    ("5.2.1", _P, None), ("5.2.2", _S, 5), ("5.2.3", _P, None), ("5.2.4", _P, None),
    # Pillar 6: Performance Measurement & Improvement
    ("6.1.1", _P, None), ("6.1.2", _P, None), ("6.1.3", _S, 5),
    ("6.2.1", _S, 3), ("6.2.2", _N, 2), ("6.2.3", _S, 5),
    ("6.3.1", _P, None), ("6.3.2", _P, None), ("6.3.3", _N, 4),
]


class IndicatorCatalog:
    """Read-only lookup over indicator metadata."""

    def __init__(self, indicators: Mapping[str, IndicatorMetadata]):
        self._indicators: Dict[str, IndicatorMetadata] = dict(indicators)

    @classmethod
    def from_rows(cls, rows) -> "IndicatorCatalog":
        return cls({
            row[0]: make_indicator(*row) for row in rows
        })

    def get(self, indicator_id) -> Optional[IndicatorMetadata]:
        if not isinstance(indicator_id, str):
            return None
        return self._indicators.get(indicator_id.strip())

    def __contains__(self, indicator_id) -> bool:
        return self.get(indicator_id) is not None

    def __iter__(self) -> Iterator[IndicatorMetadata]:
        return iter(self._indicators.values())

    def __len__(self) -> int:
        return len(self._indicators)

    def indicator_ids(self) -> List[str]:
        return list(self._indicators)

    def for_pillar(self, pillar_id: int) -> List[IndicatorMetadata]:
        return [m for m in self._indicators.values() if m.pillar_id == pillar_id]


@lru_cache
def get_indicator_catalog() -> IndicatorCatalog:
    """Process-wide catalog, built on first use."""
    return IndicatorCatalog.from_rows(_INDICATOR_ROWS)
