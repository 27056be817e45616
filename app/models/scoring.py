# app/models/scoring.py
"""
Scoring result models.

Python attributes are snake_case; JSON payloads use camelCase
(overallScore, averageScore, subPillars, ...).
"""

from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.models.enumerations import CertificationLevel, MeasurementUnit, RatingLevel

RawValue = Union[bool, float, str, None]


class CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=False,
    )


class IndicatorResult(CamelModel):
    """Normalized outcome for one indicator response."""
    id: str
    raw_value: RawValue = None
    normalized_score: float = Field(..., ge=0, le=100)
    measurement_unit: Optional[MeasurementUnit] = None
    evidence_required: bool = False
    has_evidence: bool = False


class SubPillarScore(CamelModel):
    """Informational breakdown; does not feed the pillar average."""
    id: str
    name: str
    average_score: float = Field(..., ge=0, le=100)
    indicators: List[str] = Field(default_factory=list)


class PillarScore(CamelModel):
    id: int = Field(..., ge=1, le=6)
    name: str
    average_score: float = Field(..., ge=0, le=100)
    sub_pillars: List[SubPillarScore] = Field(default_factory=list)
    indicators: List[IndicatorResult] = Field(default_factory=list)


class RatingInfo(CamelModel):
    """Five-tier presentation rating derived from the overall score."""
    stars: int = Field(..., ge=1, le=5)
    range: str
    level: RatingLevel
    description: str


class OverallResult(CamelModel):
    overall_score: float = Field(..., ge=0, le=100)
    pillars: List[PillarScore]
    certification_level: CertificationLevel
    rating: Optional[RatingInfo] = None
    recommendations: List[str] = Field(default_factory=list)


class PillarPreviewRequest(CamelModel):
    pillar_id: int
    pillar_data: Dict[str, Any] = Field(default_factory=dict)


class IndicatorPreview(CamelModel):
    id: str
    normalized_score: float
    has_evidence: bool


class PillarPreview(CamelModel):
    pillar_score: float
    indicators: List[IndicatorPreview]


class PillarPreviewResponse(CamelModel):
    success: bool = True
    data: PillarPreview


class CertificationResponse(CamelModel):
    score: float
    certification_level: CertificationLevel
    rating: RatingInfo
