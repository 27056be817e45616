"""
Assessment Catalog Router
app/routers/catalog.py

Read-only views over the pillar structure and indicator metadata, for
form builders and reviewers.

Endpoints:
  GET /api/v1/pillars                    — All six pillars with sub-pillars
  GET /api/v1/pillars/{pillar_id}        — One pillar
  GET /api/v1/indicators                 — All indicators (optional ?pillar= filter)
  GET /api/v1/indicators/{indicator_id}  — One indicator
"""

from fastapi import APIRouter, Depends, Query
from pydantic import Field
from typing import List, Optional

from app.config import settings
from app.core.dependencies import get_scoring_engine
from app.core.exceptions import IndicatorNotFoundException, PillarNotFoundException
from app.models.enumerations import MeasurementUnit
from app.models.scoring import CamelModel
from app.scoring.indicator_catalog import IndicatorMetadata
from app.scoring.pillar_structure import PillarDefinition

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Catalog"])


# =====================================================================
# Response Models
# =====================================================================

class SubPillarInfo(CamelModel):
    id: str
    name: str
    description: str
    indicators: List[str]


class PillarInfo(CamelModel):
    id: int
    name: str
    description: str
    sub_pillars: List[SubPillarInfo]
    indicator_count: int


class IndicatorInfo(CamelModel):
    id: str
    pillar_id: int
    sub_pillar_id: Optional[str] = None
    measurement_unit: MeasurementUnit
    max_score: Optional[float] = None
    evidence_threshold: Optional[float] = Field(
        default=None, description="Value above (or, for Binary, equal to) which evidence is required"
    )


def _pillar_info(pillar: PillarDefinition) -> PillarInfo:
    return PillarInfo(
        id=pillar.id,
        name=pillar.name,
        description=pillar.description,
        sub_pillars=[
            SubPillarInfo(
                id=sp.id,
                name=sp.name,
                description=sp.description,
                indicators=list(sp.indicators),
            )
            for sp in pillar.sub_pillars
        ],
        indicator_count=len(pillar.indicators),
    )


def _indicator_info(metadata: IndicatorMetadata, engine) -> IndicatorInfo:
    location = engine.structure.get_indicator_location(metadata.indicator_id)
    policy = metadata.evidence_policy
    return IndicatorInfo(
        id=metadata.indicator_id,
        pillar_id=metadata.pillar_id,
        sub_pillar_id=location[1] if location else None,
        measurement_unit=metadata.measurement_unit,
        max_score=metadata.max_score,
        evidence_threshold=None if policy.comparator == "never" else policy.threshold,
    )


# =====================================================================
# Pillars
# =====================================================================

@router.get("/pillars", response_model=List[PillarInfo], summary="List assessment pillars")
async def list_pillars(engine=Depends(get_scoring_engine)):
    return [_pillar_info(p) for p in engine.structure.pillars]


@router.get("/pillars/{pillar_id}", response_model=PillarInfo, summary="Get one pillar")
async def get_pillar(pillar_id: int, engine=Depends(get_scoring_engine)):
    pillar = engine.structure.get_pillar(pillar_id)
    if pillar is None:
        raise PillarNotFoundException(pillar_id)
    return _pillar_info(pillar)


# =====================================================================
# Indicators
# =====================================================================

@router.get("/indicators", response_model=List[IndicatorInfo], summary="List indicators")
async def list_indicators(
    pillar: Optional[int] = Query(None, ge=1, le=6, description="Only indicators of this pillar"),
    engine=Depends(get_scoring_engine),
):
    items = engine.catalog.for_pillar(pillar) if pillar is not None else list(engine.catalog)
    return [_indicator_info(m, engine) for m in items]


@router.get("/indicators/{indicator_id}", response_model=IndicatorInfo, summary="Get one indicator")
async def get_indicator(indicator_id: str, engine=Depends(get_scoring_engine)):
    metadata = engine.catalog.get(indicator_id)
    if metadata is None:
        raise IndicatorNotFoundException(indicator_id)
    return _indicator_info(metadata, engine)
