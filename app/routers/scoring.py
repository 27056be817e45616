"""
Certification Scoring API Router
app/routers/scoring.py

Endpoints:
  POST /api/v1/scoring/calculate              — Score a full application (+ audit snapshot)
  POST /api/v1/scoring/preview                — Score a single pillar
  POST /api/v1/scoring/validate               — Validate all six pillars
  POST /api/v1/scoring/validate/{pillar_id}   — Validate one pillar
  POST /api/v1/scoring/progress/{pillar_id}   — Completion + running score for one pillar
  GET  /api/v1/scoring/rating?score=          — Certification level + star rating for a score

Register in main.py:
    from app.routers.scoring import router as scoring_router
    app.include_router(scoring_router)
"""

from fastapi import APIRouter, Body, Depends, Path, Query
from typing import Any, Optional
import logging
import time

from app.config import settings
from app.core.dependencies import get_scoring_service, get_validation_service
from app.core.exceptions import InvalidFormDataException
from app.models.audit import ScoreAuditRecord
from app.models.scoring import (
    CamelModel,
    CertificationResponse,
    OverallResult,
    PillarPreviewRequest,
    PillarPreviewResponse,
)
from app.models.validation import (
    ApplicationValidationResult,
    PillarProgress,
    ValidationResult,
)
from app.scoring.certification import determine_certification_level, get_rating_info

logger = logging.getLogger(__name__)

router = APIRouter(prefix=settings.API_V1_PREFIX, tags=["Scoring"])


# =====================================================================
# Response Models
# =====================================================================

class CalculateResponse(CamelModel):
    """Response from scoring a full application."""
    success: bool = True
    data: OverallResult
    audit: Optional[ScoreAuditRecord] = None
    duration_seconds: Optional[float] = None


def _unwrap(body: Any) -> tuple:
    """Accept either raw FormData or the {applicationId, formData} envelope."""
    if not isinstance(body, dict):
        raise InvalidFormDataException()
    if "formData" in body:
        form_data = body.get("formData")
        if not isinstance(form_data, dict):
            raise InvalidFormDataException()
        return body.get("applicationId"), form_data
    return None, body


# =====================================================================
# POST /api/v1/scoring/calculate
# =====================================================================

@router.post(
    "/scoring/calculate",
    response_model=CalculateResponse,
    summary="Score a full application",
    description="""
    Runs the scoring engine over all six pillars:

    1. **Normalizes** every indicator response to 0-100 by its measurement unit
    2. **Averages** indicators per pillar (empty pillars score 0)
    3. **Averages** the six pillar scores into the overall score
    4. **Maps** the overall score to Gold / Certified / Not Certified
    5. **Returns** recommendations and an audit snapshot for persistence

    Body is either the FormData object (`pillar_1` … `pillar_6`) or
    `{"applicationId": "...", "formData": {...}}`.
    """,
)
async def calculate_scores(
    body: Any = Body(...),
    use_cache: bool = Query(True, description="Serve identical inputs from the Redis cache"),
    service=Depends(get_scoring_service),
):
    start = time.time()
    application_id, form_data = _unwrap(body)

    result = service.calculate(form_data, use_cache=use_cache)
    audit = service.build_audit_record(result, form_data, application_id=application_id)

    logger.info(
        f"Scored application {application_id or '-'}: "
        f"{result.overall_score:.2f} ({result.certification_level.value})"
    )

    return CalculateResponse(
        success=True,
        data=result,
        audit=audit,
        duration_seconds=round(time.time() - start, 4),
    )


# =====================================================================
# POST /api/v1/scoring/preview
# =====================================================================

@router.post(
    "/scoring/preview",
    response_model=PillarPreviewResponse,
    summary="Preview one pillar's score",
)
async def preview_pillar(
    request: PillarPreviewRequest,
    service=Depends(get_scoring_service),
):
    return service.preview_pillar(request.pillar_id, request.pillar_data)


# =====================================================================
# Validation
# NOTE: "/scoring/validate" is declared before "/scoring/validate/{pillar_id}".
# =====================================================================

@router.post(
    "/scoring/validate",
    response_model=ApplicationValidationResult,
    summary="Validate all pillars of an application",
)
async def validate_application(
    body: Any = Body(...),
    service=Depends(get_validation_service),
):
    _, form_data = _unwrap(body)
    return service.validate_application(form_data)


@router.post(
    "/scoring/validate/{pillar_id}",
    response_model=ValidationResult,
    summary="Validate one pillar's responses and evidence",
)
async def validate_pillar(
    pillar_id: int = Path(..., description="Pillar number 1-6"),
    pillar_data: Any = Body(None),
    service=Depends(get_validation_service),
):
    return service.validate_pillar(pillar_id, pillar_data)


@router.post(
    "/scoring/progress/{pillar_id}",
    response_model=PillarProgress,
    summary="Completion percentage and running score for one pillar",
)
async def pillar_progress(
    pillar_id: int = Path(..., description="Pillar number 1-6"),
    pillar_data: Any = Body(None),
    service=Depends(get_validation_service),
):
    return service.calculate_pillar_progress(pillar_id, pillar_data)


# =====================================================================
# GET /api/v1/scoring/rating
# =====================================================================

@router.get(
    "/scoring/rating",
    response_model=CertificationResponse,
    summary="Certification level and star rating for a score",
)
async def get_rating(
    score: float = Query(..., ge=0, le=100, description="Overall score 0-100"),
    service=Depends(get_scoring_service),
):
    thresholds = service.engine.thresholds
    return CertificationResponse(
        score=score,
        certification_level=determine_certification_level(score, thresholds),
        rating=get_rating_info(score),
    )
