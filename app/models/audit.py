from datetime import datetime, timezone
from typing import Optional
from uuid import UUID, uuid4

from pydantic import Field

from app.models.enumerations import RatingLevel
from app.models.scoring import CamelModel, OverallResult


class ScoreAuditRecord(CamelModel):
    """
    Snapshot of one score calculation, ready to be stored as an audit row.
    """

    id: UUID = Field(
        default_factory=uuid4,
        description="Unique audit record identifier"
    )

    application_id: Optional[str] = Field(
        default=None,
        max_length=255,
        description="Application the calculation belongs to, if known"
    )

    input_hash: str = Field(
        ...,
        min_length=64,
        max_length=64,
        description="SHA-256 of the canonical JSON form data"
    )

    overall_score: float = Field(..., ge=0, le=100)

    certification_level: str = Field(
        ...,
        description="Audit code: GOLD, CERTIFIED or NOT_CERTIFIED"
    )

    rating_level: Optional[RatingLevel] = None

    calculated_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Calculation timestamp (UTC)"
    )

    snapshot: OverallResult = Field(
        ...,
        description="Full copy of the computed result"
    )
