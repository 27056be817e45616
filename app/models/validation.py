from typing import List

from pydantic import Field

from app.models.scoring import CamelModel


class ValidationResult(CamelModel):
    """Outcome of validating one pillar's responses."""
    pillar_id: int = Field(..., ge=1, le=6)
    is_valid: bool
    missing_items: List[str] = Field(default_factory=list)


class ApplicationValidationResult(CamelModel):
    is_valid: bool
    pillars: List[ValidationResult]
    missing_items: List[str] = Field(default_factory=list)


class PillarProgress(CamelModel):
    """Completion percentage and running score for a pillar being filled in."""
    pillar_id: int = Field(..., ge=1, le=6)
    completion: float = Field(..., ge=0, le=100)
    score: float = Field(..., ge=0, le=100)
    answered: int = 0
    total: int = 0

