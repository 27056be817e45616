"""
Validation Service — Response Completeness Checks
app/services/validation_service.py

Combines the engine's evidence rules into user-facing messages:

  - a response with no value is incomplete
  - a response whose value triggers the indicator's evidence policy must
    carry a valid evidence bundle

The engine only answers yes/no questions; wording lives here.
"""

import logging
from functools import lru_cache
from typing import Any, List, Mapping, Optional

from app.core.dependencies import get_scoring_engine
from app.core.exceptions import InvalidPillarException
from app.models.validation import (
    ApplicationValidationResult,
    PillarProgress,
    ValidationResult,
)
from app.scoring.pillar_structure import PILLAR_IDS
from app.scoring.scoring_engine import ScoringEngine, pillar_key
from app.scoring.utils import safe_mean
from app.scoring.values import is_missing

logger = logging.getLogger(__name__)


def no_indicators_message(pillar_id: int) -> str:
    return f"No indicators found for Pillar {pillar_id}"


def no_value_message(indicator_id: str) -> str:
    return f"Indicator {indicator_id} - No value provided"


def evidence_required_message(indicator_id: str) -> str:
    return f"Indicator {indicator_id} - Evidence required"


def evidence_invalid_message(indicator_id: str) -> str:
    return f"Indicator {indicator_id} - Evidence content is invalid"


def _is_empty_bundle(evidence: Any) -> bool:
    if evidence is None:
        return True
    if isinstance(evidence, Mapping):
        return all(evidence.get(k) is None for k in ("text", "link", "file"))
    return False


class ValidationService:
    """Checks pillar responses against value and evidence rules."""

    def __init__(self, engine: Optional[ScoringEngine] = None):
        self.engine = engine or get_scoring_engine()

    def _check_pillar(self, pillar_id: int) -> None:
        if pillar_id not in PILLAR_IDS:
            raise InvalidPillarException(pillar_id)

    def validate_pillar(self, pillar_id: int, pillar_data: Any) -> ValidationResult:
        self._check_pillar(pillar_id)
        entries = self.engine.pillar_entries(pillar_data)

        missing: List[str] = []
        if not entries:
            missing.append(no_indicators_message(pillar_id))

        for indicator_id, entry in entries.items():
            value = entry.get("value")
            if is_missing(value):
                missing.append(no_value_message(indicator_id))
                continue

            if not self.engine.is_evidence_required(indicator_id, value):
                continue

            evidence = entry.get("evidence")
            if _is_empty_bundle(evidence):
                missing.append(evidence_required_message(indicator_id))
            elif not self.engine.validate_evidence(evidence):
                missing.append(evidence_invalid_message(indicator_id))

        result = ValidationResult(
            pillar_id=pillar_id,
            is_valid=not missing,
            missing_items=missing,
        )
        logger.info(
            f"Pillar {pillar_id} validation: valid={result.is_valid}, "
            f"missing={len(missing)}"
        )
        return result

    def validate_application(self, form_data: Any) -> ApplicationValidationResult:
        if not isinstance(form_data, Mapping):
            form_data = {}
        results = [
            self.validate_pillar(pillar_id, form_data.get(pillar_key(pillar_id)))
            for pillar_id in PILLAR_IDS
        ]
        missing = [item for r in results for item in r.missing_items]
        return ApplicationValidationResult(
            is_valid=all(r.is_valid for r in results),
            pillars=results,
            missing_items=missing,
        )

    def calculate_pillar_progress(self, pillar_id: int, pillar_data: Any) -> PillarProgress:
        """
        Completion and running score for a pillar.

        completion = share of the pillar's structured indicators that have a
                     value and satisfy their evidence rule (0-100)
        score      = mean normalized score over the answered indicators
        """
        self._check_pillar(pillar_id)
        entries = self.engine.pillar_entries(pillar_data)
        indicator_ids = self.engine.structure.indicators_for_pillar(pillar_id)

        completed = 0
        scores: List[float] = []
        for indicator_id in indicator_ids:
            entry = entries.get(indicator_id)
            if entry is None or is_missing(entry.get("value")):
                continue
            value = entry["value"]
            required = self.engine.is_evidence_required(indicator_id, value)
            if not required or self.engine.validate_evidence(entry.get("evidence")):
                completed += 1
            scores.append(self.engine.normalize(indicator_id, value))

        total = len(indicator_ids)
        completion = (completed / total) * 100 if total else 0.0
        return PillarProgress(
            pillar_id=pillar_id,
            completion=completion,
            score=safe_mean(scores),
            answered=len(scores),
            total=total,
        )


@lru_cache
def get_validation_service() -> ValidationService:
    return ValidationService()
