"""
Custom Exceptions - IIICI Certification Scoring Service
app/core/exceptions.py

Raised by the service and HTTP layers. The scoring engine itself never
raises for malformed responses; it degrades to zero scores.
"""


class ScoringException(Exception):
    """Base exception for scoring service operations."""

    error_code = "SCORING_ERROR"
    status_code = 500

    def __init__(self, message: str = "Scoring operation failed"):
        self.message = message
        super().__init__(message)


class InvalidPillarException(ScoringException):
    """Pillar id outside the six assessment pillars."""

    error_code = "INVALID_PILLAR"
    status_code = 422

    def __init__(self, pillar_id):
        self.pillar_id = pillar_id
        super().__init__(f"Pillar {pillar_id} does not exist; expected 1-6")


class IndicatorNotFoundException(ScoringException):
    """Indicator code not present in the catalog."""

    error_code = "INDICATOR_NOT_FOUND"
    status_code = 404

    def __init__(self, indicator_id: str):
        self.indicator_id = indicator_id
        super().__init__(f"Indicator {indicator_id} not found")


class PillarNotFoundException(ScoringException):
    """Pillar number not present in the assessment structure."""

    error_code = "PILLAR_NOT_FOUND"
    status_code = 404

    def __init__(self, pillar_id):
        self.pillar_id = pillar_id
        super().__init__(f"Pillar {pillar_id} not found")


class InvalidFormDataException(ScoringException):
    """Request body is not a form-data object."""

    error_code = "INVALID_FORM_DATA"
    status_code = 422

    def __init__(self, message: str = "Form data must be a JSON object keyed by pillar_1 .. pillar_6"):
        super().__init__(message)
