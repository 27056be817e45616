from enum import Enum


class MeasurementUnit(str, Enum):
    SCORE = "Score"            # bounded rubric score, e.g. (0-3) or (1-5)
    PERCENTAGE = "Percentage"  # already on a 0-100 scale
    BINARY = "Binary"          # yes / no
    HOURS = "Hours"            # hours per employee, 40h = full score
    NUMBER = "Number"          # raw count
    RATIO = "Ratio"            # 0-1 fraction or "a:b"


class CertificationLevel(str, Enum):
    GOLD = "Gold"
    CERTIFIED = "Certified"
    NOT_CERTIFIED = "Not Certified"

    @property
    def audit_code(self) -> str:
        """Code stored on persisted audit rows (GOLD / CERTIFIED / NOT_CERTIFIED)."""
        return self.name


class RatingLevel(str, Enum):
    LEADING = "Leading"
    OPTIMIZING = "Optimizing"
    STRUCTURED = "Structured"
    DEVELOPING = "Developing"
    INITIATING = "Initiating"

