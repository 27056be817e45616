# app/scoring/normalization.py
"""
Indicator Normalization
-----------------------
Maps one raw indicator response onto the common [0, 100] scale.

Formulas by measurement unit (result always clamped to [0, 100]):
    Score       value / max_score × 100        (max_score defaults to 5)
    Percentage  value
    Binary      100 if value != 0 else 0
    Hours       value / 40 × 100
    Number      value / 100 × 100
    Ratio       value × 100, or a / (a + b) × 100 for "a:b" text

Missing responses, unknown indicators and non-numeric input all score 0.
Infinite values are clamped like any other out-of-range number.
"""

import math
from typing import Any, Optional

import structlog

from app.models.enumerations import MeasurementUnit
from app.scoring.indicator_catalog import (
    IndicatorCatalog,
    IndicatorMetadata,
    get_indicator_catalog,
)
from app.scoring.utils import clamp
from app.scoring.values import (
    FlagValue,
    IndicatorValue,
    TextValue,
    coerce_value,
    to_number,
)

logger = structlog.get_logger(__name__)

HOURS_FULL_SCORE = 40.0
NUMBER_FULL_SCORE = 100.0


def _ratio_from_text(text: str) -> float:
    """Parse "proactive:reactive" into a 0-1 fraction. NaN if malformed."""
    parts = text.split(":")
    if len(parts) != 2:
        return math.nan
    try:
        proactive, reactive = float(parts[0]), float(parts[1])
    except ValueError:
        return math.nan
    if math.isnan(proactive) or math.isnan(reactive):
        return math.nan
    if math.isinf(proactive) and math.isfinite(reactive):
        return 1.0 if proactive > 0 else 0.0
    total = proactive + reactive
    if not math.isfinite(total) or total <= 0:
        return 0.0
    return proactive / total


def normalize_value(
    metadata: Optional[IndicatorMetadata],
    value: Optional[IndicatorValue],
) -> float:
    """Pure dispatch over (measurement unit, value kind)."""
    if metadata is None or value is None:
        return 0.0

    unit = metadata.measurement_unit

    if unit == MeasurementUnit.BINARY:
        if isinstance(value, FlagValue):
            return 100.0 if value.flag else 0.0
        number = to_number(value)
        if math.isnan(number):
            return 0.0
        return 100.0 if number != 0 else 0.0

    if unit == MeasurementUnit.RATIO and isinstance(value, TextValue) and ":" in value.text:
        return clamp(_ratio_from_text(value.text) * 100)

    number = to_number(value)
    if math.isnan(number):
        return 0.0

    if unit == MeasurementUnit.SCORE:
        raw = number / metadata.score_ceiling * 100
    elif unit == MeasurementUnit.PERCENTAGE:
        raw = number
    elif unit == MeasurementUnit.HOURS:
        raw = number / HOURS_FULL_SCORE * 100
    elif unit == MeasurementUnit.NUMBER:
        raw = number / NUMBER_FULL_SCORE * 100
    elif unit == MeasurementUnit.RATIO:
        raw = number * 100
    else:
        return 0.0

    return clamp(raw)


def normalize(
    indicator_id: str,
    raw_value: Any,
    catalog: Optional[IndicatorCatalog] = None,
) -> float:
    """
    Normalize a raw indicator response to a score in [0, 100].

    Args:
        indicator_id: Hierarchical indicator code, e.g. "2.2.3".
        raw_value: Number, bool or string response. None / "" score 0.
        catalog: Metadata lookup; defaults to the process-wide catalog.

    Returns:
        Normalized score in [0, 100]. Never raises.

    Examples:
        >>> normalize("2.2.3", 20)   # Hours
        50.0
        >>> normalize("9.9.9", 80)   # unknown indicator
        0.0
    """
    value = coerce_value(raw_value)
    if value is None:
        return 0.0

    metadata = (catalog or get_indicator_catalog()).get(indicator_id)
    if metadata is None:
        logger.debug("unknown_indicator", indicator_id=indicator_id)
        return 0.0

    return normalize_value(metadata, value)
