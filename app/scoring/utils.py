"""
Score Utilities
app/scoring/utils.py

Float helpers shared by the normalization and aggregation steps.
Every helper is NaN-safe: a NaN input never leaks into a score.
"""

import math
from typing import Iterable


SCORE_MIN = 0.0
SCORE_MAX = 100.0


def clamp(
    value: float,
    min_val: float = SCORE_MIN,
    max_val: float = SCORE_MAX,
) -> float:
    """Clamp value to range [min_val, max_val]. NaN clamps to min_val."""
    if math.isnan(value):
        return min_val
    return max(min_val, min(max_val, value))


def safe_mean(values: Iterable[float]) -> float:
    """
    Arithmetic mean with zero-division protection.

    Returns 0.0 for an empty iterable. NaN members count as 0.
    """
    total = 0.0
    count = 0
    for v in values:
        total += 0.0 if math.isnan(v) else v
        count += 1
    if count == 0:
        return 0.0
    return total / count


def fixed_mean(values: Iterable[float], divisor: int) -> float:
    """
    Sum of values divided by a fixed divisor.

    Used where every slot contributes even when absent (the six pillars).
    """
    if divisor <= 0:
        raise ValueError("divisor must be positive")
    return sum(0.0 if math.isnan(v) else v for v in values) / divisor
