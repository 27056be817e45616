"""
Indicator Values
app/scoring/values.py

Raw indicator responses arrive as loosely typed JSON scalars. They are
converted once, at the boundary, into a tagged value so normalization can
dispatch on (measurement unit, value kind) instead of re-coercing.

    NumberValue  — int / float input
    FlagValue    — bool input (checkbox style answers)
    TextValue    — string input ("75", "3:1", "yes")
"""

import math
from dataclasses import dataclass
from typing import Any, Optional, Union


@dataclass(frozen=True)
class NumberValue:
    number: float


@dataclass(frozen=True)
class FlagValue:
    flag: bool


@dataclass(frozen=True)
class TextValue:
    text: str


IndicatorValue = Union[NumberValue, FlagValue, TextValue]

_TAGGED = (NumberValue, FlagValue, TextValue)


def is_missing(raw: Any) -> bool:
    """None and empty / whitespace-only strings count as no answer."""
    if raw is None:
        return True
    if isinstance(raw, str) and raw.strip() == "":
        return True
    return False


def coerce_value(raw: Any) -> Optional[IndicatorValue]:
    """
    Wrap a raw response in its tagged form.

    Returns None when the response is missing. Never raises.
    """
    if is_missing(raw):
        return None
    if isinstance(raw, _TAGGED):
        return raw
    # bool is a subclass of int, so check it first
    if isinstance(raw, bool):
        return FlagValue(raw)
    if isinstance(raw, (int, float)):
        try:
            return NumberValue(float(raw))
        except OverflowError:
            return NumberValue(math.inf if raw > 0 else -math.inf)
    if isinstance(raw, str):
        return TextValue(raw.strip())
    return TextValue(str(raw))


def to_number(value: Optional[IndicatorValue]) -> float:
    """Numeric view of a tagged value. Unparsable or missing gives NaN."""
    if value is None:
        return math.nan
    if isinstance(value, FlagValue):
        return 1.0 if value.flag else 0.0
    if isinstance(value, NumberValue):
        return value.number
    try:
        return float(value.text)
    except ValueError:
        return math.nan


def to_raw(value: Optional[IndicatorValue]) -> Union[float, bool, str, None]:
    """Plain JSON scalar for a tagged value (used in result payloads)."""
    if value is None:
        return None
    if isinstance(value, FlagValue):
        return value.flag
    if isinstance(value, NumberValue):
        return None if not math.isfinite(value.number) else value.number
    return value.text
