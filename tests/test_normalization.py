# tests/test_normalization.py

"""
Normalization Tests - one raw response → score on the 0-100 scale
"""

import math

import pytest

from app.models.enumerations import MeasurementUnit
from app.scoring.indicator_catalog import IndicatorCatalog, make_indicator
from app.scoring.normalization import normalize, normalize_value
from app.scoring.values import (
    FlagValue,
    NumberValue,
    TextValue,
    coerce_value,
    is_missing,
    to_number,
    to_raw,
)


# =============================================================================
# UNIT FORMULAS (default catalog)
# =============================================================================

class TestUnitFormulas:

    @pytest.mark.parametrize("raw, expected", [(75, 75.0), (0, 0.0), (100, 100.0), (130, 100.0), (-5, 0.0)])
    def test_percentage(self, raw, expected):
        assert normalize("1.1.1", raw) == expected

    def test_score_uses_max_score(self):
        # 1.1.3 is a 0-2 score
        assert normalize("1.1.3", 1) == pytest.approx(50.0)
        assert normalize("1.1.3", 2) == pytest.approx(100.0)

    def test_score_five_point(self):
        assert normalize("2.1.3", 4) == pytest.approx(80.0)

    def test_hours(self):
        assert normalize("2.2.3", 20) == pytest.approx(50.0)
        assert normalize("2.2.3", 40) == pytest.approx(100.0)
        assert normalize("2.2.3", 80) == 100.0

    def test_number_is_capped_at_100(self):
        assert normalize("2.2.1", 50) == pytest.approx(50.0)
        assert normalize("2.2.1", 150) == 100.0

    def test_ratio_fraction(self):
        assert normalize("4.1.2", 0.25) == pytest.approx(25.0)

    def test_ratio_text_pair(self):
        assert normalize("4.1.2", "3:1") == pytest.approx(75.0)

    def test_ratio_zero_pair(self):
        assert normalize("4.1.2", "0:0") == 0.0

    def test_ratio_malformed_pair(self):
        assert normalize("4.1.2", "a:b") == 0.0

    def test_ratio_pair_with_huge_proactive(self):
        assert normalize("4.1.2", "1e400:3") == 100.0
        assert normalize("4.1.2", "-1e400:3") == 0.0

    @pytest.mark.parametrize("raw, expected", [(1, 100.0), (0, 0.0), (True, 100.0), (False, 0.0), ("1", 100.0)])
    def test_binary(self, raw, expected):
        assert normalize("1.2.1", raw) == expected

    def test_binary_non_numeric_text(self):
        assert normalize("1.2.1", "yes") == 0.0


# =============================================================================
# DEGRADED INPUT
# =============================================================================

class TestDegradedInput:

    @pytest.mark.parametrize("raw", [None, "", "   "])
    def test_missing_scores_zero(self, raw):
        assert normalize("1.1.1", raw) == 0.0

    def test_unknown_indicator_scores_zero(self):
        assert normalize("9.9.9", 80) == 0.0

    def test_non_numeric_text_scores_zero(self):
        assert normalize("1.1.1", "abc") == 0.0

    def test_numeric_text_is_parsed(self):
        assert normalize("1.1.1", " 42 ") == pytest.approx(42.0)

    def test_nan_scores_zero(self):
        assert normalize("1.1.1", math.nan) == 0.0

    @pytest.mark.parametrize("indicator_id", ["1.1.1", "1.1.3", "1.2.1", "2.2.3", "2.2.1", "4.1.2"])
    @pytest.mark.parametrize("raw", [math.inf, 10 ** 400, "1e400", "inf"])
    def test_huge_values_clamp_to_full_score(self, indicator_id, raw):
        assert normalize(indicator_id, raw) == 100.0

    @pytest.mark.parametrize("raw", [-math.inf, -(10 ** 400), "-1e400"])
    def test_huge_negative_values_clamp_to_zero(self, raw):
        assert normalize("1.1.1", raw) == 0.0

    def test_indicator_id_is_trimmed(self):
        assert normalize(" 1.1.1 ", 60) == pytest.approx(60.0)

    def test_non_string_indicator_id(self):
        assert normalize(111, 60) == 0.0


# =============================================================================
# CUSTOM CATALOG
# =============================================================================

class TestCustomCatalog:

    def test_score_without_max_defaults_to_five(self):
        metadata = make_indicator("7.1.1", MeasurementUnit.SCORE)
        assert normalize_value(metadata, NumberValue(2.5)) == pytest.approx(50.0)

    def test_catalog_argument_is_used(self):
        catalog = IndicatorCatalog.from_rows([("7.1.1", MeasurementUnit.HOURS, None)])
        assert normalize("7.1.1", 10, catalog) == pytest.approx(25.0)
        assert normalize("1.1.1", 10, catalog) == 0.0

    def test_missing_metadata(self):
        assert normalize_value(None, NumberValue(10)) == 0.0


# =============================================================================
# TAGGED VALUES
# =============================================================================

class TestValues:

    def test_bool_becomes_flag(self):
        assert coerce_value(True) == FlagValue(True)

    def test_int_becomes_number(self):
        assert coerce_value(3) == NumberValue(3.0)

    def test_string_is_stripped(self):
        assert coerce_value("  3:1 ") == TextValue("3:1")

    def test_tagged_value_passes_through(self):
        value = NumberValue(1.0)
        assert coerce_value(value) is value

    def test_missing(self):
        assert is_missing(None)
        assert is_missing(" \t")
        assert not is_missing(0)
        assert coerce_value("") is None

    def test_to_number(self):
        assert to_number(FlagValue(False)) == 0.0
        assert to_number(TextValue("2.5")) == 2.5
        assert math.isnan(to_number(TextValue("x")))
        assert math.isnan(to_number(None))

    def test_to_raw(self):
        assert to_raw(NumberValue(math.inf)) is None
        assert to_raw(FlagValue(True)) is True
        assert to_raw(TextValue("3:1")) == "3:1"
        assert to_raw(None) is None
