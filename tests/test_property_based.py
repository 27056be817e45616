# tests/test_property_based.py
"""
Property-Based Tests - scoring invariants over arbitrary input

Hypothesis drives random responses (numbers, flags, text, junk) through
normalization and aggregation; every score must stay inside [0, 100],
the overall score must equal the six-pillar mean, and certification
must be monotonic in the score.
"""

import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from app.models.enumerations import CertificationLevel
from app.scoring.certification import determine_certification_level, get_rating_info
from app.scoring.indicator_catalog import get_indicator_catalog
from app.scoring.normalization import normalize
from app.scoring.pillar_structure import PILLAR_IDS
from app.scoring.scoring_engine import ScoringEngine, pillar_key

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

INDICATOR_IDS = get_indicator_catalog().indicator_ids()

raw_value_st = st.one_of(
    st.none(),
    st.booleans(),
    st.integers(min_value=-10 ** 6, max_value=10 ** 6),
    st.floats(allow_nan=True, allow_infinity=True),
    st.text(max_size=12),
    st.builds(lambda a, b: f"{a}:{b}", st.integers(0, 50), st.integers(0, 50)),
)

indicator_id_st = st.one_of(
    st.sampled_from(INDICATOR_IDS),
    st.text(max_size=6),
)

score_st = st.floats(min_value=0.0, max_value=100.0, allow_nan=False, allow_infinity=False)


@st.composite
def pillar_data_st(draw):
    return draw(st.dictionaries(
        indicator_id_st,
        st.one_of(raw_value_st, st.fixed_dictionaries({"value": raw_value_st})),
        max_size=8,
    ))


@st.composite
def form_data_st(draw):
    pillars = draw(st.lists(st.sampled_from(PILLAR_IDS), unique=True, max_size=6))
    return {pillar_key(p): draw(pillar_data_st()) for p in pillars}


ENGINE = ScoringEngine()

LEVEL_RANK = {
    CertificationLevel.NOT_CERTIFIED: 0,
    CertificationLevel.CERTIFIED: 1,
    CertificationLevel.GOLD: 2,
}


# ---------------------------------------------------------------------------
# Normalization
# ---------------------------------------------------------------------------

@given(indicator_id=indicator_id_st, raw=raw_value_st)
@settings(max_examples=300)
def test_normalized_score_in_bounds(indicator_id, raw):
    score = normalize(indicator_id, raw)
    assert not math.isnan(score)
    assert 0.0 <= score <= 100.0


@given(indicator_id=indicator_id_st, raw=raw_value_st)
@settings(max_examples=100)
def test_normalize_is_deterministic(indicator_id, raw):
    assert normalize(indicator_id, raw) == normalize(indicator_id, raw)


# ---------------------------------------------------------------------------
# Aggregation
# ---------------------------------------------------------------------------

@given(form=form_data_st())
@settings(max_examples=150, deadline=None)
def test_overall_is_mean_of_pillars(form):
    result = ENGINE.process_form_data(form)
    assert len(result.pillars) == 6
    mean = sum(p.average_score for p in result.pillars) / 6
    assert result.overall_score == pytest.approx(mean)
    assert 0.0 <= result.overall_score <= 100.0


@given(form=form_data_st())
@settings(max_examples=100, deadline=None)
def test_result_is_consistent_with_thresholds(form):
    result = ENGINE.process_form_data(form)
    assert result.certification_level == determine_certification_level(result.overall_score)
    assert result.recommendations


@given(pillar_data=pillar_data_st())
@settings(max_examples=150, deadline=None)
def test_pillar_average_within_indicator_range(pillar_data):
    pillar = ENGINE.process_pillar_data(1, pillar_data)
    scores = [r.normalized_score for r in pillar.indicators]
    if scores:
        assert min(scores) - 1e-9 <= pillar.average_score <= max(scores) + 1e-9
    else:
        assert pillar.average_score == 0.0


# ---------------------------------------------------------------------------
# Certification
# ---------------------------------------------------------------------------

@given(a=score_st, b=score_st)
@settings(max_examples=300)
def test_certification_is_monotonic(a, b):
    low, high = sorted((a, b))
    assert LEVEL_RANK[determine_certification_level(low)] <= LEVEL_RANK[determine_certification_level(high)]


@given(a=score_st, b=score_st)
@settings(max_examples=300)
def test_rating_is_monotonic(a, b):
    low, high = sorted((a, b))
    assert get_rating_info(low).stars <= get_rating_info(high).stars
