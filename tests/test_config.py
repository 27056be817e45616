# tests/test_config.py

"""
Settings Tests - defaults and validators
"""

import pytest
from pydantic import ValidationError

from app.config import Settings
from app.core.dependencies import get_scoring_engine


def test_defaults():
    s = Settings(_env_file=None)
    assert s.GOLD_THRESHOLD == 80.0
    assert s.CERTIFIED_THRESHOLD == 60.0
    assert s.CACHE_TTL_SCORES == 3600


def test_gold_must_exceed_certified():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, GOLD_THRESHOLD=60, CERTIFIED_THRESHOLD=60)


def test_threshold_range():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, GOLD_THRESHOLD=120)


def test_production_forbids_debug():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, APP_ENV="production", DEBUG=True)


def test_engine_uses_configured_thresholds():
    engine = get_scoring_engine()
    assert engine.thresholds.gold == 80.0
    assert engine.thresholds.certified == 60.0
