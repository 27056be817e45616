# tests/conftest.py

"""
Pytest Fixtures - Shared engine, client and form-data fixtures

FORM DATA REFERENCE:
- single_indicator_form: only 1.1.1 = 75 (Percentage)  → overall 12.5
- full_marks_form:       every indicator at its maximum → overall 100
- evidence samples:      text / link / file bundles, valid and invalid
"""

import os

# The score cache is exercised with mocks; never reach for a live Redis.
os.environ.setdefault("CACHE_ENABLED", "false")
os.environ.setdefault("LOG_FORMAT", "console")

import pytest
from fastapi.testclient import TestClient

from app.main import app
from app.models.enumerations import MeasurementUnit
from app.scoring.indicator_catalog import get_indicator_catalog
from app.scoring.pillar_structure import PILLAR_IDS
from app.scoring.scoring_engine import ScoringEngine, pillar_key
from app.services.cache import reset_cache


# =============================================================================
# FASTAPI TEST CLIENT FIXTURE
# =============================================================================

@pytest.fixture(scope="module")
def client():
    """Create a TestClient for FastAPI application."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(autouse=True)
def _fresh_cache_singleton():
    reset_cache()
    yield
    reset_cache()


# =============================================================================
# ENGINE FIXTURES
# =============================================================================

@pytest.fixture
def engine():
    """Engine with default catalog, structure and thresholds."""
    return ScoringEngine()


@pytest.fixture
def catalog():
    return get_indicator_catalog()


# =============================================================================
# EVIDENCE FIXTURES
# =============================================================================

@pytest.fixture
def text_evidence():
    return {"text": {"description": "Board minutes approving the innovation charter"}}


@pytest.fixture
def link_evidence():
    return {"link": {"url": "https://example.com/innovation-report.pdf"}}


@pytest.fixture
def file_evidence():
    return {"file": {"fileName": "policy.pdf", "fileSize": 2048, "fileType": "application/pdf"}}


@pytest.fixture
def invalid_link_evidence():
    return {"link": {"url": "not-a-url"}}


# =============================================================================
# FORM DATA FIXTURES
# =============================================================================

def max_value(metadata):
    """A response that normalizes to 100 for the indicator."""
    unit = metadata.measurement_unit
    if unit == MeasurementUnit.SCORE:
        return metadata.score_ceiling
    if unit == MeasurementUnit.BINARY:
        return 1
    if unit == MeasurementUnit.HOURS:
        return 40
    if unit == MeasurementUnit.RATIO:
        return 1
    return 100


@pytest.fixture
def single_indicator_form():
    return {"pillar_1": {"1.1.1": {"value": 75}}}


@pytest.fixture
def empty_form():
    return {pillar_key(p): {} for p in PILLAR_IDS}


@pytest.fixture
def full_marks_form(catalog, text_evidence):
    form = {pillar_key(p): {} for p in PILLAR_IDS}
    for metadata in catalog:
        form[pillar_key(metadata.pillar_id)][metadata.indicator_id] = {
            "value": max_value(metadata),
            "evidence": text_evidence,
        }
    return form
