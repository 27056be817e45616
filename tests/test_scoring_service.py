# tests/test_scoring_service.py

"""
Scoring Service Tests - cache hits/misses, degradation, preview, audit snapshot
"""

import pytest
import redis
from unittest.mock import MagicMock

from app.core.exceptions import InvalidPillarException
from app.models.enumerations import CertificationLevel
from app.scoring.certification import CertificationThresholds
from app.scoring.scoring_engine import ScoringEngine
from app.services.cache import score_cache_key
from app.services.redis_cache import content_hash
from app.services.scoring_service import ScoringService


class DictCache:
    """In-memory stand-in for RedisCache."""

    def __init__(self):
        self.store = {}

    def get(self, key, model):
        return self.store.get(key)

    def set(self, key, value, ttl_seconds=None):
        self.store[key] = value

    def delete(self, key):
        self.store.pop(key, None)


@pytest.fixture
def mock_cache():
    cache = MagicMock()
    cache.get.return_value = None
    return cache


@pytest.fixture
def service(engine, mock_cache):
    return ScoringService(engine=engine, cache=mock_cache, ttl_seconds=120)


class TestCalculate:

    def test_cache_miss_computes_and_stores(self, service, mock_cache, single_indicator_form):
        result = service.calculate(single_indicator_form)

        key = service.cache_key(single_indicator_form)
        assert key.startswith("score:")
        mock_cache.get.assert_called_once()
        assert mock_cache.get.call_args.args[0] == key
        mock_cache.set.assert_called_once_with(key, result, 120)
        assert result.overall_score == pytest.approx(12.5)

    def test_cache_hit_skips_engine(self, engine, mock_cache, single_indicator_form):
        cached = engine.process_form_data(single_indicator_form)
        mock_cache.get.return_value = cached
        spy_engine = MagicMock(wraps=engine)
        service = ScoringService(engine=spy_engine, cache=mock_cache)

        assert service.calculate(single_indicator_form) is cached
        spy_engine.process_form_data.assert_not_called()
        mock_cache.set.assert_not_called()

    def test_use_cache_false_bypasses_cache(self, service, mock_cache, single_indicator_form):
        service.calculate(single_indicator_form, use_cache=False)
        mock_cache.get.assert_not_called()
        mock_cache.set.assert_not_called()

    def test_redis_read_error_falls_back_to_engine(self, service, mock_cache, single_indicator_form):
        mock_cache.get.side_effect = redis.ConnectionError("down")
        result = service.calculate(single_indicator_form)
        assert result.overall_score == pytest.approx(12.5)

    def test_redis_write_error_is_not_fatal(self, service, mock_cache, single_indicator_form):
        mock_cache.set.side_effect = redis.TimeoutError("slow")
        result = service.calculate(single_indicator_form)
        assert result.certification_level == CertificationLevel.NOT_CERTIFIED

    def test_no_cache_configured(self, engine, single_indicator_form):
        service = ScoringService(engine=engine, use_default_cache=False)
        assert service.cache is None
        assert service.calculate(single_indicator_form).overall_score == pytest.approx(12.5)

    def test_invalidate(self, service, mock_cache, single_indicator_form):
        service.invalidate(single_indicator_form)
        mock_cache.delete.assert_called_once_with(service.cache_key(single_indicator_form))

    def test_cache_key_includes_thresholds(self, service, single_indicator_form):
        strict = ScoringService(
            engine=ScoringEngine(thresholds=CertificationThresholds(gold=90, certified=75)),
            cache=MagicMock(),
        )
        assert service.cache_key(single_indicator_form) != strict.cache_key(single_indicator_form)
        assert service.cache_key(single_indicator_form) != score_cache_key(content_hash(single_indicator_form))

    def test_shared_cache_respects_each_engine_thresholds(self, engine):
        form = {f"pillar_{p}": {pid: {"value": 70}} for p, pid in
                zip(range(1, 7), ["1.1.1", "2.1.1", "3.1.2", "4.2.1", "5.1.2", "6.1.1"])}
        shared = DictCache()
        lenient = ScoringService(engine=engine, cache=shared)
        strict = ScoringService(
            engine=ScoringEngine(thresholds=CertificationThresholds(gold=90, certified=75)),
            cache=shared,
        )

        assert lenient.calculate(form).certification_level == CertificationLevel.CERTIFIED
        assert strict.calculate(form).certification_level == CertificationLevel.NOT_CERTIFIED
        assert len(shared.store) == 2


class TestContentHash:

    def test_key_order_does_not_matter(self):
        a = {"pillar_1": {"1.1.1": {"value": 75}, "1.1.2": {"value": 10}}}
        b = {"pillar_1": {"1.1.2": {"value": 10}, "1.1.1": {"value": 75}}}
        assert content_hash(a) == content_hash(b)

    def test_values_matter(self):
        assert content_hash({"pillar_1": {"1.1.1": 75}}) != content_hash({"pillar_1": {"1.1.1": 76}})

    def test_is_sha256_hex(self):
        digest = content_hash({})
        assert len(digest) == 64
        int(digest, 16)

    def test_mixed_key_types(self):
        assert len(content_hash({1: "a", "b": 2})) == 64


class TestPreview:

    def test_preview(self, service, mock_cache):
        response = service.preview_pillar(2, {"2.2.3": {"value": 20}, "2.2.1": {"value": 50}})
        assert response.success is True
        assert response.data.pillar_score == pytest.approx(50.0)
        assert [i.id for i in response.data.indicators] == ["2.2.3", "2.2.1"]
        mock_cache.get.assert_not_called()

    @pytest.mark.parametrize("pillar_id", [0, 7])
    def test_invalid_pillar(self, service, pillar_id):
        with pytest.raises(InvalidPillarException) as exc_info:
            service.preview_pillar(pillar_id, {})
        assert exc_info.value.status_code == 422


class TestAuditRecord:

    def test_build_audit_record(self, service, single_indicator_form):
        result = service.calculate(single_indicator_form)
        record = service.build_audit_record(result, single_indicator_form, application_id="app-1")

        assert record.application_id == "app-1"
        assert record.input_hash == content_hash(single_indicator_form)
        assert record.certification_level == "NOT_CERTIFIED"
        assert record.overall_score == pytest.approx(12.5)
        assert record.snapshot == result
        assert record.snapshot is not result
