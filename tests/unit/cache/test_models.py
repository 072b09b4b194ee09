# tests/unit/cache/test_models.py — v1
"""Tests for cache/models.py — stored records."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from aidetector.cache.models import AnalysisRecord, HistoryItem
from aidetector.core.models import Platform


def _record(**overrides) -> AnalysisRecord:
    fields = dict(
        fingerprint="f" * 64,
        platform=Platform.TWITTER,
        final_score=7,
        confidence=0.93,
        label="likely_ai",
        llm_score=8,
        heuristic_score=6,
        signals=["ai_vocabulary"],
    )
    fields.update(overrides)
    return AnalysisRecord(**fields)


class TestAnalysisRecord:
    def test_defaults(self):
        record = _record()
        assert len(record.id) == 32
        assert record.created_at.tzinfo is not None
        assert record.author is None

    def test_ids_unique(self):
        assert _record().id != _record().id

    def test_to_result(self):
        record = _record()
        result = record.to_result()
        assert result.cached is True
        assert result.score == 7
        assert result.llm_score == 8
        assert result.heuristic_score == 6
        assert result.record_id == record.id
        assert result.fingerprint == record.fingerprint

    def test_to_result_not_cached(self):
        assert _record().to_result(cached=False).cached is False

    def test_to_result_copies_signals(self):
        record = _record()
        record.to_result().signals.append("extra")
        assert record.signals == ["ai_vocabulary"]

    def test_score_bounds(self):
        with pytest.raises(ValidationError):
            _record(final_score=11)


class TestHistoryItem:
    def test_preview_defaults_empty(self):
        item = HistoryItem(**_record().model_dump())
        assert item.content_preview == ""
