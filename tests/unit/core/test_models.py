# tests/unit/core/test_models.py — v1
"""Tests for core/models.py — domain model validation."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from aidetector.core.models import Document, HeuristicResult, LlmResult, Platform


class TestDocument:
    def test_frozen(self):
        doc = Document(content="hello", platform=Platform.TWITTER)
        with pytest.raises(ValidationError):
            doc.content = "changed"

    def test_platform_from_string(self):
        assert Document(content="x", platform="linkedin").platform is Platform.LINKEDIN

    def test_unknown_platform(self):
        with pytest.raises(ValidationError):
            Document(content="x", platform="myspace")

    def test_content_kept_verbatim(self):
        assert Document(content="  padded \n", platform="twitter").content == "  padded \n"


class TestResults:
    def test_heuristic_score_bounds(self):
        with pytest.raises(ValidationError):
            HeuristicResult(score=11)

    def test_llm_confidence_bounds(self):
        with pytest.raises(ValidationError):
            LlmResult(score=5, confidence=1.5)
