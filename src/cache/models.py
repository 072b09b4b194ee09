# src/cache/models.py — v2
"""Persisted analysis models: AnalysisRecord, HistoryItem."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone

from pydantic import BaseModel, Field

from aidetector.core.models import AnalysisResult, Platform

PREVIEW_CHARS = 150


def _new_id() -> str:
    return uuid.uuid4().hex


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class AnalysisRecord(BaseModel):
    """One stored analysis, written once per fingerprint and never mutated."""

    id: str = Field(default_factory=_new_id)
    fingerprint: str
    platform: Platform
    post_id: str | None = None
    author: str | None = None
    final_score: int = Field(ge=0, le=10)
    confidence: float = Field(ge=0.0, le=1.0)
    label: str
    llm_score: int | None = Field(default=None, ge=0, le=10)
    heuristic_score: int = Field(ge=0, le=10)
    signals: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=_utcnow)

    def to_result(self, cached: bool = True) -> AnalysisResult:
        """Rebuild the orchestrator result this record was written from."""
        return AnalysisResult(
            fingerprint=self.fingerprint,
            score=self.final_score,
            confidence=self.confidence,
            label=self.label,
            llm_score=self.llm_score,
            heuristic_score=self.heuristic_score,
            signals=list(self.signals),
            cached=cached,
            record_id=self.id,
        )


class HistoryItem(AnalysisRecord):
    """Record plus a preview of the stored text, for history listings."""

    content_preview: str = ""
