# src/api/models.py — v2
"""API-level models: AnalyzeRequest, AnalyzeResponse, HistoryPage."""

from __future__ import annotations

from pydantic import BaseModel, Field

from aidetector.cache.models import HistoryItem
from aidetector.core.models import AnalysisResult, Document, Platform


class AnalyzeRequest(BaseModel):
    """Incoming analysis request.

    Content is kept exactly as received: length and blankness are checked by
    the orchestrator, and the fingerprint is taken over the raw text.
    """

    content: str
    platform: Platform
    post_id: str | None = None
    author: str | None = None

    def to_document(self) -> Document:
        return Document(
            content=self.content,
            platform=self.platform,
            post_id=self.post_id,
            author=self.author,
        )


class Breakdown(BaseModel):
    """Per-judge detail behind a final score."""

    llm_score: int | None = None
    heuristic_score: int
    signals: list[str] = Field(default_factory=list)


class AnalyzeResponse(BaseModel):
    """Return value of facade.analyze()."""

    score: int = Field(ge=0, le=10)
    confidence: float = Field(ge=0.0, le=1.0)
    label: str
    breakdown: Breakdown

    @classmethod
    def from_result(cls, result: AnalysisResult) -> AnalyzeResponse:
        return cls(
            score=result.score,
            confidence=result.confidence,
            label=result.label,
            breakdown=Breakdown(
                llm_score=result.llm_score,
                heuristic_score=result.heuristic_score,
                signals=list(result.signals),
            ),
        )


class HistoryPage(BaseModel):
    """One page of stored analyses, newest first."""

    items: list[HistoryItem] = Field(default_factory=list)
    total: int = 0
    limit: int
    offset: int
