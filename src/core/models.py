# src/core/models.py — v2
"""Shared Pydantic domain models used across modules.

No module redefines these types — all imports come from core.models.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Platform(str, Enum):
    """Social platform a post was captured from."""

    TWITTER = "twitter"
    INSTAGRAM = "instagram"
    LINKEDIN = "linkedin"


# === INPUT ===


class Document(BaseModel):
    """A single post submitted for analysis. Immutable once received."""

    model_config = ConfigDict(frozen=True)

    content: str
    platform: Platform
    post_id: str | None = None
    author: str | None = None


# === JUDGE OUTPUTS ===


class HeuristicResult(BaseModel):
    """Output of the heuristic engine."""

    score: int = Field(ge=0, le=10)
    signals: list[str] = Field(default_factory=list)


class LlmResult(BaseModel):
    """Normalized opinion of an LLM judge."""

    score: int = Field(ge=0, le=10)
    confidence: float = Field(ge=0.0, le=1.0)


# === COMBINED OUTPUT ===


class AnalysisResult(BaseModel):
    """Return value of DetectionOrchestrator.analyze()."""

    fingerprint: str
    score: int = Field(ge=0, le=10)
    confidence: float = Field(ge=0.0, le=1.0)
    label: str
    llm_score: int | None = None
    heuristic_score: int = Field(ge=0, le=10)
    signals: list[str] = Field(default_factory=list)
    cached: bool = False
    record_id: str | None = None
