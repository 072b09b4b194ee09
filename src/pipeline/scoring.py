# src/pipeline/scoring.py — v1
"""Score combination and label bucketing.

Combination weights the LLM opinion at 60% and the heuristic at 40%.
Confidence starts from a 0.3 floor because heuristic corroboration always
contributes, even when the LLM reports low confidence.
"""

from __future__ import annotations

from aidetector.core.models import HeuristicResult, LlmResult
from aidetector.core.numeric import clamp, round_half_up

LLM_WEIGHT = 0.6
HEURISTIC_WEIGHT = 0.4
CONFIDENCE_SCALE = 0.7
CONFIDENCE_FLOOR = 0.3
HEURISTICS_ONLY_CONFIDENCE = CONFIDENCE_FLOOR

_LABELS = ((3, "human"), (5, "mixed"), (7, "likely_ai"), (10, "ai"))
_HEURISTICS_ONLY_LABELS = ((3, "human"), (5, "uncertain"), (7, "likely_ai"), (10, "ai"))


def combine(llm: LlmResult, heuristic: HeuristicResult) -> tuple[int, float]:
    """Return (final_score, confidence) for an LLM + heuristic pair."""
    score = round_half_up(llm.score * LLM_WEIGHT + heuristic.score * HEURISTIC_WEIGHT)
    confidence = min(1.0, llm.confidence * CONFIDENCE_SCALE + CONFIDENCE_FLOOR)
    return clamp(score, 0, 10), confidence


def score_to_label(score: int, heuristics_only: bool = False) -> str:
    """Bucket a 0-10 score into a coarse label.

    Without a second opinion the 4-5 band is "uncertain" rather than "mixed".
    """
    table = _HEURISTICS_ONLY_LABELS if heuristics_only else _LABELS
    for upper, label in table:
        if score <= upper:
            return label
    return "unknown"
