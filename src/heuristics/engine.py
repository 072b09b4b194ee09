# src/heuristics/engine.py — v1
"""Heuristic engine: weighted evidence accumulation over text signals.

There is no prior: a category whose evidence is neutral or absent casts no
vote, instead of pulling the score toward a midpoint. Each voting category
adds ``score * weight`` to the running sum and ``weight`` to the total
weight, and records one signal label. Evaluation order is fixed and is the
order of the returned signals.

CPU-bound and free of I/O; the orchestrator runs it in a worker thread.
"""

from __future__ import annotations

import logging

from aidetector.core.models import HeuristicResult
from aidetector.core.numeric import clamp, round_half_up
from aidetector.heuristics import extractors as ex

logger = logging.getLogger(__name__)

NEUTRAL_SCORE = 5
DASH_OVERRIDE_FLOOR = 8
SHORT_TEXT_WORDS = 20
SHORT_TEXT_SIGNAL = "short_text_low_confidence"


class _Evidence:
    """Running weighted sum plus the ordered signal list."""

    def __init__(self) -> None:
        self.score_sum = 0.0
        self.weight_sum = 0.0
        self.signals: list[str] = []

    def vote(self, signal: str, score: float, weight: float) -> None:
        self.score_sum += score * weight
        self.weight_sum += weight
        self.signals.append(signal)

    def note(self, signal: str) -> None:
        """Record an informational signal that carries no weight."""
        self.signals.append(signal)

    def score(self) -> int:
        if self.weight_sum <= 0:
            return NEUTRAL_SCORE
        return clamp(round_half_up(self.score_sum / self.weight_sum), 0, 10)


def analyze(text: str) -> HeuristicResult:
    """Score a non-empty document 0-10 from heuristic signals.

    Args:
        text: Raw document text. Blank text must be rejected by the caller.

    Returns:
        HeuristicResult with the clamped score and the ordered signal labels.
    """
    ev = _Evidence()
    sentence_count = len(ex.split_sentences(text))

    # 1. Sentence length variance (AI writes uniform sentence lengths)
    variance = ex.sentence_length_variance(text)
    if variance < 5.0:
        ev.vote("uniform_sentence_length", 8, 2.0)
    elif variance < 15.0:
        ev.vote("low_sentence_variance", 6, 2.0)
    elif sentence_count >= 2:
        ev.vote("varied_sentence_length", 2, 2.0)

    # 2. Burstiness
    if sentence_count >= 3:
        bursty = ex.burstiness(text)
        if bursty < 0.3:
            ev.vote("low_burstiness", 7, 1.5)
        elif bursty >= 0.45:
            ev.vote("high_burstiness", 2, 1.5)

    # 3. Vocabulary diversity
    if ex.tokens(text):
        ttr = ex.type_token_ratio(text)
        if ttr < 0.4:
            ev.vote("low_vocabulary_diversity", 7, 1.5)
        elif ttr < 0.55:
            ev.vote("moderate_vocabulary_diversity", 4, 1.5)
        else:
            ev.vote("high_vocabulary_diversity", 2, 1.5)

    # 4. Formulaic phrases
    formulaic = ex.count_formulaic_phrases(text)
    if formulaic >= 3:
        ev.vote("formulaic_phrases", 9, 5.0)
    elif formulaic >= 1:
        ev.vote("some_formulaic_phrases", 6, 3.0)

    # 5. Dashes
    dashes = ex.count_dashes(text)
    if dashes.em_dashes > 0:
        ev.vote("em_dash_usage", 9, 5.0)
    elif dashes.spaced_hyphens > 0:
        ev.vote("spaced_hyphens", 6, 2.0)

    # 6. Standalone AI vocabulary
    vocabulary = ex.count_ai_vocabulary(text)
    if vocabulary >= 3:
        ev.vote("ai_vocabulary", 8, 3.0)
    elif vocabulary >= 1:
        ev.vote("some_ai_vocabulary", 6, 2.0)

    # 7. Punctuation uniformity
    pattern = ex.punctuation_pattern(text)
    if pattern is not None:
        ev.vote(pattern, 6, 1.0)

    # 8. Informality (human-leaning)
    informal = ex.count_informal_markers(text)
    if informal >= 2:
        ev.vote("informal_language", 1, 3.0)
    elif informal == 1:
        ev.vote("some_informal_markers", 3, 1.0)

    # 9. One sentence per line
    if ex.line_break_ratio(text) >= 0.8:
        ev.vote("one_sentence_per_line", 7, 2.0)

    # 10. Promotional / call-to-action templates
    promotional = ex.count_promotional_patterns(text)
    if promotional >= 2:
        ev.vote("promotional_language", 8, 2.5)
    elif promotional == 1:
        ev.vote("some_promotional_language", 6, 1.5)

    if ex.word_count(text) < SHORT_TEXT_WORDS:
        ev.note(SHORT_TEXT_SIGNAL)

    score = ev.score()
    # Dashes are near-definitive; other neutral signals must not dilute them.
    if dashes.em_dashes > 0:
        score = max(score, DASH_OVERRIDE_FLOOR)

    logger.debug(
        "Heuristic score %d (weight %.1f, signals=%s)",
        score, ev.weight_sum, ev.signals,
    )
    return HeuristicResult(score=score, signals=ev.signals)
