# src/heuristics/extractors.py — v1
"""Text signal extractors — pure, deterministic feature functions.

Each extractor takes the raw document text and returns one numeric feature
(or a small named tuple). Extractors share no state and never raise on
non-empty input; under-determined statistics return documented fallbacks.
"""

from __future__ import annotations

import math
import re
from typing import NamedTuple

from aidetector.heuristics.lexicon import (
    AI_VOCABULARY,
    CASUAL_CONTRACTIONS,
    FORMULAIC_PHRASES,
    INFORMAL_SLANG,
    PROMOTIONAL_PATTERNS,
    REPEATED_PUNCTUATION,
)

_SENTENCE_SPLIT = re.compile(r"[.!?]")
_NON_ALNUM = re.compile(r"[\W_]+")
_TERMINALS = frozenset(".!?")

EM_DASHES = ("—", "–")  # em dash, en dash
SPACED_HYPHENS = (" - ", " -- ")

INSUFFICIENT_VARIANCE = 50.0
NEUTRAL_BURSTINESS = 0.5


class DashUsage(NamedTuple):
    """Dash counts: unicode em/en dashes and space-padded hyphen runs."""

    em_dashes: int
    spaced_hyphens: int


# --- Tokenization helpers ---


def split_sentences(text: str) -> list[str]:
    """Split on . ! ? and drop empty fragments."""
    return [s.strip() for s in _SENTENCE_SPLIT.split(text) if s.strip()]


def word_count(text: str) -> int:
    """Number of whitespace-delimited words."""
    return len(text.split())


def tokens(text: str) -> list[str]:
    """Lowercased words with non-alphanumeric edge characters stripped.

    Words that are entirely punctuation or emoji yield no token.
    """
    result = []
    for word in text.split():
        token = word.lower()
        start, end = 0, len(token)
        while start < end and not token[start].isalnum():
            start += 1
        while end > start and not token[end - 1].isalnum():
            end -= 1
        if start < end:
            result.append(token[start:end])
    return result


def _sentence_lengths(text: str) -> list[int]:
    return [len(s.split()) for s in split_sentences(text)]


def _whole_words(text: str) -> set[str]:
    return {w for w in _NON_ALNUM.split(text.lower()) if w}


def _contained(text: str, phrases) -> int:
    lower = text.lower()
    return sum(1 for phrase in phrases if phrase in lower)


# --- Extractors ---


def sentence_length_variance(text: str) -> float:
    """Population variance of sentence word counts.

    Returns INSUFFICIENT_VARIANCE (50.0) with fewer than 2 sentences.
    """
    lengths = _sentence_lengths(text)
    if len(lengths) < 2:
        return INSUFFICIENT_VARIANCE
    mean = sum(lengths) / len(lengths)
    return sum((n - mean) ** 2 for n in lengths) / len(lengths)


def burstiness(text: str) -> float:
    """Normalized burstiness of sentence lengths in [0, 1].

    (std - mean) / (std + mean) remapped from [-1, 1]. Low values mean a
    uniform rhythm. Returns NEUTRAL_BURSTINESS (0.5) with fewer than 3
    sentences.
    """
    lengths = _sentence_lengths(text)
    if len(lengths) < 3:
        return NEUTRAL_BURSTINESS
    mean = sum(lengths) / len(lengths)
    if mean == 0:
        return NEUTRAL_BURSTINESS
    std_dev = math.sqrt(sum((n - mean) ** 2 for n in lengths) / len(lengths))
    raw = (std_dev - mean) / (std_dev + mean)
    return (raw + 1.0) / 2.0


def type_token_ratio(text: str) -> float:
    """Unique / total tokens; 1.0 when the text has no tokens."""
    words = tokens(text)
    if not words:
        return 1.0
    return len(set(words)) / len(words)


def count_formulaic_phrases(text: str) -> int:
    """Number of distinct cliché phrases present."""
    return _contained(text, FORMULAIC_PHRASES)


def count_dashes(text: str) -> DashUsage:
    """Count em/en dashes and spaced hyphens separately."""
    em = sum(text.count(dash) for dash in EM_DASHES)
    spaced = sum(text.count(seq) for seq in SPACED_HYPHENS)
    return DashUsage(em_dashes=em, spaced_hyphens=spaced)


def count_ai_vocabulary(text: str) -> int:
    """Number of distinct AI-typical words present as whole words."""
    return len(_whole_words(text) & AI_VOCABULARY)


def punctuation_pattern(text: str) -> str | None:
    """Flag uniform terminal punctuation or comma-heavy prose.

    Returns "uniform_punctuation", "high_comma_frequency", or None when
    there is no opinion (fewer than 3 sentences or no terminal punctuation).
    """
    if len(split_sentences(text)) < 3:
        return None
    terminals = sum(1 for c in text if c in _TERMINALS)
    if terminals == 0:
        return None

    if text.count(".") / terminals > 0.95:
        return "uniform_punctuation"

    words = word_count(text)
    if words > 0 and text.count(",") / words > 0.15:
        return "high_comma_frequency"
    return None


def count_informal_markers(text: str) -> int:
    """Slang words + casual contractions + repeated punctuation markers."""
    slang = len(_whole_words(text) & INFORMAL_SLANG)
    contractions = _contained(text, CASUAL_CONTRACTIONS)
    repeated = sum(1 for marker in REPEATED_PUNCTUATION if marker in text)
    return slang + contractions + repeated


def line_break_ratio(text: str) -> float:
    """Non-empty lines per sentence; 0.0 when undefined.

    Undefined means fewer than 3 non-empty lines or no sentences.
    """
    lines = [line for line in text.splitlines() if line.strip()]
    if len(lines) < 3:
        return 0.0
    sentences = len(split_sentences(text))
    if sentences == 0:
        return 0.0
    return len(lines) / sentences


def count_promotional_patterns(text: str) -> int:
    """Number of distinct call-to-action / motivational templates present."""
    return _contained(text, PROMOTIONAL_PATTERNS)
