# tests/unit/heuristics/test_engine.py — v1
"""Tests for heuristics/engine.py — weighted evidence scoring."""

from __future__ import annotations

import pytest

from aidetector.heuristics.engine import (
    DASH_OVERRIDE_FLOOR,
    NEUTRAL_SCORE,
    SHORT_TEXT_SIGNAL,
    _Evidence,
    analyze,
)


class TestScenarios:
    def test_casual_text_scores_human(self, casual_text):
        result = analyze(casual_text)
        assert result.score <= 4
        assert "informal_language" in result.signals
        assert "formulaic_phrases" not in result.signals
        assert "some_formulaic_phrases" not in result.signals

    def test_cliche_text_scores_ai(self, cliche_text):
        result = analyze(cliche_text)
        assert result.score >= 6
        assert "formulaic_phrases" in result.signals

    def test_two_word_title_scores_low(self):
        result = analyze("NUTELLA PANCAKES")
        assert result.score <= 3
        assert result.signals == ["high_vocabulary_diversity", SHORT_TEXT_SIGNAL]

    def test_human_paragraph(self, human_text):
        result = analyze(human_text)
        assert result.score <= 4
        assert "varied_sentence_length" in result.signals
        assert SHORT_TEXT_SIGNAL not in result.signals

    def test_ai_paragraph(self, ai_text):
        result = analyze(ai_text)
        assert result.score >= DASH_OVERRIDE_FLOOR
        assert "formulaic_phrases" in result.signals
        assert "ai_vocabulary" in result.signals


class TestDashOverride:
    def test_em_dash_forces_floor(self):
        text = "lol ok — whatever haha"
        result = analyze(text)
        assert result.score >= DASH_OVERRIDE_FLOOR
        assert "em_dash_usage" in result.signals

    def test_en_dash_counts(self):
        assert analyze("2019 – 2021 was rough tbh").score >= DASH_OVERRIDE_FLOOR

    def test_spaced_hyphen_does_not_force_floor(self):
        result = analyze("lol ok - whatever haha")
        assert "spaced_hyphens" in result.signals
        assert result.score < DASH_OVERRIDE_FLOOR


class TestSignals:
    def test_short_text_signal_below_twenty_words(self):
        assert SHORT_TEXT_SIGNAL in analyze("a few words only").signals

    def test_short_text_signal_is_last(self, casual_text):
        assert analyze(casual_text).signals[-1] == SHORT_TEXT_SIGNAL

    def test_evaluation_order(self, cliche_text):
        signals = analyze(cliche_text).signals
        assert signals.index("low_sentence_variance") < signals.index("formulaic_phrases")
        assert signals.index("formulaic_phrases") < signals.index("uniform_punctuation")

    def test_one_sentence_per_line(self):
        text = "Big news.\nWe shipped.\nThank you all.\nMore soon."
        assert "one_sentence_per_line" in analyze(text).signals

    def test_promotional_language(self):
        text = "Here's what I learned this year. Link in bio. Follow for more."
        assert "promotional_language" in analyze(text).signals


class TestScoreProperties:
    @pytest.mark.parametrize(
        "text",
        [
            "x",
            "!!!",
            "a " * 500,
            "Delve. Delve. Delve. Delve.",
            "\n".join(["line"] * 50),
            "😀 🚀 🔥",
        ],
    )
    def test_score_in_range(self, text):
        result = analyze(text)
        assert 0 <= result.score <= 10

    def test_deterministic(self, ai_text):
        assert analyze(ai_text) == analyze(ai_text)

    def test_no_votes_falls_back_to_neutral(self):
        assert _Evidence().score() == NEUTRAL_SCORE


class TestTokenlessText:
    def test_emoji_only_casts_no_vote(self):
        result = analyze("😀 🚀 🔥")
        assert result.score == NEUTRAL_SCORE
        assert result.signals == [SHORT_TEXT_SIGNAL]

    def test_punctuation_only_skips_vocabulary(self):
        result = analyze("!!! ???")
        assert "high_vocabulary_diversity" not in result.signals
        assert result.signals == ["informal_language", SHORT_TEXT_SIGNAL]
        assert result.score == 1
