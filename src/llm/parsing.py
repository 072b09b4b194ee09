# src/llm/parsing.py — v1
"""Parse a judge's free-form reply into a clamped LlmResult.

Models are told to answer with bare JSON but regularly wrap it in prose or
markdown fences. Parsing tries the trimmed reply first, then the substring
between the first "{" and the last "}".
"""

from __future__ import annotations

import json
import math
from typing import Any

from aidetector.core.errors import ParseError
from aidetector.core.models import LlmResult
from aidetector.core.numeric import clamp, round_half_up


def parse_score(content: str) -> LlmResult:
    """Extract ``{"score", "confidence"}`` from a model reply.

    Raises:
        ParseError: No JSON object found, invalid JSON, or missing or
            non-numeric fields. The raw reply is attached for diagnosis.
    """
    content = content.strip()
    payload = _load_object(content)

    score = _number(payload, "score", content)
    confidence = _number(payload, "confidence", content)
    return LlmResult(
        score=round_half_up(clamp(score, 0.0, 10.0)),
        confidence=clamp(confidence, 0.0, 1.0),
    )


def _load_object(content: str) -> dict[str, Any]:
    try:
        payload = json.loads(content)
    except json.JSONDecodeError:
        start = content.find("{")
        end = content.rfind("}")
        if start == -1:
            raise ParseError("No JSON in LLM response", content) from None
        if end < start:
            raise ParseError("Malformed JSON in LLM response", content) from None
        try:
            payload = json.loads(content[start : end + 1])
        except json.JSONDecodeError as e:
            raise ParseError(f"Failed to parse LLM JSON: {e}", content) from e

    if not isinstance(payload, dict):
        raise ParseError("LLM JSON is not an object", content)
    return payload


def _number(payload: dict[str, Any], field: str, raw: str) -> float:
    value = payload.get(field)
    # bool is an int subclass; "true" is not a score.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"LLM JSON has no numeric {field!r}", raw)
    if math.isnan(value):
        raise ParseError(f"LLM JSON {field!r} is NaN", raw)
    return float(value)
