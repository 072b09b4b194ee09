# src/core/numeric.py — v1
"""Small numeric helpers shared by the heuristic engine and the scorer."""

from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to nearest int, halves away from zero (2.5 -> 3, not 2)."""
    if value < 0:
        return -math.floor(-value + 0.5)
    return math.floor(value + 0.5)


def clamp(value, low, high):
    """Bound value to [low, high]."""
    return max(low, min(high, value))
