"""Priority weight formula and clamping helpers for subjects."""

from __future__ import annotations

import math

DIFFICULTY_RANGE: tuple[int, int] = (1, 10)
IMPORTANCE_RANGE: tuple[int, int] = (1, 10)
PERFORMANCE_RANGE: tuple[float, float] = (0.0, 100.0)

# 1.5 at performance 0, 0.5 at performance 100.
PERFORMANCE_FACTOR_OFFSET = 1.5


def clamp(value: float, low: float, high: float) -> float:
    """Clamp ``value`` into ``[low, high]``.

    The lower bound is checked first, so when ``high < low`` any value below
    ``low`` still resolves to ``low``.
    """
    if value < low:
        return low
    if value > high:
        return high
    return value


def clamp_performance(score: float) -> float:
    """Clamp a score into [0, 100]; infinities saturate, NaN is rejected."""
    value = float(score)
    if math.isnan(value):
        raise ValueError("performance score must be a number, got nan")
    low, high = PERFORMANCE_RANGE
    return float(clamp(value, low, high))


def compute_priority_weight(*, difficulty: int, importance: int, performance_score: float) -> float:
    """Compute the subject urgency weight.

    Formula: ``difficulty * importance * (1.5 - performance_score / 100)``.
    Higher difficulty or importance raise the weight, higher recent
    performance dampens it without ever negating it.
    """
    performance_factor = PERFORMANCE_FACTOR_OFFSET - (float(performance_score) / 100.0)
    base = float(difficulty) * float(importance)
    return base * performance_factor
