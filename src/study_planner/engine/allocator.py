"""Deterministic weighted allocation of the daily budget.

Phases:
1) proportional split by priority weight,
2) minimum-slot floor,
3) renormalization back to the budget,
4) rounding to hundredths of an hour.

Rule preserved: the floor is applied before renormalizing, so when
``min_slot_hours * count`` exceeds the budget single allocations can end up
below the floor.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence

from .schedule import Schedule
from .subject import Subject

logger = logging.getLogger(__name__)

DEFAULT_MIN_SLOT_HOURS = 0.25


def round_hours(value: float) -> float:
    """Round to 2 decimals, halves away from zero."""
    return math.copysign(math.floor(abs(value) * 100.0 + 0.5) / 100.0, value)


def _equal_split(subjects: Sequence[Subject], total_daily_hours: float) -> Schedule:
    per_subject = total_daily_hours / float(len(subjects))
    schedule = Schedule()
    for subject in subjects:
        subject.set_allocated_hours(per_subject)
        schedule.allocations[subject.name] = subject.allocated_hours
    return schedule


def _floored_raw_allocations(weights: list[float], total_daily_hours: float, min_slot_hours: float) -> list[float]:
    sum_weights = sum(weights)
    return [max((weight / sum_weights) * total_daily_hours, min_slot_hours) for weight in weights]


def allocate_hours(
    subjects: Sequence[Subject],
    *,
    total_daily_hours: float,
    min_slot_hours: float = DEFAULT_MIN_SLOT_HOURS,
) -> Schedule:
    """Split ``total_daily_hours`` across ``subjects`` and write the result back.

    Returns an empty schedule when there are no subjects. Falls back to an
    equal split when the weights do not sum to a positive value.
    """
    if not subjects:
        return Schedule()

    weights = [subject.priority_weight() for subject in subjects]
    sum_weights = sum(weights)
    if sum_weights <= 0.0:
        logger.warning(
            "Non-positive weight total %.4f for %d subjects, using equal split",
            sum_weights,
            len(subjects),
        )
        return _equal_split(subjects, total_daily_hours)

    raw = _floored_raw_allocations(weights, total_daily_hours, min_slot_hours)
    raw_sum = sum(raw)
    if min_slot_hours * len(subjects) > total_daily_hours:
        logger.warning(
            "Minimum slot %.2fh x %d subjects exceeds budget %.2fh, allocations may fall below the floor",
            min_slot_hours,
            len(subjects),
            total_daily_hours,
        )
    if raw_sum > 0.0:
        scale = total_daily_hours / raw_sum
        raw = [value * scale for value in raw]

    schedule = Schedule()
    for subject, weight, value in zip(subjects, weights, raw):
        hours = round_hours(value)
        subject.set_allocated_hours(hours)
        schedule.allocations[subject.name] = subject.allocated_hours
        logger.debug("Allocated %.2fh to %s (weight %.4f)", hours, subject.name, weight)

    logger.info(
        "Generated schedule for %d subjects: %.2fh of %.2fh",
        len(subjects),
        schedule.total_hours,
        total_daily_hours,
    )
    return schedule
