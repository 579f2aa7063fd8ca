"""Performance-driven adjustment of an existing allocation.

The pass perturbs the hours already assigned to each subject instead of
recomputing them from priority weights, so its outcome depends on the
previous schedule.
"""

from __future__ import annotations

import logging
from typing import Sequence

from study_planner.reporting.decision_trace import DecisionTraceCollector

from .allocator import round_hours
from .schedule import Schedule
from .scoring import clamp
from .subject import Subject

logger = logging.getLogger(__name__)

DEFAULT_LOW_THRESHOLD = 70.0
DEFAULT_HIGH_THRESHOLD = 90.0
DEFAULT_BOOST_FACTOR = 1.15
DEFAULT_REDUCE_FACTOR = 0.9
MIN_ADJUSTED_HOURS = 0.1


def _adjust_rule(
    performance: float,
    *,
    low_threshold: float,
    high_threshold: float,
    boost_factor: float,
    reduce_factor: float,
) -> tuple[str, float]:
    if performance < low_threshold:
        return "RULE_BOOST_LOW_PERFORMANCE", boost_factor
    if performance > high_threshold:
        return "RULE_REDUCE_HIGH_PERFORMANCE", reduce_factor
    return "RULE_KEEP_STEADY_PERFORMANCE", 1.0


def adaptive_adjust(
    subjects: Sequence[Subject],
    *,
    total_daily_hours: float,
    low_threshold: float = DEFAULT_LOW_THRESHOLD,
    high_threshold: float = DEFAULT_HIGH_THRESHOLD,
    boost_factor: float = DEFAULT_BOOST_FACTOR,
    reduce_factor: float = DEFAULT_REDUCE_FACTOR,
    decision_trace: DecisionTraceCollector | None = None,
) -> Schedule:
    """Boost struggling subjects, trim mastered ones, then restore the budget.

    Each subject's hours are multiplied by ``boost_factor`` below
    ``low_threshold`` and by ``reduce_factor`` above ``high_threshold``,
    clamped to ``[0.1, total_daily_hours]`` and finally rescaled so they sum
    to ``total_daily_hours``. When the clamped total is not positive the
    rescale is skipped and the clamped values are kept as they are.
    """
    before: dict[str, float] = {}
    rules: dict[str, list[str]] = {}
    for subject in subjects:
        current = subject.allocated_hours
        rule, factor = _adjust_rule(
            subject.performance_score,
            low_threshold=low_threshold,
            high_threshold=high_threshold,
            boost_factor=boost_factor,
            reduce_factor=reduce_factor,
        )
        adjusted = current * factor
        subject.set_allocated_hours(clamp(adjusted, MIN_ADJUSTED_HOURS, total_daily_hours))
        before[subject.name] = current
        rules[subject.name] = [rule]
        logger.debug(
            "%s: performance %.1f, %s, %.2fh -> %.2fh",
            subject.name,
            subject.performance_score,
            rule,
            current,
            subject.allocated_hours,
        )

    new_total = sum(subject.allocated_hours for subject in subjects)
    if new_total > 0:
        scale = total_daily_hours / new_total
        for subject in subjects:
            subject.set_allocated_hours(round_hours(subject.allocated_hours * scale))
            rules[subject.name].append("RULE_RESCALE_TO_BUDGET")
    else:
        logger.warning("Adjusted total %.4f is not positive, skipping rescale", new_total)

    schedule = Schedule()
    for subject in subjects:
        schedule.allocations[subject.name] = subject.allocated_hours
        if decision_trace is not None:
            decision_trace.record(
                subject_name=subject.name,
                performance_score=subject.performance_score,
                hours_before=before[subject.name],
                hours_after=subject.allocated_hours,
                applied_rules=rules[subject.name],
            )
    return schedule
