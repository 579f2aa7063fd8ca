"""Resolve effective planner configuration from layered inputs."""

from __future__ import annotations

import math
from typing import Any

from study_planner.validation import ValidationReport
from study_planner.validation.request import MAX_DAILY_HOURS

DEFAULT_PLANNER_CONFIG: dict[str, Any] = {
    "total_daily_hours": 4.0,
    "min_slot_hours": 0.25,
    "low_threshold": 70.0,
    "high_threshold": 90.0,
    "boost_factor": 1.15,
    "reduce_factor": 0.9,
}


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def resolve_effective_config(
    *sources: dict[str, Any] | None,
    validation_report: ValidationReport,
) -> dict[str, Any]:
    """Merge ``sources`` over the defaults, later sources winning.

    ``None`` values inside a source are treated as "not set". Unknown keys and
    non-numeric values are reported as errors and dropped.
    """
    config = dict(DEFAULT_PLANNER_CONFIG)
    for source in sources:
        if not isinstance(source, dict):
            continue
        for key, value in source.items():
            if value is None:
                continue
            if key not in DEFAULT_PLANNER_CONFIG:
                validation_report.add_error(
                    code="INVALID_CONFIG_KEY",
                    message=f"Config key {key!r} is not allowed",
                    field_path=f"$.config.{key}",
                    suggested_fix=f"Use one of: {', '.join(sorted(DEFAULT_PLANNER_CONFIG))}",
                )
                continue
            if not _is_number(value):
                validation_report.add_error(
                    code="INVALID_TYPE",
                    message=f"Expected a finite number for {key}, got {value!r}",
                    field_path=f"$.config.{key}",
                )
                continue
            config[key] = float(value)

    hours = config["total_daily_hours"]
    clamped = min(MAX_DAILY_HOURS, max(0.0, float(hours)))
    if clamped != hours:
        config["total_daily_hours"] = clamped
        validation_report.add_info(
            code="INFO_CLAMP_DAILY_HOURS_APPLIED",
            message=f"total_daily_hours was clamped into [0,{MAX_DAILY_HOURS:g}]",
            field_path="$.config.total_daily_hours",
            extra={"applied_value": clamped},
        )

    if config["low_threshold"] > config["high_threshold"]:
        validation_report.add_error(
            code="INVALID_THRESHOLDS",
            message="low_threshold must be <= high_threshold",
            field_path="$.config.low_threshold",
            suggested_fix="Swap the thresholds or adjust one of them.",
        )

    return config
