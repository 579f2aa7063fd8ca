"""Reporting utilities."""

from .decision_trace import DecisionTraceCollector
from .reports import (
    build_error_report,
    build_planner_error_report,
    render_decision_trace,
    render_error_report,
    render_schedule,
    render_subjects,
)

__all__ = [
    "DecisionTraceCollector",
    "build_error_report",
    "build_planner_error_report",
    "render_decision_trace",
    "render_error_report",
    "render_schedule",
    "render_subjects",
]
