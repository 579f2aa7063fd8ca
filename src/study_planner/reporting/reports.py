"""Build CLI reports."""

from __future__ import annotations

from typing import Any, Iterable

from study_planner.engine.schedule import Schedule
from study_planner.engine.subject import Subject
from study_planner.validation import PlannerError, ValidationError


def render_subjects(subjects: Iterable[Subject]) -> str:
    rows = [subject.summary() for subject in subjects]
    if not rows:
        return "(No subjects available)"
    return "\n".join(["Subjects:", *(f"  {row}" for row in rows)])


def render_schedule(schedule: Schedule) -> str:
    lines = [f"Schedule (total {schedule.total_hours:.2f} hrs):"]
    for name, hours in schedule.allocations.items():
        lines.append(f"  - {name:<15} -> {hours:.2f} hrs")
    return "\n".join(lines)


def render_decision_trace(items: list[dict[str, Any]]) -> str:
    lines = []
    for item in items:
        rules = ", ".join(item["applied_rules"])
        lines.append(
            f"  {item['decision_id']} {item['subject_name']:<15} perf {item['performance_score']:5.1f}"
            f"  {item['hours_before']:.2f} -> {item['hours_after']:.2f}  [{rules}]"
        )
    return "\n".join(["Decisions:", *lines])


def build_error_report(errors: list[ValidationError], code: str = "validation_error") -> dict[str, Any]:
    """Return a JSON-serializable error report."""
    return {
        "status": "error",
        "error": {
            "code": code,
            "count": len(errors),
            "details": [
                {"code": err.code, "message": err.message, "path": err.path}
                for err in errors
            ],
        },
    }


def build_planner_error_report(exc: PlannerError) -> dict[str, Any]:
    return {
        "status": "error",
        "error": {"code": exc.code, "count": 1, "details": [{"code": exc.code, "message": str(exc)}]},
    }


def render_error_report(report: dict[str, Any]) -> str:
    details = report["error"]["details"]
    return "\n".join(
        f"Error [{detail['code']}]: {detail['message']}" + (f" ({detail['path']})" if detail.get("path") else "")
        for detail in details
    )
