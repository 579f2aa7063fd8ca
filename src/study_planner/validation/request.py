"""Range checks for values entered through the CLI."""

from __future__ import annotations

from typing import Any

from .errors import ValidationError

MAX_DAILY_HOURS = 24.0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _check_range(
    value: Any,
    *,
    field: str,
    minimum: float,
    maximum: float,
    integer: bool = False,
) -> list[ValidationError]:
    if value is None:
        return [
            ValidationError(
                code="MISSING_REQUIRED_FIELD",
                message=f"Missing required field: {field}",
                path=f"$.{field}",
            )
        ]
    if not _is_number(value) or (integer and not isinstance(value, int)):
        expected = "integer" if integer else "number"
        return [
            ValidationError(
                code="INVALID_TYPE",
                message=f"Expected {expected} for {field}, got {type(value).__name__}",
                path=f"$.{field}",
            )
        ]
    if not (minimum <= value <= maximum):
        return [
            ValidationError(
                code="OUT_OF_RANGE",
                message=f"{field} must be between {minimum:g} and {maximum:g}, got {value:g}",
                path=f"$.{field}",
            )
        ]
    return []


def validate_subject_input(
    *,
    name: Any,
    difficulty: Any,
    importance: Any,
    performance: Any = 100.0,
) -> list[ValidationError]:
    """Validate the fields of a new subject, reporting every problem found."""
    errors: list[ValidationError] = []

    if not isinstance(name, str) or not name.strip():
        errors.append(
            ValidationError(
                code="MISSING_REQUIRED_FIELD",
                message="Subject name must be a non-empty string",
                path="$.name",
            )
        )
    elif "," in name:
        errors.append(
            ValidationError(
                code="INVALID_NAME",
                message="Subject name cannot contain commas",
                path="$.name",
            )
        )

    errors.extend(_check_range(difficulty, field="difficulty", minimum=1, maximum=10, integer=True))
    errors.extend(_check_range(importance, field="importance", minimum=1, maximum=10, integer=True))
    errors.extend(_check_range(performance, field="performance", minimum=0.0, maximum=100.0))
    return errors


def validate_performance_score(score: Any) -> list[ValidationError]:
    return _check_range(score, field="score", minimum=0.0, maximum=100.0)


def validate_daily_hours(hours: Any) -> list[ValidationError]:
    return _check_range(hours, field="total_daily_hours", minimum=0.0, maximum=MAX_DAILY_HOURS)
