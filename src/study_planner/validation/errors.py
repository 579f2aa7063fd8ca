"""Validation models and planner error types."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


class PlannerError(Exception):
    """Base class for errors raised by planner operations."""

    code = "PLANNER_ERROR"


class DuplicateSubjectError(PlannerError):
    code = "DUPLICATE_SUBJECT"

    def __init__(self, name: str) -> None:
        super().__init__(f"Subject already exists: {name}")
        self.name = name


class SubjectNotFoundError(PlannerError):
    code = "SUBJECT_NOT_FOUND"

    def __init__(self, name: str) -> None:
        super().__init__(f"Subject not found: {name}")
        self.name = name


class InvalidBudgetError(PlannerError):
    code = "INVALID_BUDGET"

    def __init__(self, hours: float) -> None:
        super().__init__(f"Daily hours must be non-negative, got {hours}")
        self.hours = hours


class PersistenceError(PlannerError):
    """File could not be opened, read or written."""

    code = "PERSISTENCE_ERROR"


class ParseError(PlannerError):
    """A persisted subject record is malformed."""

    code = "PARSE_ERROR"

    def __init__(self, message: str, *, line_number: int | None = None) -> None:
        if line_number is not None:
            message = f"line {line_number}: {message}"
        super().__init__(message)
        self.line_number = line_number


@dataclass(slots=True)
class ValidationError:
    """Represents one validation issue."""

    code: str
    message: str
    path: str


@dataclass(slots=True)
class ValidationIssue:
    """Structured validation issue collected while resolving configuration."""

    code: str
    message: str
    field_path: str
    suggested_fix: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)


@dataclass(slots=True)
class ValidationReport:
    """Aggregated report with errors and infos (no short-circuit)."""

    errors: list[ValidationIssue] = field(default_factory=list)
    infos: list[ValidationIssue] = field(default_factory=list)

    def add_error(
        self,
        *,
        code: str,
        message: str,
        field_path: str,
        suggested_fix: str | None = None,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.errors.append(
            ValidationIssue(
                code=code,
                message=message,
                field_path=field_path,
                suggested_fix=suggested_fix,
                extra=extra or {},
            )
        )

    def add_info(
        self,
        *,
        code: str,
        message: str,
        field_path: str,
        extra: dict[str, Any] | None = None,
    ) -> None:
        self.infos.append(
            ValidationIssue(
                code=code,
                message=message,
                field_path=field_path,
                extra=extra or {},
            )
        )

