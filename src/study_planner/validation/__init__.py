"""Validation helpers."""

from .errors import (
    DuplicateSubjectError,
    InvalidBudgetError,
    ParseError,
    PersistenceError,
    PlannerError,
    SubjectNotFoundError,
    ValidationError,
    ValidationReport,
)
from .request import validate_daily_hours, validate_performance_score, validate_subject_input

__all__ = [
    "DuplicateSubjectError",
    "InvalidBudgetError",
    "ParseError",
    "PersistenceError",
    "PlannerError",
    "SubjectNotFoundError",
    "ValidationError",
    "ValidationReport",
    "validate_daily_hours",
    "validate_performance_score",
    "validate_subject_input",
]
