"""Study planner: subject collection, daily budget and persistence hooks."""

from __future__ import annotations

import logging
from pathlib import Path

from study_planner.io import SubjectRecord, read_subject_records, write_subject_records
from study_planner.reporting.decision_trace import DecisionTraceCollector
from study_planner.validation.errors import (
    DuplicateSubjectError,
    InvalidBudgetError,
    SubjectNotFoundError,
)

from .allocator import DEFAULT_MIN_SLOT_HOURS, allocate_hours
from .rebalance import (
    DEFAULT_BOOST_FACTOR,
    DEFAULT_HIGH_THRESHOLD,
    DEFAULT_LOW_THRESHOLD,
    DEFAULT_REDUCE_FACTOR,
    adaptive_adjust,
)
from .schedule import Schedule
from .subject import Subject

logger = logging.getLogger(__name__)

DEFAULT_TOTAL_DAILY_HOURS = 4.0


class StudyPlanner:
    """Owns every subject and the daily hour budget.

    Subjects are keyed by exact name. References returned by
    :meth:`find_subject` are meant for the duration of a call only; the planner
    stays the single owner.
    """

    def __init__(
        self,
        total_daily_hours: float = DEFAULT_TOTAL_DAILY_HOURS,
        *,
        min_slot_hours: float = DEFAULT_MIN_SLOT_HOURS,
    ) -> None:
        self._subjects: dict[str, Subject] = {}
        self._total_daily_hours = 0.0
        self.min_slot_hours = min_slot_hours
        self.set_total_daily_hours(total_daily_hours)

    def __len__(self) -> int:
        return len(self._subjects)

    def __contains__(self, name: object) -> bool:
        return name in self._subjects

    @property
    def subjects(self) -> tuple[Subject, ...]:
        return tuple(self._subjects.values())

    @property
    def total_daily_hours(self) -> float:
        return self._total_daily_hours

    def set_total_daily_hours(self, hours: float) -> None:
        if not hours >= 0:
            raise InvalidBudgetError(hours)
        self._total_daily_hours = float(hours)

    def add_subject(self, name: str, difficulty: int, importance: int, performance: float = 100.0) -> Subject:
        if name in self._subjects:
            raise DuplicateSubjectError(name)
        subject = Subject(name, difficulty, importance, performance)
        self._subjects[name] = subject
        logger.debug("Added %r", subject)
        return subject

    def remove_subject(self, name: str) -> None:
        if self._subjects.pop(name, None) is not None:
            logger.debug("Removed subject %s", name)

    def find_subject(self, name: str) -> Subject | None:
        return self._subjects.get(name)

    def get_subject(self, name: str) -> Subject:
        subject = self._subjects.get(name)
        if subject is None:
            raise SubjectNotFoundError(name)
        return subject

    def record_performance(self, name: str, score: float) -> None:
        self.get_subject(name).record_performance(score)

    def generate_schedule(self) -> Schedule:
        """Allocate the daily budget by priority weight and store the result."""
        return allocate_hours(
            self.subjects,
            total_daily_hours=self._total_daily_hours,
            min_slot_hours=self.min_slot_hours,
        )

    def adaptive_adjust(
        self,
        low_threshold: float = DEFAULT_LOW_THRESHOLD,
        high_threshold: float = DEFAULT_HIGH_THRESHOLD,
        boost_factor: float = DEFAULT_BOOST_FACTOR,
        reduce_factor: float = DEFAULT_REDUCE_FACTOR,
        *,
        decision_trace: DecisionTraceCollector | None = None,
    ) -> Schedule:
        """Perturb the current allocation by performance thresholds."""
        return adaptive_adjust(
            self.subjects,
            total_daily_hours=self._total_daily_hours,
            low_threshold=low_threshold,
            high_threshold=high_threshold,
            boost_factor=boost_factor,
            reduce_factor=reduce_factor,
            decision_trace=decision_trace,
        )

    def current_schedule(self) -> Schedule:
        return Schedule({subject.name: subject.allocated_hours for subject in self._subjects.values()})

    def save(self, path: str | Path) -> None:
        write_subject_records(
            path,
            (SubjectRecord(*subject.as_record()) for subject in self._subjects.values()),
        )

    def load(self, path: str | Path) -> None:
        """Replace every subject with the contents of ``path``.

        The current collection is left untouched when reading fails.
        """
        loaded: dict[str, Subject] = {}
        for record in read_subject_records(path):
            subject = Subject(record.name, record.difficulty, record.importance, record.performance_score)
            subject.set_allocated_hours(record.allocated_hours)
            loaded[record.name] = subject
        self._subjects = loaded
