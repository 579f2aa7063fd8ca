"""Subject model: static traits plus rolling performance state."""

from __future__ import annotations

from statistics import fmean

from .scoring import (
    DIFFICULTY_RANGE,
    IMPORTANCE_RANGE,
    clamp,
    clamp_performance,
    compute_priority_weight,
)

HISTORY_WINDOW = 10


class Subject:
    """One subject tracked by the planner.

    ``name``, ``difficulty`` and ``importance`` are fixed at construction.
    Performance changes through :meth:`record_performance`, allocated hours
    through :meth:`set_allocated_hours` (called by the planner only).
    """

    __slots__ = ("_name", "_difficulty", "_importance", "_performance_score", "_allocated_hours", "_history")

    def __init__(self, name: str, difficulty: int, importance: int, performance: float = 100.0) -> None:
        self._name = str(name)
        self._difficulty = int(clamp(int(difficulty), *DIFFICULTY_RANGE))
        self._importance = int(clamp(int(importance), *IMPORTANCE_RANGE))
        self._performance_score = clamp_performance(performance)
        self._allocated_hours = 0.0
        self._history: list[float] = []

    def __repr__(self) -> str:
        return (
            f"Subject(name={self._name!r}, difficulty={self._difficulty}, importance={self._importance}, "
            f"performance_score={self._performance_score!r}, allocated_hours={self._allocated_hours!r})"
        )

    @property
    def name(self) -> str:
        return self._name

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @property
    def importance(self) -> int:
        return self._importance

    @property
    def performance_score(self) -> float:
        return self._performance_score

    @property
    def allocated_hours(self) -> float:
        return self._allocated_hours

    @property
    def history(self) -> tuple[float, ...]:
        """Recorded scores, oldest first."""
        return tuple(self._history)

    def priority_weight(self) -> float:
        return compute_priority_weight(
            difficulty=self._difficulty,
            importance=self._importance,
            performance_score=self._performance_score,
        )

    def record_performance(self, score: float) -> None:
        """Append a session score and refresh the rolling mean.

        Only the most recent ``HISTORY_WINDOW`` scores are kept.
        """
        self._history.append(clamp_performance(score))
        if len(self._history) > HISTORY_WINDOW:
            del self._history[: len(self._history) - HISTORY_WINDOW]
        self._performance_score = fmean(self._history)

    def set_performance(self, score: float) -> None:
        self._performance_score = clamp_performance(score)

    def set_allocated_hours(self, hours: float) -> None:
        self._allocated_hours = max(0.0, float(hours))

    def as_record(self) -> tuple[str, int, int, float, float]:
        return (
            self._name,
            self._difficulty,
            self._importance,
            self._performance_score,
            self._allocated_hours,
        )

    def summary(self) -> str:
        return (
            f"{self._name:<15} | diff: {self._difficulty:<2} imp: {self._importance:<2} "
            f"perf: {self._performance_score:<6.1f} hrs: {self._allocated_hours:<5.2f}"
        )
