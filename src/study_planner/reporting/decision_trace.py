"""Decision trace utilities for adaptive adjustment events."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from typing import Any


@dataclass(slots=True)
class DecisionTraceCollector:
    """Collect per-subject decisions while an adjustment pass is executed."""

    start_timestamp: datetime
    _sequence: int = 0
    _items: list[dict[str, Any]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.start_timestamp.tzinfo is None:
            self.start_timestamp = self.start_timestamp.replace(tzinfo=timezone.utc)

    def record(
        self,
        *,
        subject_name: str,
        performance_score: float,
        hours_before: float,
        hours_after: float,
        applied_rules: list[str],
    ) -> None:
        self._sequence += 1
        timestamp = self.start_timestamp + timedelta(seconds=self._sequence)
        self._items.append(
            {
                "decision_id": f"d-{self._sequence:06d}",
                "timestamp": timestamp.isoformat().replace("+00:00", "Z"),
                "subject_name": subject_name,
                "performance_score": float(performance_score),
                "hours_before": float(hours_before),
                "hours_after": float(hours_after),
                "applied_rules": list(applied_rules),
            }
        )

    def as_list(self) -> list[dict[str, Any]]:
        """Return trace sorted in deterministic chronological order."""
        return sorted(self._items, key=lambda item: (str(item["timestamp"]), str(item["decision_id"])))
