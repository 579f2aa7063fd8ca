"""Schedule value object: subject name to allocated daily hours."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(slots=True)
class Schedule:
    """Point-in-time allocation of the daily budget.

    Entries keep the order in which subjects were allocated.
    """

    allocations: dict[str, float] = field(default_factory=dict)

    def __add__(self, other: "Schedule") -> "Schedule":
        merged = dict(self.allocations)
        for name, hours in other.allocations.items():
            merged[name] = merged.get(name, 0.0) + hours
        return Schedule(merged)

    def __len__(self) -> int:
        return len(self.allocations)

    def __iter__(self) -> Iterator[str]:
        return iter(self.allocations)

    def __getitem__(self, name: str) -> float:
        return self.allocations[name]

    @property
    def total_hours(self) -> float:
        return sum(self.allocations.values())

    def as_dict(self) -> dict[str, float]:
        return dict(self.allocations)
