"""Planning engine."""

from .allocator import allocate_hours, round_hours
from .planner import StudyPlanner
from .rebalance import adaptive_adjust
from .schedule import Schedule
from .scoring import compute_priority_weight
from .subject import HISTORY_WINDOW, Subject

__all__ = [
    "HISTORY_WINDOW",
    "Schedule",
    "StudyPlanner",
    "Subject",
    "adaptive_adjust",
    "allocate_hours",
    "compute_priority_weight",
    "round_hours",
]
