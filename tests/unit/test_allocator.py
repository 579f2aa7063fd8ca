from __future__ import annotations

import pytest

from study_planner.engine import StudyPlanner, Subject, allocate_hours, round_hours


class _ZeroWeightSubject(Subject):
    __slots__ = ()

    def priority_weight(self) -> float:
        return 0.0


def _reference_planner(total: float = 4.0) -> StudyPlanner:
    planner = StudyPlanner(total)
    planner.add_subject("Math", 9, 10, 80.0)
    planner.add_subject("Physics", 8, 9, 70.0)
    planner.add_subject("History", 4, 5, 90.0)
    planner.add_subject("English", 3, 4, 95.0)
    return planner


def test_empty_planner_yields_empty_schedule() -> None:
    schedule = StudyPlanner(4.0).generate_schedule()
    assert len(schedule) == 0
    assert schedule.total_hours == 0.0


def test_reference_scenario_floor_then_renormalize() -> None:
    planner = _reference_planner()
    weights = [subject.priority_weight() for subject in planner.subjects]
    assert weights == pytest.approx([63.0, 57.6, 12.0, 6.6])

    schedule = planner.generate_schedule()

    assert schedule.as_dict() == pytest.approx(
        {"Math": 1.78, "Physics": 1.63, "History": 0.34, "English": 0.25}
    )
    assert schedule.total_hours == pytest.approx(4.0, abs=0.04)
    assert [s.allocated_hours for s in planner.subjects] == [schedule[s.name] for s in planner.subjects]


def test_single_subject_with_perfect_performance_gets_full_budget() -> None:
    planner = StudyPlanner(3.5)
    planner.add_subject("Art", 2, 3, 100.0)

    schedule = planner.generate_schedule()

    assert schedule["Art"] == pytest.approx(3.5)
    assert planner.find_subject("Art").allocated_hours == pytest.approx(3.5)


def test_floor_can_be_pushed_below_minimum_when_budget_is_small() -> None:
    planner = StudyPlanner(1.0)
    for idx in range(10):
        planner.add_subject(f"S{idx}", 1 + idx % 3, 2, 50.0)

    schedule = planner.generate_schedule()

    assert all(hours < 0.25 for hours in schedule.allocations.values())
    assert schedule.total_hours == pytest.approx(1.0, abs=0.1)


def test_zero_budget_allocates_nothing() -> None:
    planner = _reference_planner(total=0.0)
    schedule = planner.generate_schedule()
    assert all(hours == 0.0 for hours in schedule.allocations.values())


def test_non_positive_weights_fall_back_to_equal_split() -> None:
    subjects = [_ZeroWeightSubject(name, 5, 5) for name in ("a", "b", "c")]

    schedule = allocate_hours(subjects, total_daily_hours=1.0)

    assert schedule.as_dict() == pytest.approx({"a": 1 / 3, "b": 1 / 3, "c": 1 / 3})
    assert all(subject.allocated_hours == pytest.approx(1 / 3) for subject in subjects)


def test_custom_minimum_slot() -> None:
    planner = _reference_planner()
    planner.min_slot_hours = 0.5

    schedule = planner.generate_schedule()

    assert schedule["English"] >= 0.45
    assert schedule.total_hours == pytest.approx(4.0, abs=0.04)


def test_round_hours_rounds_halves_away_from_zero() -> None:
    assert round_hours(0.125) == 0.13
    assert round_hours(1.784) == 1.78
    assert round_hours(0.0) == 0.0
