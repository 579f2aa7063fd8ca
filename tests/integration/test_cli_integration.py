from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable

import pytest

from study_planner.cli import main, run_interactive
from study_planner.engine import StudyPlanner
from study_planner.io import CSV_HEADER
from study_planner.normalization import DEFAULT_PLANNER_CONFIG


def _run(tmp_path: Path, *args: str) -> int:
    return main(["--data", str(tmp_path / "plan.csv"), *args])


def _seed_reference_subjects(tmp_path: Path) -> None:
    for name, difficulty, importance, performance in (
        ("Math", "9", "10", "80"),
        ("Physics", "8", "9", "70"),
        ("History", "4", "5", "90"),
        ("English", "3", "4", "95"),
    ):
        code = _run(
            tmp_path,
            "add",
            name,
            "--difficulty",
            difficulty,
            "--importance",
            importance,
            "--performance",
            performance,
        )
        assert code == 0


def _scripted(answers: Iterable[str]):
    pending = list(answers)

    def _input(prompt: str) -> str:
        if not pending:
            raise EOFError
        return pending.pop(0)

    return _input


def test_add_schedule_and_show_round_trip_through_data_file(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _seed_reference_subjects(tmp_path)

    assert _run(tmp_path, "--hours", "4", "schedule") == 0
    out = capsys.readouterr().out
    assert "Schedule (total 4.00 hrs):" in out
    assert "1.78 hrs" in out

    lines = (tmp_path / "plan.csv").read_text(encoding="utf-8").splitlines()
    assert lines[0] == CSV_HEADER
    assert lines[1] == "Math,9,10,80.0,1.78"

    assert _run(tmp_path, "show") == 0
    assert "Math            -> 1.78 hrs" in capsys.readouterr().out


def test_duplicate_add_reports_error_and_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _seed_reference_subjects(tmp_path)
    capsys.readouterr()

    code = _run(tmp_path, "add", "Math", "--difficulty", "1", "--importance", "1")

    assert code == 2
    assert "Error [DUPLICATE_SUBJECT]: Subject already exists: Math" in capsys.readouterr().err


def test_out_of_range_input_is_rejected_before_reaching_planner(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = _run(tmp_path, "add", "Math", "--difficulty", "11", "--importance", "5")

    assert code == 2
    assert "OUT_OF_RANGE" in capsys.readouterr().err
    assert not (tmp_path / "plan.csv").exists()

    assert _run(tmp_path, "--hours", "30", "list") == 2


def test_record_unknown_subject_reports_not_found(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _seed_reference_subjects(tmp_path)

    assert _run(tmp_path, "record", "Biology", "50") == 2
    assert "SUBJECT_NOT_FOUND" in capsys.readouterr().err


def test_remove_and_list(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _seed_reference_subjects(tmp_path)
    assert _run(tmp_path, "remove", "History") == 0
    assert _run(tmp_path, "remove", "Nonexistent") == 0
    capsys.readouterr()

    assert _run(tmp_path, "list") == 0
    out = capsys.readouterr().out
    assert "History" not in out
    assert "Math" in out and "English" in out


def test_record_and_adjust_with_trace(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    _seed_reference_subjects(tmp_path)
    assert _run(tmp_path, "schedule") == 0
    assert _run(tmp_path, "record", "Math", "40") == 0
    capsys.readouterr()

    assert _run(tmp_path, "adjust", "--trace") == 0
    out = capsys.readouterr().out
    assert "Decisions:" in out
    assert "RULE_BOOST_LOW_PERFORMANCE" in out

    planner = StudyPlanner()
    planner.load(tmp_path / "plan.csv")
    assert planner.get_subject("Math").performance_score == 40.0
    assert planner.get_subject("Math").allocated_hours > 1.78


def test_config_file_sets_budget(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"total_daily_hours": 6}), encoding="utf-8")
    _seed_reference_subjects(tmp_path)

    assert _run(tmp_path, "--config", str(config), "schedule") == 0
    assert "Schedule (total 6.00 hrs):" in capsys.readouterr().out


def test_invalid_config_file_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"weekly_hours": 6}), encoding="utf-8")

    assert _run(tmp_path, "--config", str(config), "list") == 2
    assert "INVALID_CONFIG_KEY" in capsys.readouterr().err
    assert _run(tmp_path, "--config", str(tmp_path / "missing.json"), "list") == 2


def test_malformed_data_file_exits_2(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    (tmp_path / "plan.csv").write_text("Math,9\n", encoding="utf-8")

    assert _run(tmp_path, "list") == 2
    assert "PARSE_ERROR" in capsys.readouterr().err


def test_interactive_session_reprompts_and_survives_errors(tmp_path: Path) -> None:
    planner = StudyPlanner(4.0)
    output: list[str] = []
    save_target = tmp_path / "session.csv"

    code = run_interactive(
        planner,
        dict(DEFAULT_PLANNER_CONFIG),
        data_path=tmp_path / "default.csv",
        input_fn=_scripted(
            [
                "1", "Math", "abc", "9", "10", "80",
                "1", "Math", "1", "1", "50",
                "7", "Biology", "50",
                "4", "25", "2",
                "5",
                "8",
                "9", str(save_target),
                "0",
            ]
        ),
        output=output.append,
    )

    assert code == 0
    assert output[-1] == "Goodbye!"
    assert planner.total_daily_hours == 2.0
    assert planner.get_subject("Math").allocated_hours == 2.0
    assert any("DUPLICATE_SUBJECT" in line for line in output)
    assert any("SUBJECT_NOT_FOUND" in line for line in output)
    assert sum("Please enter a number" in line for line in output) == 2
    assert save_target.read_text(encoding="utf-8").splitlines()[1] == "Math,9,10,80.0,2.0"


def test_interactive_load_uses_default_path_and_stops_at_eof(tmp_path: Path) -> None:
    data_path = tmp_path / "default.csv"
    data_path.write_text("History,4,5,90,0.5\n", encoding="utf-8")
    planner = StudyPlanner()
    output: list[str] = []

    run_interactive(
        planner,
        dict(DEFAULT_PLANNER_CONFIG),
        data_path=data_path,
        input_fn=_scripted(["10", "", "3", "6"]),
        output=output.append,
    )

    assert [s.name for s in planner.subjects] == ["History"]
    assert any("History" in line and "hrs: 0.50" in line for line in output)
    assert any("Schedule (total 0.50 hrs):" in line for line in output)
    assert output[-1] == "Goodbye!"


def test_nan_performance_is_rejected_before_saving(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    code = _run(tmp_path, "add", "Math", "--difficulty", "5", "--importance", "5", "--performance", "nan")

    assert code == 2
    assert "OUT_OF_RANGE" in capsys.readouterr().err
    assert not (tmp_path / "plan.csv").exists()

    _seed_reference_subjects(tmp_path)
    assert _run(tmp_path, "record", "Math", "nan") == 2
    assert _run(tmp_path, "--hours", "nan", "schedule") == 2
    assert _run(tmp_path, "schedule") == 0


def test_record_help_explains_history_is_not_persisted(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit):
        main(["--help"])

    help_text = " ".join(capsys.readouterr().out.split())
    assert "recorded score replaces the stored one" in help_text


def test_config_errors_include_suggested_fix(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config = tmp_path / "config.json"
    config.write_text(json.dumps({"weekly_hours": 6}), encoding="utf-8")

    assert _run(tmp_path, "--config", str(config), "list") == 2
    assert "Use one of: boost_factor" in capsys.readouterr().err
