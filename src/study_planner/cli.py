"""CLI entrypoint for the study planner."""

from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Callable

from study_planner.engine import StudyPlanner
from study_planner.io import read_json
from study_planner.normalization import resolve_effective_config
from study_planner.reporting import (
    DecisionTraceCollector,
    build_error_report,
    build_planner_error_report,
    render_decision_trace,
    render_error_report,
    render_schedule,
    render_subjects,
)
from study_planner.validation import (
    PlannerError,
    ValidationError,
    ValidationReport,
    validate_daily_hours,
    validate_performance_score,
    validate_subject_input,
)

logger = logging.getLogger(__name__)

DEFAULT_DATA_FILE = "study_planner.csv"

InputFn = Callable[[str], str]
OutputFn = Callable[[str], None]

_MENU = """
Menu:
1) Add Subject
2) Remove Subject
3) List Subjects
4) Set total daily hours
5) Generate Schedule
6) Show Current Schedule
7) Record Performance for Subject
8) Adaptive Adjustment
9) Save to file
10) Load from file
0) Exit"""


def _print_errors(errors: list[ValidationError]) -> int:
    print(render_error_report(build_error_report(errors)), file=sys.stderr)
    return 2


def _report_errors_to_validation_errors(report: ValidationReport) -> list[ValidationError]:
    return [
        ValidationError(
            code=issue.code,
            message=f"{issue.message}. {issue.suggested_fix}" if issue.suggested_fix else issue.message,
            path=issue.field_path,
        )
        for issue in report.errors
    ]


def _load_config(args: argparse.Namespace) -> tuple[dict[str, Any], list[ValidationError]]:
    report = ValidationReport()
    errors: list[ValidationError] = []
    file_config: dict[str, Any] | None = None

    if args.config:
        try:
            file_config = read_json(args.config)
        except FileNotFoundError:
            errors.append(
                ValidationError(code="file_not_found", message=f"Config file not found: {args.config}", path="$.config")
            )
        except ValueError as exc:
            errors.append(ValidationError(code="invalid_json", message=str(exc), path="$.config"))

    if args.hours is not None:
        errors.extend(validate_daily_hours(args.hours))

    config = resolve_effective_config(
        file_config,
        {"total_daily_hours": args.hours},
        validation_report=report,
    )
    for info in report.infos:
        logger.info("%s: %s", info.code, info.message)
    errors.extend(_report_errors_to_validation_errors(report))
    return config, errors


def _adjust_kwargs(config: dict[str, Any], args: argparse.Namespace | None = None) -> dict[str, float]:
    kwargs = {
        "low_threshold": config["low_threshold"],
        "high_threshold": config["high_threshold"],
        "boost_factor": config["boost_factor"],
        "reduce_factor": config["reduce_factor"],
    }
    if args is not None:
        for key in kwargs:
            value = getattr(args, key, None)
            if value is not None:
                kwargs[key] = float(value)
    return kwargs


def _prompt_number(
    prompt: str,
    minimum: float,
    maximum: float,
    *,
    cast: Callable[[str], Any],
    input_fn: InputFn,
    output: OutputFn,
) -> Any:
    while True:
        raw = input_fn(prompt).strip()
        try:
            value = cast(raw)
        except ValueError:
            output(f"Please enter a number between {minimum:g} and {maximum:g}.")
            continue
        if minimum <= value <= maximum:
            return value
        output(f"Please enter a number between {minimum:g} and {maximum:g}.")


def _prompt_text(prompt: str, *, input_fn: InputFn) -> str:
    value = input_fn(prompt)
    while not value.strip():
        value = input_fn(prompt)
    return value.strip()


def run_interactive(
    planner: StudyPlanner,
    config: dict[str, Any],
    *,
    data_path: str | Path,
    input_fn: InputFn = input,
    output: OutputFn = print,
) -> int:
    """Menu-driven session; planner errors are reported and the loop continues."""
    output("=== SMART STUDY PLANNER ===")
    while True:
        output(_MENU)
        try:
            choice = input_fn("Enter choice: ").strip()
        except EOFError:
            break

        try:
            if choice == "0":
                break
            elif choice == "1":
                name = _prompt_text("Subject name: ", input_fn=input_fn)
                difficulty = _prompt_number("Difficulty (1-10): ", 1, 10, cast=int, input_fn=input_fn, output=output)
                importance = _prompt_number("Importance (1-10): ", 1, 10, cast=int, input_fn=input_fn, output=output)
                performance = _prompt_number(
                    "Initial performance (0-100): ", 0, 100, cast=float, input_fn=input_fn, output=output
                )
                errors = validate_subject_input(
                    name=name, difficulty=difficulty, importance=importance, performance=performance
                )
                if errors:
                    output(render_error_report(build_error_report(errors)))
                    continue
                planner.add_subject(name, difficulty, importance, performance)
            elif choice == "2":
                planner.remove_subject(_prompt_text("Subject name to remove: ", input_fn=input_fn))
            elif choice == "3":
                output(render_subjects(planner.subjects))
            elif choice == "4":
                hours = _prompt_number(
                    "Enter total study hours per day: ", 0, 24, cast=float, input_fn=input_fn, output=output
                )
                planner.set_total_daily_hours(hours)
            elif choice == "5":
                output(render_schedule(planner.generate_schedule()))
            elif choice == "6":
                output(render_schedule(planner.current_schedule()))
            elif choice == "7":
                name = _prompt_text("Subject name: ", input_fn=input_fn)
                score = _prompt_number("Enter score (0-100): ", 0, 100, cast=float, input_fn=input_fn, output=output)
                planner.record_performance(name, score)
            elif choice == "8":
                output(render_schedule(planner.adaptive_adjust(**_adjust_kwargs(config))))
            elif choice == "9":
                filename = input_fn(f"Save filename [{data_path}]: ").strip() or str(data_path)
                planner.save(filename)
                output(f"Saved {len(planner)} subjects to {filename}")
            elif choice == "10":
                filename = input_fn(f"Load filename [{data_path}]: ").strip() or str(data_path)
                planner.load(filename)
                output(f"Loaded {len(planner)} subjects from {filename}")
            else:
                output(f"Unknown choice: {choice}")
        except EOFError:
            break
        except PlannerError as exc:
            output(render_error_report(build_planner_error_report(exc)))

    output("Goodbye!")
    return 0


def _run_command(args: argparse.Namespace, planner: StudyPlanner, config: dict[str, Any]) -> int:
    data_path = Path(args.data)

    if args.command == "add":
        errors = validate_subject_input(
            name=args.name,
            difficulty=args.difficulty,
            importance=args.importance,
            performance=args.performance,
        )
        if errors:
            return _print_errors(errors)
        planner.add_subject(args.name, args.difficulty, args.importance, args.performance)
        planner.save(data_path)
    elif args.command == "remove":
        planner.remove_subject(args.name)
        planner.save(data_path)
    elif args.command == "list":
        print(render_subjects(planner.subjects))
    elif args.command == "schedule":
        print(render_schedule(planner.generate_schedule()))
        planner.save(data_path)
    elif args.command == "show":
        print(render_schedule(planner.current_schedule()))
    elif args.command == "record":
        errors = validate_performance_score(args.score)
        if errors:
            return _print_errors(errors)
        planner.record_performance(args.name, args.score)
        planner.save(data_path)
    elif args.command == "adjust":
        trace = DecisionTraceCollector(start_timestamp=datetime.now(timezone.utc)) if args.trace else None
        schedule = planner.adaptive_adjust(**_adjust_kwargs(config, args), decision_trace=trace)
        if trace is not None:
            print(render_decision_trace(trace.as_list()))
        print(render_schedule(schedule))
        planner.save(data_path)
    elif args.command == "interactive":
        return run_interactive(planner, config, data_path=data_path)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="study-planner", description="Adaptive daily study planner CLI")
    parser.add_argument("--data", default=DEFAULT_DATA_FILE, help="Path to the subjects file")
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--hours", type=float, help="Total study hours per day (0-24)")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    add_parser = subparsers.add_parser("add", help="Add a subject")
    add_parser.add_argument("name")
    add_parser.add_argument("--difficulty", type=int, required=True, help="Difficulty (1-10)")
    add_parser.add_argument("--importance", type=int, required=True, help="Importance (1-10)")
    add_parser.add_argument("--performance", type=float, default=100.0, help="Initial performance (0-100)")

    remove_parser = subparsers.add_parser("remove", help="Remove a subject")
    remove_parser.add_argument("name")

    subparsers.add_parser("list", help="List subjects")
    subparsers.add_parser("schedule", help="Generate a weighted schedule")
    subparsers.add_parser("show", help="Show the current schedule")

    record_parser = subparsers.add_parser(
        "record",
        help=(
            "Record a performance score. Score history is not saved, so the recorded score "
            "replaces the stored one instead of averaging with earlier sessions"
        ),
    )
    record_parser.add_argument("name")
    record_parser.add_argument("score", type=float)

    adjust_parser = subparsers.add_parser("adjust", help="Adapt the schedule to recent performance")
    adjust_parser.add_argument("--low", dest="low_threshold", type=float)
    adjust_parser.add_argument("--high", dest="high_threshold", type=float)
    adjust_parser.add_argument("--boost", dest="boost_factor", type=float)
    adjust_parser.add_argument("--reduce", dest="reduce_factor", type=float)
    adjust_parser.add_argument("--trace", action="store_true", help="Print per-subject decisions")

    subparsers.add_parser("interactive", help="Start the menu-driven session")

    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    config, errors = _load_config(args)
    if errors:
        return _print_errors(errors)

    planner = StudyPlanner(config["total_daily_hours"], min_slot_hours=config["min_slot_hours"])
    try:
        if Path(args.data).exists():
            planner.load(args.data)
        return _run_command(args, planner, config)
    except PlannerError as exc:
        print(render_error_report(build_planner_error_report(exc)), file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
