"""I/O helpers for subject files and JSON configuration."""

from __future__ import annotations

import json
import logging
import math
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable

from study_planner.validation.errors import ParseError, PersistenceError

logger = logging.getLogger(__name__)

CSV_HEADER = "name,difficulty,importance,perfScore,allocatedHours"
_HEADER_MARKER = "name,difficulty,importance"
_FIELD_COUNT = 5


@dataclass(slots=True, frozen=True)
class SubjectRecord:
    """One persisted subject row."""

    name: str
    difficulty: int
    importance: int
    performance_score: float
    allocated_hours: float

    def to_line(self) -> str:
        return ",".join(
            [
                self.name,
                str(self.difficulty),
                str(self.importance),
                repr(float(self.performance_score)),
                repr(float(self.allocated_hours)),
            ]
        )


def _parse_float(raw: str, field: str, line_number: int) -> float:
    try:
        value = float(raw)
    except ValueError:
        raise ParseError(f"{field} is not a number: {raw!r}", line_number=line_number) from None
    if not math.isfinite(value):
        raise ParseError(f"{field} is not a finite number: {raw!r}", line_number=line_number)
    return value


def _parse_int(raw: str, field: str, line_number: int) -> int:
    return int(_parse_float(raw, field, line_number))


def parse_subject_line(line: str, line_number: int = 1) -> SubjectRecord:
    """Parse ``name,difficulty,importance,performance,hours``.

    Extra trailing fields are ignored.
    """
    parts = line.split(",")
    if len(parts) < _FIELD_COUNT:
        raise ParseError(
            f"expected {_FIELD_COUNT} comma-separated fields, got {len(parts)}",
            line_number=line_number,
        )
    return SubjectRecord(
        name=parts[0],
        difficulty=_parse_int(parts[1], "difficulty", line_number),
        importance=_parse_int(parts[2], "importance", line_number),
        performance_score=_parse_float(parts[3], "performance", line_number),
        allocated_hours=_parse_float(parts[4], "allocated_hours", line_number),
    )


def read_subject_records(path: str | Path) -> list[SubjectRecord]:
    """Read every subject row from a planner file.

    Blank lines are skipped, and so is a first line that looks like the header.
    """
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(f"Unable to open file for reading: {path} ({exc.strerror or exc})") from exc

    records: list[SubjectRecord] = []
    seen: set[str] = set()
    first = True
    for line_number, line in enumerate(text.splitlines(), start=1):
        if not line:
            continue
        if first and _HEADER_MARKER in line:
            first = False
            continue
        first = False
        record = parse_subject_line(line, line_number)
        if record.name in seen:
            raise ParseError(f"duplicate subject name: {record.name!r}", line_number=line_number)
        seen.add(record.name)
        records.append(record)

    logger.info("Loaded %d subjects from %s", len(records), path)
    return records


def write_subject_records(path: str | Path, records: Iterable[SubjectRecord]) -> None:
    """Overwrite ``path`` with a header line followed by one row per subject."""
    lines = [CSV_HEADER, *(record.to_line() for record in records)]
    try:
        Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")
    except OSError as exc:
        raise PersistenceError(f"Unable to open file for writing: {path} ({exc.strerror or exc})") from exc
    logger.info("Saved %d subjects to %s", len(lines) - 1, path)


def read_json(path: str | Path) -> dict[str, Any]:
    """Read a JSON file and return a dictionary payload."""
    payload = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(payload, dict):
        raise ValueError(f"JSON root must be an object: {path}")
    return payload
