"""Validation for uploaded rosters and configured rooms."""

from collections import Counter
from dataclasses import dataclass, field
from typing import List, Sequence
import pandas as pd

from data.loader import find_column
from models.room import Room


@dataclass
class ValidationResult:
    is_valid: bool = True
    errors: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def fail(self, message: str):
        self.is_valid = False
        self.errors.append(message)


ROSTER_REQUIRED_FIELDS = {"roll_number": "Roll Number", "name": "Name"}
ROSTER_OPTIONAL_FIELDS = {"class_name": "Class", "branch": "Branch"}


def validate_roster(df: pd.DataFrame) -> ValidationResult:
    """Check an uploaded roster before it is parsed into students."""
    result = ValidationResult()

    missing = [label for f, label in ROSTER_REQUIRED_FIELDS.items() if find_column(df, f) is None]
    if missing:
        result.fail(f"Roster: Missing required columns: {', '.join(missing)}")
    if df.empty:
        result.fail("Roster: File contains no data rows.")
    if not result.is_valid:
        return result

    for f, label in ROSTER_OPTIONAL_FIELDS.items():
        if find_column(df, f) is None:
            result.warnings.append(f"Roster: No '{label}' column found; it will be left blank.")

    roll_col = find_column(df, "roll_number")
    name_col = find_column(df, "name")
    rolls = df[roll_col].fillna("").astype(str).str.strip()
    names = df[name_col].fillna("").astype(str).str.strip()

    if (rolls == "").any():
        result.fail(f"Roster: {int((rolls == '').sum())} row(s) have a blank roll number.")
    if (names == "").any():
        result.fail(f"Roster: {int((names == '').sum())} row(s) have a blank name.")

    dupes = rolls[rolls.duplicated(keep=False) & (rolls != "")]
    if not dupes.empty:
        result.fail(f"Roster: Duplicate roll numbers: {sorted(dupes.unique().tolist())}")

    return result


def validate_room_setup(rooms: Sequence[Room], student_count: int) -> ValidationResult:
    """Checks run before proceeding from room configuration to the seating preview."""
    result = ValidationResult()

    if not rooms:
        result.fail("No Rooms Configured: Please configure at least one room.")
        return result

    negative = [r.room_number for r in rooms if r.benches < 0]
    if negative:
        result.fail(f"Invalid Bench Count: Rooms with negative benches: {', '.join(negative)}")

    blank = sum(1 for r in rooms if not r.room_number.strip())
    if blank:
        result.fail(f"Missing Room Numbers: {blank} room(s) have no room number.")

    total_capacity = sum(r.benches for r in rooms)
    if total_capacity < student_count:
        result.fail(
            f"Insufficient Capacity: Total room capacity ({total_capacity}) is less than "
            f"the number of students ({student_count})."
        )

    counts = Counter(r.room_number for r in rooms)
    if any(n > 1 for n in counts.values()):
        result.fail("Duplicate Room Numbers: Please ensure all room numbers are unique.")

    empty_rooms = [r.room_number for r in rooms if r.benches == 0]
    if empty_rooms:
        result.warnings.append(f"Rooms with zero benches will not be used: {', '.join(empty_rooms)}")

    return result
