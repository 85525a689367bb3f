"""Tabular exports of a seating plan — DataFrames, XLSX workbook and CSV bytes."""

import io
import logging
import re
from datetime import date
from typing import Optional, Sequence, Set

import pandas as pd

from models.exam import ExamInfo
from models.seating import SeatingAssignment, SeatingPlan
from engine.projections import group_by_room
from config.defaults import (
    ATTENDANCE_COLUMNS, EXCEL_SHEET_NAME_LIMIT,
    ROOM_SHEET_COLUMNS, SEATING_LIST_COLUMNS,
)

LOG = logging.getLogger(__name__)


def _room_sort_key(room_number: str):
    # Numeric rooms first in numeric order, then the rest alphabetically
    stripped = room_number.strip()
    if stripped.isdigit():
        return (0, int(stripped), "")
    return (1, 0, stripped)


def summary_frame(plan: SeatingPlan, exam_info: ExamInfo, generated_on: Optional[date] = None) -> pd.DataFrame:
    generated_on = generated_on or date.today()
    s = plan.summary
    rows = [
        ("Exam Name", exam_info.name),
        ("Shift", exam_info.shift),
        ("Generated Date", generated_on.isoformat()),
        ("Total Students", s.total_students),
        ("Total Rooms", s.total_rooms),
        ("Total Benches", s.total_benches),
        ("Occupied Benches", s.occupied_benches),
        ("Empty Benches", s.empty_benches),
    ]
    return pd.DataFrame(rows, columns=["Field", "Value"])


def seating_list_frame(plan: SeatingPlan) -> pd.DataFrame:
    """Every assignment, sorted by room then bench."""
    ordered = sorted(
        plan.assignments,
        key=lambda a: (_room_sort_key(a.room_number), a.bench_number),
    )
    rows = [[
        a.room_number, a.bench_number, a.student.roll_number,
        a.student.name, a.student.class_name, a.student.branch,
    ] for a in ordered]
    return pd.DataFrame(rows, columns=SEATING_LIST_COLUMNS)


def room_frame(assignments: Sequence[SeatingAssignment]) -> pd.DataFrame:
    """Seating list for a single room, ascending bench."""
    ordered = sorted(assignments, key=lambda a: a.bench_number)
    rows = [[
        a.bench_number, a.student.roll_number, a.student.name,
        a.student.class_name, a.student.branch,
    ] for a in ordered]
    return pd.DataFrame(rows, columns=ROOM_SHEET_COLUMNS)


def attendance_frame(assignments: Sequence[SeatingAssignment]) -> pd.DataFrame:
    """Attendance sheet for one room with a blank signature column."""
    ordered = sorted(assignments, key=lambda a: a.bench_number)
    rows = [[
        i, a.student.roll_number, a.student.name, a.bench_number, "",
    ] for i, a in enumerate(ordered, start=1)]
    return pd.DataFrame(rows, columns=ATTENDANCE_COLUMNS)


def room_sheet_name(room_number: str) -> str:
    # Excel forbids []:*?/\ in sheet names
    cleaned = re.sub(r"[\[\]:*?/\\]", "-", f"Room {room_number}")
    return cleaned[:EXCEL_SHEET_NAME_LIMIT]


def unique_sheet_name(room_number: str, taken: Set[str]) -> str:
    """Room sheet name that does not clash, ignoring case, with any name in ``taken``.

    Clashes get a " (n)" suffix, trimming the base so the result stays within
    Excel's sheet name limit. The chosen name is added to ``taken``.
    """
    name = room_sheet_name(room_number)
    n = 2
    while name.lower() in taken:
        suffix = f" ({n})"
        name = room_sheet_name(room_number)[:EXCEL_SHEET_NAME_LIMIT - len(suffix)] + suffix
        n += 1
    taken.add(name.lower())
    return name


def export_filename(exam_name: str, suffix: str) -> str:
    base = re.sub(r"\s+", "_", exam_name.strip()) or "Exam"
    return f"{base}_{suffix}"


def build_workbook(plan: SeatingPlan, exam_info: ExamInfo, generated_on: Optional[date] = None) -> bytes:
    """Summary sheet, complete seating list, and one sheet per room."""
    buffer = io.BytesIO()
    taken = {"summary", "complete seating list"}
    room_sheets = 0
    with pd.ExcelWriter(buffer, engine="openpyxl") as writer:
        summary_frame(plan, exam_info, generated_on).to_excel(writer, sheet_name="Summary", index=False)
        seating_list_frame(plan).to_excel(writer, sheet_name="Complete Seating List", index=False)
        for room_number, items in group_by_room(plan).items():
            name = unique_sheet_name(room_number, taken)
            room_sheets += 1
            room_frame(items).to_excel(writer, sheet_name=name, index=False)
    LOG.info("Built seating workbook with %d room sheets", room_sheets)
    return buffer.getvalue()


def frame_to_csv_bytes(df: pd.DataFrame) -> bytes:
    return df.to_csv(index=False).encode("utf-8")


def build_attendance_csv(plan: SeatingPlan, room_number: str) -> bytes:
    items = group_by_room(plan).get(room_number, [])
    return frame_to_csv_bytes(attendance_frame(items))
