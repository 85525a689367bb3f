"""File upload parsing — CSV/XLSX into typed model lists."""

import logging
import pandas as pd
from typing import Dict, List, Optional
from models.student import Student
from models.room import Room

LOG = logging.getLogger(__name__)


# Accepted header spellings per field (case-insensitive matching)
COLUMN_ALIASES = {
    "roll_number": ["roll number", "roll no", "roll no.", "rollno", "roll", "roll_number"],
    "name": ["name", "student name", "student_name"],
    "class_name": ["class", "year", "class_name"],
    "branch": ["branch", "department", "dept"],
    "room_number": ["room number", "room", "room no", "room_number"],
    "benches": ["benches", "bench count", "capacity", "total benches"],
}


def find_column(df: pd.DataFrame, field: str) -> Optional[str]:
    """Return the DataFrame column that matches one of the field's aliases, if any."""
    lower_map = {str(c).lower().strip(): c for c in df.columns}
    for alias in COLUMN_ALIASES[field]:
        if alias in lower_map:
            return lower_map[alias]
    return None


def resolve_columns(df: pd.DataFrame, fields: List[str]) -> Dict[str, Optional[str]]:
    return {f: find_column(df, f) for f in fields}


def _cell(row, column: Optional[str]) -> str:
    if column is None or pd.isna(row.get(column)):
        return ""
    return str(row[column]).strip()


def parse_students(df: pd.DataFrame) -> List[Student]:
    """Convert a roster DataFrame into Student objects."""
    cols = resolve_columns(df, ["roll_number", "name", "class_name", "branch"])
    students = []
    for _, row in df.iterrows():
        students.append(Student(
            roll_number=_cell(row, cols["roll_number"]),
            name=_cell(row, cols["name"]),
            class_name=_cell(row, cols["class_name"]),
            branch=_cell(row, cols["branch"]),
        ))
    LOG.info("Parsed %d students from roster", len(students))
    return students


def parse_rooms(df: pd.DataFrame) -> List[Room]:
    """Convert a rooms DataFrame into Room objects."""
    cols = resolve_columns(df, ["room_number", "benches"])
    rooms = []
    for _, row in df.iterrows():
        rooms.append(Room(
            room_number=_cell(row, cols["room_number"]),
            benches=int(row[cols["benches"]]),
        ))
    return rooms


def rooms_to_frame(rooms: List[Room]) -> pd.DataFrame:
    return pd.DataFrame(
        [{"Room Number": r.room_number, "Benches": r.benches} for r in rooms],
        columns=["Room Number", "Benches"],
    )


def load_file(uploaded_file) -> pd.DataFrame:
    """Load an uploaded file (CSV or XLSX) into a DataFrame."""
    name = uploaded_file.name.lower()
    if not name.endswith((".csv", ".xlsx", ".xls")):
        raise ValueError(f"Unsupported file format: {name}. Use CSV or XLSX.")

    # Readers raise their own types for corrupt files (BadZipFile, ParserError, ...)
    try:
        if name.endswith(".csv"):
            return pd.read_csv(uploaded_file, dtype=str)
        return pd.read_excel(uploaded_file, engine="openpyxl", dtype=str)
    except Exception as e:
        LOG.warning("Could not read %s: %s", name, e)
        raise ValueError(f"Could not read {name}: {e}") from e
