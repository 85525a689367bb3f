"""Dataframe display helpers for rosters and seating lists."""

import streamlit as st
import pandas as pd
from typing import List, Optional, Sequence
from models.seating import SeatingAssignment
from models.student import Student


def students_to_frame(students: Sequence[Student]) -> pd.DataFrame:
    return pd.DataFrame(
        [[s.roll_number, s.name, s.class_name, s.branch] for s in students],
        columns=["Roll Number", "Name", "Class", "Branch"],
    )


def render_roster_preview(students: List[Student], limit: int):
    """Show the first ``limit`` students and a count of the rest."""
    st.dataframe(students_to_frame(students[:limit]), use_container_width=True, hide_index=True)
    if len(students) > limit:
        st.caption(f"... and {len(students) - limit} more students")


def render_room_table(
    room_number: str,
    assignments: Sequence[SeatingAssignment],
    title: Optional[str] = None,
):
    """Render one room's seats in bench order."""
    st.subheader(title or f"Room {room_number}")
    rows = [[a.bench_number, a.student.roll_number, a.student.name, a.student.class_name, a.student.branch]
            for a in sorted(assignments, key=lambda a: a.bench_number)]
    df = pd.DataFrame(rows, columns=["Bench", "Roll Number", "Name", "Class", "Branch"])
    st.dataframe(df, use_container_width=True, hide_index=True)
