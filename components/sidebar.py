"""Sidebar progress tracker for the four-step seating workflow."""

import streamlit as st
from dataclasses import dataclass
from data.session_store import STEPS, get_current_step, get_exam_info, get_students, get_configured_rooms, step_completed
from engine.seat_assigner import total_capacity


STEP_LABELS = {
    "upload": "Upload Roster",
    "configure": "Configure Rooms",
    "preview": "Preview Seating",
    "generate": "Generate Reports",
}


@dataclass
class SidebarState:
    current_step: str
    student_count: int
    total_benches: int


def render_sidebar() -> SidebarState:
    """Render progress and roster/room counts and return them."""
    current = get_current_step()
    students = get_students()
    rooms = get_configured_rooms()
    benches = total_capacity(rooms)

    with st.sidebar:
        st.title("Exam Seating Planner")
        st.divider()

        st.subheader("Progress")
        for step in STEPS:
            label = STEP_LABELS[step]
            if step_completed(step):
                st.success(label, icon="✅")
            elif step == current:
                st.info(label, icon="➡️")
            else:
                st.caption(label)

        st.divider()

        exam = get_exam_info()
        if exam.name:
            st.caption(f"Exam: {exam.title}")
        st.caption(f"Students: {len(students)}")
        st.caption(f"Rooms: {len(rooms)}")
        st.caption(f"Total Benches: {benches}")

    return SidebarState(
        current_step=current,
        student_count=len(students),
        total_benches=benches,
    )
