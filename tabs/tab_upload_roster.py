"""Tab 1: Upload Roster — exam details and student list intake."""

import logging
import streamlit as st

from data.loader import load_file, parse_students
from data.validator import validate_roster
from data.sample_data import generate_roster_df
from data.session_store import get_students, set_roster
from engine.projections import list_branches, list_classes
from components.tables import render_roster_preview
from models.exam import ExamInfo
from config.defaults import EXAM_SHIFTS, ROSTER_PREVIEW_ROWS

LOG = logging.getLogger(__name__)


def _load_and_validate(df, exam_info: ExamInfo) -> bool:
    """Validate and store an uploaded roster."""
    result = validate_roster(df)
    if not result.is_valid:
        for e in result.errors:
            st.error(e)
        return False

    for w in result.warnings:
        st.warning(w)

    students = parse_students(df)
    set_roster(students, exam_info)
    st.success(f"Successfully extracted {len(students)} student records.")
    return True


def render(sidebar_state):
    """Render the Upload Roster tab."""
    st.header("Upload Student Roster")

    col1, col2 = st.columns(2)
    with col1:
        exam_name = st.text_input("Exam Name", placeholder="e.g., Mid-Semester Examination", key="exam_name")
    with col2:
        shift = st.selectbox("Shift", EXAM_SHIFTS, key="exam_shift")

    roster_file = st.file_uploader(
        "Student roster (CSV or XLSX with Roll Number, Name, Class, Branch)",
        type=["csv", "xlsx"],
        key="upload_roster",
    )

    col_upload, col_sample = st.columns(2)
    with col_upload:
        if st.button("Upload & Validate", type="primary", key="btn_upload_roster"):
            if not exam_name.strip():
                st.warning("Please enter the exam name.")
            elif not roster_file:
                st.warning("Please upload a roster file.")
            else:
                try:
                    df = load_file(roster_file)
                    _load_and_validate(df, ExamInfo(exam_name.strip(), shift))
                except ValueError as e:
                    LOG.warning("Roster upload rejected: %s", e)
                    st.error(f"Error loading file: {e}")

    with col_sample:
        if st.button("Load Sample Roster", key="btn_sample_roster"):
            name = exam_name.strip() or "Sample Examination"
            _load_and_validate(generate_roster_df(), ExamInfo(name, shift))

    students = get_students()
    if students:
        st.divider()
        st.subheader("Extracted Student Data Preview")
        col1, col2, col3 = st.columns(3)
        col1.metric("Total Students", len(students))
        col2.caption("Branches: " + ", ".join(b for b in list_branches(students) if b))
        col3.caption("Classes: " + ", ".join(c for c in list_classes(students) if c))
        render_roster_preview(students, ROSTER_PREVIEW_ROWS)
