"""Tab 2: Configure Rooms — room numbers and bench counts, with capacity checks."""

import streamlit as st

from data.loader import rooms_to_frame, parse_rooms
from data.validator import validate_room_setup
from data.session_store import (
    get_students, get_exam_info, get_draft_rooms, get_room_editor_version,
    set_draft_rooms, set_configured_rooms,
)
from engine.room_config import build_default_rooms, add_room
from engine.projections import utilization_pct
from engine.seat_assigner import total_capacity
from config.defaults import MAX_ROOMS


def render(sidebar_state):
    """Render the Configure Rooms tab."""
    st.header("Room Configuration")

    students = get_students()
    if not students:
        st.info("No roster loaded. Please upload students in the Upload Roster tab.")
        return

    exam = get_exam_info()
    st.caption(f"Configure exam rooms and their seating capacity for {exam.title}")

    col1, col2 = st.columns([1, 3])
    with col1:
        count = st.number_input(
            "Number of Rooms", min_value=1, max_value=MAX_ROOMS, value=3, step=1, key="num_rooms",
        )
    with col2:
        st.write("")
        if st.button("Create Rooms", key="btn_create_rooms"):
            set_draft_rooms(build_default_rooms(int(count)))

    base_rooms = get_draft_rooms()
    if not base_rooms:
        return

    st.subheader("Room Details")
    edited = st.data_editor(
        rooms_to_frame(base_rooms),
        num_rows="dynamic",
        use_container_width=True,
        hide_index=True,
        column_config={
            "Room Number": st.column_config.TextColumn("Room Number", required=True),
            "Benches": st.column_config.NumberColumn("Benches", min_value=0, step=1, required=True),
        },
        key=f"room_editor_{get_room_editor_version()}",
    )
    rooms = parse_rooms(edited.dropna(subset=["Benches"]))

    if st.button("Add Room", key="btn_add_room"):
        set_draft_rooms(add_room(rooms))
        st.rerun()

    capacity = total_capacity(rooms)
    col1, col2, col3 = st.columns(3)
    col1.metric("Students", len(students))
    col2.metric("Capacity", capacity)
    col3.metric("Utilization", f"{utilization_pct(len(students), rooms)}%")

    if st.button("Proceed to Preview", type="primary", key="btn_rooms_done"):
        result = validate_room_setup(rooms, len(students))
        if not result.is_valid:
            for e in result.errors:
                st.error(e)
            return
        for w in result.warnings:
            st.warning(w)
        set_configured_rooms(rooms)
        st.success(f"{len(rooms)} rooms configured. Continue in the Preview Seating tab.")
