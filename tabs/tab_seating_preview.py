"""Tab 3: Preview Seating — generate, filter and regenerate the seating plan."""

import logging
import streamlit as st

from data.session_store import (
    get_students, get_configured_rooms, get_exam_info,
    get_seating_plan, set_seating_plan, set_final_plan,
)
from engine.errors import SeatingError
from engine.seat_assigner import assign_seats, regenerate_plan
from engine.projections import (
    filter_assignments, group_by_room, list_branches, list_rooms,
    room_occupancy, branch_counts_by_room,
)
from components.charts import room_occupancy_bar, branch_by_room_heatmap
from components.metrics_cards import render_summary_metrics
from components.tables import render_room_table

LOG = logging.getLogger(__name__)


def _filter_label(value):
    return "All" if value is None else value


def render(sidebar_state):
    """Render the Preview Seating tab."""
    st.header("Seating Arrangement Preview")

    students = get_students()
    rooms = get_configured_rooms()
    if not students or not rooms:
        st.info("Configure rooms first in the Configure Rooms tab.")
        return

    st.caption(f"Review the generated seating plan for {get_exam_info().title}")

    plan = get_seating_plan()
    regenerate = st.button("Regenerate Seating", key="btn_regenerate")
    try:
        if plan is None:
            plan = assign_seats(students, rooms)
            set_seating_plan(plan)
        elif regenerate:
            plan = regenerate_plan(students, rooms)
            set_seating_plan(plan)
    except SeatingError as e:
        st.error(str(e))
        return

    render_summary_metrics(plan.summary)

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(room_occupancy_bar(room_occupancy(plan, rooms)), use_container_width=True)
    with col2:
        branches = [b for b in list_branches(students) if b]
        if branches:
            st.plotly_chart(
                branch_by_room_heatmap(branch_counts_by_room(plan), list_rooms(plan), branches),
                use_container_width=True,
            )

    st.divider()

    col1, col2 = st.columns(2)
    with col1:
        room_filter = st.selectbox(
            "Filter by Room", [None] + [r.room_number for r in rooms],
            format_func=_filter_label, key="preview_room",
        )
    with col2:
        branch_filter = st.selectbox(
            "Filter by Branch", [None] + list_branches(students),
            format_func=_filter_label, key="preview_branch",
        )

    filtered = filter_assignments(plan, room_filter, branch_filter)
    if not filtered:
        st.info("No students match the selected filters.")
    for room_number, items in group_by_room(filtered).items():
        render_room_table(room_number, items, title=f"Room {room_number} ({len(items)} students)")

    if st.button("Proceed to Reports", type="primary", key="btn_preview_done"):
        set_final_plan(plan)
        LOG.info("Seating plan accepted with %d assignments", len(plan.assignments))
        st.success("Seating plan saved. Continue in the Generate Reports tab.")
