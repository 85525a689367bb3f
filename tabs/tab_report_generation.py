"""Tab 4: Generate Reports — spreadsheet and CSV downloads for the accepted plan."""

import streamlit as st

from data.session_store import get_final_plan, get_exam_info
from data.exporter import (
    build_workbook, build_attendance_csv, export_filename,
    frame_to_csv_bytes, seating_list_frame, summary_frame,
)
from engine.projections import list_rooms
from components.metrics_cards import render_summary_metrics
from components.charts import occupancy_donut


def render(sidebar_state):
    """Render the Generate Reports tab."""
    st.header("Generate Reports")

    plan = get_final_plan()
    if plan is None:
        st.info("No seating plan accepted yet. Use Preview Seating first.")
        return

    exam = get_exam_info()
    render_summary_metrics(plan.summary)
    col1, col2 = st.columns([3, 2])
    with col1:
        st.dataframe(summary_frame(plan, exam).astype(str), use_container_width=True, hide_index=True)
    with col2:
        st.plotly_chart(
            occupancy_donut(plan.summary.occupied_benches, plan.summary.total_benches),
            use_container_width=True,
        )

    st.divider()
    st.subheader("Seating Plan")
    col1, col2 = st.columns(2)
    with col1:
        st.download_button(
            "Download Excel Workbook",
            data=build_workbook(plan, exam),
            file_name=export_filename(exam.name, "Seating_Plan.xlsx"),
            mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
            type="primary",
            key="dl_workbook",
        )
    with col2:
        st.download_button(
            "Download Seating List (CSV)",
            data=frame_to_csv_bytes(seating_list_frame(plan)),
            file_name=export_filename(exam.name, "Seating_List.csv"),
            mime="text/csv",
            key="dl_seating_csv",
        )

    st.divider()
    st.subheader("Attendance Sheets")
    for room_number in list_rooms(plan):
        st.download_button(
            f"Room {room_number} Attendance (CSV)",
            data=build_attendance_csv(plan, room_number),
            file_name=export_filename(exam.name, f"Attendance_Room_{room_number}.csv"),
            mime="text/csv",
            key=f"dl_attendance_{room_number}",
        )
