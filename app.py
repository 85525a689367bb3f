"""Exam Seating Planner — Streamlit entry point."""

import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config.logging_config import configure_logging
from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from tabs import (
    tab_upload_roster,
    tab_room_configuration,
    tab_seating_preview,
    tab_report_generation,
)


def main():
    st.set_page_config(
        page_title="Exam Seating Planner",
        page_icon="🎓",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    configure_logging()
    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2, tab3, tab4 = st.tabs([
        "📄 Upload Roster",
        "🏫 Configure Rooms",
        "👥 Preview Seating",
        "📥 Generate Reports",
    ])

    with tab1:
        tab_upload_roster.render(sidebar_state)
    with tab2:
        tab_room_configuration.render(sidebar_state)
    with tab3:
        tab_seating_preview.render(sidebar_state)
    with tab4:
        tab_report_generation.render(sidebar_state)


if __name__ == "__main__":
    main()
