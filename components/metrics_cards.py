"""Reusable KPI metric card widgets."""

import streamlit as st
from models.seating import SeatingSummary


def render_metric_row(metrics: list[dict]):
    """Render a row of metric cards.

    Each metric dict should have: label, value, and optionally help.
    """
    cols = st.columns(len(metrics))
    for col, m in zip(cols, metrics):
        with col:
            st.metric(label=m["label"], value=m["value"], help=m.get("help"))


def render_summary_metrics(summary: SeatingSummary):
    render_metric_row([
        {"label": "Students", "value": summary.total_students},
        {"label": "Rooms", "value": summary.total_rooms},
        {"label": "Occupied Benches", "value": summary.occupied_benches},
        {"label": "Empty Benches", "value": summary.empty_benches},
    ])
