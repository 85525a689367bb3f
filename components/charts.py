"""Plotly chart builders for the Exam Seating Planner."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import Dict, List


def room_occupancy_bar(
    occupancy: List[dict],
    title: str = "Bench Occupancy by Room",
) -> go.Figure:
    """Stacked bar of occupied vs empty benches per room."""
    df = pd.DataFrame(occupancy, columns=["room_number", "capacity", "occupied", "empty", "utilization_pct"])
    fig = px.bar(
        df, x="room_number", y=["occupied", "empty"],
        barmode="stack",
        labels={"value": "Benches", "room_number": "Room", "variable": ""},
        title=title,
        color_discrete_map={"occupied": "#E8734A", "empty": "#4A90D9"},
    )
    fig.update_layout(legend_title_text="", height=400, xaxis_type="category")
    return fig


def occupancy_donut(occupied: int, total: int, title: str = "Overall Occupancy") -> go.Figure:
    """Donut chart of occupied vs empty benches across all rooms."""
    fig = go.Figure(data=[go.Pie(
        labels=["Occupied", "Empty"],
        values=[occupied, max(total - occupied, 0)],
        hole=0.6,
        marker_colors=["#E8734A", "#4A90D9"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{occupied}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def branch_by_room_heatmap(counts: Dict[str, Dict[str, int]], rooms: List[str], branches: List[str]) -> go.Figure:
    """Heatmap of how many students of each branch sit in each room."""
    matrix = [[counts.get(room, {}).get(b, 0) for b in branches] for room in rooms]
    fig = go.Figure(data=go.Heatmap(
        z=matrix,
        x=branches,
        y=rooms,
        colorscale="YlOrRd",
        text=matrix,
        texttemplate="%{text}",
        hovertemplate="Room: %{y}<br>Branch: %{x}<br>Students: %{z}<extra></extra>",
    ))
    fig.update_layout(
        title="Branch Mix by Room",
        xaxis_title="Branch",
        yaxis_title="Room",
        yaxis_type="category",
        height=max(300, len(rooms) * 40),
    )
    return fig
