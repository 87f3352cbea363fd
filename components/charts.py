"""Plotly chart builders for the Hotel Room Reservation System."""

import plotly.express as px
import plotly.graph_objects as go
import pandas as pd
from typing import List


def floor_occupancy_bar(
    occupancy_data: List[dict],
    title: str = "Rooms by Floor",
) -> go.Figure:
    """Stacked bar of booked vs available rooms per floor, top floor first."""
    df = pd.DataFrame(occupancy_data).sort_values("floor_number", ascending=False)
    fig = px.bar(
        df, x=["booked_rooms", "available_rooms"], y="floor_id",
        orientation="h",
        labels={"value": "Rooms", "floor_id": "Floor", "variable": ""},
        title=title,
        color_discrete_map={"booked_rooms": "#E8734A", "available_rooms": "#5CB85C"},
    )
    fig.update_layout(legend_title_text="", height=max(300, len(df) * 35), yaxis_type="category")
    return fig


def occupancy_donut(booked: int, total: int, title: str = "Overall Occupancy") -> go.Figure:
    """Donut chart showing overall room occupancy."""
    available = total - booked
    fig = go.Figure(data=[go.Pie(
        labels=["Booked", "Available"],
        values=[booked, available],
        hole=0.6,
        marker_colors=["#E8734A", "#5CB85C"],
        textinfo="percent+label",
    )])
    fig.update_layout(
        title=title,
        height=350,
        showlegend=True,
        annotations=[dict(text=f"{booked}/{total}", x=0.5, y=0.5, font_size=16, showarrow=False)],
    )
    return fig


def room_status_heatmap(inventory_df: pd.DataFrame) -> go.Figure:
    """Floor x position grid, 1 = booked. Floor 10 has fewer positions."""
    pivot = inventory_df.assign(
        Booked=(inventory_df["Status"] == "Booked").astype(int)
    ).pivot(index="Floor", columns="Position", values="Booked")
    rooms = inventory_df.pivot(index="Floor", columns="Position", values="Room")
    pivot = pivot.sort_index(ascending=False)
    rooms = rooms.sort_index(ascending=False)
    labels = [["" if pd.isna(v) else str(int(v)) for v in row] for row in rooms.values]

    fig = go.Figure(data=go.Heatmap(
        z=pivot.values,
        x=[str(c) for c in pivot.columns],
        y=[f"F{i}" for i in pivot.index],
        colorscale=[[0, "#5CB85C"], [1, "#E8734A"]],
        zmin=0, zmax=1,
        showscale=False,
        text=labels,
        texttemplate="%{text}",
        hovertemplate="Room %{text}<extra></extra>",
    ))
    fig.update_layout(
        title="Room Status",
        xaxis_title="Distance from stairs/lift",
        yaxis_title="Floor",
        height=450,
    )
    return fig
