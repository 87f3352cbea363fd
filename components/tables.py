"""Styled dataframe display helpers."""

import streamlit as st
import pandas as pd
from typing import Dict, Optional

RESULT_COLORS = {
    "Failed": "background-color: #ffcccc; color: #cc0000; font-weight: bold",
    "OK": "background-color: #d4edda; color: #155724; font-weight: bold",
}
STATUS_COLORS = {
    "Booked": "background-color: #ffcccc; color: #cc0000",
    "Available": "background-color: #d4edda; color: #155724",
}


def style_column(df: pd.DataFrame, column: str, colors: Dict[str, str]):
    """Color one column by value. Returns the DataFrame unchanged if it can't be styled."""
    if column not in df.columns or df.empty:
        return df
    return df.style.map(lambda val: colors.get(val, ""), subset=[column])


def render_styled_table(
    df: pd.DataFrame,
    title: Optional[str] = None,
    height: Optional[int] = None,
    color_column: Optional[str] = None,
    colors: Optional[Dict[str, str]] = None,
):
    """Render a non-editable dataframe, optionally coloring one column by value."""
    if title:
        st.subheader(title)
    data = style_column(df, color_column, colors or {}) if color_column else df
    st.dataframe(data, height=height, use_container_width=True)


def render_history_table(df: pd.DataFrame, result_column: str = "Result"):
    """Render the booking history with failed attempts highlighted."""
    render_styled_table(df, color_column=result_column, colors=RESULT_COLORS)


def render_room_table(df: pd.DataFrame, height: int = 400):
    """Render the per-room status list."""
    render_styled_table(df, title="Rooms", height=height, color_column="Status", colors=STATUS_COLORS)
