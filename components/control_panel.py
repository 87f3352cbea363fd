"""Booking controls: room count input plus book / randomize / reset buttons."""

import streamlit as st
from dataclasses import dataclass
from typing import Optional

from config.defaults import (
    MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING,
    ACTION_BOOK, ACTION_RANDOMIZE, ACTION_RESET,
)


@dataclass
class ControlPanelState:
    action: Optional[str]   # "book", "randomize", "reset" or None
    room_count: object      # Raw widget value, validated by the caller


def render_control_panel() -> ControlPanelState:
    """Render the controls and report which button (if any) was pressed."""
    action = None
    col_input, col_book, col_random, col_reset = st.columns([2, 1, 1, 1])

    with col_input:
        room_count = st.number_input(
            f"Number of Rooms to Book ({MIN_ROOMS_PER_BOOKING}-{MAX_ROOMS_PER_BOOKING})",
            step=1,
            key="room_count_input",
        )
    with col_book:
        st.write("")
        if st.button("Book Rooms", type="primary", key="btn_book"):
            action = ACTION_BOOK
    with col_random:
        st.write("")
        if st.button("Generate Random Occupancy", key="btn_randomize"):
            action = ACTION_RANDOMIZE
    with col_reset:
        st.write("")
        if st.button("Reset Booking", key="btn_reset"):
            action = ACTION_RESET

    return ControlPanelState(action=action, room_count=room_count)
