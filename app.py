"""Hotel Room Reservation System: Streamlit entry point."""

import logging
import streamlit as st
import sys
import os

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from components.sidebar import render_sidebar
from data.session_store import initialize_session_state
from config.defaults import LOG_LEVEL, LOG_FORMAT
from tabs import (
    tab_room_grid,
    tab_booking_history,
)


def main():
    logging.basicConfig(level=os.environ.get("HOTEL_LOG_LEVEL", LOG_LEVEL), format=LOG_FORMAT)

    st.set_page_config(
        page_title="Hotel Room Reservation",
        page_icon="🏨",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    initialize_session_state()
    sidebar_state = render_sidebar()

    tab1, tab2 = st.tabs([
        "🏨 Room Grid",
        "📋 Booking History",
    ])

    with tab1:
        tab_room_grid.render(sidebar_state)
    with tab2:
        tab_booking_history.render(sidebar_state)


if __name__ == "__main__":
    main()
