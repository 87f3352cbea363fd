"""Tab 2: Booking History. Past actions and floor occupancy."""

import streamlit as st

from components.charts import floor_occupancy_bar, occupancy_donut, room_status_heatmap
from components.tables import render_history_table, render_room_table
from data.sample_data import booking_log_to_df, inventory_to_df
from data.session_store import get_inventory, get_booking_log, clear_booking_log
from engine.spatial import get_floor_occupancy, get_property_summary


def render(sidebar_state):
    """Render the Booking History tab."""
    st.header("Booking History")

    inventory = get_inventory()
    occupancy = get_floor_occupancy(inventory)
    summary = get_property_summary(inventory)

    col1, col2 = st.columns([3, 2])
    with col1:
        st.plotly_chart(floor_occupancy_bar(occupancy), use_container_width=True)
    with col2:
        st.plotly_chart(
            occupancy_donut(summary["booked_rooms"], summary["total_rooms"]),
            use_container_width=True,
        )

    inventory_df = inventory_to_df(inventory)
    st.plotly_chart(room_status_heatmap(inventory_df), use_container_width=True)
    with st.expander("Room list"):
        render_room_table(inventory_df)

    st.divider()

    st.subheader("Actions")
    log = get_booking_log()
    if not log:
        st.info("No bookings yet. Use the Room Grid tab to book rooms.")
        return

    render_history_table(booking_log_to_df(log))
    failed = sum(1 for r in log if not r.ok)
    st.caption(f"{len(log)} action(s), {failed} failed")

    if st.button("Clear History", key="btn_clear_history"):
        clear_booking_log()
        st.rerun()
