"""Tab 1: Room Grid. Booking controls above a grid of every floor."""

import streamlit as st

from components.control_panel import render_control_panel
from components.floor_grid import render_floor_grid
from components.metrics_cards import render_metric_row, render_outcome_card
from data.validator import validate_room_count
from data.sample_data import generate_demo_inventory
from data.session_store import (
    get_inventory, set_inventory, get_last_outcome, set_last_outcome,
    get_rule_config, add_booking_record,
)
from models.booking import BookingOutcome
from engine.booking import book_rooms, randomize_occupancy, reset_inventory
from engine.errors import InvalidRequestError
from engine.spatial import get_property_summary
from config.defaults import ACTION_BOOK, ACTION_RANDOMIZE, ACTION_RESET


def _handle_booking(raw_count):
    inventory = get_inventory()
    validation = validate_room_count(raw_count)
    if not validation.is_valid:
        message = validation.errors[0]
        set_last_outcome(BookingOutcome(
            inventory=inventory,
            requested_count=raw_count,
            ok=False,
            message=message,
            error=InvalidRequestError(message),
        ))
        add_booking_record(ACTION_BOOK, False, message, requested_count=validation.requested)
        return

    outcome = book_rooms(inventory, validation.value)
    set_inventory(outcome.inventory)
    set_last_outcome(outcome)
    add_booking_record(
        ACTION_BOOK, outcome.ok, outcome.message,
        requested_count=validation.value,
        room_numbers=outcome.booked_rooms,
        tier=outcome.tier,
    )


def _handle_randomize(sidebar_state):
    if sidebar_state.seed is not None:
        inventory = generate_demo_inventory(sidebar_state.seed, sidebar_state.occupancy_probability)
    else:
        inventory = randomize_occupancy(rule_config=get_rule_config())
    set_inventory(inventory)
    set_last_outcome(None)
    booked = inventory.total_rooms - inventory.total_available
    add_booking_record(
        ACTION_RANDOMIZE, True,
        f"Random occupancy at {sidebar_state.occupancy_probability:.0%}: {booked} rooms booked",
    )


def _handle_reset():
    set_inventory(reset_inventory())
    set_last_outcome(None)
    add_booking_record(ACTION_RESET, True, "All bookings cleared")


def render(sidebar_state):
    """Render the Room Grid tab."""
    st.header("Room Grid")

    panel = render_control_panel()
    if panel.action == ACTION_BOOK:
        _handle_booking(panel.room_count)
    elif panel.action == ACTION_RANDOMIZE:
        _handle_randomize(sidebar_state)
    elif panel.action == ACTION_RESET:
        _handle_reset()
    if panel.action is not None:
        # Redraw so the sidebar snapshot reflects the new inventory
        st.rerun()

    outcome = get_last_outcome()
    highlight = []
    if outcome is not None:
        level = "error" if isinstance(outcome.error, InvalidRequestError) else "warning"
        render_outcome_card(outcome.message, outcome.ok, level)
        highlight = outcome.booked_rooms
        if outcome.explanation_steps:
            with st.expander("How these rooms were chosen"):
                for step in outcome.explanation_steps:
                    st.write(step)

    st.divider()

    inventory = get_inventory()
    summary = get_property_summary(inventory)
    render_metric_row([
        {"label": "Total Rooms", "value": summary["total_rooms"]},
        {"label": "Available", "value": summary["available_rooms"]},
        {"label": "Booked", "value": summary["booked_rooms"]},
        {"label": "Occupancy", "value": f"{summary['occupancy_pct']:.0%}"},
    ])

    render_floor_grid(inventory, highlight)
