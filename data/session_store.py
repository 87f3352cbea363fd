"""Typed wrapper around st.session_state for application data."""

import streamlit as st
from typing import List, Optional
from datetime import datetime
from models.inventory import RoomInventory
from models.booking import BookingOutcome
from models.audit import BookingRecord
from engine.inventory import new_inventory
from config.defaults import DEFAULT_OCCUPANCY_PROBABILITY, DEMO_SEED, DEFAULT_ROOMS_PER_BOOKING


def initialize_session_state():
    """Initialize all session state keys with defaults."""
    defaults = {
        "inventory": new_inventory(),
        "booking_log": [],
        "last_outcome": None,
        "rule_config": {
            "occupancy_probability": DEFAULT_OCCUPANCY_PROBABILITY,
            "demo_seed": DEMO_SEED,
            "use_seed": False,
        },
        "room_count_input": DEFAULT_ROOMS_PER_BOOKING,
    }
    for key, default in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = default


# --- Getters ---

def get_inventory() -> RoomInventory:
    return st.session_state.get("inventory") or new_inventory()


def get_booking_log() -> List[BookingRecord]:
    return st.session_state.get("booking_log", [])


def get_last_outcome() -> Optional[BookingOutcome]:
    return st.session_state.get("last_outcome")


def get_rule_config() -> dict:
    return st.session_state.get("rule_config", {})


# --- Setters ---

def set_inventory(inventory: RoomInventory):
    st.session_state["inventory"] = inventory


def set_last_outcome(outcome: Optional[BookingOutcome]):
    st.session_state["last_outcome"] = outcome


def set_rule_config(config: dict):
    st.session_state["rule_config"] = config


# --- History ---

def add_booking_record(
    action: str,
    ok: bool,
    message: str,
    requested_count: Optional[int] = None,
    room_numbers: Optional[List[int]] = None,
    tier: str = "none",
):
    record = BookingRecord(
        timestamp=datetime.now(),
        action=action,
        ok=ok,
        message=message,
        requested_count=requested_count,
        room_numbers=list(room_numbers or []),
        tier=tier,
    )
    st.session_state["booking_log"].append(record)


def clear_booking_log():
    st.session_state["booking_log"] = []
