"""Seeded demo occupancy and DataFrame views of inventories and booking history."""

import random
from typing import List

import pandas as pd

from models.inventory import RoomInventory
from models.audit import BookingRecord
from engine.inventory import randomized
from config.defaults import DEFAULT_OCCUPANCY_PROBABILITY, DEMO_SEED


def generate_demo_inventory(
    seed: int = DEMO_SEED,
    probability: float = DEFAULT_OCCUPANCY_PROBABILITY,
) -> RoomInventory:
    """Reproducible randomized occupancy for demos and screenshots."""
    return randomized(probability, random.Random(seed))


def inventory_to_df(inventory: RoomInventory) -> pd.DataFrame:
    """One row per room, floors ascending."""
    rows = []
    for f in inventory.floors:
        for position, room in enumerate(f.rooms, start=1):
            rows.append({
                "Floor": f.floor_number,
                "Room": room.number,
                "Position": position,  # 1 = nearest stairs/lift
                "Status": "Booked" if room.booked else "Available",
            })
    return pd.DataFrame(rows)


def booking_log_to_df(records: List[BookingRecord]) -> pd.DataFrame:
    """Booking history, newest first."""
    rows = [{
        "Time": r.timestamp.strftime("%H:%M:%S"),
        "Action": r.action,
        "Requested": r.requested_count if r.requested_count is not None else "—",
        "Rooms": ", ".join(str(n) for n in r.room_numbers) if r.room_numbers else "—",
        "Tier": r.tier,
        "Result": "OK" if r.ok else "Failed",
        "Message": r.message,
    } for r in reversed(records)]
    columns = ["Time", "Action", "Requested", "Rooms", "Tier", "Result", "Message"]
    return pd.DataFrame(rows, columns=columns)
