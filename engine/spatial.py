"""Per-floor occupancy statistics and selection spread."""

from typing import Dict, List

from models.room import RoomRef
from models.inventory import RoomInventory
from config.defaults import FLOOR_FULL_THRESHOLD, FLOOR_BUSY_THRESHOLD


def get_floor_occupancy(inventory: RoomInventory) -> List[dict]:
    """Compute occupancy stats per floor, in floor order."""
    results = []
    for f in inventory.floors:
        total = len(f.rooms)
        available = f.available_count
        booked = total - available
        results.append({
            "floor_number": f.floor_number,
            "floor_id": f"F{f.floor_number}",
            "total_rooms": total,
            "booked_rooms": booked,
            "available_rooms": available,
            "occupancy_pct": booked / total if total > 0 else 0,
            "room_numbers_available": [r.number for r in f.available_rooms],
        })
    return results


def get_property_summary(inventory: RoomInventory) -> Dict[str, float]:
    """Totals across the whole property."""
    occupancy = get_floor_occupancy(inventory)
    total = sum(f["total_rooms"] for f in occupancy)
    booked = sum(f["booked_rooms"] for f in occupancy)
    return {
        "total_rooms": total,
        "booked_rooms": booked,
        "available_rooms": total - booked,
        "occupancy_pct": booked / total if total > 0 else 0,
        "full_floors": sum(1 for f in occupancy if f["occupancy_pct"] >= FLOOR_FULL_THRESHOLD),
        "busy_floors": sum(1 for f in occupancy
                           if FLOOR_BUSY_THRESHOLD <= f["occupancy_pct"] < FLOOR_FULL_THRESHOLD),
    }


def count_floors_spanned(selection: List[RoomRef]) -> int:
    return len({ref.floor_number for ref in selection})
