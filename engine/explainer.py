"""Generates human-readable explanations for room allocations."""

from typing import List

from models.room import RoomRef
from models.inventory import RoomInventory
from engine.spatial import count_floors_spanned


def _room_list(selection: List[RoomRef]) -> str:
    return ", ".join(str(ref.room_number) for ref in selection)


def explain_same_floor(
    inventory: RoomInventory,
    requested_count: int,
    selection: List[RoomRef],
) -> List[str]:
    """Produce step-by-step explanation for a same-floor allocation."""
    steps = []
    chosen = selection[0].floor_number

    skipped = [n for n in inventory.floor_numbers if n < chosen]
    if skipped:
        steps.append(
            f"Step 1 - Same floor: floors {skipped[0]}-{skipped[-1]} have fewer than "
            f"{requested_count} free room(s)"
        )
    else:
        steps.append("Step 1 - Same floor: floor 1 is checked first")

    steps.append(
        f"Step 2 - Floor {chosen} has {inventory.available_count(chosen)} free room(s) "
        f">= {requested_count} requested => first fit"
    )
    steps.append(
        f"Step 3 - Rooms nearest the stairs/lift: {_room_list(selection)}"
    )
    return steps


def explain_cross_floor(
    inventory: RoomInventory,
    requested_count: int,
    ranking: List[int],
    selection: List[RoomRef],
) -> List[str]:
    """Produce step-by-step explanation for a cross-floor allocation."""
    steps = []

    best = max(inventory.available_count(n) for n in inventory.floor_numbers)
    steps.append(
        f"Step 1 - Same floor: no floor has {requested_count} free room(s) "
        f"(best is {best})"
    )

    ranked = ", ".join(f"F{n} ({inventory.available_count(n)})" for n in ranking)
    steps.append(f"Step 2 - Floors ranked by free rooms: {ranked}")

    used = []
    for ref in selection:
        if ref.floor_number not in used:
            used.append(ref.floor_number)
    for n in used:
        taken = [ref for ref in selection if ref.floor_number == n]
        steps.append(f"Step 3 - Floor {n}: take {_room_list(taken)}")

    steps.append(
        f"Step 4 - {requested_count} room(s) across {count_floors_spanned(selection)} "
        f"floor(s): {_room_list(selection)}"
    )
    return steps


def explain_failure(inventory: RoomInventory, requested_count: int) -> List[str]:
    return [
        f"Requested {requested_count} room(s) but only {inventory.total_available} "
        f"are free across the property => nothing booked"
    ]
