"""Rule-based room allocation: same-floor first-fit, then cross-floor fallback."""

import logging
from typing import List, Optional

from models.room import RoomRef
from models.inventory import RoomInventory
from models.booking import AllocationResult
from engine.errors import InvalidRequestError
from engine.explainer import explain_same_floor, explain_cross_floor, explain_failure
from config.defaults import (
    MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING,
    TIER_SAME_FLOOR, TIER_CROSS_FLOOR, TIER_NONE,
)

logger = logging.getLogger(__name__)


def validate_requested_count(requested_count) -> int:
    """Reject anything that is not an int in [1, 5]."""
    if isinstance(requested_count, bool) or not isinstance(requested_count, int):
        raise InvalidRequestError(
            f"Requested room count must be an integer, got {requested_count!r}"
        )
    if not MIN_ROOMS_PER_BOOKING <= requested_count <= MAX_ROOMS_PER_BOOKING:
        raise InvalidRequestError(
            f"Requested room count must be between {MIN_ROOMS_PER_BOOKING} and "
            f"{MAX_ROOMS_PER_BOOKING}, got {requested_count}"
        )
    return requested_count


def find_same_floor_selection(
    inventory: RoomInventory,
    requested_count: int,
) -> Optional[List[RoomRef]]:
    """First floor (ascending) that can hold the whole request; its lowest-numbered rooms."""
    for f in inventory.floors:
        available = f.available_rooms
        if len(available) >= requested_count:
            return [RoomRef(f.floor_number, r.number) for r in available[:requested_count]]
    return None


def rank_floors_by_availability(inventory: RoomInventory) -> List[int]:
    """Floor numbers ordered by available rooms descending, lower floor first on ties."""
    return sorted(
        inventory.floor_numbers,
        key=lambda n: (-inventory.available_count(n), n),
    )


def find_cross_floor_selection(
    inventory: RoomInventory,
    requested_count: int,
) -> Optional[List[RoomRef]]:
    """Fill the request greedily from the best-stocked floors. None if the property runs out."""
    selection: List[RoomRef] = []
    for floor_number in rank_floors_by_availability(inventory):
        for room in inventory.available_rooms(floor_number):
            if len(selection) == requested_count:
                break
            selection.append(RoomRef(floor_number, room.number))
        if len(selection) == requested_count:
            return selection
    return None


def allocate(inventory: RoomInventory, requested_count: int) -> AllocationResult:
    """Pick the rooms for a booking request without touching the inventory."""
    validate_requested_count(requested_count)

    # Tier 1: same floor, first fit
    selection = find_same_floor_selection(inventory, requested_count)
    if selection is not None:
        floor_number = selection[0].floor_number
        logger.info(
            "Allocated %d room(s) on floor %d: %s",
            requested_count, floor_number, [ref.room_number for ref in selection],
        )
        return AllocationResult(
            selection=selection,
            ok=True,
            tier=TIER_SAME_FLOOR,
            explanation_steps=explain_same_floor(inventory, requested_count, selection),
        )

    # Tier 2: spread across floors ranked by availability
    ranking = rank_floors_by_availability(inventory)
    logger.debug("No single floor fits %d room(s); floor ranking %s", requested_count, ranking)
    selection = find_cross_floor_selection(inventory, requested_count)
    if selection is not None:
        logger.info(
            "Allocated %d room(s) across floors %s: %s",
            requested_count,
            sorted({ref.floor_number for ref in selection}),
            [ref.room_number for ref in selection],
        )
        return AllocationResult(
            selection=selection,
            ok=True,
            tier=TIER_CROSS_FLOOR,
            explanation_steps=explain_cross_floor(inventory, requested_count, ranking, selection),
        )

    logger.warning(
        "Cannot allocate %d room(s): only %d available",
        requested_count, inventory.total_available,
    )
    return AllocationResult(
        selection=[],
        ok=False,
        tier=TIER_NONE,
        explanation_steps=explain_failure(inventory, requested_count),
    )
