"""Booking workflow: validate the request, allocate, commit the selection."""

import logging
import random
from typing import Optional

from models.inventory import RoomInventory
from models.booking import BookingOutcome
from engine.allocation_engine import allocate
from engine.inventory import new_inventory, randomized, with_booked
from engine.errors import InvalidRequestError, AllocationFailedError
from config.defaults import (
    DEFAULT_OCCUPANCY_PROBABILITY,
    INVALID_REQUEST_MESSAGE, ALLOCATION_FAILED_MESSAGE,
    TIER_NONE,
)

logger = logging.getLogger(__name__)


def book_rooms(inventory: RoomInventory, requested_count) -> BookingOutcome:
    """Run one booking request against an inventory and return the outcome.

    On success the outcome carries a new inventory with the chosen rooms booked.
    On failure it carries the input inventory unchanged. InvalidSelectionError
    from the commit step is a logic error and propagates.
    """
    try:
        result = allocate(inventory, requested_count)
    except InvalidRequestError as e:
        logger.warning("Rejected booking request: %s", e)
        return BookingOutcome(
            inventory=inventory,
            requested_count=requested_count,
            ok=False,
            message=INVALID_REQUEST_MESSAGE,
            error=e,
        )

    if not result.ok:
        return BookingOutcome(
            inventory=inventory,
            requested_count=requested_count,
            ok=False,
            message=ALLOCATION_FAILED_MESSAGE,
            tier=TIER_NONE,
            error=AllocationFailedError(
                f"{requested_count} room(s) requested, {inventory.total_available} available"
            ),
            explanation_steps=result.explanation_steps,
        )

    updated = with_booked(inventory, result.selection)
    rooms = result.room_numbers
    return BookingOutcome(
        inventory=updated,
        requested_count=requested_count,
        ok=True,
        message=f"Booked room(s): {', '.join(str(n) for n in rooms)}",
        booked_rooms=rooms,
        tier=result.tier,
        explanation_steps=result.explanation_steps,
    )


def reset_inventory() -> RoomInventory:
    """Discard all bookings."""
    logger.info("Resetting all bookings")
    return new_inventory()


def randomize_occupancy(
    probability: Optional[float] = None,
    rng: Optional[random.Random] = None,
    rule_config: Optional[dict] = None,
) -> RoomInventory:
    """Generate demo occupancy. Explicit probability wins over rule_config."""
    cfg = rule_config or {}
    if probability is None:
        probability = cfg.get("occupancy_probability", DEFAULT_OCCUPANCY_PROBABILITY)
    return randomized(probability, rng)
