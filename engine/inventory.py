"""Inventory construction and state transitions: initial layout, commit, randomize."""

import logging
import random
from typing import Iterable, Optional, Set

from models.room import Room, RoomRef
from models.inventory import Floor, RoomInventory, expected_room_numbers
from engine.errors import InvalidSelectionError
from config.defaults import FLOOR_COUNT, DEFAULT_OCCUPANCY_PROBABILITY

logger = logging.getLogger(__name__)


def new_inventory() -> RoomInventory:
    """Build the canonical initial inventory with every room unbooked."""
    floors = []
    for floor_number in range(1, FLOOR_COUNT + 1):
        rooms = tuple(Room(number=n) for n in expected_room_numbers(floor_number))
        floors.append(Floor(floor_number=floor_number, rooms=rooms))
    return RoomInventory(floors=tuple(floors))


def with_booked(inventory: RoomInventory, selection: Iterable[RoomRef]) -> RoomInventory:
    """Return a copy of the inventory with every selected room marked booked.

    Raises InvalidSelectionError if a ref names a room that does not exist,
    is already booked, or appears twice. The input inventory is never touched.
    """
    to_book: Set[RoomRef] = set()
    for ref in selection:
        room = inventory.room(ref)
        if room is None:
            raise InvalidSelectionError(
                f"Room {ref.room_number} does not exist on floor {ref.floor_number}"
            )
        if room.booked:
            raise InvalidSelectionError(f"Room {ref.room_number} is already booked")
        if ref in to_book:
            raise InvalidSelectionError(f"Room {ref.room_number} selected more than once")
        to_book.add(ref)

    floors = []
    for f in inventory.floors:
        rooms = tuple(
            r.as_booked() if RoomRef(f.floor_number, r.number) in to_book else r
            for r in f.rooms
        )
        floors.append(Floor(floor_number=f.floor_number, rooms=rooms))

    logger.debug("Committed %d room(s): %s", len(to_book),
                 sorted(ref.room_number for ref in to_book))
    return RoomInventory(floors=tuple(floors))


def randomized(
    probability: float = DEFAULT_OCCUPANCY_PROBABILITY,
    rng: Optional[random.Random] = None,
) -> RoomInventory:
    """Build an inventory where each room is independently booked with `probability`."""
    if not 0.0 <= probability <= 1.0:
        raise ValueError(f"Occupancy probability must be between 0 and 1, got {probability}")
    rng = rng or random.Random()

    floors = []
    for f in new_inventory().floors:
        rooms = tuple(Room(number=r.number, booked=rng.random() < probability) for r in f.rooms)
        floors.append(Floor(floor_number=f.floor_number, rooms=rooms))

    inventory = RoomInventory(floors=tuple(floors))
    logger.info(
        "Randomized occupancy at p=%.2f: %d of %d rooms booked",
        probability, inventory.total_rooms - inventory.total_available, inventory.total_rooms,
    )
    return inventory
