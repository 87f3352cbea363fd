from dataclasses import dataclass
from typing import List, Optional, Tuple

from models.room import Room, RoomRef
from engine.errors import InventoryLayoutError
from config.defaults import (
    FLOOR_COUNT, ROOMS_PER_FLOOR, TOP_FLOOR, TOP_FLOOR_ROOMS,
    TOP_FLOOR_BASE, ROOM_NUMBER_MULTIPLIER,
)


def expected_room_numbers(floor_number: int) -> List[int]:
    """Room numbers a floor must hold, in ascending (nearest to stairs first) order."""
    if floor_number == TOP_FLOOR:
        return [TOP_FLOOR_BASE + i for i in range(1, TOP_FLOOR_ROOMS + 1)]
    base = floor_number * ROOM_NUMBER_MULTIPLIER
    return [base + i for i in range(1, ROOMS_PER_FLOOR + 1)]


@dataclass(frozen=True)
class Floor:
    floor_number: int
    rooms: Tuple[Room, ...]  # Ascending room number = closest to stairs/lift first

    @property
    def available_rooms(self) -> List[Room]:
        return [r for r in self.rooms if not r.booked]

    @property
    def available_count(self) -> int:
        return len(self.available_rooms)

    @property
    def room_numbers(self) -> List[int]:
        return [r.number for r in self.rooms]


@dataclass(frozen=True)
class RoomInventory:
    """Immutable snapshot of every floor and the booking status of each room.

    The layout is checked on construction, so any inventory value that exists
    holds exactly 10 floors and 97 uniquely numbered rooms.
    """
    floors: Tuple[Floor, ...]

    def __post_init__(self):
        _check_layout(self.floors)

    @property
    def floor_numbers(self) -> List[int]:
        return [f.floor_number for f in self.floors]

    def floor(self, floor_number: int) -> Floor:
        if not 1 <= floor_number <= len(self.floors):
            raise KeyError(f"No floor {floor_number}")
        return self.floors[floor_number - 1]

    def available_rooms(self, floor_number: int) -> List[Room]:
        return self.floor(floor_number).available_rooms

    def available_count(self, floor_number: int) -> int:
        return self.floor(floor_number).available_count

    @property
    def rooms(self) -> List[Room]:
        return [r for f in self.floors for r in f.rooms]

    @property
    def total_rooms(self) -> int:
        return len(self.rooms)

    @property
    def total_available(self) -> int:
        return sum(f.available_count for f in self.floors)

    @property
    def booked_room_numbers(self) -> List[int]:
        return [r.number for r in self.rooms if r.booked]

    def room(self, ref: RoomRef) -> Optional[Room]:
        """Look up a referenced room. Returns None when the ref points nowhere."""
        if not 1 <= ref.floor_number <= len(self.floors):
            return None
        for r in self.floor(ref.floor_number).rooms:
            if r.number == ref.room_number:
                return r
        return None


def _check_layout(floors: Tuple[Floor, ...]):
    numbers = [f.floor_number for f in floors]
    if numbers != list(range(1, FLOOR_COUNT + 1)):
        raise InventoryLayoutError(
            f"Expected floors 1..{FLOOR_COUNT} in order, got {numbers}"
        )
    for f in floors:
        expected = expected_room_numbers(f.floor_number)
        if f.room_numbers != expected:
            raise InventoryLayoutError(
                f"Floor {f.floor_number}: expected rooms {expected[0]}..{expected[-1]}, "
                f"got {f.room_numbers}"
            )
