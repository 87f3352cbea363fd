from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Room:
    number: int   # Globally unique, e.g. 101 or 1007
    booked: bool = False

    def as_booked(self) -> "Room":
        return replace(self, booked=True)


@dataclass(frozen=True)
class RoomRef:
    """Reference to a room chosen by the allocator, prior to commit."""
    floor_number: int
    room_number: int
