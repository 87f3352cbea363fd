from dataclasses import dataclass, field
from typing import List, Optional

from models.room import RoomRef
from models.inventory import RoomInventory
from engine.errors import ReservationError


@dataclass
class AllocationResult:
    selection: List[RoomRef]        # Empty unless ok
    ok: bool
    tier: str                       # "same_floor", "cross_floor", "none"
    explanation_steps: List[str] = field(default_factory=list)

    @property
    def room_numbers(self) -> List[int]:
        return [ref.room_number for ref in self.selection]


@dataclass
class BookingOutcome:
    """Result of one booking attempt, as handed back to the display layer."""
    inventory: RoomInventory        # Unchanged input inventory on failure
    requested_count: object         # Raw request as received
    ok: bool
    message: str
    booked_rooms: List[int] = field(default_factory=list)
    tier: str = "none"
    error: Optional[ReservationError] = None
    explanation_steps: List[str] = field(default_factory=list)
