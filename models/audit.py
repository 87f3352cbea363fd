from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional


@dataclass
class BookingRecord:
    timestamp: datetime
    action: str                     # "book", "randomize", "reset"
    ok: bool
    message: str
    requested_count: Optional[int] = None
    room_numbers: List[int] = field(default_factory=list)
    tier: str = "none"
