from models.room import Room, RoomRef
from models.inventory import Floor, RoomInventory
from models.booking import AllocationResult, BookingOutcome
from models.audit import BookingRecord
