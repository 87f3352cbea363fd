"""Default configuration constants for the Hotel Room Reservation System."""

# Property layout (fixed, not configurable at runtime)
FLOOR_COUNT = 10
ROOMS_PER_FLOOR = 10          # Floors 1-9
TOP_FLOOR = 10
TOP_FLOOR_ROOMS = 7           # Floor 10 is smaller
TOP_FLOOR_BASE = 1000         # Floor 10 rooms are 1001..1007
ROOM_NUMBER_MULTIPLIER = 100  # Floor f rooms are f*100+1 .. f*100+10

# Booking request bounds (inclusive)
MIN_ROOMS_PER_BOOKING = 1
MAX_ROOMS_PER_BOOKING = 5
DEFAULT_ROOMS_PER_BOOKING = 1

# Demo occupancy generator
DEFAULT_OCCUPANCY_PROBABILITY = 0.3
DEMO_SEED = 42

# Allocation tiers
TIER_SAME_FLOOR = "same_floor"
TIER_CROSS_FLOOR = "cross_floor"
TIER_NONE = "none"

# User-facing messages
INVALID_REQUEST_MESSAGE = "You can book between 1 to 5 rooms at a time."
ALLOCATION_FAILED_MESSAGE = "Not enough rooms available to fulfill the booking."

# History actions
ACTION_BOOK = "book"
ACTION_RANDOMIZE = "randomize"
ACTION_RESET = "reset"

# Floor occupancy alert thresholds
FLOOR_FULL_THRESHOLD = 1.0
FLOOR_BUSY_THRESHOLD = 0.70

# Logging
LOG_LEVEL = "INFO"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
