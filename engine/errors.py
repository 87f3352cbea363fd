"""Exception hierarchy for room allocation and inventory transitions."""


class ReservationError(Exception):
    """Base exception for all reservation errors."""


class InvalidRequestError(ReservationError):
    """Requested room count is outside the bookable range."""


class AllocationFailedError(ReservationError):
    """Not enough rooms available. Carried in outcomes, never raised by the allocator."""


class InvalidSelectionError(ReservationError):
    """Selection references a missing, duplicated or already booked room."""


class InventoryLayoutError(ReservationError):
    """Inventory does not match the fixed floor and room layout."""
