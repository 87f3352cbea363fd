"""Validation for booking requests coming from the control panel."""

from dataclasses import dataclass, field
from typing import List, Optional

from config.defaults import MIN_ROOMS_PER_BOOKING, MAX_ROOMS_PER_BOOKING, INVALID_REQUEST_MESSAGE


@dataclass
class ValidationResult:
    is_valid: bool = True
    value: Optional[int] = None      # Set only when valid
    requested: Optional[int] = None  # Whole-number request, kept even when out of range
    errors: List[str] = field(default_factory=list)


def validate_room_count(raw) -> ValidationResult:
    """Parse a raw widget value into a room count and check the bookable range."""
    result = ValidationResult()

    if raw is None or (isinstance(raw, str) and not raw.strip()):
        result.is_valid = False
        result.errors.append("Enter the number of rooms to book.")
        return result

    try:
        number = float(raw)
    except (TypeError, ValueError):
        result.is_valid = False
        result.errors.append(f"'{raw}' is not a number.")
        return result

    if not number.is_integer():
        result.is_valid = False
        result.errors.append("Room count must be a whole number.")
        return result

    count = int(number)
    result.requested = count
    if not MIN_ROOMS_PER_BOOKING <= count <= MAX_ROOMS_PER_BOOKING:
        result.is_valid = False
        result.errors.append(INVALID_REQUEST_MESSAGE)
        return result

    result.value = count
    return result
