"""Errors raised by lot operations."""

from typing import Optional


class LotError(Exception):
    """Base class for expected, reportable lot outcomes."""

    default_message = "Parking lot error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class LotNotCreated(LotError):
    """An operation was attempted before the lot was created."""

    default_message = "Parking lot has not been created"


class LotFull(LotError):
    """No free slot is left for an arriving car."""

    default_message = "Sorry, parking lot is full"


class SlotNotOccupied(LotError):
    """Leave was called on a slot that holds no car."""

    default_message = "Slot not found"

    def __init__(self, slot_number: int):
        self.slot_number = slot_number
        super().__init__()


class NotFound(LotError):
    """A color or registration lookup matched no parked car."""

    default_message = "Not found"

    def __init__(self, key: str):
        self.key = key
        super().__init__()


class DuplicateRegistration(LotError):
    """A car with this registration is already parked."""

    def __init__(self, registration: str, slot_number: int):
        self.registration = registration
        self.slot_number = slot_number
        super().__init__(
            f"Registration {registration} is already parked in slot {slot_number}"
        )


class InvalidInput(LotError, ValueError):
    """Malformed argument passed to a lot operation."""

    default_message = "Invalid input"


class InvalidCapacity(InvalidInput):
    """Capacity is not a positive integer."""

    def __init__(self, capacity: object):
        self.capacity = capacity
        super().__init__(f"Capacity must be a positive integer, got {capacity!r}")
