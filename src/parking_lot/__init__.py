"""Fixed-capacity parking lot with slot, color and registration lookups."""

from .errors import (
    DuplicateRegistration,
    InvalidCapacity,
    InvalidInput,
    LotError,
    LotFull,
    LotNotCreated,
    NotFound,
    SlotNotOccupied,
)
from .state import Car, LotManager, LotState, OccupiedSlot

__all__ = [
    "Car",
    "LotManager",
    "LotState",
    "OccupiedSlot",
    "LotError",
    "LotFull",
    "LotNotCreated",
    "NotFound",
    "SlotNotOccupied",
    "DuplicateRegistration",
    "InvalidInput",
    "InvalidCapacity",
]
