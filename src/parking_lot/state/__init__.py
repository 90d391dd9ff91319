"""State management module."""

from .models import Car, LotState, OccupiedSlot
from .slot_pool import FreeSlotPool
from .lot_manager import LotManager

__all__ = ["Car", "LotState", "OccupiedSlot", "FreeSlotPool", "LotManager"]
