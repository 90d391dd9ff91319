"""Parking lot state management with slot, color and registration indexes."""

import logging
from typing import Iterator, Optional

from pydantic import ValidationError

from ..errors import (
    DuplicateRegistration,
    InvalidCapacity,
    InvalidInput,
    LotError,
    LotFull,
    LotNotCreated,
    NotFound,
    SlotNotOccupied,
)
from ..metrics import record_leave, record_park, record_rejection, update_slot_counts
from .models import Car, LotState, OccupiedSlot
from .slot_pool import FreeSlotPool

logger = logging.getLogger(__name__)


class LotManager:
    """
    Owns the state of one fixed-capacity parking lot.

    Cars are always given the lowest free slot number. Two secondary
    indexes are kept in step with the slot mapping:

    - color -> slot numbers, in the order the slots were allocated
    - registration -> slot number

    Every park and leave validates its arguments before touching any of
    the four structures, so a rejected operation leaves the lot unchanged.
    """

    def __init__(self, reject_duplicate_registrations: bool = True):
        """
        Initialize an empty manager. Call create_lot before anything else.

        Args:
            reject_duplicate_registrations: Refuse to park a registration
                that is already parked. When False the newer park shadows
                the older one in the registration index.
        """
        self.reject_duplicate_registrations = reject_duplicate_registrations

        self._pool: Optional[FreeSlotPool] = None
        self._slots: dict[int, Car] = {}
        self._color_index: dict[str, list[int]] = {}
        self._registration_index: dict[str, int] = {}

    def create_lot(self, capacity: int) -> int:
        """
        Create the lot, discarding any previous state.

        Args:
            capacity: Number of slots, a positive integer

        Returns:
            The capacity of the new lot
        """
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise self._reject("create_lot", InvalidCapacity(capacity))

        self._pool = FreeSlotPool(capacity)
        self._slots = {}
        self._color_index = {}
        self._registration_index = {}

        logger.info(f"Created parking lot with {capacity} slots")
        self._update_counts()
        return capacity

    def park(self, registration: str, color: str) -> int:
        """
        Park a car in the lowest free slot.

        Returns:
            The allocated slot number

        Raises:
            LotFull: If no slot is free
            DuplicateRegistration: If the registration is already parked
            InvalidInput: If registration or color is empty
        """
        pool = self._require_lot("park")

        try:
            car = Car(registration=registration, color=color)
        except ValidationError as e:
            error = InvalidInput(f"Invalid car: {e.errors()[0]['msg']}")
            raise self._reject("park", error) from e

        existing = self._registration_index.get(car.registration)
        if existing is not None and self.reject_duplicate_registrations:
            raise self._reject("park", DuplicateRegistration(car.registration, existing))

        try:
            slot_number = pool.acquire()
        except LotFull as e:
            self._reject("park", e)
            raise

        self._slots[slot_number] = car
        self._color_index.setdefault(car.color, []).append(slot_number)
        self._registration_index[car.registration] = slot_number

        logger.info(f"Parked {car.registration} ({car.color}) in slot {slot_number}")
        record_park()
        self._update_counts()
        return slot_number

    def leave(self, slot_number: int) -> Car:
        """
        Free an occupied slot.

        Returns:
            The car that left

        Raises:
            SlotNotOccupied: If the slot holds no car or is out of range
            InvalidInput: If slot_number is not an integer
        """
        pool = self._require_lot("leave")

        if isinstance(slot_number, bool) or not isinstance(slot_number, int):
            error = InvalidInput(f"Slot number must be an integer, got {slot_number!r}")
            raise self._reject("leave", error)

        car = self._slots.get(slot_number)
        if car is None:
            raise self._reject("leave", SlotNotOccupied(slot_number))

        del self._slots[slot_number]
        pool.release(slot_number)

        color_slots = self._color_index[car.color]
        color_slots.remove(slot_number)
        if not color_slots:
            del self._color_index[car.color]

        # A shadowed registration may already point at a newer slot
        if self._registration_index.get(car.registration) == slot_number:
            del self._registration_index[car.registration]

        logger.info(f"Slot {slot_number} freed ({car.registration} left)")
        record_leave()
        self._update_counts()
        return car

    def status(self) -> Iterator[OccupiedSlot]:
        """Iterate over occupied slots in ascending slot order."""
        self._require_lot("status")
        return self._iter_occupied()

    def _iter_occupied(self) -> Iterator[OccupiedSlot]:
        for slot_number in sorted(self._slots):
            car = self._slots.get(slot_number)
            if car is None:
                continue
            yield OccupiedSlot(
                slot_number=slot_number,
                registration=car.registration,
                color=car.color,
            )

    def registrations_for_color(self, color: str) -> list[str]:
        """Registrations of cars with this color, in allocation order."""
        slot_numbers = self._color_slots("registrations_for_color", color)
        return [self._slots[slot_number].registration for slot_number in slot_numbers]

    def slots_for_color(self, color: str) -> list[int]:
        """Slot numbers holding cars with this color, in allocation order."""
        return list(self._color_slots("slots_for_color", color))

    def slot_for_registration(self, registration: str) -> int:
        """Slot number of the parked car with this registration."""
        self._require_lot("slot_for_registration")

        slot_number = self._registration_index.get(registration)
        if slot_number is None:
            raise self._not_found("slot_for_registration", registration)

        return slot_number

    def get_car(self, slot_number: int) -> Optional[Car]:
        """Get the car parked in a slot, if any."""
        return self._slots.get(slot_number)

    def get_state(self) -> LotState:
        """Get current lot state."""
        self._require_lot("get_state")
        return LotState(
            capacity=self.capacity,
            available=self.available_count,
            occupied=self.occupied_count,
            slots=list(self._iter_occupied()),
        )

    @property
    def capacity(self) -> int:
        return self._require_lot("capacity").capacity

    @property
    def available_count(self) -> int:
        return len(self._require_lot("available_count"))

    @property
    def occupied_count(self) -> int:
        return len(self._slots)

    def _color_slots(self, operation: str, color: str) -> list[int]:
        self._require_lot(operation)

        slot_numbers = self._color_index.get(color)
        if not slot_numbers:
            raise self._not_found(operation, color)

        return slot_numbers

    def _require_lot(self, operation: str) -> FreeSlotPool:
        if self._pool is None:
            raise self._reject(operation, LotNotCreated())
        return self._pool

    def _reject(self, operation: str, error: LotError) -> LotError:
        logger.warning(f"{operation} rejected: {error.message}")
        record_rejection(operation, type(error).__name__)
        return error

    def _not_found(self, operation: str, key: str) -> NotFound:
        logger.debug(f"{operation}: nothing found for {key!r}")
        record_rejection(operation, "NotFound")
        return NotFound(key)

    def _update_counts(self) -> None:
        update_slot_counts(
            total=self.capacity,
            available=self.available_count,
            occupied=self.occupied_count,
        )
