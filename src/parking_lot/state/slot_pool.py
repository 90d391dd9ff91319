"""Free slot pool that always hands out the lowest free slot number."""

import heapq
from typing import Iterator

from ..errors import LotFull


class FreeSlotPool:
    """
    Ordered pool of free slot numbers in ``[1, capacity]``.

    Slots that were never used are handed out from a monotonic counter.
    Released slots go onto a min-heap; every released slot is below the
    counter, so the heap minimum is also the minimum of the whole pool.
    """

    def __init__(self, capacity: int):
        self.capacity = capacity
        self.next_slot = 1
        self._released: list[int] = []

    def acquire(self) -> int:
        """
        Take the lowest free slot number out of the pool.

        Raises:
            LotFull: If every slot is in use
        """
        if self._released:
            return heapq.heappop(self._released)

        if self.next_slot > self.capacity:
            raise LotFull()

        slot_number = self.next_slot
        self.next_slot += 1
        return slot_number

    def release(self, slot_number: int) -> None:
        """
        Return a slot to the pool.

        Raises:
            ValueError: If the slot is out of range or already free
        """
        if not 1 <= slot_number < self.next_slot:
            raise ValueError(f"Slot {slot_number} was never handed out")
        if slot_number in self._released:
            raise ValueError(f"Slot {slot_number} is already free")

        heapq.heappush(self._released, slot_number)

    def __len__(self) -> int:
        return len(self._released) + (self.capacity - self.next_slot + 1)

    def __contains__(self, slot_number: object) -> bool:
        if not isinstance(slot_number, int):
            return False
        if self.next_slot <= slot_number <= self.capacity:
            return True
        return slot_number in self._released

    def __iter__(self) -> Iterator[int]:
        yield from sorted(self._released)
        yield from range(self.next_slot, self.capacity + 1)
