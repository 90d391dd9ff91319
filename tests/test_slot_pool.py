import pytest

from parking_lot.errors import LotFull
from parking_lot.state.slot_pool import FreeSlotPool


def test_fresh_pool_contains_every_slot():
    pool = FreeSlotPool(5)
    assert len(pool) == 5
    assert list(pool) == [1, 2, 3, 4, 5]
    assert 1 in pool and 5 in pool
    assert 0 not in pool and 6 not in pool


def test_acquire_hands_out_ascending_slots_until_full():
    pool = FreeSlotPool(3)
    assert [pool.acquire() for _ in range(3)] == [1, 2, 3]
    assert len(pool) == 0
    with pytest.raises(LotFull):
        pool.acquire()


def test_released_slot_is_reused_before_unused_ones():
    pool = FreeSlotPool(10)
    for _ in range(6):
        pool.acquire()
    pool.release(4)
    pool.release(2)

    assert list(pool) == [2, 4, 7, 8, 9, 10]
    assert pool.acquire() == 2
    assert pool.acquire() == 4
    assert pool.acquire() == 7


def test_release_rejects_unknown_or_free_slots():
    pool = FreeSlotPool(4)
    pool.acquire()
    pool.acquire()

    with pytest.raises(ValueError):
        pool.release(3)  # never handed out
    with pytest.raises(ValueError):
        pool.release(0)

    pool.release(1)
    with pytest.raises(ValueError):
        pool.release(1)


def test_len_tracks_released_and_unused_slots():
    pool = FreeSlotPool(4)
    pool.acquire()
    pool.acquire()
    assert len(pool) == 2
    pool.release(1)
    assert len(pool) == 3
    assert "1" not in pool
