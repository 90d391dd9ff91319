import pytest

from parking_lot.errors import LotFull, NotFound, SlotNotOccupied
from parking_lot.metrics import REGISTRY, get_metrics
from parking_lot.state.lot_manager import LotManager


def _sample(name, labels=None):
    return REGISTRY.get_sample_value(name, labels or {}) or 0.0


def test_park_and_leave_update_counters_and_gauges():
    parked = _sample("parking_lot_cars_parked_total")
    left = _sample("parking_lot_cars_left_total")

    m = LotManager()
    m.create_lot(4)
    m.park("A-1", "Red")
    m.park("A-2", "Red")
    m.leave(1)

    assert _sample("parking_lot_cars_parked_total") == parked + 2
    assert _sample("parking_lot_cars_left_total") == left + 1
    assert _sample("parking_lot_slots_total") == 4
    assert _sample("parking_lot_slots_available") == 3
    assert _sample("parking_lot_slots_occupied") == 1


def test_rejections_are_counted_by_operation_and_reason():
    full = {"operation": "park", "reason": "LotFull"}
    missing_slot = {"operation": "leave", "reason": "SlotNotOccupied"}
    missing_color = {"operation": "slots_for_color", "reason": "NotFound"}
    before = [_sample("parking_lot_rejections_total", labels) for labels in (full, missing_slot, missing_color)]

    m = LotManager()
    m.create_lot(1)
    m.park("A-1", "Red")
    with pytest.raises(LotFull):
        m.park("A-2", "Red")
    with pytest.raises(SlotNotOccupied):
        m.leave(7)
    with pytest.raises(NotFound):
        m.slots_for_color("Blue")

    after = [_sample("parking_lot_rejections_total", labels) for labels in (full, missing_slot, missing_color)]
    assert after == [b + 1 for b in before]


def test_get_metrics_renders_exposition_text():
    m = LotManager()
    m.create_lot(2)
    text = get_metrics().decode()
    assert "parking_lot_slots_total" in text
    assert "parking_lot_cars_parked_total" in text
