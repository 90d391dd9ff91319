"""Prometheus metrics for the parking lot."""

from prometheus_client import Counter, Gauge, CollectorRegistry, generate_latest

# Custom registry keeps lot metrics apart from process defaults
REGISTRY = CollectorRegistry()

TOTAL_SLOTS = Gauge(
    "parking_lot_slots_total",
    "Capacity of the parking lot",
    registry=REGISTRY,
)

AVAILABLE_SLOTS = Gauge(
    "parking_lot_slots_available",
    "Number of free slots",
    registry=REGISTRY,
)

OCCUPIED_SLOTS = Gauge(
    "parking_lot_slots_occupied",
    "Number of occupied slots",
    registry=REGISTRY,
)

CARS_PARKED = Counter(
    "parking_lot_cars_parked_total",
    "Total number of cars allocated a slot",
    registry=REGISTRY,
)

CARS_LEFT = Counter(
    "parking_lot_cars_left_total",
    "Total number of cars that left the lot",
    registry=REGISTRY,
)

REJECTIONS = Counter(
    "parking_lot_rejections_total",
    "Operations rejected with an error",
    ["operation", "reason"],
    registry=REGISTRY,
)


def record_park() -> None:
    """Record a successful park."""
    CARS_PARKED.inc()


def record_leave() -> None:
    """Record a successful leave."""
    CARS_LEFT.inc()


def record_rejection(operation: str, reason: str) -> None:
    """Record an operation that was rejected."""
    REJECTIONS.labels(operation=operation, reason=reason).inc()


def update_slot_counts(total: int, available: int, occupied: int) -> None:
    """Update overall slot count gauges."""
    TOTAL_SLOTS.set(total)
    AVAILABLE_SLOTS.set(available)
    OCCUPIED_SLOTS.set(occupied)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    return generate_latest(REGISTRY)
