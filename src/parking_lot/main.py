"""Main application entry point: runs the demonstration sequence."""

import logging
import sys
from typing import Callable

from .config import AppConfig, LoggingConfig, get_config_path, load_config
from .errors import LotError
from .state.lot_manager import LotManager

logger = logging.getLogger(__name__)

DEMO_CAPACITY = 10

DEMO_ARRIVALS = [
    ("KA-01-HH-1234", "White"),
    ("KA-01-HH-9999", "White"),
    ("KA-01-BB-0001", "Black"),
    ("KA-01-HH-7777", "Red"),
    ("KA-01-HH-2701", "Blue"),
    ("KA-01-HH-3141", "Black"),
]

DEMO_LATE_ARRIVALS = [
    ("KA-01-P-333", "White"),
    ("DL-12-AA-9999", "White"),
]

STATUS_HEADER = "Slot No. Registration No Colour"


def configure_logging(config: LoggingConfig) -> None:
    """Configure root logging from the logging section of the config."""
    logging.basicConfig(level=config.level, format=config.format)


def report(action: Callable[[], str], emit: Callable[[str], None] = print) -> None:
    """
    Run one lot operation and emit its outcome.

    Expected failures (full lot, unknown slot, nothing found) are emitted
    as their message instead of propagating.
    """
    try:
        emit(action())
    except LotError as e:
        emit(e.message)


def create_lot(manager: LotManager, capacity: int) -> str:
    return f"Created a parking lot with {manager.create_lot(capacity)} slots"


def park(manager: LotManager, registration: str, color: str) -> str:
    return f"Allocated slot number: {manager.park(registration, color)}"


def leave(manager: LotManager, slot_number: int) -> str:
    manager.leave(slot_number)
    return f"Slot number {slot_number} is free"


def status(manager: LotManager) -> str:
    rows = [STATUS_HEADER]
    for slot in manager.status():
        rows.append(f"{slot.slot_number:<8} {slot.registration}   {slot.color}")
    return "\n".join(rows)


def registrations_for_color(manager: LotManager, color: str) -> str:
    return ", ".join(manager.registrations_for_color(color))


def slots_for_color(manager: LotManager, color: str) -> str:
    return ", ".join(str(n) for n in manager.slots_for_color(color))


def slot_for_registration(manager: LotManager, registration: str) -> str:
    return str(manager.slot_for_registration(registration))


def run_scenario(
    manager: LotManager,
    capacity: int = DEMO_CAPACITY,
    emit: Callable[[str], None] = print,
) -> None:
    """
    Drive the lot through the fixed demonstration sequence.

    Args:
        manager: Lot manager to operate on; its lot is (re)created
        capacity: Number of slots in the demonstration lot
        emit: Sink for each line of output
    """
    report(lambda: create_lot(manager, capacity), emit)

    for registration, color in DEMO_ARRIVALS:
        report(lambda: park(manager, registration, color), emit)

    report(lambda: leave(manager, 4), emit)
    report(lambda: status(manager), emit)

    for registration, color in DEMO_LATE_ARRIVALS:
        report(lambda: park(manager, registration, color), emit)

    report(lambda: registrations_for_color(manager, "White"), emit)
    report(lambda: slots_for_color(manager, "White"), emit)
    report(lambda: slot_for_registration(manager, "KA-01-HH-3141"), emit)
    report(lambda: slot_for_registration(manager, "MH-04-AY-1111"), emit)


def main():
    """Run the demonstration."""
    config_path = get_config_path()
    if config_path.exists():
        config = load_config(config_path)
    else:
        config = AppConfig()

    configure_logging(config.logging)
    if config_path.exists():
        logger.info(f"Loaded configuration from {config_path}")
    else:
        logger.info(f"No configuration at {config_path}, using defaults")

    manager = LotManager(
        reject_duplicate_registrations=config.lot.reject_duplicate_registrations,
    )

    try:
        run_scenario(manager, capacity=config.lot.capacity)
    except Exception as e:
        logger.error(f"Scenario failed: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
