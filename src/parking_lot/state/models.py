"""Data models for parking lot state."""

from pydantic import BaseModel, ConfigDict, Field


class Car(BaseModel):
    """A parked car."""

    model_config = ConfigDict(frozen=True)

    registration: str = Field(min_length=1)
    color: str = Field(min_length=1)


class OccupiedSlot(BaseModel):
    """One row of the lot status: a slot and the car parked there."""

    slot_number: int
    registration: str
    color: str


class LotState(BaseModel):
    """Overall lot state."""

    capacity: int
    available: int
    occupied: int
    slots: list[OccupiedSlot]
