"""Pursuit Model — the three per-participant records the registry keeps coherent."""

from enum import IntEnum

from pydantic import BaseModel, Field


class PriorityTier(IntEnum):
    MINIMAL = 1
    MODERATE = 2
    CRITICAL = 3


class PursuitRecord(BaseModel):
    """A participant's registered goal. At most one per participant."""

    description: str = Field(min_length=1, max_length=100)
    completed: bool = False


class PriorityEntry(BaseModel):
    """Importance weight attached to a pursuit."""

    weight: int = Field(ge=1, le=3)         # See PriorityTier


class DeadlineEntry(BaseModel):
    """Absolute logical-clock deadline attached to a pursuit."""

    target: int = Field(ge=0)               # clock at write time + offset
    alert: bool = False                     # Reserved for deadline alerting; never set
