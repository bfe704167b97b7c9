"""Domain models for users."""

from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class Goal(str, Enum):
    """Body-weight goal driving the calorie target."""

    WEIGHT_LOSS = "WEIGHT_LOSS"
    MAINTENANCE = "MAINTENANCE"
    WEIGHT_GAIN = "WEIGHT_GAIN"


@dataclass(frozen=True)
class UserProfile:
    """Represents a user with body metrics and a stored calorie target."""

    id: UUID
    name: str
    email: str
    age: int
    weight_kg: float
    height_cm: int
    goal: Goal
    daily_calorie_target: int
