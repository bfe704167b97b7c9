"""Domain models for nutrition reports."""

from dataclasses import dataclass
from datetime import date
from uuid import UUID

from calorie_tracker.domain.meals import Meal
from calorie_tracker.domain.nutrition import Nutrients


@dataclass(frozen=True)
class DailyReport:
    """Nutrition consumed by a user on one day against their target."""

    user_id: UUID
    user_name: str
    day: date
    daily_calorie_target: int
    totals: Nutrients
    within_calorie_target: bool
    calorie_deficit: int
    meals: list[Meal]
