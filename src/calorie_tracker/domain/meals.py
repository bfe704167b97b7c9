"""Domain models for meals."""

from dataclasses import dataclass
from datetime import date, time
from uuid import UUID

from calorie_tracker.domain.foods import FoodItem
from calorie_tracker.domain.nutrition import Nutrients


@dataclass(frozen=True)
class MealLineRequest:
    """Requested food and servings for a meal line."""

    food_id: UUID
    servings: float


@dataclass(frozen=True)
class MealLine:
    """A food portion inside a meal, with nutrients derived from the food."""

    food: FoodItem
    servings: float
    nutrition: Nutrients
    id: UUID | None = None


@dataclass(frozen=True)
class Meal:
    """A meal eaten by a user, composed of one or more lines."""

    id: UUID | None
    user_id: UUID
    meal_date: date
    meal_time: time
    meal_type: str
    lines: list[MealLine]
    totals: Nutrients
