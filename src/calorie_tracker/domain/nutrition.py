"""Nutrition domain models."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Nutrients:
    """Calories and macronutrients for a portion, meal or day."""

    calories: int
    proteins: float
    fats: float
    carbohydrates: float


ZERO_NUTRIENTS = Nutrients(calories=0, proteins=0.0, fats=0.0, carbohydrates=0.0)
