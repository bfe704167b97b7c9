"""Nutrient arithmetic for meal lines, meals and days."""

from collections.abc import Iterable

from calorie_tracker.domain.foods import FoodItem
from calorie_tracker.domain.nutrition import ZERO_NUTRIENTS, Nutrients


def line_nutrition(food: FoodItem, servings: float) -> Nutrients:
    """Return the nutrients contributed by a number of servings of a food.

    Calories are truncated toward zero, macros are left unrounded.
    """
    return Nutrients(
        calories=int(food.calories_per_serving * servings),
        proteins=food.proteins * servings,
        fats=food.fats * servings,
        carbohydrates=food.carbohydrates * servings,
    )


def sum_nutrition(items: Iterable[Nutrients]) -> Nutrients:
    """Sum nutrient contributions; an empty input yields zeros."""
    total = ZERO_NUTRIENTS
    for item in items:
        total = Nutrients(
            calories=total.calories + item.calories,
            proteins=total.proteins + item.proteins,
            fats=total.fats + item.fats,
            carbohydrates=total.carbohydrates + item.carbohydrates,
        )
    return total
