"""Validation rules shared by meal composition and reporting."""

from collections.abc import Sized
from datetime import date

from calorie_tracker.domain.errors import InvalidComposition, InvalidRange

MAX_HISTORY_DAYS = 31


def require_non_empty(items: Sized | None, message: str) -> None:
    """Raise InvalidComposition when a collection is missing or empty."""
    if not items:
        raise InvalidComposition(message)


def require_positive_servings(servings: float) -> None:
    """Raise InvalidComposition unless servings is a positive number."""
    if not servings > 0:
        raise InvalidComposition(f"Servings must be positive, got {servings}")


def require_not_future(meal_date: date, today: date) -> None:
    """Raise InvalidComposition for a meal dated after today."""
    if meal_date > today:
        raise InvalidComposition("Meal date cannot be in the future")


def validate_date_range(
    start: date, end: date, max_days: int = MAX_HISTORY_DAYS
) -> int:
    """Validate an inclusive date range and return its length in days."""
    if start > end:
        raise InvalidRange("Start date cannot be after end date")
    days = (end - start).days + 1
    if days > max_days:
        raise InvalidRange(f"Maximum report period is {max_days} days")
    return days
