"""Meal composition and the meal application service."""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo

from calorie_tracker.domain.errors import NotFound
from calorie_tracker.domain.foods import FoodItem
from calorie_tracker.domain.meals import Meal, MealLine, MealLineRequest
from calorie_tracker.domain.users import UserProfile
from calorie_tracker.services.foods import FoodRepository
from calorie_tracker.services.nutrition import line_nutrition, sum_nutrition
from calorie_tracker.services.users import UserRepository
from calorie_tracker.services.validation import (
    require_non_empty,
    require_not_future,
    require_positive_servings,
)

FoodLookup = Callable[[UUID], FoodItem | None]

_EMPTY_MEAL_MESSAGE = "A meal must contain at least one food"

_logger = logging.getLogger(__name__)


class MealRepository(Protocol):
    """Persistence interface for meals and their lines."""

    def create_meal(self, meal: Meal) -> Meal:
        """Persist a new meal with its lines and return it with identifiers."""

    def replace_meal(self, meal: Meal) -> Meal:
        """Update a meal's header and replace all of its lines."""

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal rebuilt from current food values, if present."""

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[Meal]:
        """Return a user's meals dated within an inclusive range."""

    def list_meal_dates(self, user_id: UUID) -> list[date]:
        """Return the distinct dates a user has meals on, ascending."""

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal and its lines."""


def build_line(
    food: FoodItem, servings: float, line_id: UUID | None = None
) -> MealLine:
    """Build a meal line with nutrients derived from the food snapshot."""
    return MealLine(
        food=food,
        servings=servings,
        nutrition=line_nutrition(food, servings),
        id=line_id,
    )


def assemble_meal(  # noqa: PLR0913
    meal_id: UUID | None,
    user_id: UUID,
    meal_date: date,
    meal_time: time,
    meal_type: str,
    lines: Sequence[MealLine],
) -> Meal:
    """Assemble a meal from built lines, computing its totals."""
    require_non_empty(lines, _EMPTY_MEAL_MESSAGE)
    return Meal(
        id=meal_id,
        user_id=user_id,
        meal_date=meal_date,
        meal_time=meal_time,
        meal_type=meal_type,
        lines=list(lines),
        totals=sum_nutrition(line.nutrition for line in lines),
    )


def compose(  # noqa: PLR0913
    owner: UserProfile,
    meal_date: date,
    meal_time: time,
    meal_type: str,
    requested_lines: Sequence[MealLineRequest],
    food_lookup: FoodLookup,
) -> Meal:
    """Compose a new meal for a user from requested foods and servings."""
    lines = _resolve_lines(requested_lines, food_lookup)
    return assemble_meal(None, owner.id, meal_date, meal_time, meal_type, lines)


def recompose(  # noqa: PLR0913
    existing: Meal,
    new_lines: Sequence[MealLineRequest],
    food_lookup: FoodLookup,
    *,
    meal_date: date | None = None,
    meal_time: time | None = None,
    meal_type: str | None = None,
) -> Meal:
    """Return the meal with its line set fully replaced by new lines."""
    lines = _resolve_lines(new_lines, food_lookup)
    return assemble_meal(
        existing.id,
        existing.user_id,
        existing.meal_date if meal_date is None else meal_date,
        existing.meal_time if meal_time is None else meal_time,
        existing.meal_type if meal_type is None else meal_type,
        lines,
    )


def _resolve_lines(
    requested_lines: Sequence[MealLineRequest], food_lookup: FoodLookup
) -> list[MealLine]:
    require_non_empty(requested_lines, _EMPTY_MEAL_MESSAGE)
    for requested in requested_lines:
        require_positive_servings(requested.servings)
    foods: dict[UUID, FoodItem] = {}
    lines: list[MealLine] = []
    for requested in requested_lines:
        food = foods.get(requested.food_id)
        if food is None:
            food = food_lookup(requested.food_id)
            if food is None:
                raise NotFound("food", requested.food_id)
            foods[requested.food_id] = food
        lines.append(build_line(food, requested.servings))
    return lines


@dataclass
class MealService:
    """Application service that composes, persists and lists meals."""

    repository: MealRepository
    user_repository: UserRepository
    food_repository: FoodRepository
    timezone_name: str = "UTC"

    def create_meal(  # noqa: PLR0913
        self,
        user_id: UUID,
        meal_date: date,
        meal_time: time,
        meal_type: str,
        lines: Sequence[MealLineRequest],
    ) -> Meal:
        """Compose a meal for a user and persist it."""
        user = self.user_repository.get_user(user_id)
        if user is None:
            raise NotFound("user", user_id)
        require_not_future(meal_date, self._today())
        meal = compose(
            user, meal_date, meal_time, meal_type, lines, self.food_repository.get_food
        )
        saved = self.repository.create_meal(meal)
        _logger.info(
            "Meal created: meal_id=%s user_id=%s lines=%s calories=%s",
            saved.id,
            user_id,
            len(saved.lines),
            saved.totals.calories,
        )
        return saved

    def update_meal(  # noqa: PLR0913
        self,
        meal_id: UUID,
        meal_date: date,
        meal_time: time,
        meal_type: str,
        lines: Sequence[MealLineRequest],
    ) -> Meal:
        """Replace a meal's header and lines."""
        existing = self.repository.get_meal(meal_id)
        if existing is None:
            raise NotFound("meal", meal_id)
        require_not_future(meal_date, self._today())
        updated = recompose(
            existing,
            lines,
            self.food_repository.get_food,
            meal_date=meal_date,
            meal_time=meal_time,
            meal_type=meal_type,
        )
        saved = self.repository.replace_meal(updated)
        _logger.info(
            "Meal updated: meal_id=%s lines=%s calories=%s",
            meal_id,
            len(saved.lines),
            saved.totals.calories,
        )
        return saved

    def get_meal(self, meal_id: UUID) -> Meal:
        """Return a meal by id."""
        meal = self.repository.get_meal(meal_id)
        if meal is None:
            raise NotFound("meal", meal_id)
        return meal

    def list_meals_on_date(self, user_id: UUID, day: date) -> list[Meal]:
        """Return a user's meals for one day ordered by time."""
        self._require_user(user_id)
        return order_by_time(self.repository.list_meals(user_id, day, day))

    def list_meals_in_range(
        self, user_id: UUID, start: date, end: date
    ) -> list[Meal]:
        """Return a user's meals within an inclusive range ordered by date and time."""
        self._require_user(user_id)
        return order_by_time(self.repository.list_meals(user_id, start, end))

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal by id."""
        if self.repository.get_meal(meal_id) is None:
            raise NotFound("meal", meal_id)
        self.repository.delete_meal(meal_id)
        _logger.info("Meal deleted: meal_id=%s", meal_id)

    def _require_user(self, user_id: UUID) -> None:
        if self.user_repository.get_user(user_id) is None:
            raise NotFound("user", user_id)

    def _today(self) -> date:
        return datetime.now(tz=ZoneInfo(self.timezone_name)).date()


def order_by_time(meals: list[Meal]) -> list[Meal]:
    """Return meals ordered by date then time of day."""
    return sorted(meals, key=lambda meal: (meal.meal_date, meal.meal_time))
