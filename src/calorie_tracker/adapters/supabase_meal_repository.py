"""Supabase repository for meals and meal lines."""

import logging
from dataclasses import dataclass, replace
from datetime import date, time
from uuid import UUID

from supabase import Client

from calorie_tracker.adapters.supabase_food_repository import parse_food_row
from calorie_tracker.domain.meals import Meal, MealLine
from calorie_tracker.services.meals import MealRepository, assemble_meal, build_line

_logger = logging.getLogger(__name__)

# Lines keep only the food reference and servings; nutrients are rebuilt from
# the joined food row on every read.
_MEAL_SELECT = (
    "id, user_id, meal_date, meal_time, meal_type, "
    "meal_lines(id, food_id, servings, foods(*))"
)


@dataclass
class SupabaseMealRepository(MealRepository):
    """Supabase implementation for meals."""

    client: Client

    def create_meal(self, meal: Meal) -> Meal:
        """Insert a meal row and its lines."""
        response = (
            self.client.table("meals")
            .insert({"user_id": str(meal.user_id), **_header_payload(meal)})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create meal")
        meal_id = UUID(response.data[0]["id"])
        try:
            lines = self._insert_lines(meal_id, meal.lines)
        except Exception:
            self.client.table("meals").delete().eq("id", str(meal_id)).execute()
            raise
        return replace(meal, id=meal_id, lines=lines)

    def replace_meal(self, meal: Meal) -> Meal:
        """Update a meal row and swap its lines for the meal's current ones."""
        if meal.id is None:
            raise ValueError("Cannot replace a meal without an id")
        response = (
            self.client.table("meals")
            .update(_header_payload(meal))
            .eq("id", str(meal.id))
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update meal")
        stale_ids = self._line_ids(meal.id)
        lines = self._insert_lines(meal.id, meal.lines)
        if stale_ids:
            self.client.table("meal_lines").delete().in_("id", stale_ids).execute()
        return replace(meal, lines=lines)

    def get_meal(self, meal_id: UUID) -> Meal | None:
        """Return a meal with lines rebuilt from current foods."""
        response = (
            self.client.table("meals")
            .select(_MEAL_SELECT)
            .eq("id", str(meal_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_meal(response.data[0])

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[Meal]:
        """Return a user's meals dated within the inclusive range."""
        response = (
            self.client.table("meals")
            .select(_MEAL_SELECT)
            .eq("user_id", str(user_id))
            .gte("meal_date", start.isoformat())
            .lte("meal_date", end.isoformat())
            .order("meal_date", desc=False)
            .order("meal_time", desc=False)
            .execute()
        )
        meals = (_parse_meal(row) for row in response.data or [])
        return [meal for meal in meals if meal is not None]

    def list_meal_dates(self, user_id: UUID) -> list[date]:
        """Return the distinct dates of a user's meals, ascending."""
        response = (
            self.client.table("meals")
            .select("meal_date, meal_lines(id)")
            .eq("user_id", str(user_id))
            .order("meal_date", desc=False)
            .execute()
        )
        dates = {
            date.fromisoformat(row["meal_date"])
            for row in response.data or []
            if row.get("meal_lines")
        }
        return sorted(dates)

    def delete_meal(self, meal_id: UUID) -> None:
        """Delete a meal and its lines."""
        self.client.table("meal_lines").delete().eq("meal_id", str(meal_id)).execute()
        self.client.table("meals").delete().eq("id", str(meal_id)).execute()

    def _line_ids(self, meal_id: UUID) -> list[str]:
        response = (
            self.client.table("meal_lines")
            .select("id")
            .eq("meal_id", str(meal_id))
            .execute()
        )
        return [str(row["id"]) for row in response.data or []]

    def _insert_lines(self, meal_id: UUID, lines: list[MealLine]) -> list[MealLine]:
        payload = [
            {
                "meal_id": str(meal_id),
                "food_id": str(line.food.id),
                "servings": line.servings,
            }
            for line in lines
        ]
        response = self.client.table("meal_lines").insert(payload).execute()
        rows = response.data or []
        if len(rows) != len(lines):
            raise RuntimeError("Failed to create meal lines")
        return [
            replace(line, id=UUID(row["id"]))
            for line, row in zip(lines, rows, strict=True)
        ]


def _header_payload(meal: Meal) -> dict[str, object]:
    return {
        "meal_date": meal.meal_date.isoformat(),
        "meal_time": meal.meal_time.isoformat(),
        "meal_type": meal.meal_type,
    }


def _parse_meal(row: dict[str, object]) -> Meal | None:
    lines = [
        build_line(
            parse_food_row(line["foods"]),
            float(line["servings"]),
            UUID(line["id"]),
        )
        for line in row.get("meal_lines") or []
    ]
    if not lines:
        _logger.warning("Skipping meal without lines: meal_id=%s", row["id"])
        return None
    return assemble_meal(
        UUID(row["id"]),
        UUID(row["user_id"]),
        date.fromisoformat(row["meal_date"]),
        time.fromisoformat(row["meal_time"]),
        str(row.get("meal_type", "")),
        lines,
    )
