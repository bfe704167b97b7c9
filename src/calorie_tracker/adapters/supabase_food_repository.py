"""Supabase implementation for the food catalog."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.foods import FoodItem
from calorie_tracker.services.foods import FoodRepository


@dataclass
class SupabaseFoodRepository(FoodRepository):
    """Supabase-backed repository for catalog foods."""

    client: Client

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .eq("id", str(food_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food_row(response.data[0])

    def find_by_name(self, name: str) -> FoodItem | None:
        """Return the food with this name ignoring case, if present."""
        response = (
            self.client.table("foods")
            .select("*")
            .ilike("name", _escape_like(name))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_food_row(response.data[0])

    def search_foods(self, query: str) -> list[FoodItem]:
        """Return foods whose names contain the query."""
        response = (
            self.client.table("foods")
            .select("*")
            .ilike("name", f"%{_escape_like(query)}%")
            .order("name")
            .execute()
        )
        return [parse_food_row(row) for row in response.data or []]

    def list_foods(self) -> list[FoodItem]:
        """Return all foods ordered by name."""
        response = self.client.table("foods").select("*").order("name").execute()
        return [parse_food_row(row) for row in response.data or []]

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a food row and return it."""
        response = self.client.table("foods").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create food entry")
        return parse_food_row(response.data[0])

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Update a food row and return it."""
        response = (
            self.client.table("foods").update(payload).eq("id", str(food_id)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update food entry")
        return parse_food_row(response.data[0])

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food row."""
        self.client.table("foods").delete().eq("id", str(food_id)).execute()


def parse_food_row(row: dict[str, object]) -> FoodItem:
    """Parse a foods row into a domain model."""
    return FoodItem(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        calories_per_serving=int(row.get("calories_per_serving", 0)),
        proteins=float(row.get("proteins", 0.0)),
        fats=float(row.get("fats", 0.0)),
        carbohydrates=float(row.get("carbohydrates", 0.0)),
    )


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
