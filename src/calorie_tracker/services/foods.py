"""Services for managing the food catalog."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.errors import InvalidData, NotFound
from calorie_tracker.domain.foods import FoodItem

_logger = logging.getLogger(__name__)


class FoodRepository(Protocol):
    """Persistence interface for the food catalog."""

    def get_food(self, food_id: UUID) -> FoodItem | None:
        """Return a food by id, if present."""

    def find_by_name(self, name: str) -> FoodItem | None:
        """Return the food whose name matches ignoring case, if present."""

    def search_foods(self, query: str) -> list[FoodItem]:
        """Return foods whose names contain the query ignoring case."""

    def list_foods(self) -> list[FoodItem]:
        """Return all foods."""

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Create a food and return it."""

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Update a food and return it."""

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food."""


@dataclass
class FoodService:
    """Application service for catalog operations."""

    repository: FoodRepository

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        """Add a food to the catalog, rejecting duplicate names."""
        name = str(payload["name"])
        if self.repository.find_by_name(name) is not None:
            raise InvalidData(f"Food named '{name}' already exists")
        food = self.repository.create_food(payload)
        _logger.info("Food created: food_id=%s name=%s", food.id, food.name)
        return food

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        """Update a catalog food; meals pick up the new values on next read."""
        current = self.get_food(food_id)
        name = str(payload["name"])
        if (
            name.lower() != current.name.lower()
            and self.repository.find_by_name(name) is not None
        ):
            raise InvalidData(f"Food named '{name}' already exists")
        return self.repository.update_food(food_id, payload)

    def get_food(self, food_id: UUID) -> FoodItem:
        """Return a food by id."""
        food = self.repository.get_food(food_id)
        if food is None:
            raise NotFound("food", food_id)
        return food

    def list_foods(self) -> list[FoodItem]:
        """Return the whole catalog."""
        return self.repository.list_foods()

    def search_foods(self, query: str) -> list[FoodItem]:
        """Search the catalog by a name fragment."""
        return self.repository.search_foods(query)

    def delete_food(self, food_id: UUID) -> None:
        """Delete a food by id."""
        self.get_food(food_id)
        self.repository.delete_food(food_id)
        _logger.info("Food deleted: food_id=%s", food_id)
