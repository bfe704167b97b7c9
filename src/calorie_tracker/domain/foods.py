"""Domain models for the food catalog."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True)
class FoodItem:
    """A catalog food with nutrient values per serving."""

    id: UUID
    name: str
    calories_per_serving: int
    proteins: float
    fats: float
    carbohydrates: float
