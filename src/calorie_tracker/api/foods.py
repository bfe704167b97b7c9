"""Food catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status

from calorie_tracker.api.schemas import FoodIn, FoodOut

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/api/foods", tags=["foods"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_food(payload: FoodIn, request: Request) -> FoodOut:
    """Add a food to the catalog."""
    container: AppContainer = request.app.state.container
    return FoodOut.from_domain(container.food_service.create_food(payload.model_dump()))


@router.get("")
async def list_foods(request: Request) -> list[FoodOut]:
    """Return the whole catalog."""
    container: AppContainer = request.app.state.container
    return [FoodOut.from_domain(food) for food in container.food_service.list_foods()]


@router.get("/search")
async def search_foods(name: str, request: Request) -> list[FoodOut]:
    """Return foods whose names contain the given text."""
    container: AppContainer = request.app.state.container
    foods = container.food_service.search_foods(name)
    return [FoodOut.from_domain(food) for food in foods]


@router.get("/{food_id}")
async def get_food(food_id: UUID, request: Request) -> FoodOut:
    """Return a food by id."""
    container: AppContainer = request.app.state.container
    return FoodOut.from_domain(container.food_service.get_food(food_id))


@router.put("/{food_id}")
async def update_food(food_id: UUID, payload: FoodIn, request: Request) -> FoodOut:
    """Update a catalog food."""
    container: AppContainer = request.app.state.container
    food = container.food_service.update_food(food_id, payload.model_dump())
    return FoodOut.from_domain(food)


@router.delete("/{food_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_food(food_id: UUID, request: Request) -> None:
    """Delete a catalog food."""
    container: AppContainer = request.app.state.container
    container.food_service.delete_food(food_id)
