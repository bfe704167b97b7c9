"""Meal endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status

from calorie_tracker.api.schemas import MealIn, MealOut, MealUpdateIn

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/api/meals", tags=["meals"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_meal(payload: MealIn, request: Request) -> MealOut:
    """Create a meal from foods and servings."""
    container: AppContainer = request.app.state.container
    meal = container.meal_service.create_meal(
        user_id=payload.user_id,
        meal_date=payload.meal_date,
        meal_time=payload.meal_time,
        meal_type=payload.meal_type,
        lines=payload.line_requests(),
    )
    return MealOut.from_domain(meal)


@router.get("/user/{user_id}/date/{day}")
async def list_meals_on_date(
    user_id: UUID, day: date, request: Request
) -> list[MealOut]:
    """Return a user's meals for one day."""
    container: AppContainer = request.app.state.container
    meals = container.meal_service.list_meals_on_date(user_id, day)
    return [MealOut.from_domain(meal) for meal in meals]


@router.get("/user/{user_id}/period")
async def list_meals_in_period(
    user_id: UUID, start_date: date, end_date: date, request: Request
) -> list[MealOut]:
    """Return a user's meals within a date range."""
    container: AppContainer = request.app.state.container
    meals = container.meal_service.list_meals_in_range(user_id, start_date, end_date)
    return [MealOut.from_domain(meal) for meal in meals]


@router.get("/{meal_id}")
async def get_meal(meal_id: UUID, request: Request) -> MealOut:
    """Return a meal by id."""
    container: AppContainer = request.app.state.container
    return MealOut.from_domain(container.meal_service.get_meal(meal_id))


@router.put("/{meal_id}")
async def update_meal(
    meal_id: UUID, payload: MealUpdateIn, request: Request
) -> MealOut:
    """Replace a meal's details and all of its lines."""
    container: AppContainer = request.app.state.container
    meal = container.meal_service.update_meal(
        meal_id,
        meal_date=payload.meal_date,
        meal_time=payload.meal_time,
        meal_type=payload.meal_type,
        lines=payload.line_requests(),
    )
    return MealOut.from_domain(meal)


@router.delete("/{meal_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_meal(meal_id: UUID, request: Request) -> None:
    """Delete a meal."""
    container: AppContainer = request.app.state.container
    container.meal_service.delete_meal(meal_id)
