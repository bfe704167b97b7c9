"""User endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request, status

from calorie_tracker.api.schemas import UserIn, UserOut

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserIn, request: Request) -> UserOut:
    """Register a user and derive their daily calorie target."""
    container: AppContainer = request.app.state.container
    user = container.user_service.create_user(payload.model_dump(mode="json"))
    return UserOut.from_domain(user)


@router.get("")
async def list_users(request: Request) -> list[UserOut]:
    """Return all users."""
    container: AppContainer = request.app.state.container
    return [UserOut.from_domain(user) for user in container.user_service.list_users()]


@router.get("/{user_id}")
async def get_user(user_id: UUID, request: Request) -> UserOut:
    """Return a user by id."""
    container: AppContainer = request.app.state.container
    return UserOut.from_domain(container.user_service.get_user(user_id))


@router.put("/{user_id}")
async def update_user(user_id: UUID, payload: UserIn, request: Request) -> UserOut:
    """Update a user and recompute their calorie target."""
    container: AppContainer = request.app.state.container
    user = container.user_service.update_user(user_id, payload.model_dump(mode="json"))
    return UserOut.from_domain(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: UUID, request: Request) -> None:
    """Delete a user."""
    container: AppContainer = request.app.state.container
    container.user_service.delete_user(user_id)
