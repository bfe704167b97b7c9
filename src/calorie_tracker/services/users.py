"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from calorie_tracker.domain.errors import InvalidData, NotFound
from calorie_tracker.domain.users import Goal, UserProfile
from calorie_tracker.services.targets import compute_target

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_user(self, user_id: UUID) -> UserProfile | None:
        """Return the user with the given id, if present."""

    def get_by_email(self, email: str) -> UserProfile | None:
        """Return the user registered with an email, if present."""

    def list_users(self) -> list[UserProfile]:
        """Return all users."""

    def create_user(self, payload: dict[str, object]) -> UserProfile:
        """Create and return a new user."""

    def update_user(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        """Update and return an existing user."""

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def create_user(self, payload: dict[str, object]) -> UserProfile:
        """Register a user, deriving their daily calorie target."""
        email = str(payload["email"])
        if self.repository.get_by_email(email) is not None:
            raise InvalidData(f"User with email '{email}' already exists")
        user = self.repository.create_user(_with_target(payload))
        _logger.info(
            "User created: user_id=%s target=%s", user.id, user.daily_calorie_target
        )
        return user

    def update_user(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        """Update a user's profile and recompute their calorie target."""
        current = self.get_user(user_id)
        email = str(payload["email"])
        if email != current.email and self.repository.get_by_email(email) is not None:
            raise InvalidData(f"User with email '{email}' already exists")
        user = self.repository.update_user(user_id, _with_target(payload))
        _logger.info(
            "User updated: user_id=%s target=%s", user.id, user.daily_calorie_target
        )
        return user

    def get_user(self, user_id: UUID) -> UserProfile:
        """Return a user by id."""
        user = self.repository.get_user(user_id)
        if user is None:
            raise NotFound("user", user_id)
        return user

    def list_users(self) -> list[UserProfile]:
        """Return all users."""
        return self.repository.list_users()

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user by id."""
        self.get_user(user_id)
        self.repository.delete_user(user_id)
        _logger.info("User deleted: user_id=%s", user_id)


def _with_target(payload: dict[str, object]) -> dict[str, object]:
    """Return a user payload carrying a freshly computed calorie target."""
    goal = Goal(payload["goal"])
    target = compute_target(
        age=int(payload["age"]),
        weight_kg=float(payload["weight_kg"]),
        height_cm=int(payload["height_cm"]),
        goal=goal,
    )
    return {**payload, "goal": goal.value, "daily_calorie_target": target}
