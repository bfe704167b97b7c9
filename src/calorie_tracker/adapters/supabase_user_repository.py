"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from calorie_tracker.domain.users import Goal, UserProfile
from calorie_tracker.services.users import UserRepository

_USER_COLUMNS = (
    "id, name, email, age, weight_kg, height_cm, goal, daily_calorie_target"
)


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_user(self, user_id: UUID) -> UserProfile | None:
        """Return the user with the given id, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def get_by_email(self, email: str) -> UserProfile | None:
        """Return the user registered with an email, if present."""
        response = (
            self.client.table("users")
            .select(_USER_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return _parse_user(response.data[0])
        return None

    def list_users(self) -> list[UserProfile]:
        """Return all users ordered by name."""
        response = (
            self.client.table("users").select(_USER_COLUMNS).order("name").execute()
        )
        return [_parse_user(row) for row in response.data or []]

    def create_user(self, payload: dict[str, object]) -> UserProfile:
        """Create a new user row and return it."""
        response = self.client.table("users").insert(payload).execute()
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        return _parse_user(response.data[0])

    def update_user(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        """Update a user row and return it."""
        response = (
            self.client.table("users").update(payload).eq("id", str(user_id)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to update user in Supabase")
        return _parse_user(response.data[0])

    def delete_user(self, user_id: UUID) -> None:
        """Delete a user row."""
        self.client.table("users").delete().eq("id", str(user_id)).execute()


def _parse_user(row: dict[str, object]) -> UserProfile:
    return UserProfile(
        id=UUID(row["id"]),
        name=str(row.get("name", "")),
        email=str(row.get("email", "")),
        age=int(row.get("age", 0)),
        weight_kg=float(row.get("weight_kg", 0.0)),
        height_cm=int(row.get("height_cm", 0)),
        goal=Goal(row.get("goal", Goal.MAINTENANCE.value)),
        daily_calorie_target=int(row.get("daily_calorie_target", 0)),
    )
