"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import date, time
from uuid import UUID, uuid4

import pytest

from calorie_tracker.config import Settings
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.foods import FoodItem
from calorie_tracker.domain.meals import Meal
from calorie_tracker.domain.users import Goal, UserProfile
from calorie_tracker.services.foods import FoodRepository, FoodService
from calorie_tracker.services.meals import (
    MealRepository,
    MealService,
    assemble_meal,
    build_line,
)
from calorie_tracker.services.reports import ReportService
from calorie_tracker.services.users import UserRepository, UserService


def make_user(
    daily_calorie_target: int = 2100,
    name: str = "Anna",
    email: str = "anna@example.com",
) -> UserProfile:
    return UserProfile(
        id=uuid4(),
        name=name,
        email=email,
        age=30,
        weight_kg=70.0,
        height_cm=170,
        goal=Goal.MAINTENANCE,
        daily_calorie_target=daily_calorie_target,
    )


def make_food(  # noqa: PLR0913
    name: str = "Chicken breast",
    calories_per_serving: int = 165,
    proteins: float = 31.0,
    fats: float = 3.6,
    carbohydrates: float = 0.0,
    food_id: UUID | None = None,
) -> FoodItem:
    return FoodItem(
        id=food_id or uuid4(),
        name=name,
        calories_per_serving=calories_per_serving,
        proteins=proteins,
        fats=fats,
        carbohydrates=carbohydrates,
    )


def make_meal(
    user: UserProfile,
    meal_date: date,
    lines: list[tuple[FoodItem, float]],
    meal_time: time = time(12, 0),
    meal_type: str = "Lunch",
) -> Meal:
    return assemble_meal(
        uuid4(),
        user.id,
        meal_date,
        meal_time,
        meal_type,
        [build_line(food, servings) for food, servings in lines],
    )


@dataclass
class InMemoryUserRepository(UserRepository):
    """In-memory user repository for tests."""

    users: dict[UUID, UserProfile] = field(default_factory=dict)

    def add(self, user: UserProfile) -> UserProfile:
        self.users[user.id] = user
        return user

    def get_user(self, user_id: UUID) -> UserProfile | None:
        return self.users.get(user_id)

    def get_by_email(self, email: str) -> UserProfile | None:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def list_users(self) -> list[UserProfile]:
        return list(self.users.values())

    def create_user(self, payload: dict[str, object]) -> UserProfile:
        return self.add(_user_from_payload(uuid4(), payload))

    def update_user(self, user_id: UUID, payload: dict[str, object]) -> UserProfile:
        return self.add(_user_from_payload(user_id, payload))

    def delete_user(self, user_id: UUID) -> None:
        self.users.pop(user_id, None)


def _user_from_payload(user_id: UUID, payload: dict[str, object]) -> UserProfile:
    return UserProfile(
        id=user_id,
        name=str(payload["name"]),
        email=str(payload["email"]),
        age=int(payload["age"]),
        weight_kg=float(payload["weight_kg"]),
        height_cm=int(payload["height_cm"]),
        goal=Goal(payload["goal"]),
        daily_calorie_target=int(payload["daily_calorie_target"]),
    )


@dataclass
class InMemoryFoodRepository(FoodRepository):
    """In-memory food catalog for tests."""

    foods: dict[UUID, FoodItem] = field(default_factory=dict)
    lookups: list[UUID] = field(default_factory=list)

    def add(self, food: FoodItem) -> FoodItem:
        self.foods[food.id] = food
        return food

    def get_food(self, food_id: UUID) -> FoodItem | None:
        self.lookups.append(food_id)
        return self.foods.get(food_id)

    def find_by_name(self, name: str) -> FoodItem | None:
        for food in self.foods.values():
            if food.name.lower() == name.lower():
                return food
        return None

    def search_foods(self, query: str) -> list[FoodItem]:
        return [
            food for food in self.foods.values() if query.lower() in food.name.lower()
        ]

    def list_foods(self) -> list[FoodItem]:
        return list(self.foods.values())

    def create_food(self, payload: dict[str, object]) -> FoodItem:
        return self.add(_food_from_payload(uuid4(), payload))

    def update_food(self, food_id: UUID, payload: dict[str, object]) -> FoodItem:
        return self.add(_food_from_payload(food_id, payload))

    def delete_food(self, food_id: UUID) -> None:
        self.foods.pop(food_id, None)


def _food_from_payload(food_id: UUID, payload: dict[str, object]) -> FoodItem:
    return FoodItem(
        id=food_id,
        name=str(payload["name"]),
        calories_per_serving=int(payload["calories_per_serving"]),
        proteins=float(payload["proteins"]),
        fats=float(payload["fats"]),
        carbohydrates=float(payload["carbohydrates"]),
    )


@dataclass
class InMemoryMealRepository(MealRepository):
    """In-memory meal repository that rebuilds nutrients from current foods."""

    food_repository: InMemoryFoodRepository
    meals: dict[UUID, dict[str, object]] = field(default_factory=dict)

    def create_meal(self, meal: Meal) -> Meal:
        meal_id = uuid4()
        self._store(meal_id, meal)
        return self._load(meal_id)

    def replace_meal(self, meal: Meal) -> Meal:
        assert meal.id is not None
        self._store(meal.id, meal)
        return self._load(meal.id)

    def get_meal(self, meal_id: UUID) -> Meal | None:
        if meal_id not in self.meals:
            return None
        return self._load(meal_id)

    def list_meals(self, user_id: UUID, start: date, end: date) -> list[Meal]:
        return [
            self._load(meal_id)
            for meal_id, row in self.meals.items()
            if row["user_id"] == user_id and start <= row["meal_date"] <= end
        ]

    def list_meal_dates(self, user_id: UUID) -> list[date]:
        rows = self.meals.values()
        return sorted({row["meal_date"] for row in rows if row["user_id"] == user_id})

    def delete_meal(self, meal_id: UUID) -> None:
        self.meals.pop(meal_id, None)

    def _store(self, meal_id: UUID, meal: Meal) -> None:
        self.meals[meal_id] = {
            "user_id": meal.user_id,
            "meal_date": meal.meal_date,
            "meal_time": meal.meal_time,
            "meal_type": meal.meal_type,
            "lines": [(uuid4(), line.food.id, line.servings) for line in meal.lines],
        }

    def _load(self, meal_id: UUID) -> Meal:
        row = self.meals[meal_id]
        lines = [
            build_line(self.food_repository.foods[food_id], servings, line_id)
            for line_id, food_id, servings in row["lines"]
        ]
        return assemble_meal(
            meal_id,
            row["user_id"],
            row["meal_date"],
            row["meal_time"],
            row["meal_type"],
            lines,
        )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        max_history_days=31,
    )


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def food_repository() -> InMemoryFoodRepository:
    return InMemoryFoodRepository()


@pytest.fixture
def meal_repository(food_repository: InMemoryFoodRepository) -> InMemoryMealRepository:
    return InMemoryMealRepository(food_repository=food_repository)


@pytest.fixture
def container(
    settings: Settings,
    user_repository: InMemoryUserRepository,
    food_repository: InMemoryFoodRepository,
    meal_repository: InMemoryMealRepository,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        user_service=UserService(user_repository),
        food_service=FoodService(food_repository),
        meal_service=MealService(
            repository=meal_repository,
            user_repository=user_repository,
            food_repository=food_repository,
            timezone_name=settings.timezone,
        ),
        report_service=ReportService(
            user_repository=user_repository,
            meal_repository=meal_repository,
            max_history_days=settings.max_history_days,
        ),
    )
