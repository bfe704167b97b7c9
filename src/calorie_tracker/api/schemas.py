"""Request and response models for the HTTP API."""

import datetime as dt
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from calorie_tracker.domain.foods import FoodItem
from calorie_tracker.domain.meals import Meal, MealLine, MealLineRequest
from calorie_tracker.domain.reports import DailyReport
from calorie_tracker.domain.users import Goal, UserProfile

_EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class UserIn(BaseModel):
    """Payload for creating or updating a user."""

    name: str = Field(min_length=2, max_length=100)
    email: str = Field(pattern=_EMAIL_PATTERN)
    age: int = Field(ge=1, le=120)
    weight_kg: float = Field(gt=0)
    height_cm: int = Field(ge=50, le=250)
    goal: Goal


class UserOut(BaseModel):
    """User representation returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    email: str
    age: int
    weight_kg: float
    height_cm: int
    goal: Goal
    daily_calorie_target: int

    @classmethod
    def from_domain(cls, user: UserProfile) -> "UserOut":
        return cls.model_validate(user)


class FoodIn(BaseModel):
    """Payload for creating or updating a catalog food."""

    name: str = Field(min_length=2, max_length=100)
    calories_per_serving: int = Field(ge=0)
    proteins: float = Field(ge=0)
    fats: float = Field(ge=0)
    carbohydrates: float = Field(ge=0)


class FoodOut(BaseModel):
    """Catalog food returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    calories_per_serving: int
    proteins: float
    fats: float
    carbohydrates: float

    @classmethod
    def from_domain(cls, food: FoodItem) -> "FoodOut":
        return cls.model_validate(food)


class NutrientsOut(BaseModel):
    """Calories and macros."""

    model_config = ConfigDict(from_attributes=True)

    calories: int
    proteins: float
    fats: float
    carbohydrates: float


class MealLineIn(BaseModel):
    """Requested food and servings for a meal."""

    food_id: UUID
    servings: float = Field(gt=0)

    def to_request(self) -> MealLineRequest:
        return MealLineRequest(food_id=self.food_id, servings=self.servings)


class MealUpdateIn(BaseModel):
    """Payload for replacing a meal's header and lines."""

    meal_date: dt.date
    meal_time: dt.time
    meal_type: str = Field(min_length=1)
    lines: list[MealLineIn] = Field(min_length=1)

    def line_requests(self) -> list[MealLineRequest]:
        return [line.to_request() for line in self.lines]


class MealIn(MealUpdateIn):
    """Payload for creating a meal."""

    user_id: UUID


class MealLineOut(BaseModel):
    """Meal line with nutrients computed from the current food."""

    id: UUID | None
    food_id: UUID
    food_name: str
    servings: float
    nutrition: NutrientsOut

    @classmethod
    def from_domain(cls, line: MealLine) -> "MealLineOut":
        return cls(
            id=line.id,
            food_id=line.food.id,
            food_name=line.food.name,
            servings=line.servings,
            nutrition=NutrientsOut.model_validate(line.nutrition),
        )


class MealOut(BaseModel):
    """Meal with lines and totals."""

    id: UUID | None
    user_id: UUID
    meal_date: dt.date
    meal_time: dt.time
    meal_type: str
    lines: list[MealLineOut]
    totals: NutrientsOut

    @classmethod
    def from_domain(cls, meal: Meal) -> "MealOut":
        return cls(
            id=meal.id,
            user_id=meal.user_id,
            meal_date=meal.meal_date,
            meal_time=meal.meal_time,
            meal_type=meal.meal_type,
            lines=[MealLineOut.from_domain(line) for line in meal.lines],
            totals=NutrientsOut.model_validate(meal.totals),
        )


class DailyReportOut(BaseModel):
    """Nutrition report for one day."""

    user_id: UUID
    user_name: str
    date: dt.date
    daily_calorie_target: int
    totals: NutrientsOut
    within_calorie_target: bool
    calorie_deficit: int
    meals: list[MealOut]

    @classmethod
    def from_domain(cls, report: DailyReport) -> "DailyReportOut":
        return cls(
            user_id=report.user_id,
            user_name=report.user_name,
            date=report.day,
            daily_calorie_target=report.daily_calorie_target,
            totals=NutrientsOut.model_validate(report.totals),
            within_calorie_target=report.within_calorie_target,
            calorie_deficit=report.calorie_deficit,
            meals=[MealOut.from_domain(meal) for meal in report.meals],
        )


class CalorieCheckOut(BaseModel):
    """Compact calorie target check for one day."""

    user_id: UUID
    date: dt.date
    daily_calorie_target: int
    calories_consumed: int
    within_target: bool
    calorie_deficit: int

    @classmethod
    def from_domain(cls, report: DailyReport) -> "CalorieCheckOut":
        return cls(
            user_id=report.user_id,
            date=report.day,
            daily_calorie_target=report.daily_calorie_target,
            calories_consumed=report.totals.calories,
            within_target=report.within_calorie_target,
            calorie_deficit=report.calorie_deficit,
        )
