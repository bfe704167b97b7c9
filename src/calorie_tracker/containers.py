"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from calorie_tracker.adapters.supabase_food_repository import SupabaseFoodRepository
from calorie_tracker.adapters.supabase_meal_repository import SupabaseMealRepository
from calorie_tracker.adapters.supabase_user_repository import SupabaseUserRepository
from calorie_tracker.config import Settings
from calorie_tracker.services.foods import FoodService
from calorie_tracker.services.meals import MealService
from calorie_tracker.services.reports import ReportService
from calorie_tracker.services.users import UserService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    user_service: UserService
    food_service: FoodService
    meal_service: MealService
    report_service: ReportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    user_repository = SupabaseUserRepository(supabase_client)
    food_repository = SupabaseFoodRepository(supabase_client)
    meal_repository = SupabaseMealRepository(supabase_client)
    return AppContainer(
        settings=resolved_settings,
        user_service=UserService(user_repository),
        food_service=FoodService(food_repository),
        meal_service=MealService(
            repository=meal_repository,
            user_repository=user_repository,
            food_repository=food_repository,
            timezone_name=resolved_settings.timezone,
        ),
        report_service=ReportService(
            user_repository=user_repository,
            meal_repository=meal_repository,
            max_history_days=resolved_settings.max_history_days,
        ),
    )
