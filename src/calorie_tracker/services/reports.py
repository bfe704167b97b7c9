"""Daily and history nutrition reports."""

from collections import defaultdict
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import date, timedelta
from uuid import UUID

from calorie_tracker.domain.errors import NotFound
from calorie_tracker.domain.meals import Meal
from calorie_tracker.domain.reports import DailyReport
from calorie_tracker.domain.users import UserProfile
from calorie_tracker.services.meals import MealRepository, order_by_time
from calorie_tracker.services.nutrition import sum_nutrition
from calorie_tracker.services.users import UserRepository
from calorie_tracker.services.validation import MAX_HISTORY_DAYS, validate_date_range


def daily_report(user: UserProfile, day: date, meals: Sequence[Meal]) -> DailyReport:
    """Combine a day's meals into a report against the user's target."""
    totals = sum_nutrition(meal.totals for meal in meals)
    target = user.daily_calorie_target
    return DailyReport(
        user_id=user.id,
        user_name=user.name,
        day=day,
        daily_calorie_target=target,
        totals=totals,
        within_calorie_target=totals.calories <= target,
        calorie_deficit=target - totals.calories,
        meals=list(meals),
    )


def history_report(
    user: UserProfile,
    start: date,
    end: date,
    meals: Sequence[Meal],
    max_days: int = MAX_HISTORY_DAYS,
) -> list[DailyReport]:
    """Return one report per calendar day in an inclusive range.

    Days without meals get an empty report, so the result always has exactly
    one entry per date in ascending order. Meals dated outside the range are
    ignored.
    """
    days = validate_date_range(start, end, max_days)
    by_day: dict[date, list[Meal]] = defaultdict(list)
    for meal in meals:
        by_day[meal.meal_date].append(meal)
    reports = []
    for offset in range(days):
        day = start + timedelta(days=offset)
        reports.append(daily_report(user, day, by_day.get(day, [])))
    return reports


@dataclass
class ReportService:
    """Service building reports from stored users and meals."""

    user_repository: UserRepository
    meal_repository: MealRepository
    max_history_days: int = MAX_HISTORY_DAYS

    def get_daily_report(self, user_id: UUID, day: date) -> DailyReport:
        """Return the nutrition report for a user on a day."""
        user = self._get_user(user_id)
        meals = self.meal_repository.list_meals(user_id, day, day)
        return daily_report(user, day, order_by_time(meals))

    def is_within_calorie_target(self, user_id: UUID, day: date) -> bool:
        """Return True when the user stayed within their target on a day."""
        return self.get_daily_report(user_id, day).within_calorie_target

    def get_history(self, user_id: UUID, start: date, end: date) -> list[DailyReport]:
        """Return per-day reports for a user over an inclusive range."""
        user = self._get_user(user_id)
        validate_date_range(start, end, self.max_history_days)
        meals = self.meal_repository.list_meals(user_id, start, end)
        return history_report(
            user, start, end, order_by_time(meals), self.max_history_days
        )

    def get_meal_dates(self, user_id: UUID) -> list[date]:
        """Return the dates on which the user logged meals."""
        self._get_user(user_id)
        return self.meal_repository.list_meal_dates(user_id)

    def _get_user(self, user_id: UUID) -> UserProfile:
        user = self.user_repository.get_user(user_id)
        if user is None:
            raise NotFound("user", user_id)
        return user
