"""Report endpoints."""

from __future__ import annotations

from datetime import date  # noqa: TC003
from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Request

from calorie_tracker.api.schemas import CalorieCheckOut, DailyReportOut

if TYPE_CHECKING:
    from calorie_tracker.containers import AppContainer

router = APIRouter(prefix="/api/reports", tags=["reports"])


@router.get("/daily/{user_id}/{day}")
async def daily_report(user_id: UUID, day: date, request: Request) -> DailyReportOut:
    """Return the nutrition report for a user on a day."""
    container: AppContainer = request.app.state.container
    report = container.report_service.get_daily_report(user_id, day)
    return DailyReportOut.from_domain(report)


@router.get("/calorie-check/{user_id}/{day}")
async def calorie_check(user_id: UUID, day: date, request: Request) -> CalorieCheckOut:
    """Return whether a user stayed within their calorie target on a day."""
    container: AppContainer = request.app.state.container
    report = container.report_service.get_daily_report(user_id, day)
    return CalorieCheckOut.from_domain(report)


@router.get("/history/{user_id}")
async def history(
    user_id: UUID, start_date: date, end_date: date, request: Request
) -> list[DailyReportOut]:
    """Return one report per day over a date range of at most 31 days."""
    container: AppContainer = request.app.state.container
    reports = container.report_service.get_history(user_id, start_date, end_date)
    return [DailyReportOut.from_domain(report) for report in reports]


@router.get("/meal-dates/{user_id}")
async def meal_dates(user_id: UUID, request: Request) -> list[date]:
    """Return the dates on which a user logged meals."""
    container: AppContainer = request.app.state.container
    return container.report_service.get_meal_dates(user_id)
