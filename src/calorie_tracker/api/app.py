"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from calorie_tracker.api.foods import router as foods_router
from calorie_tracker.api.meals import router as meals_router
from calorie_tracker.api.reports import router as reports_router
from calorie_tracker.api.users import router as users_router
from calorie_tracker.app_logging import configure_logging
from calorie_tracker.containers import AppContainer
from calorie_tracker.domain.errors import CalorieTrackerError, NotFound


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(container.settings.log_level)
    logger = logging.getLogger(__name__)

    app = FastAPI(title="Calorie Tracker")
    app.state.container = container

    app.include_router(users_router)
    app.include_router(foods_router)
    app.include_router(meals_router)
    app.include_router(reports_router)

    @app.exception_handler(CalorieTrackerError)
    async def handle_domain_error(
        request: Request, exc: CalorieTrackerError
    ) -> JSONResponse:
        status_code = (
            status.HTTP_404_NOT_FOUND
            if isinstance(exc, NotFound)
            else status.HTTP_400_BAD_REQUEST
        )
        logger.warning(
            "%s %s failed: %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc,
        )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app
