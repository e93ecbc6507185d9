"""FastAPI application factory."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from food_diary.api.consumption import router as consumption_router
from food_diary.api.foods import router as foods_router
from food_diary.app_logging import configure_logging
from food_diary.containers import AppContainer
from food_diary.domain.errors import (
    CatalogError,
    ConsumptionProcessingError,
    ConsumptionValidationError,
    DuplicateFoodError,
    FoodDiaryError,
    FoodNotFoundError,
    FoodValidationError,
)

_ERROR_STATUS: tuple[tuple[type[FoodDiaryError], int], ...] = (
    (ConsumptionValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (FoodValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY),
    (DuplicateFoodError, status.HTTP_409_CONFLICT),
    (ConsumptionProcessingError, status.HTTP_409_CONFLICT),
    (FoodNotFoundError, status.HTTP_404_NOT_FOUND),
    (CatalogError, status.HTTP_502_BAD_GATEWAY),
)


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    app = FastAPI()
    app.state.container = container

    app.include_router(consumption_router)
    app.include_router(foods_router)

    @app.exception_handler(FoodDiaryError)
    async def handle_food_diary_error(
        request: Request, exc: FoodDiaryError
    ) -> JSONResponse:
        status_code = _status_for(exc)
        if status_code >= status.HTTP_500_INTERNAL_SERVER_ERROR:
            logger.error("Request %s failed: %s", request.url.path, exc)
        elif isinstance(exc, ConsumptionProcessingError):
            logger.warning(
                "Request %s failed after %s entries were logged: %s",
                request.url.path,
                len(exc.logged_items),
                exc,
            )
        return JSONResponse(status_code=status_code, content={"detail": str(exc)})

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    return app


def _status_for(exc: FoodDiaryError) -> int:
    if isinstance(exc, ConsumptionProcessingError) and isinstance(
        exc.cause, CatalogError
    ):
        return status.HTTP_502_BAD_GATEWAY
    for error_type, status_code in _ERROR_STATUS:
        if isinstance(exc, error_type):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR
