"""Consumption logging endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from food_diary.api.models import (
    LogCustomFoodRequest,
    LogFoodByBarcodeRequest,
    LogFoodByIdRequest,
    LogFoodByNameRequest,
    LogFoodRequest,
)
from food_diary.api.security import require_api_token
from food_diary.api.serializers import serialize_log_response, serialize_log_result

if TYPE_CHECKING:
    from food_diary.containers import AppContainer

router = APIRouter(
    prefix="/consumption",
    tags=["consumption"],
    dependencies=[Depends(require_api_token)],
)


@router.post("/log")
async def log_food(payload: LogFoodRequest, request: Request) -> dict[str, object]:
    """Log a batch of consumed items."""
    container: AppContainer = request.app.state.container
    result = container.consumption_log_service.log_food(
        container.settings.default_user_id, payload.consumed_items
    )
    return serialize_log_result(result)


@router.post("/log-by-id")
async def log_food_by_id(
    payload: LogFoodByIdRequest, request: Request
) -> dict[str, object]:
    """Log a food by catalog id."""
    container: AppContainer = request.app.state.container
    response = container.consumption_log_service.log_food_by_id(
        container.settings.default_user_id, payload.to_item(food_id=payload.food_id)
    )
    return serialize_log_response(response)


@router.post("/log-by-name")
async def log_food_by_name(
    payload: LogFoodByNameRequest, request: Request
) -> dict[str, object]:
    """Search a food by name and log it."""
    container: AppContainer = request.app.state.container
    response = container.consumption_log_service.log_food_by_name(
        container.settings.default_user_id, payload.to_item(name=payload.name)
    )
    return serialize_log_response(response)


@router.post("/log-by-barcode")
async def log_food_by_barcode(
    payload: LogFoodByBarcodeRequest, request: Request
) -> dict[str, object]:
    """Find a food by barcode and log it."""
    container: AppContainer = request.app.state.container
    response = container.consumption_log_service.log_food_by_barcode(
        container.settings.default_user_id, payload.to_item(barcode=payload.barcode)
    )
    return serialize_log_response(response)


@router.post("/log-custom")
async def log_custom_food(
    payload: LogCustomFoodRequest, request: Request
) -> dict[str, object]:
    """Log nutrients supplied directly."""
    container: AppContainer = request.app.state.container
    response = container.consumption_log_service.log_custom_food(
        container.settings.default_user_id, payload.to_item()
    )
    return serialize_log_response(response)
