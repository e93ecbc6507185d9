"""Food catalog endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request

from food_diary.api.models import AddFoodRequest, ResolveFoodRequest
from food_diary.api.security import require_api_token
from food_diary.api.serializers import serialize_resolution

if TYPE_CHECKING:
    from food_diary.containers import AppContainer

router = APIRouter(
    prefix="/foods",
    tags=["foods"],
    dependencies=[Depends(require_api_token)],
)


@router.post("")
async def add_food(payload: AddFoodRequest, request: Request) -> dict[str, object]:
    """Add a food to the catalog."""
    container: AppContainer = request.app.state.container
    result = container.food_service.add_food(payload.to_new_food())
    return {"id": result.id, "message": result.message}


@router.post("/resolve")
async def resolve_food_id_by_name(
    payload: ResolveFoodRequest, request: Request
) -> dict[str, object]:
    """Rank catalog foods by 1-5 name variants."""
    container: AppContainer = request.app.state.container
    resolution = container.food_search_service.resolve_by_name_variants(
        payload.name_variants
    )
    return serialize_resolution(resolution)
