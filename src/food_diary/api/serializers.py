"""Conversion of domain results into JSON-ready dicts."""

from food_diary.domain.consumption import (
    AddedConsumptionItem,
    ConsumptionLogEntry,
    FoodMatch,
    FoodResolution,
    LogFoodResponse,
    LogFoodResult,
    NotFoundItem,
)
from food_diary.domain.foods import Food
from food_diary.domain.nutrients import NutrientProfile


def serialize_log_result(result: LogFoodResult) -> dict[str, object]:
    return {
        "added_items": [_serialize_added(item) for item in result.added_items],
        "not_found_items": [
            _serialize_not_found(item) for item in result.not_found_items
        ],
        "message": result.message,
    }


def serialize_log_response(response: LogFoodResponse) -> dict[str, object]:
    payload: dict[str, object] = {}
    if response.error:
        payload["error"] = response.error
    if response.message:
        payload["message"] = response.message
    if response.suggestions:
        payload["suggestions"] = [
            _serialize_match(match) for match in response.suggestions
        ]
    return payload


def serialize_resolution(resolution: FoodResolution) -> dict[str, object]:
    payload: dict[str, object] = {
        "foods": [
            {
                "id": match.id,
                "name": match.name,
                "serving_name": match.serving_name,
                "match_count": match.match_count,
            }
            for match in resolution.foods
        ]
    }
    if resolution.error:
        payload["error"] = resolution.error
    return payload


def serialize_food(food: Food) -> dict[str, object]:
    return {
        "id": food.id,
        "name": food.name,
        "description": food.description,
        "barcode": food.barcode,
        "food_type": food.food_type,
        "is_archived": food.is_archived,
        "serving_size_g": food.serving_size_g,
        "serving_name": food.serving_name,
        "nutrients": _serialize_nutrients(food.nutrients),
        "food_composition": [
            {"food_id": component.food_id, "amount_g": component.amount_g}
            for component in food.composition
        ],
    }


def _serialize_added(item: AddedConsumptionItem) -> dict[str, object]:
    payload = _serialize_entry(item.entry)
    payload["index"] = item.index
    if item.food is not None:
        payload["food"] = serialize_food(item.food)
    return payload


def _serialize_entry(entry: ConsumptionLogEntry) -> dict[str, object]:
    return {
        "user_id": entry.user_id,
        "consumed_at": entry.consumed_at.isoformat(),
        "food_id": entry.food_id,
        "food_name": entry.food_name,
        "amount_g": entry.amount_g,
        "meal_type": entry.meal_type,
        "note": entry.note,
        "nutrients": _serialize_nutrients(entry.nutrients),
    }


def _serialize_not_found(item: NotFoundItem) -> dict[str, object]:
    payload: dict[str, object] = {
        "index": item.index,
        "amount_g": item.amount_g,
        "reason": item.reason.value,
    }
    if item.food_id is not None:
        payload["food_id"] = item.food_id
    if item.name is not None:
        payload["name"] = item.name
    if item.barcode is not None:
        payload["barcode"] = item.barcode
    if item.suggestions:
        payload["suggestions"] = [_serialize_match(match) for match in item.suggestions]
    return payload


def _serialize_match(match: FoodMatch) -> dict[str, object]:
    return {"id": match.id, "name": match.name}


def _serialize_nutrients(
    nutrients: NutrientProfile | None,
) -> dict[str, float | int] | None:
    return nutrients.to_payload() if nutrients is not None else None
