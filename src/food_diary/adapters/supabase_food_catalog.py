"""Supabase implementation of the food catalog."""

from dataclasses import dataclass
from datetime import datetime

from supabase import Client

from food_diary.domain.consumption import ConsumptionLogEntry
from food_diary.domain.errors import FoodNotFoundError
from food_diary.domain.foods import Food, FoodComponent, FoodFilter, NewFood
from food_diary.domain.nutrients import NutrientProfile
from food_diary.services.foods import FoodCatalog

_FOOD_COLUMNS = (
    "id, name, description, barcode, food_type, is_archived, serving_size_g, "
    "serving_name, nutrients, food_composition, created_at, updated_at"
)


@dataclass
class SupabaseFoodCatalog(FoodCatalog):
    """Supabase-backed food catalog and consumption log."""

    client: Client

    def get_food(self, food_id: int) -> Food:
        """Return a food by id."""
        response = (
            self.client.table("food")
            .select(_FOOD_COLUMNS)
            .eq("id", food_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            raise FoodNotFoundError(food_id)
        return _parse_food(response.data[0])

    def search_food(self, food_filter: FoodFilter) -> list[Food]:
        """Search foods by ids, name substring and barcode."""
        query = self.client.table("food").select(_FOOD_COLUMNS)
        if food_filter.ids:
            query = query.in_("id", food_filter.ids)
        if food_filter.name:
            query = query.ilike("name", f"%{food_filter.name}%")
        if food_filter.barcode:
            query = query.eq("barcode", food_filter.barcode)
        response = query.order("name", desc=False).execute()
        return [_parse_food(row) for row in response.data or []]

    def add_food(self, food: NewFood) -> int:
        """Insert a food row and return its id."""
        response = (
            self.client.table("food")
            .insert(
                {
                    "name": food.name,
                    "description": food.description,
                    "barcode": food.barcode,
                    "food_type": food.food_type,
                    "is_archived": False,
                    "serving_size_g": food.serving_size_g,
                    "serving_name": food.serving_name,
                    "nutrients": food.nutrients.to_payload()
                    if food.nutrients
                    else None,
                    "food_composition": [
                        {"food_id": component.food_id, "amount_g": component.amount_g}
                        for component in food.composition
                    ]
                    or None,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create food")
        return int(response.data[0]["id"])

    def add_consumption_log(self, entry: ConsumptionLogEntry) -> None:
        """Insert a consumption log row."""
        self.client.table("consumption_log").insert(
            {
                "user_id": entry.user_id,
                "consumed_at": entry.consumed_at.isoformat(),
                "food_id": entry.food_id,
                "food_name": entry.food_name,
                "amount_g": entry.amount_g,
                "meal_type": entry.meal_type,
                "note": entry.note,
                "nutrients": entry.nutrients.to_payload() if entry.nutrients else None,
            }
        ).execute()


def _parse_food(row: dict[str, object]) -> Food:
    """Parse a food row into a domain model."""
    nutrients_raw = row.get("nutrients")
    composition_raw = row.get("food_composition") or []
    serving_size = row.get("serving_size_g")
    return Food(
        id=int(row["id"]),
        name=str(row.get("name", "")),
        description=row.get("description"),
        barcode=row.get("barcode"),
        food_type=str(row.get("food_type", "")),
        is_archived=bool(row.get("is_archived", False)),
        serving_size_g=float(serving_size) if serving_size is not None else None,
        serving_name=row.get("serving_name"),
        nutrients=NutrientProfile.model_validate(nutrients_raw)
        if isinstance(nutrients_raw, dict)
        else None,
        composition=[
            FoodComponent(
                food_id=int(component["food_id"]),
                amount_g=float(component["amount_g"]),
            )
            for component in composition_raw
            if isinstance(component, dict)
        ],
        created_at=_parse_timestamp(row.get("created_at")),
        updated_at=_parse_timestamp(row.get("updated_at")),
    )


def _parse_timestamp(value: object) -> datetime | None:
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value)
    return None
