"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from food_diary.config import Settings
from food_diary.containers import AppContainer, build_services
from food_diary.domain.consumption import ConsumptionLogEntry, DirectNutrients
from food_diary.domain.errors import FoodNotFoundError
from food_diary.domain.foods import Food, FoodFilter, NewFood
from food_diary.domain.nutrients import NutrientProfile
from food_diary.services.consumption import ConsumptionLogService
from food_diary.services.foods import FoodCatalog
from food_diary.services.resolution import BarcodeConflictPolicy, FoodResolver


@dataclass
class InMemoryFoodCatalog(FoodCatalog):
    """In-memory food catalog that records calls for tests."""

    foods: dict[int, Food] = field(default_factory=dict)
    logs: list[ConsumptionLogEntry] = field(default_factory=list)
    search_calls: list[FoodFilter] = field(default_factory=list)
    search_error: Exception | None = None
    log_error: Exception | None = None
    next_id: int = 1000

    def add(self, food: Food) -> Food:
        self.foods[food.id] = food
        return food

    def get_food(self, food_id: int) -> Food:
        food = self.foods.get(food_id)
        if food is None:
            raise FoodNotFoundError(food_id)
        return food

    def search_food(self, food_filter: FoodFilter) -> list[Food]:
        self.search_calls.append(food_filter)
        if self.search_error is not None:
            raise self.search_error
        results = list(self.foods.values())
        if food_filter.ids:
            results = [food for food in results if food.id in food_filter.ids]
        if food_filter.name:
            needle = food_filter.name.lower()
            results = [food for food in results if needle in food.name.lower()]
        if food_filter.barcode:
            results = [
                food for food in results if food.barcode == food_filter.barcode
            ]
        return sorted(results, key=lambda food: food.name)

    def add_food(self, food: NewFood) -> int:
        food_id = self.next_id
        self.next_id += 1
        self.foods[food_id] = Food(
            id=food_id,
            name=food.name,
            food_type=food.food_type,
            description=food.description,
            barcode=food.barcode,
            serving_size_g=food.serving_size_g,
            serving_name=food.serving_name,
            nutrients=food.nutrients,
            composition=food.composition,
        )
        return food_id

    def add_consumption_log(self, entry: ConsumptionLogEntry) -> None:
        if self.log_error is not None:
            raise self.log_error
        self.logs.append(entry)


def make_food(  # noqa: PLR0913
    food_id: int,
    name: str,
    *,
    calories: float | None = 100.0,
    barcode: str | None = None,
    serving_size_g: float | None = None,
    serving_name: str | None = None,
    nutrients: NutrientProfile | None = None,
    with_nutrients: bool = True,
) -> Food:
    """Build a catalog food with a small per-100g profile."""
    if nutrients is None and with_nutrients:
        nutrients = NutrientProfile(calories=calories)
    return Food(
        id=food_id,
        name=name,
        barcode=barcode,
        serving_size_g=serving_size_g,
        serving_name=serving_name,
        nutrients=nutrients,
    )


def make_direct_nutrients(
    product_name: str = "Sandwich", **values: float | None
) -> DirectNutrients:
    """Build direct nutrients with all macros set."""
    macros: dict[str, float | None] = {
        "calories": 250.0,
        "protein_g": 12.0,
        "total_fat_g": 8.0,
        "carbohydrates_g": 35.0,
    }
    macros.update(values)
    return DirectNutrients(product_name=product_name, **macros)


def make_log_service(
    catalog: InMemoryFoodCatalog,
    barcode_policy: BarcodeConflictPolicy = BarcodeConflictPolicy.FIRST_MATCH,
) -> ConsumptionLogService:
    return ConsumptionLogService(
        catalog=catalog,
        resolver=FoodResolver(catalog=catalog, barcode_policy=barcode_policy),
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="header.payload.signature",
        api_token="api-token",
    )


@pytest.fixture
def catalog() -> InMemoryFoodCatalog:
    return InMemoryFoodCatalog()


@pytest.fixture
def container(settings: Settings, catalog: InMemoryFoodCatalog) -> AppContainer:
    return build_services(settings, catalog)
