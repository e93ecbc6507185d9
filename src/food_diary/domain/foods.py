"""Domain models for the food catalog."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from food_diary.domain.nutrients import NutrientProfile


class FoodType(StrEnum):
    """Kind of catalog food."""

    COMPONENT = "component"
    PRODUCT = "product"
    DISH = "dish"


@dataclass(frozen=True)
class FoodComponent:
    """Ingredient of a composite dish."""

    food_id: int
    amount_g: float


@dataclass(frozen=True)
class Food:
    """Represents a food stored in the catalog."""

    id: int
    name: str
    food_type: str = FoodType.PRODUCT.value
    description: str | None = None
    barcode: str | None = None
    is_archived: bool = False
    serving_size_g: float | None = None
    serving_name: str | None = None
    nutrients: NutrientProfile | None = None
    composition: list[FoodComponent] = field(default_factory=list)
    created_at: datetime | None = None
    updated_at: datetime | None = None


@dataclass(frozen=True)
class NewFood:
    """Food payload that has not been persisted yet."""

    name: str
    food_type: str
    description: str | None = None
    barcode: str | None = None
    serving_size_g: float | None = None
    serving_name: str | None = None
    nutrients: NutrientProfile | None = None
    composition: list[FoodComponent] = field(default_factory=list)


@dataclass(frozen=True)
class FoodFilter:
    """Catalog search criteria; unset criteria are ignored."""

    ids: list[int] | None = None
    name: str | None = None
    barcode: str | None = None
