"""Domain models for consumption logging."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import StrEnum

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

from food_diary.domain.foods import Food
from food_diary.domain.nutrients import NutrientProfile


class DirectNutrients(BaseModel):
    """Nutrients already scaled to the consumed amount."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    product_name: str = ""
    calories: float
    protein_g: float
    total_fat_g: float = Field(validation_alias=AliasChoices("total_fat_g", "fat_g"))
    carbohydrates_g: float = Field(
        validation_alias=AliasChoices("carbohydrates_g", "carbs_g")
    )
    caffeine_mg: float | None = None
    ethyl_alcohol_g: float | None = None


class ConsumedItem(BaseModel):
    """A single food reference with the amount that was consumed."""

    model_config = ConfigDict(frozen=True)

    food_id: int | None = None
    name: str | None = None
    barcode: str | None = None
    direct_nutrients: DirectNutrients | None = None

    amount_g: float = 0.0
    serving_count: float | None = None
    meal_type: str | None = None
    consumed_at: datetime | None = None
    note: str | None = None


class NotFoundReason(StrEnum):
    """Why a consumed item could not be resolved to a single food."""

    ID_NOT_FOUND = "id_not_found"
    NAME_NOT_FOUND = "name_not_found"
    BARCODE_NOT_FOUND = "barcode_not_found"
    MULTIPLE_MATCHES = "multiple_matches"
    INVALID_SCENARIO = "invalid_scenario"


@dataclass(frozen=True)
class FoodMatch:
    """Suggested food for an ambiguous reference."""

    id: int
    name: str


@dataclass(frozen=True)
class RankedFoodMatch:
    """Food matched by one or more name variants."""

    id: int
    name: str
    serving_name: str | None
    match_count: int


@dataclass(frozen=True)
class NotFoundItem:
    """Consumed item that needs clarification from the caller."""

    amount_g: float
    reason: NotFoundReason
    index: int | None = None
    food_id: int | None = None
    name: str | None = None
    barcode: str | None = None
    suggestions: list[FoodMatch] = field(default_factory=list)


@dataclass(frozen=True)
class ConsumptionLogEntry:
    """Consumption log row as it is persisted."""

    user_id: int
    consumed_at: datetime
    food_id: int | None
    food_name: str
    amount_g: float
    nutrients: NutrientProfile | None
    meal_type: str | None = None
    note: str | None = None


@dataclass(frozen=True)
class AddedConsumptionItem:
    """Logged entry together with the food it was resolved to."""

    entry: ConsumptionLogEntry
    food: Food | None = None
    index: int | None = None


@dataclass(frozen=True)
class LogFoodResult:
    """Outcome of a batch logging request."""

    added_items: list[AddedConsumptionItem]
    not_found_items: list[NotFoundItem]
    message: str


@dataclass(frozen=True)
class LogFoodResponse:
    """Outcome of a single-reference logging call."""

    error: str | None = None
    message: str | None = None
    suggestions: list[FoodMatch] = field(default_factory=list)


@dataclass(frozen=True)
class FoodResolution:
    """Ranked foods for a set of name variants."""

    foods: list[RankedFoodMatch] = field(default_factory=list)
    error: str | None = None
