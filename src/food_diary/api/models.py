"""Pydantic models for API payloads."""

from datetime import datetime

from pydantic import AliasChoices, BaseModel, Field

from food_diary.domain.consumption import ConsumedItem, DirectNutrients
from food_diary.domain.foods import FoodComponent, NewFood
from food_diary.domain.nutrients import NutrientProfile


class LogFoodRequest(BaseModel):
    """Batch of consumed items to log."""

    consumed_items: list[ConsumedItem]


class FoodReferenceRequest(BaseModel):
    """Common fields of the single-reference logging endpoints."""

    amount_g: float = 0.0
    serving_count: float = 0.0
    meal_type: str | None = None
    consumed_at: datetime | None = None
    note: str | None = None

    def to_item(self, **reference: object) -> ConsumedItem:
        """Build a consumed item carrying the given food reference."""
        return ConsumedItem(
            amount_g=self.amount_g,
            serving_count=self.serving_count or None,
            meal_type=self.meal_type,
            consumed_at=self.consumed_at,
            note=self.note,
            **reference,
        )


class LogFoodByIdRequest(FoodReferenceRequest):
    """Log a food by catalog id."""

    food_id: int = 0


class LogFoodByNameRequest(FoodReferenceRequest):
    """Log a food found by name."""

    name: str = ""


class LogFoodByBarcodeRequest(FoodReferenceRequest):
    """Log a food found by barcode."""

    barcode: str = ""


class LogCustomFoodRequest(BaseModel):
    """Log nutrients supplied directly for the consumed amount."""

    product_name: str = ""
    amount_g: float = 0.0
    calories: float
    protein_g: float
    total_fat_g: float = Field(validation_alias=AliasChoices("total_fat_g", "fat_g"))
    carbohydrates_g: float = Field(
        validation_alias=AliasChoices("carbohydrates_g", "carbs_g")
    )
    caffeine_mg: float | None = None
    ethyl_alcohol_g: float | None = None
    meal_type: str | None = None
    consumed_at: datetime | None = None
    note: str | None = None

    def to_item(self) -> ConsumedItem:
        """Build a direct-nutrients consumed item."""
        return ConsumedItem(
            direct_nutrients=DirectNutrients(
                product_name=self.product_name,
                calories=self.calories,
                protein_g=self.protein_g,
                total_fat_g=self.total_fat_g,
                carbohydrates_g=self.carbohydrates_g,
                caffeine_mg=self.caffeine_mg,
                ethyl_alcohol_g=self.ethyl_alcohol_g,
            ),
            amount_g=self.amount_g,
            meal_type=self.meal_type,
            consumed_at=self.consumed_at,
            note=self.note,
        )


class FoodComponentPayload(BaseModel):
    """Ingredient of a composite dish."""

    food_id: int
    amount_g: float


class AddFoodRequest(BaseModel):
    """New catalog food."""

    name: str
    food_type: str
    description: str | None = None
    barcode: str | None = None
    serving_size_g: float | None = None
    serving_name: str | None = None
    nutrients: NutrientProfile | None = None
    food_composition: list[FoodComponentPayload] = Field(default_factory=list)

    def to_new_food(self) -> NewFood:
        """Convert to the domain payload."""
        return NewFood(
            name=self.name,
            food_type=self.food_type,
            description=self.description,
            barcode=self.barcode,
            serving_size_g=self.serving_size_g,
            serving_name=self.serving_name,
            nutrients=self.nutrients,
            composition=[
                FoodComponent(food_id=component.food_id, amount_g=component.amount_g)
                for component in self.food_composition
            ],
        )


class ResolveFoodRequest(BaseModel):
    """Name variants to rank catalog foods by."""

    name_variants: list[str] = Field(default_factory=list)
