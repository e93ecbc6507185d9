"""Conversion of consumed amounts into grams."""

from food_diary.domain.consumption import ConsumedItem
from food_diary.domain.errors import ConsumptionValidationError, MissingServingSizeError
from food_diary.domain.foods import Food


def resolve_actual_grams(food: Food | None, item: ConsumedItem) -> float:
    """Return grams consumed, converting servings with the food's serving size."""
    if item.amount_g > 0:
        return item.amount_g
    if item.serving_count is not None and item.serving_count > 0:
        if food is None:
            raise ConsumptionValidationError(
                "serving_count requires a catalog food, use amount_g"
            )
        if food.serving_size_g is None:
            raise MissingServingSizeError(food.name)
        return item.serving_count * food.serving_size_g
    raise ConsumptionValidationError("no valid amount specified")
