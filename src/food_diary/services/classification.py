"""Classification and pre-flight validation of consumed items."""

from enum import StrEnum

from food_diary.domain.consumption import ConsumedItem, DirectNutrients
from food_diary.domain.errors import ConsumptionValidationError

_SCENARIO_FIELDS = "food_id, name, barcode, or direct_nutrients"


class Scenario(StrEnum):
    """Resolution path for a consumed item."""

    BY_ID = "by_id"
    BY_NAME = "by_name"
    BY_BARCODE = "by_barcode"
    DIRECT_NUTRIENTS = "direct_nutrients"


def classify_item(item: ConsumedItem) -> Scenario:
    """Return the item's scenario or raise if the item is malformed."""
    present = []
    if item.food_id is not None:
        present.append(Scenario.BY_ID)
    if item.name:
        present.append(Scenario.BY_NAME)
    if item.barcode:
        present.append(Scenario.BY_BARCODE)
    if item.direct_nutrients is not None:
        present.append(Scenario.DIRECT_NUTRIENTS)

    if not present:
        raise ConsumptionValidationError(f"must provide one of {_SCENARIO_FIELDS}")
    if len(present) > 1:
        raise ConsumptionValidationError(
            f"must provide only one of {_SCENARIO_FIELDS}"
        )

    _validate_amount(item)
    scenario = present[0]
    if scenario is Scenario.DIRECT_NUTRIENTS and item.direct_nutrients is not None:
        try:
            _validate_direct_nutrients(item.direct_nutrients)
        except ConsumptionValidationError as exc:
            raise ConsumptionValidationError(f"direct_nutrients: {exc}") from exc
    return scenario


def validate_consumed_items(items: list[ConsumedItem]) -> list[Scenario]:
    """Classify every item up front; the first bad item fails the request."""
    if not items:
        raise ConsumptionValidationError("consumed_items cannot be empty")
    scenarios = []
    for index, item in enumerate(items):
        try:
            scenarios.append(classify_item(item))
        except ConsumptionValidationError as exc:
            raise ConsumptionValidationError(f"item {index}: {exc}") from exc
    return scenarios


def _validate_amount(item: ConsumedItem) -> None:
    has_amount = item.amount_g > 0
    has_serving = item.serving_count is not None and item.serving_count > 0
    if not has_amount and not has_serving:
        raise ConsumptionValidationError(
            "must provide either amount_g>0 or serving_count>0"
        )
    if has_amount and has_serving:
        raise ConsumptionValidationError(
            "cannot provide both amount_g and serving_count, use only one"
        )


def _validate_direct_nutrients(nutrients: DirectNutrients) -> None:
    if not nutrients.product_name:
        raise ConsumptionValidationError("product_name is required")
    for field_name in ("calories", "protein_g", "total_fat_g", "carbohydrates_g"):
        if getattr(nutrients, field_name) < 0:
            raise ConsumptionValidationError(f"{field_name} must be non-negative")
    for field_name in ("caffeine_mg", "ethyl_alcohol_g"):
        value = getattr(nutrients, field_name)
        if value is not None and value < 0:
            raise ConsumptionValidationError(f"{field_name} must be non-negative")
