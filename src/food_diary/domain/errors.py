"""Errors raised by the food diary services."""

from food_diary.domain.consumption import AddedConsumptionItem


class FoodDiaryError(Exception):
    """Base class for food diary errors."""


class ConsumptionValidationError(FoodDiaryError):
    """Consumption request is malformed; nothing was resolved or written."""


class FoodValidationError(FoodDiaryError):
    """New food payload is malformed."""


class DuplicateFoodError(FoodDiaryError):
    """A food with the same name or barcode already exists."""


class FoodNotFoundError(FoodDiaryError):
    """Catalog has no food with the requested id."""

    def __init__(self, food_id: int) -> None:
        super().__init__(f"food {food_id} not found")
        self.food_id = food_id


class MissingServingSizeError(FoodDiaryError):
    """Serving count was given for a food without a serving size."""

    def __init__(self, food_name: str) -> None:
        super().__init__(
            f"food '{food_name}' has no serving_size_g defined, "
            "cannot use serving_count"
        )
        self.food_name = food_name


class MissingNutrientsError(FoodDiaryError):
    """Food has no nutrient profile where one is required."""

    def __init__(self, food_name: str) -> None:
        super().__init__(f"food '{food_name}' has no nutrients data")
        self.food_name = food_name


class CatalogError(FoodDiaryError):
    """Food catalog call failed."""


class ConsumptionProcessingError(FoodDiaryError):
    """Batch logging stopped on an item after classification succeeded.

    Entries logged before the failing item are not rolled back; they are
    listed in ``logged_items``.
    """

    def __init__(
        self,
        item_index: int,
        cause: Exception,
        logged_items: list[AddedConsumptionItem],
    ) -> None:
        super().__init__(f"item {item_index}: {cause}")
        self.item_index = item_index
        self.cause = cause
        self.logged_items = logged_items
