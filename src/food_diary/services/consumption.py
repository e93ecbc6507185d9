"""Consumption logging service."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from food_diary.domain.consumption import (
    AddedConsumptionItem,
    ConsumedItem,
    ConsumptionLogEntry,
    DirectNutrients,
    FoodMatch,
    LogFoodResponse,
    LogFoodResult,
)
from food_diary.domain.errors import (
    CatalogError,
    ConsumptionProcessingError,
    FoodDiaryError,
    FoodNotFoundError,
    MissingNutrientsError,
    MissingServingSizeError,
)
from food_diary.domain.foods import Food, FoodFilter
from food_diary.domain.nutrients import NutrientProfile
from food_diary.services.amounts import resolve_actual_grams
from food_diary.services.classification import validate_consumed_items
from food_diary.services.food_search import search_foods_by_name
from food_diary.services.foods import FoodCatalog
from food_diary.services.nutrients import round_to_3_decimals, scale_nutrients
from food_diary.services.resolution import (
    MAX_SUGGESTIONS,
    DirectItem,
    FoodResolver,
    ResolvedFood,
)

_logger = logging.getLogger(__name__)


@dataclass
class ConsumptionLogService:
    """Resolves consumed foods and appends consumption log entries."""

    catalog: FoodCatalog
    resolver: FoodResolver
    debug: bool = False

    def log_food(self, user_id: int, items: list[ConsumedItem]) -> LogFoodResult:
        """Validate, resolve and log a batch of consumed items.

        Every item is validated before anything is looked up. Entries are
        saved one by one; if an item fails after earlier items were saved,
        those entries stay logged and are reported on the raised
        ConsumptionProcessingError.
        """
        scenarios = validate_consumed_items(items)
        resolution = self.resolver.resolve_items(items, scenarios)
        pending: list[ResolvedFood | DirectItem] = sorted(
            [*resolution.found, *resolution.direct], key=lambda item: item.index
        )

        added: list[AddedConsumptionItem] = []
        for resolved in pending:
            try:
                added.append(self._log_pending(user_id, resolved))
            except FoodDiaryError as exc:
                _logger.warning(
                    "Consumption batch stopped at item %s after %s logged: %s",
                    resolved.index,
                    len(added),
                    exc,
                )
                raise ConsumptionProcessingError(resolved.index, exc, added) from exc

        message = summary_message(len(added), len(resolution.not_found))
        if self.debug:
            _logger.info("Consumption batch: user_id=%s %s", user_id, message)
        return LogFoodResult(
            added_items=added,
            not_found_items=resolution.not_found,
            message=message,
        )

    def log_food_by_id(self, user_id: int, item: ConsumedItem) -> LogFoodResponse:
        """Log a food referenced by catalog id."""
        if item.food_id is None or item.food_id <= 0:
            return LogFoodResponse(error="food_id must be greater than 0")
        if not _has_amount(item):
            return LogFoodResponse(
                error="either amount_g or serving_count must be greater than 0"
            )
        try:
            food = self.catalog.get_food(item.food_id)
        except FoodNotFoundError:
            return LogFoodResponse(error="food not found")
        except Exception as exc:
            _logger.warning("Food lookup failed: food_id=%s %s", item.food_id, exc)
            return LogFoodResponse(error="food not found")
        return self._log_single(user_id, food, item)

    def log_food_by_name(self, user_id: int, item: ConsumedItem) -> LogFoodResponse:
        """Search a food by name and log it when the match is unique."""
        if not item.name:
            return LogFoodResponse(error="name cannot be empty")
        if not _has_amount(item):
            return LogFoodResponse(
                error="either amount_g or serving_count must be greater than 0"
            )
        try:
            foods = search_foods_by_name(self.catalog, item.name)
        except Exception as exc:
            return LogFoodResponse(error=f"search failed: {exc}")
        if not foods:
            return LogFoodResponse(error="food not found")
        if len(foods) > 1:
            return LogFoodResponse(
                error="multiple matches found",
                suggestions=[
                    FoodMatch(id=food.id, name=food.name)
                    for food in foods[:MAX_SUGGESTIONS]
                ],
            )
        return self._log_single(user_id, foods[0], item)

    def log_food_by_barcode(self, user_id: int, item: ConsumedItem) -> LogFoodResponse:
        """Find a food by barcode and log it."""
        if not item.barcode:
            return LogFoodResponse(error="barcode cannot be empty")
        if not _has_amount(item):
            return LogFoodResponse(
                error="either amount_g or serving_count must be greater than 0"
            )
        try:
            foods = self.catalog.search_food(FoodFilter(barcode=item.barcode))
        except Exception as exc:
            return LogFoodResponse(error=f"search failed: {exc}")
        if not foods:
            return LogFoodResponse(error="barcode not found")
        return self._log_single(user_id, foods[0], item)

    def log_custom_food(self, user_id: int, item: ConsumedItem) -> LogFoodResponse:
        """Log nutrients supplied by the caller without a catalog food."""
        direct = item.direct_nutrients
        if direct is None or not direct.product_name:
            return LogFoodResponse(error="product_name cannot be empty")
        if item.amount_g <= 0:
            return LogFoodResponse(error="amount_g must be greater than 0")
        required = (
            direct.calories,
            direct.protein_g,
            direct.total_fat_g,
            direct.carbohydrates_g,
        )
        if min(required) < 0:
            return LogFoodResponse(error="all required nutrients must be >= 0")
        optional = (direct.caffeine_mg, direct.ethyl_alcohol_g)
        if any(value is not None and value < 0 for value in optional):
            return LogFoodResponse(error="optional nutrients must be >= 0")
        entry = build_entry_from_direct_nutrients(user_id, item)
        try:
            self._save(entry)
        except CatalogError as exc:
            return LogFoodResponse(error=f"failed to save consumption log: {exc}")
        return LogFoodResponse(message=_logged_message(entry))

    def _log_pending(
        self, user_id: int, pending: ResolvedFood | DirectItem
    ) -> AddedConsumptionItem:
        if isinstance(pending, ResolvedFood):
            entry = build_entry_from_food(user_id, pending.food, pending.item)
            food: Food | None = pending.food
        else:
            entry = build_entry_from_direct_nutrients(user_id, pending.item)
            food = None
        self._save(entry)
        return AddedConsumptionItem(entry=entry, food=food, index=pending.index)

    def _log_single(
        self, user_id: int, food: Food, item: ConsumedItem
    ) -> LogFoodResponse:
        try:
            entry = build_entry_from_food(user_id, food, item, require_nutrients=True)
        except MissingServingSizeError:
            return LogFoodResponse(
                error="food has no serving size, amount_g is required"
            )
        except MissingNutrientsError:
            return LogFoodResponse(error="food has no nutrients data")
        try:
            self._save(entry)
        except CatalogError as exc:
            return LogFoodResponse(error=f"failed to save consumption log: {exc}")
        return LogFoodResponse(message=_logged_message(entry))

    def _save(self, entry: ConsumptionLogEntry) -> None:
        try:
            self.catalog.add_consumption_log(entry)
        except Exception as exc:
            raise CatalogError(f"database save failed: {exc}") from exc


def build_entry_from_food(
    user_id: int,
    food: Food,
    item: ConsumedItem,
    *,
    require_nutrients: bool = False,
) -> ConsumptionLogEntry:
    """Build a log entry for a catalog food scaled to the consumed grams."""
    grams = resolve_actual_grams(food, item)
    if food.nutrients is None:
        if require_nutrients:
            raise MissingNutrientsError(food.name)
        nutrients = None
    else:
        nutrients = scale_nutrients(food.nutrients, grams)
    return ConsumptionLogEntry(
        user_id=user_id,
        consumed_at=consumed_at_or_now(item),
        food_id=food.id,
        food_name=food.name,
        amount_g=grams,
        nutrients=nutrients,
        meal_type=item.meal_type or None,
        note=item.note or None,
    )


def build_entry_from_direct_nutrients(
    user_id: int, item: ConsumedItem
) -> ConsumptionLogEntry:
    """Build a log entry from caller-supplied nutrients, without scaling."""
    direct = item.direct_nutrients
    if direct is None:
        raise MissingNutrientsError(item.name or "direct nutrients")
    return ConsumptionLogEntry(
        user_id=user_id,
        consumed_at=consumed_at_or_now(item),
        food_id=None,
        food_name=direct.product_name,
        amount_g=item.amount_g,
        nutrients=direct_nutrient_profile(direct),
        meal_type=item.meal_type or None,
        note=item.note or None,
    )


def direct_nutrient_profile(direct: DirectNutrients) -> NutrientProfile:
    """Round supplied nutrients to 3 decimals; optional ones only when given."""
    values = {
        "calories": round_to_3_decimals(direct.calories),
        "protein_g": round_to_3_decimals(direct.protein_g),
        "total_fat_g": round_to_3_decimals(direct.total_fat_g),
        "carbohydrates_g": round_to_3_decimals(direct.carbohydrates_g),
    }
    if direct.caffeine_mg is not None:
        values["caffeine_mg"] = round_to_3_decimals(direct.caffeine_mg)
    if direct.ethyl_alcohol_g is not None:
        values["ethyl_alcohol_g"] = round_to_3_decimals(direct.ethyl_alcohol_g)
    return NutrientProfile(**values)


def consumed_at_or_now(item: ConsumedItem) -> datetime:
    """Return the item's timestamp, defaulting to the current UTC time."""
    return item.consumed_at or datetime.now(tz=UTC)


def summary_message(added_count: int, not_found_count: int) -> str:
    """Summarize a batch for the caller."""
    if not_found_count == 0:
        return f"Successfully logged {added_count} item(s)"
    return (
        f"Logged {added_count} item(s), {not_found_count} item(s) not found "
        "and require clarification"
    )


def _has_amount(item: ConsumedItem) -> bool:
    return item.amount_g > 0 or (item.serving_count or 0) > 0


def _logged_message(entry: ConsumptionLogEntry) -> str:
    return f"Successfully logged {entry.amount_g:.1f}g of {entry.food_name}"
