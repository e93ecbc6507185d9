"""Food catalog interface and food creation."""

import logging
from dataclasses import dataclass
from typing import Protocol

from food_diary.domain.consumption import ConsumptionLogEntry
from food_diary.domain.errors import (
    CatalogError,
    DuplicateFoodError,
    FoodDiaryError,
    FoodValidationError,
)
from food_diary.domain.foods import Food, FoodComponent, FoodFilter, FoodType, NewFood
from food_diary.domain.nutrients import NutrientProfile
from food_diary.services.nutrients import add_scaled_nutrients

_logger = logging.getLogger(__name__)


class FoodCatalog(Protocol):
    """Persistence interface for foods and consumption logs."""

    def get_food(self, food_id: int) -> Food:
        """Return a food by id or raise FoodNotFoundError."""

    def search_food(self, food_filter: FoodFilter) -> list[Food]:
        """Return foods matching the filter, ordered by name."""

    def add_food(self, food: NewFood) -> int:
        """Persist a new food and return its id."""

    def add_consumption_log(self, entry: ConsumptionLogEntry) -> None:
        """Append a consumption log row."""


@dataclass(frozen=True)
class AddFoodResult:
    """Identifier and summary of a created food."""

    id: int
    message: str


@dataclass
class FoodService:
    """Application service for adding foods to the catalog."""

    catalog: FoodCatalog

    def add_food(self, food: NewFood) -> AddFoodResult:
        """Validate, de-duplicate, compute nutrients and persist a food."""
        _validate_new_food(food)
        self._check_duplicates(food)
        nutrients = self.calculate_nutrients(food)
        stored = NewFood(
            name=food.name,
            food_type=food.food_type,
            description=food.description or None,
            barcode=food.barcode or None,
            serving_size_g=food.serving_size_g or None,
            serving_name=food.serving_name or None,
            nutrients=nutrients,
            composition=food.composition,
        )
        try:
            food_id = self.catalog.add_food(stored)
        except FoodDiaryError:
            raise
        except Exception as exc:
            raise CatalogError(f"database error: {exc}") from exc
        _logger.info("Food added: id=%s name=%s", food_id, food.name)
        return AddFoodResult(
            id=food_id,
            message=f"Food '{food.name}' added successfully with ID {food_id}",
        )

    def calculate_nutrients(self, food: NewFood) -> NutrientProfile | None:
        """Use explicit nutrients, else sum them from the composition."""
        if food.nutrients is not None:
            return food.nutrients
        if food.composition:
            return self.sum_composition(food.composition)
        return None

    def sum_composition(self, composition: list[FoodComponent]) -> NutrientProfile:
        """Sum component nutrients scaled to their amounts.

        Components without a nutrient profile are skipped.
        """
        total = NutrientProfile()
        for component in composition:
            try:
                component_food = self.catalog.get_food(component.food_id)
            except FoodDiaryError:
                raise
            except Exception as exc:
                raise CatalogError(
                    f"failed to get component food {component.food_id}: {exc}"
                ) from exc
            if component_food.nutrients is None:
                continue
            total = add_scaled_nutrients(
                total, component_food.nutrients, component.amount_g
            )
        return total

    def _check_duplicates(self, food: NewFood) -> None:
        name_matches = self._search(FoodFilter(name=food.name), "name")
        if name_matches:
            match = name_matches[0]
            raise DuplicateFoodError(
                f"food with name '{match.name}' already exists (ID: {match.id})"
            )
        if food.barcode:
            barcode_matches = self._search(FoodFilter(barcode=food.barcode), "barcode")
            if barcode_matches:
                match = barcode_matches[0]
                raise DuplicateFoodError(
                    f"food with barcode '{food.barcode}' already exists: "
                    f"'{match.name}' (ID: {match.id})"
                )

    def _search(self, food_filter: FoodFilter, label: str) -> list[Food]:
        try:
            return self.catalog.search_food(food_filter)
        except Exception as exc:
            raise CatalogError(f"{label} search failed: {exc}") from exc


def _validate_new_food(food: NewFood) -> None:
    if not food.name.strip():
        raise FoodValidationError("name is required")
    if food.food_type not in {food_type.value for food_type in FoodType}:
        raise FoodValidationError("food_type must be one of: component, product, dish")
    if food.serving_size_g is not None and food.serving_size_g < 0:
        raise FoodValidationError("serving_size_g must be positive")
