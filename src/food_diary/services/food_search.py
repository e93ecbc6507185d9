"""Name search over the food catalog and multi-variant ranking."""

import logging
from dataclasses import dataclass

from food_diary.domain.consumption import FoodResolution, RankedFoodMatch
from food_diary.domain.foods import Food, FoodFilter
from food_diary.services.foods import FoodCatalog

MAX_NAME_VARIANTS = 5

_logger = logging.getLogger(__name__)


def search_foods_by_name(catalog: FoodCatalog, name: str) -> list[Food]:
    """Case-insensitive substring search on food names."""
    return catalog.search_food(FoodFilter(name=name))


@dataclass
class FoodSearchService:
    """Service for resolving food ids from loosely spelled names."""

    catalog: FoodCatalog
    debug: bool = False

    def resolve_by_name_variants(self, name_variants: list[str]) -> FoodResolution:
        """Rank foods by how many name variants matched them."""
        if not name_variants:
            return FoodResolution(error="name_variants cannot be empty")
        if len(name_variants) > MAX_NAME_VARIANTS:
            return FoodResolution(
                error=f"maximum {MAX_NAME_VARIANTS} name variants allowed"
            )
        if any(variant == "" for variant in name_variants):
            return FoodResolution(error="name variants cannot be empty")

        try:
            foods = rank_foods_by_variants(self.catalog, name_variants)
        except Exception as exc:
            _logger.warning("Name variant search failed: %s", exc)
            return FoodResolution(error=f"search failed: {exc}")
        if self.debug:
            _logger.info(
                "Name variants resolved: variants=%s results=%s",
                len(name_variants),
                len(foods),
            )
        return FoodResolution(foods=foods)


def rank_foods_by_variants(
    catalog: FoodCatalog, name_variants: list[str]
) -> list[RankedFoodMatch]:
    """Search each variant and order foods by match count, then id."""
    counts: dict[int, int] = {}
    first_seen: dict[int, Food] = {}
    for variant in name_variants:
        for food in search_foods_by_name(catalog, variant):
            counts[food.id] = counts.get(food.id, 0) + 1
            first_seen.setdefault(food.id, food)

    ranked = [
        RankedFoodMatch(
            id=food_id,
            name=first_seen[food_id].name,
            serving_name=first_seen[food_id].serving_name,
            match_count=count,
        )
        for food_id, count in counts.items()
    ]
    return sorted(ranked, key=lambda match: (-match.match_count, match.id))
