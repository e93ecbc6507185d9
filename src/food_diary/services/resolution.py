"""Batch resolution of consumed items against the food catalog."""

import logging
from dataclasses import dataclass, field
from enum import StrEnum
from typing import TYPE_CHECKING

from food_diary.domain.consumption import (
    ConsumedItem,
    FoodMatch,
    NotFoundItem,
    NotFoundReason,
)
from food_diary.domain.errors import CatalogError
from food_diary.domain.foods import Food, FoodFilter
from food_diary.services.classification import Scenario
from food_diary.services.food_search import search_foods_by_name
from food_diary.services.foods import FoodCatalog

MAX_SUGGESTIONS = 2

_NOT_FOUND_REASONS = {
    Scenario.BY_ID: NotFoundReason.ID_NOT_FOUND,
    Scenario.BY_NAME: NotFoundReason.NAME_NOT_FOUND,
    Scenario.BY_BARCODE: NotFoundReason.BARCODE_NOT_FOUND,
}

_logger = logging.getLogger(__name__)

if TYPE_CHECKING:
    from collections.abc import Callable


class BarcodeConflictPolicy(StrEnum):
    """What to do when a barcode matches more than one food."""

    FIRST_MATCH = "first_match"
    AMBIGUOUS = "ambiguous"


@dataclass(frozen=True)
class ResolvedFood:
    """Consumed item matched to exactly one catalog food."""

    index: int
    item: ConsumedItem
    food: Food


@dataclass(frozen=True)
class DirectItem:
    """Consumed item that carries its own nutrients."""

    index: int
    item: ConsumedItem


@dataclass
class ResolutionResult:
    """Items partitioned by resolution outcome."""

    found: list[ResolvedFood] = field(default_factory=list)
    not_found: list[NotFoundItem] = field(default_factory=list)
    direct: list[DirectItem] = field(default_factory=list)


def interpret_matches(
    index: int,
    item: ConsumedItem,
    scenario: Scenario,
    foods: list[Food],
    barcode_policy: BarcodeConflictPolicy = BarcodeConflictPolicy.FIRST_MATCH,
) -> ResolvedFood | NotFoundItem:
    """Turn the catalog matches for one item into an outcome."""
    if not foods:
        return _not_found(index, item, scenario, _NOT_FOUND_REASONS[scenario])
    if len(foods) == 1:
        return ResolvedFood(index=index, item=item, food=foods[0])
    if (
        scenario is Scenario.BY_BARCODE
        and barcode_policy is BarcodeConflictPolicy.FIRST_MATCH
    ):
        _logger.warning(
            "Barcode %s matched %s foods, using id=%s",
            item.barcode,
            len(foods),
            foods[0].id,
        )
        return ResolvedFood(index=index, item=item, food=foods[0])
    return _not_found(
        index,
        item,
        scenario,
        NotFoundReason.MULTIPLE_MATCHES,
        suggestions=[
            FoodMatch(id=food.id, name=food.name) for food in foods[:MAX_SUGGESTIONS]
        ],
    )


@dataclass
class FoodResolver:
    """Resolves classified items with as few catalog queries as possible."""

    catalog: FoodCatalog
    barcode_policy: BarcodeConflictPolicy = BarcodeConflictPolicy.FIRST_MATCH

    def resolve_items(
        self, items: list[ConsumedItem], scenarios: list[Scenario]
    ) -> ResolutionResult:
        """Resolve pre-classified items, keyed by request index."""
        result = ResolutionResult()
        by_id: list[tuple[int, ConsumedItem, int]] = []
        for index, (item, scenario) in enumerate(zip(items, scenarios, strict=True)):
            if scenario is Scenario.BY_ID and item.food_id is not None:
                by_id.append((index, item, item.food_id))
            elif scenario is Scenario.DIRECT_NUTRIENTS:
                result.direct.append(DirectItem(index=index, item=item))

        if by_id:
            self._resolve_by_ids(by_id, result)

        for index, (item, scenario) in enumerate(zip(items, scenarios, strict=True)):
            if scenario is Scenario.BY_NAME:
                foods = self._search(
                    lambda item=item: search_foods_by_name(self.catalog, str(item.name)),
                    "name",
                )
            elif scenario is Scenario.BY_BARCODE:
                foods = self._search(
                    lambda item=item: self.catalog.search_food(
                        FoodFilter(barcode=item.barcode)
                    ),
                    "barcode",
                )
            else:
                continue
            outcome = interpret_matches(
                index, item, scenario, foods, self.barcode_policy
            )
            _append_outcome(result, outcome)

        result.found.sort(key=lambda resolved: resolved.index)
        result.not_found.sort(key=lambda missing: missing.index or 0)
        return result

    def _resolve_by_ids(
        self, items: list[tuple[int, ConsumedItem, int]], result: ResolutionResult
    ) -> None:
        ids = list(dict.fromkeys(food_id for _, _, food_id in items))
        foods = self._search(
            lambda: self.catalog.search_food(FoodFilter(ids=ids)), "ID"
        )
        found = {food.id: food for food in foods}
        for index, item, food_id in items:
            food = found.get(food_id)
            if food is None:
                result.not_found.append(
                    _not_found(index, item, Scenario.BY_ID, NotFoundReason.ID_NOT_FOUND)
                )
            else:
                result.found.append(ResolvedFood(index=index, item=item, food=food))

    @staticmethod
    def _search(func: "Callable[[], list[Food]]", label: str) -> list[Food]:
        """Run a catalog search, wrapping failures with the scenario label."""
        try:
            return func()
        except Exception as exc:
            raise CatalogError(f"{label} search failed: {exc}") from exc


def _append_outcome(
    result: ResolutionResult, outcome: ResolvedFood | NotFoundItem
) -> None:
    if isinstance(outcome, ResolvedFood):
        result.found.append(outcome)
    else:
        result.not_found.append(outcome)


def _not_found(
    index: int,
    item: ConsumedItem,
    scenario: Scenario,
    reason: NotFoundReason,
    suggestions: list[FoodMatch] | None = None,
) -> NotFoundItem:
    return NotFoundItem(
        index=index,
        food_id=item.food_id if scenario is Scenario.BY_ID else None,
        name=item.name if scenario is Scenario.BY_NAME else None,
        barcode=item.barcode if scenario is Scenario.BY_BARCODE else None,
        amount_g=item.amount_g,
        reason=reason,
        suggestions=suggestions or [],
    )
