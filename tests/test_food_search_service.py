"""Tests for name-variant food resolution."""

from food_diary.services.food_search import FoodSearchService
from tests.conftest import InMemoryFoodCatalog, make_food


def test_foods_are_ranked_by_match_count(catalog: InMemoryFoodCatalog) -> None:
    catalog.add(make_food(4, "Banana", serving_name="1 medium"))
    catalog.add(make_food(2, "Banana bread"))
    catalog.add(make_food(9, "Apple"))
    service = FoodSearchService(catalog)

    resolution = service.resolve_by_name_variants(["banana", "bread", "apple"])

    assert resolution.error is None
    assert [(food.id, food.match_count) for food in resolution.foods] == [
        (2, 2),
        (4, 1),
        (9, 1),
    ]
    assert resolution.foods[1].serving_name == "1 medium"


def test_each_variant_is_searched(catalog: InMemoryFoodCatalog) -> None:
    service = FoodSearchService(catalog)

    resolution = service.resolve_by_name_variants(["kiwi", "kiwifruit"])

    assert resolution.foods == []
    assert [call.name for call in catalog.search_calls] == ["kiwi", "kiwifruit"]


def test_variant_validation(catalog: InMemoryFoodCatalog) -> None:
    service = FoodSearchService(catalog)

    assert (
        service.resolve_by_name_variants([]).error == "name_variants cannot be empty"
    )
    assert (
        service.resolve_by_name_variants(["a", "b", "c", "d", "e", "f"]).error
        == "maximum 5 name variants allowed"
    )
    assert (
        service.resolve_by_name_variants(["apple", ""]).error
        == "name variants cannot be empty"
    )
    assert catalog.search_calls == []


def test_search_failure_is_reported(catalog: InMemoryFoodCatalog) -> None:
    catalog.search_error = RuntimeError("boom")
    service = FoodSearchService(catalog, debug=True)

    resolution = service.resolve_by_name_variants(["apple"])

    assert resolution.foods == []
    assert resolution.error == "search failed: boom"


def test_repeated_variants_count_each_occurrence(catalog: InMemoryFoodCatalog) -> None:
    catalog.add(make_food(2, "яблоко красное"))
    catalog.add(make_food(1, "банан"))
    service = FoodSearchService(catalog)

    resolution = service.resolve_by_name_variants(
        ["банан", "банан", "яблоко", "красное"]
    )

    assert [(food.id, food.match_count) for food in resolution.foods] == [
        (1, 2),
        (2, 2),
    ]
    assert [food.name for food in resolution.foods] == ["банан", "яблоко красное"]
