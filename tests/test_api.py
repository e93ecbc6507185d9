"""Tests for the HTTP endpoints."""

from fastapi.testclient import TestClient

from food_diary.api.app import create_app
from food_diary.containers import AppContainer
from tests.conftest import make_food

HEADERS = {"X-Api-Token": "api-token"}


def _client(container: AppContainer) -> TestClient:
    return TestClient(create_app(container))


def test_health(container: AppContainer) -> None:
    response = _client(container).get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_requests_require_token(container: AppContainer) -> None:
    client = _client(container)

    response = client.post("/consumption/log", json={"consumed_items": []})
    wrong = client.post(
        "/consumption/log",
        json={"consumed_items": []},
        headers={"X-Api-Token": "nope"},
    )

    assert response.status_code == 401
    assert wrong.status_code == 401


def test_log_batch(container: AppContainer) -> None:
    container.catalog.add(make_food(1, "Apple", calories=52))

    response = _client(container).post(
        "/consumption/log",
        json={
            "consumed_items": [
                {"food_id": 1, "amount_g": 150},
                {"name": "kiwi", "amount_g": 80},
                {
                    "direct_nutrients": {
                        "product_name": "Sandwich",
                        "calories": 350,
                        "protein_g": 15,
                        "fat_g": 12,
                        "carbs_g": 40,
                    },
                    "amount_g": 200,
                },
            ]
        },
        headers=HEADERS,
    )

    assert response.status_code == 200
    data = response.json()
    assert data["message"] == (
        "Logged 2 item(s), 1 item(s) not found and require clarification"
    )
    assert data["added_items"][0]["nutrients"] == {"calories": 78.0}
    assert data["added_items"][0]["food"]["name"] == "Apple"
    assert [item["index"] for item in data["added_items"]] == [0, 2]
    assert data["added_items"][1]["food_id"] is None
    assert data["added_items"][1]["nutrients"]["total_fat_g"] == 12.0
    assert data["not_found_items"] == [
        {"index": 1, "amount_g": 80.0, "reason": "name_not_found", "name": "kiwi"}
    ]


def test_log_batch_validation_error(container: AppContainer) -> None:
    response = _client(container).post(
        "/consumption/log", json={"consumed_items": []}, headers=HEADERS
    )

    assert response.status_code == 422
    assert response.json() == {"detail": "consumed_items cannot be empty"}


def test_log_batch_processing_error(container: AppContainer) -> None:
    container.catalog.add(make_food(1, "Apple"))

    response = _client(container).post(
        "/consumption/log",
        json={"consumed_items": [{"food_id": 1, "serving_count": 1}]},
        headers=HEADERS,
    )

    assert response.status_code == 409
    assert response.json()["detail"].startswith("item 0: food 'Apple' has no")


def test_log_batch_rejects_missing_macros(container: AppContainer) -> None:
    response = _client(container).post(
        "/consumption/log",
        json={
            "consumed_items": [
                {"direct_nutrients": {"product_name": "X"}, "amount_g": 100}
            ]
        },
        headers=HEADERS,
    )

    assert response.status_code == 422
    assert container.catalog.logs == []


def test_log_batch_save_failure_is_a_catalog_error(container: AppContainer) -> None:
    container.catalog.add(make_food(1, "Apple"))
    container.catalog.log_error = RuntimeError("insert failed")

    response = _client(container).post(
        "/consumption/log",
        json={"consumed_items": [{"food_id": 1, "amount_g": 100}]},
        headers=HEADERS,
    )

    assert response.status_code == 502
    assert response.json() == {"detail": "item 0: database save failed: insert failed"}


def test_log_batch_catalog_error(container: AppContainer) -> None:
    container.catalog.search_error = RuntimeError("down")

    response = _client(container).post(
        "/consumption/log",
        json={"consumed_items": [{"name": "apple", "amount_g": 10}]},
        headers=HEADERS,
    )

    assert response.status_code == 502


def test_log_by_id(container: AppContainer) -> None:
    container.catalog.add(make_food(1, "Apple"))
    client = _client(container)

    response = client.post(
        "/consumption/log-by-id", json={"food_id": 1, "amount_g": 50}, headers=HEADERS
    )
    missing = client.post(
        "/consumption/log-by-id", json={"food_id": 2, "amount_g": 50}, headers=HEADERS
    )

    assert response.json() == {"message": "Successfully logged 50.0g of Apple"}
    assert missing.json() == {"error": "food not found"}
    assert container.catalog.logs[0].user_id == container.settings.default_user_id


def test_log_by_name_suggestions(container: AppContainer) -> None:
    container.catalog.add(make_food(1, "Apple, green"))
    container.catalog.add(make_food(2, "Apple, red"))

    response = _client(container).post(
        "/consumption/log-by-name",
        json={"name": "apple", "amount_g": 100},
        headers=HEADERS,
    )

    assert response.json() == {
        "error": "multiple matches found",
        "suggestions": [
            {"id": 1, "name": "Apple, green"},
            {"id": 2, "name": "Apple, red"},
        ],
    }


def test_log_by_barcode(container: AppContainer) -> None:
    container.catalog.add(make_food(1, "Milk", barcode="460", serving_size_g=250))

    response = _client(container).post(
        "/consumption/log-by-barcode",
        json={"barcode": "460", "serving_count": 2},
        headers=HEADERS,
    )

    assert response.json() == {"message": "Successfully logged 500.0g of Milk"}


def test_log_custom(container: AppContainer) -> None:
    response = _client(container).post(
        "/consumption/log-custom",
        json={
            "product_name": "Beer",
            "amount_g": 500,
            "calories": 215,
            "protein_g": 2.5,
            "fat_g": 0,
            "carbs_g": 18,
            "ethyl_alcohol_g": 20,
        },
        headers=HEADERS,
    )

    assert response.json() == {"message": "Successfully logged 500.0g of Beer"}
    nutrients = container.catalog.logs[0].nutrients
    assert nutrients.carbohydrates_g == 18.0
    assert nutrients.ethyl_alcohol_g == 20.0


def test_add_food(container: AppContainer) -> None:
    container.catalog.add(make_food(1, "Rice", calories=130))
    client = _client(container)

    response = client.post(
        "/foods",
        json={
            "name": "Rice bowl",
            "food_type": "dish",
            "food_composition": [{"food_id": 1, "amount_g": 300}],
        },
        headers=HEADERS,
    )
    duplicate = client.post(
        "/foods",
        json={"name": "rice", "food_type": "component"},
        headers=HEADERS,
    )
    invalid = client.post(
        "/foods", json={"name": "Tea", "food_type": "drink"}, headers=HEADERS
    )

    assert response.status_code == 200
    food_id = response.json()["id"]
    assert container.catalog.foods[food_id].nutrients.calories == 390.0
    assert duplicate.status_code == 409
    assert invalid.status_code == 422


def test_resolve_food(container: AppContainer) -> None:
    container.catalog.add(make_food(1, "Oatmeal", serving_name="1 cup"))

    response = _client(container).post(
        "/foods/resolve",
        json={"name_variants": ["oat", "oatmeal"]},
        headers=HEADERS,
    )
    too_many = _client(container).post(
        "/foods/resolve",
        json={"name_variants": ["a", "b", "c", "d", "e", "f"]},
        headers=HEADERS,
    )

    assert response.json() == {
        "foods": [
            {"id": 1, "name": "Oatmeal", "serving_name": "1 cup", "match_count": 2}
        ]
    }
    assert too_many.json() == {
        "foods": [],
        "error": "maximum 5 name variants allowed",
    }
