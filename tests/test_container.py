"""Tests for container wiring."""

import pytest

from food_diary.adapters.supabase_food_catalog import SupabaseFoodCatalog
from food_diary.config import Settings, parse_barcode_policy
from food_diary.containers import build_container, build_services
from food_diary.services.resolution import BarcodeConflictPolicy
from tests.conftest import InMemoryFoodCatalog


def test_build_container_creates_services(settings: Settings) -> None:
    container = build_container(settings)

    assert isinstance(container.catalog, SupabaseFoodCatalog)
    assert container.food_service.catalog is container.catalog
    assert container.consumption_log_service.catalog is container.catalog


def test_build_services_applies_barcode_policy(settings: Settings) -> None:
    catalog = InMemoryFoodCatalog()
    configured = settings.model_copy(update={"barcode_conflict_policy": "ambiguous"})

    container = build_services(configured, catalog)

    resolver = container.consumption_log_service.resolver
    assert resolver.barcode_policy is BarcodeConflictPolicy.AMBIGUOUS
    assert resolver.catalog is catalog


@pytest.mark.parametrize(
    ("raw", "policy"),
    [
        (None, BarcodeConflictPolicy.FIRST_MATCH),
        ("", BarcodeConflictPolicy.FIRST_MATCH),
        ("first-match", BarcodeConflictPolicy.FIRST_MATCH),
        (" AMBIGUOUS ", BarcodeConflictPolicy.AMBIGUOUS),
    ],
)
def test_parse_barcode_policy(raw: str | None, policy: BarcodeConflictPolicy) -> None:
    assert parse_barcode_policy(raw) is policy


def test_parse_barcode_policy_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="barcode_conflict_policy must be one of"):
        parse_barcode_policy("newest")
