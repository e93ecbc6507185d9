"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from food_diary.adapters.supabase_food_catalog import SupabaseFoodCatalog
from food_diary.config import Settings, parse_barcode_policy
from food_diary.services.consumption import ConsumptionLogService
from food_diary.services.food_search import FoodSearchService
from food_diary.services.foods import FoodCatalog, FoodService
from food_diary.services.resolution import FoodResolver


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    food_service: FoodService
    food_search_service: FoodSearchService
    consumption_log_service: ConsumptionLogService


def build_services(settings: Settings, catalog: FoodCatalog) -> AppContainer:
    """Wire services around a food catalog."""
    resolver = FoodResolver(
        catalog=catalog,
        barcode_policy=parse_barcode_policy(settings.barcode_conflict_policy),
    )
    return AppContainer(
        settings=settings,
        catalog=catalog,
        food_service=FoodService(catalog),
        food_search_service=FoodSearchService(catalog, debug=settings.debug),
        consumption_log_service=ConsumptionLogService(
            catalog=catalog,
            resolver=resolver,
            debug=settings.debug,
        ),
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    return build_services(resolved_settings, SupabaseFoodCatalog(supabase_client))
