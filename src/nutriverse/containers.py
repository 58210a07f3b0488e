"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from nutriverse.adapters.foods_api_client import HttpxFoodsApiClient
from nutriverse.adapters.json_food_repository import JsonFoodRepository
from nutriverse.adapters.supabase_food_repository import SupabaseFoodRepository
from nutriverse.config import Settings
from nutriverse.services.catalog import CatalogService
from nutriverse.services.favorites import (
    FavoritesService,
    InMemoryKeyValueStore,
    KeyValueStore,
    RecentSearchesService,
)
from nutriverse.services.foods import (
    FavoriteIntentService,
    FoodRepository,
    FoodService,
)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    food_repository: FoodRepository
    food_service: FoodService
    favorite_intent_service: FavoriteIntentService


def build_food_repository(settings: Settings) -> FoodRepository:
    """Load the catalog from the configured source."""
    if settings.food_source == "supabase":
        if not settings.supabase_url or not settings.supabase_service_key:
            raise ValueError(
                "SUPABASE_URL and SUPABASE_SERVICE_KEY are required "
                "when FOOD_SOURCE is supabase"
            )
        client = create_client(settings.supabase_url, settings.supabase_service_key)
        return SupabaseFoodRepository.load(
            client,
            table=settings.supabase_foods_table,
            order_column=settings.supabase_foods_order_column,
        )
    return JsonFoodRepository.from_path(settings.foods_data_path)


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    food_repository = build_food_repository(resolved_settings)
    return AppContainer(
        settings=resolved_settings,
        food_repository=food_repository,
        food_service=FoodService(food_repository),
        favorite_intent_service=FavoriteIntentService(),
    )


@dataclass
class ClientContainer:
    """Holds dependencies for client-side catalog browsing."""

    settings: Settings
    catalog_service: CatalogService
    favorites_service: FavoritesService
    recent_searches_service: RecentSearchesService
    close_resources: Callable[[], Awaitable[None]]


def build_client_container(
    settings: Settings | None = None,
    base_url: str | None = None,
    store: KeyValueStore | None = None,
) -> ClientContainer:
    """Create the client container; the local catalog backs API failures."""
    resolved_settings = settings or Settings()
    api_client = HttpxFoodsApiClient.create(base_url or resolved_settings.api_base_url)
    fallback = FoodService(build_food_repository(resolved_settings))
    resolved_store = store or InMemoryKeyValueStore()

    async def close_resources() -> None:
        await api_client.close()

    return ClientContainer(
        settings=resolved_settings,
        catalog_service=CatalogService(api_client=api_client, fallback=fallback),
        favorites_service=FavoritesService(resolved_store),
        recent_searches_service=RecentSearchesService(resolved_store),
        close_resources=close_resources,
    )
