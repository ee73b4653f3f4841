"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from nutrition_query.adapters.off_client import HttpxOpenFoodFactsClient
from nutrition_query.config import Settings
from nutrition_query.domain.catalog import FoodCatalog, default_catalog
from nutrition_query.services.analysis import AnalysisService
from nutrition_query.services.cache import InMemoryCache
from nutrition_query.services.lookup import ExternalLookupService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    catalog: FoodCatalog
    lookup_service: ExternalLookupService
    analysis_service: AnalysisService
    close_resources: Callable[[], Awaitable[None]]


def build_container(
    settings: Settings | None = None, catalog: FoodCatalog | None = None
) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    resolved_catalog = catalog or default_catalog()
    off_client = HttpxOpenFoodFactsClient.create(
        base_url=resolved_settings.off_base_url,
        user_agent=resolved_settings.off_user_agent,
        timeout_seconds=resolved_settings.off_timeout_seconds,
    )
    lookup_service = ExternalLookupService(
        client=off_client,
        cache=InMemoryCache(
            maxsize=resolved_settings.lookup_cache_max_entries,
            ttl_seconds=resolved_settings.lookup_cache_ttl_seconds,
        ),
        language=resolved_settings.off_language,
        page_size=resolved_settings.off_page_size,
        debug=resolved_settings.debug,
    )
    analysis_service = AnalysisService(
        catalog=resolved_catalog,
        lookup_service=lookup_service,
        concurrent_lookups=resolved_settings.concurrent_lookups,
        debug=resolved_settings.debug,
    )

    async def close_resources() -> None:
        await off_client.close()

    return AppContainer(
        settings=resolved_settings,
        catalog=resolved_catalog,
        lookup_service=lookup_service,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )
