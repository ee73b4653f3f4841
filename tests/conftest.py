"""Shared test fixtures."""

from dataclasses import dataclass, field

import pytest

from nutrition_query.adapters.off_client import OpenFoodFactsClient
from nutrition_query.config import Settings
from nutrition_query.containers import AppContainer
from nutrition_query.domain.catalog import FoodCatalog, default_catalog
from nutrition_query.services.analysis import AnalysisService
from nutrition_query.services.cache import InMemoryCache
from nutrition_query.services.lookup import ExternalLookupService


def off_product(  # noqa: PLR0913
    name: str | None,
    *,
    kcal: float | None = None,
    kj: float | None = None,
    protein: float | None = None,
    carbs: float | None = None,
    fat: float | None = None,
    categories: list[str] | None = None,
    languages: list[str] | None = None,
) -> dict[str, object]:
    """Build a raw Open Food Facts product as returned by the search API."""
    nutriments: dict[str, object] = {}
    if kcal is not None:
        nutriments["energy-kcal_100g"] = kcal
    if kj is not None:
        nutriments["energy_100g"] = kj
    if protein is not None:
        nutriments["proteins_100g"] = protein
    if carbs is not None:
        nutriments["carbohydrates_100g"] = carbs
    if fat is not None:
        nutriments["fat_100g"] = fat
    product: dict[str, object] = {
        "nutriments": nutriments,
        "categories_tags": categories or [],
        "languages_tags": languages if languages is not None else ["en:spanish-es"],
    }
    if name is not None:
        product["product_name"] = name
    return product


@dataclass
class FakeOpenFoodFactsClient(OpenFoodFactsClient):
    """Fake Open Food Facts client returning canned payloads per term."""

    payloads: dict[str, object] = field(default_factory=dict)
    default_payload: object = field(default_factory=lambda: {"products": []})
    error: Exception | None = None
    calls: list[tuple[str, str, int]] = field(default_factory=list)

    async def search_products(
        self, term: str, language: str, page_size: int = 10
    ) -> object:
        self.calls.append((term, language, page_size))
        if self.error is not None:
            raise self.error
        return self.payloads.get(term, self.default_payload)


@pytest.fixture
def settings() -> Settings:
    return Settings(off_base_url="https://off.test")


@pytest.fixture
def catalog() -> FoodCatalog:
    return default_catalog()


@pytest.fixture
def off_client() -> FakeOpenFoodFactsClient:
    return FakeOpenFoodFactsClient()


@pytest.fixture
def lookup_service(off_client: FakeOpenFoodFactsClient) -> ExternalLookupService:
    return ExternalLookupService(client=off_client, cache=InMemoryCache())


@pytest.fixture
def analysis_service(
    catalog: FoodCatalog, lookup_service: ExternalLookupService
) -> AnalysisService:
    return AnalysisService(catalog=catalog, lookup_service=lookup_service)


@pytest.fixture
def container(
    settings: Settings,
    catalog: FoodCatalog,
    lookup_service: ExternalLookupService,
    analysis_service: AnalysisService,
) -> AppContainer:
    async def close_resources() -> None:
        return None

    return AppContainer(
        settings=settings,
        catalog=catalog,
        lookup_service=lookup_service,
        analysis_service=analysis_service,
        close_resources=close_resources,
    )
