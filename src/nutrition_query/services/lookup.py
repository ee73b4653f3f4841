"""External food lookup with candidate disambiguation."""

import logging
import re
from dataclasses import dataclass

from nutrition_query.adapters.off_client import OpenFoodFactsClient
from nutrition_query.domain.analysis import ExternalProduct
from nutrition_query.services.cache import Cache

_logger = logging.getLogger(__name__)

# (term pattern, category keywords), checked in order.
KEYWORD_GROUPS: tuple[tuple[re.Pattern[str], tuple[str, ...]], ...] = (
    (re.compile("arroz"), ("arroz", "rice", "arroz-cocido")),
    (re.compile("huevo"), ("huevo", "eggs")),
    (re.compile("manzana"), ("apple", "manzana", "frutas")),
    (re.compile("plátano|platano|banana"), ("banana", "plátano", "frutas")),
    (re.compile("pollo|pechuga"), ("pollo", "chicken")),
)


def _language_pattern(language: str) -> re.Pattern[str]:
    code = re.escape(language.lower())
    return re.compile(rf"-{code}$|^{code}:?")


def preferred_keywords(term: str) -> list[str]:
    """Category keywords to prefer for a term, in priority order."""
    lowered = term.lower()
    keywords: list[str] = []
    for pattern, group in KEYWORD_GROUPS:
        if pattern.search(lowered):
            keywords.extend(group)
    return keywords


def choose_product(
    candidates: list[ExternalProduct], term: str, language: str = "es"
) -> ExternalProduct | None:
    """Pick one candidate deterministically.

    Language-tagged candidates are preferred, then richer category metadata,
    then a category keyword matching the term, then usable energy data.
    """
    if not candidates:
        return None
    pattern = _language_pattern(language)
    localized = [
        product
        for product in candidates
        if any(pattern.search(str(tag)) for tag in product.language_tags)
    ]
    pool = localized or candidates
    ranked = sorted(
        pool, key=lambda product: len(product.category_tags), reverse=True
    )

    for keyword in preferred_keywords(term):
        for product in ranked:
            if any(keyword in tag.lower() for tag in product.category_tags):
                return product

    for product in ranked:
        if product.has_energy:
            return product
    return ranked[0]


def _tags(value: object) -> tuple[str, ...]:
    if not isinstance(value, list):
        return ()
    return tuple(str(tag) for tag in value)


def parse_products(payload: object) -> list[ExternalProduct]:
    """Convert a search payload into candidate products."""
    if not isinstance(payload, dict):
        return []
    raw_products = payload.get("products") or []
    if not isinstance(raw_products, list):
        return []
    products: list[ExternalProduct] = []
    for raw in raw_products:
        if not isinstance(raw, dict):
            continue
        nutriments = raw.get("nutriments")
        products.append(
            ExternalProduct(
                display_name=raw.get("product_name") or None,
                nutriments=nutriments if isinstance(nutriments, dict) else {},
                category_tags=_tags(raw.get("categories_tags")),
                language_tags=_tags(raw.get("languages_tags")),
            )
        )
    return products


@dataclass
class ExternalLookupService:
    """Searches Open Food Facts and selects the best candidate per term."""

    client: OpenFoodFactsClient
    cache: Cache
    language: str = "es"
    page_size: int = 10
    debug: bool = False

    async def candidates(self, term: str) -> list[ExternalProduct]:
        """Return all candidates for a term, using the cache when possible."""
        cache_key = f"off:search:{self.language}:{term.lower()}:{self.page_size}"
        cached = self.cache.get(cache_key)
        if isinstance(cached, list):
            return cached

        payload = await self.client.search_products(
            term, language=self.language, page_size=self.page_size
        )
        products = parse_products(payload)
        self.cache.set(cache_key, products)
        if self.debug:
            _logger.info("OFF search: term=%s results=%s", term, len(products))
        return products

    async def lookup(self, term: str) -> ExternalProduct | None:
        """Return the selected product for a term, or None without candidates."""
        product = choose_product(await self.candidates(term), term, self.language)
        if self.debug:
            _logger.info(
                "OFF selection: term=%s product=%s",
                term,
                product.display_name if product else None,
            )
        return product
