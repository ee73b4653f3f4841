"""Query analysis: resolve food mentions into calories and macros."""

import asyncio
import logging
from dataclasses import dataclass

from nutrition_query.domain.analysis import AnalysisResult, AnalyzedItem, ParsedMention
from nutrition_query.domain.catalog import FoodCatalog
from nutrition_query.domain.nutrition import ZERO_PROFILE, Unit
from nutrition_query.services.lookup import ExternalLookupService
from nutrition_query.services.nutrition import (
    aggregate,
    per_100_from_nutriments,
    scale_profile,
)
from nutrition_query.services.parsing import parse_query
from nutrition_query.services.units import (
    catalog_display_unit,
    external_basis,
    grams_from_catalog,
)

SOURCE = "local+openfoodfacts"

_logger = logging.getLogger(__name__)


@dataclass
class AnalysisService:
    """Resolves each mention against the catalog, falling back to Open Food Facts.

    A failed external lookup aborts the whole analysis; there are no partial
    results.
    """

    catalog: FoodCatalog
    lookup_service: ExternalLookupService
    concurrent_lookups: bool = False
    debug: bool = False

    async def analyze(self, query: str) -> AnalysisResult:
        """Analyze a free-form query such as ``"2 huevos, 1 taza de arroz"``."""
        mentions = parse_query(query)
        if self.concurrent_lookups:
            items = await self._resolve_concurrently(mentions)
        else:
            items = [await self.resolve(mention) for mention in mentions]
        return AnalysisResult(
            items=items,
            totals=aggregate(item.nutrients for item in items),
            source=SOURCE,
        )

    async def _resolve_concurrently(
        self, mentions: list[ParsedMention]
    ) -> list[AnalyzedItem]:
        """Resolve all mentions at once; the first failure cancels the rest."""
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(self.resolve(mention)) for mention in mentions
                ]
        except ExceptionGroup as errors:
            raise errors.exceptions[0] from None
        return [task.result() for task in tasks]

    async def resolve(self, mention: ParsedMention) -> AnalyzedItem:
        """Resolve one mention, locally when possible."""
        local = self.resolve_locally(mention)
        if local is not None:
            return local
        return await self._resolve_externally(mention)

    def resolve_locally(self, mention: ParsedMention) -> AnalyzedItem | None:
        """Resolve a mention from the catalog, or None to fall back."""
        entry = self.catalog.find(mention.term)
        if entry is None:
            return None
        grams = grams_from_catalog(entry, mention.qty, mention.unit)
        if grams is None:
            if self.debug:
                _logger.info(
                    "Unit %s not resolvable for %s, using fallback",
                    mention.unit,
                    entry.name,
                )
            return None
        return AnalyzedItem(
            name=entry.name,
            qty=mention.qty,
            unit=catalog_display_unit(entry, mention.unit),
            nutrients=scale_profile(entry.per_100g, grams),
        )

    async def _resolve_externally(self, mention: ParsedMention) -> AnalyzedItem:
        product = await self.lookup_service.lookup(mention.term)
        if product is None:
            return AnalyzedItem(
                name=mention.term,
                qty=mention.qty,
                unit=mention.unit or Unit.GRAM,
                nutrients=ZERO_PROFILE,
            )
        basis = external_basis(mention.qty, mention.unit)
        per_100 = per_100_from_nutriments(product.nutriments)
        return AnalyzedItem(
            name=product.display_name or mention.term,
            qty=mention.qty,
            unit=mention.unit or Unit.GRAM,
            nutrients=scale_profile(per_100, basis.amount),
        )
