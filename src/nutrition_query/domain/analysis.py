"""Domain models for query analysis."""

from dataclasses import dataclass, field

from nutrition_query.domain.nutrition import NutrientProfile, Unit


@dataclass(frozen=True)
class ParsedMention:
    """One quantified food clause of a query."""

    raw: str
    term: str
    qty: float
    unit: Unit | None


@dataclass(frozen=True)
class ExternalProduct:
    """Candidate product returned by the external food database."""

    display_name: str | None
    nutriments: dict[str, object] = field(default_factory=dict)
    category_tags: tuple[str, ...] = ()
    language_tags: tuple[str, ...] = ()

    @property
    def has_energy(self) -> bool:
        """Whether the product carries kcal or kJ per 100 g."""
        return (
            self.nutriments.get("energy-kcal_100g") is not None
            or self.nutriments.get("energy_100g") is not None
        )


@dataclass(frozen=True)
class AnalyzedItem:
    """Resolved mention with its scaled nutrients."""

    name: str
    qty: float
    unit: Unit | None
    nutrients: NutrientProfile


@dataclass(frozen=True)
class AnalysisResult:
    """Per-item breakdown and totals for one query."""

    items: list[AnalyzedItem]
    totals: NutrientProfile
    source: str
