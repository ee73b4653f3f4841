"""Conversion of (quantity, unit, food) into a mass or volume basis."""

from dataclasses import dataclass

from nutrition_query.domain.catalog import FoodEntry
from nutrition_query.domain.nutrition import Unit

_ML_PER_UNIT = {
    Unit.MILLILITER: 1.0,
    Unit.TEASPOON: 5.0,
    Unit.TABLESPOON: 15.0,
    Unit.CUP: 240.0,
}

# No density is known for external products: one discrete unit counts as 100 g.
EXTERNAL_GRAMS_PER_COUNT = 100.0


@dataclass(frozen=True)
class Basis:
    """Resolved amount for an external product, in grams or milliliters."""

    grams: float | None = None
    ml: float | None = None

    @property
    def amount(self) -> float:
        """Grams or milliliters; both scale a per-100 g/ml profile alike."""
        if self.grams is not None:
            return self.grams
        return self.ml or 0.0


def grams_from_catalog(entry: FoodEntry, qty: float, unit: Unit | None) -> float | None:
    """Return grams for a catalog food, or None when the unit can't be resolved.

    None routes the mention to the external lookup.
    """
    if unit is None:
        if entry.unit_g:
            return entry.unit_g * qty
        if entry.cup_g:
            return entry.cup_g * qty
        return qty
    if unit in {Unit.GRAM, Unit.MILLILITER}:
        return qty
    if unit is Unit.CUP and entry.cup_g:
        return entry.cup_g * qty
    if unit is Unit.COUNT and entry.unit_g:
        return entry.unit_g * qty
    return None


def catalog_display_unit(entry: FoodEntry, unit: Unit | None) -> Unit:
    """Unit reported for a catalog item, following the grams precedence."""
    if unit is not None:
        return unit
    if entry.unit_g:
        return Unit.COUNT
    if entry.cup_g:
        return Unit.CUP
    return Unit.GRAM


def external_basis(qty: float, unit: Unit | None) -> Basis:
    """Map a quantity to the grams/ml basis used for external products."""
    if unit is None or unit is Unit.GRAM:
        return Basis(grams=qty)
    if unit is Unit.COUNT:
        return Basis(grams=qty * EXTERNAL_GRAMS_PER_COUNT)
    return Basis(ml=qty * _ML_PER_UNIT[unit])
