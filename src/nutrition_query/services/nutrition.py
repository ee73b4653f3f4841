"""Nutrient scaling and aggregation."""

import math
from collections.abc import Iterable, Mapping
from decimal import ROUND_HALF_UP, Decimal

from nutrition_query.domain.nutrition import NutrientProfile

KJ_PER_KCAL = 4.184


def round_half_up(value: float, digits: int) -> float:
    """Round the exact binary value half away from zero, like ``toFixed``."""
    quantum = Decimal(1).scaleb(-digits)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _round_profile(
    kcal: float, protein_g: float, carbs_g: float, fat_g: float
) -> NutrientProfile:
    return NutrientProfile(
        kcal=int(round_half_up(kcal, 0)),
        protein_g=round_half_up(protein_g, 1),
        carbs_g=round_half_up(carbs_g, 1),
        fat_g=round_half_up(fat_g, 1),
    )


def scale_profile(per_100g: NutrientProfile, grams: float) -> NutrientProfile:
    """Scale a per-100 g profile to the given amount and round it."""
    factor = grams / 100
    return _round_profile(
        per_100g.kcal * factor,
        per_100g.protein_g * factor,
        per_100g.carbs_g * factor,
        per_100g.fat_g * factor,
    )


def aggregate(profiles: Iterable[NutrientProfile]) -> NutrientProfile:
    """Sum already-rounded profiles field by field, rounding the sums again."""
    kcal = protein_g = carbs_g = fat_g = 0.0
    for profile in profiles:
        kcal += profile.kcal
        protein_g += profile.protein_g
        carbs_g += profile.carbs_g
        fat_g += profile.fat_g
    return _round_profile(kcal, protein_g, carbs_g, fat_g)


def _number(value: object) -> float | None:
    """Coerce a nutriment value to a finite float, or None."""
    if value is None or isinstance(value, bool):
        return None
    try:
        number = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        return None
    return number if math.isfinite(number) else None


def per_100_from_nutriments(nutriments: Mapping[str, object]) -> NutrientProfile:
    """Build an unrounded per-100 g/ml profile from Open Food Facts nutriments.

    Energy prefers kcal and falls back to kJ; missing fields count as zero.
    """
    kcal = _number(nutriments.get("energy-kcal_100g"))
    if kcal is None:
        kilojoules = _number(nutriments.get("energy_100g"))
        kcal = kilojoules / KJ_PER_KCAL if kilojoules is not None else 0.0
    return NutrientProfile(
        kcal=kcal,
        protein_g=_number(nutriments.get("proteins_100g")) or 0.0,
        carbs_g=_number(nutriments.get("carbohydrates_100g")) or 0.0,
        fat_g=_number(nutriments.get("fat_100g")) or 0.0,
    )
