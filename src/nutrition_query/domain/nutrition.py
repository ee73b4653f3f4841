"""Nutrition domain models."""

from dataclasses import dataclass
from enum import Enum


class Unit(str, Enum):
    """Canonical units a food mention can be expressed in."""

    GRAM = "g"
    MILLILITER = "ml"
    TEASPOON = "tsp"
    TABLESPOON = "tbsp"
    CUP = "cup"
    COUNT = "unit"


@dataclass(frozen=True)
class NutrientProfile:
    """Energy and macronutrients, either per 100 g or for a resolved quantity."""

    kcal: float
    protein_g: float
    carbs_g: float
    fat_g: float


ZERO_PROFILE = NutrientProfile(kcal=0, protein_g=0.0, carbs_g=0.0, fat_g=0.0)
