"""Local food catalog with per-100 g densities and unit conversions."""

from dataclasses import dataclass

from nutrition_query.domain.nutrition import NutrientProfile


@dataclass(frozen=True)
class FoodEntry:
    """A catalog food.

    ``unit_g`` is the mass of one discrete unit (one egg) and ``cup_g`` the mass
    of one cup; each is set only for foods that have such a natural measure.
    """

    name: str
    aliases: tuple[str, ...]
    per_100g: NutrientProfile
    unit_g: float | None = None
    cup_g: float | None = None

    def matches(self, term: str) -> bool:
        """Return whether any alias is contained in the term."""
        lowered = term.lower()
        return any(alias.lower() in lowered for alias in self.aliases)


@dataclass(frozen=True)
class FoodCatalog:
    """Ordered, read-only collection of catalog foods."""

    entries: tuple[FoodEntry, ...]

    def find(self, term: str) -> FoodEntry | None:
        """Return the first entry matching the term, in catalog order."""
        for entry in self.entries:
            if entry.matches(term):
                return entry
        return None

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_FOODS: tuple[FoodEntry, ...] = (
    FoodEntry(
        name="Huevo",
        aliases=("huevo", "huevos", "egg", "eggs"),
        per_100g=NutrientProfile(kcal=155, protein_g=13.0, carbs_g=1.1, fat_g=11.0),
        unit_g=50,
    ),
    FoodEntry(
        name="Arroz cocido",
        aliases=("arroz", "arroz cocido", "rice", "arroz blanco"),
        per_100g=NutrientProfile(kcal=130, protein_g=2.7, carbs_g=28.0, fat_g=0.3),
        cup_g=158,
    ),
    FoodEntry(
        name="Manzana",
        aliases=("manzana", "apple", "manzanas"),
        per_100g=NutrientProfile(kcal=52, protein_g=0.3, carbs_g=14.0, fat_g=0.2),
        unit_g=182,
    ),
    FoodEntry(
        name="Plátano",
        aliases=("plátano", "platano", "banana", "banano"),
        per_100g=NutrientProfile(kcal=89, protein_g=1.1, carbs_g=22.8, fat_g=0.3),
        unit_g=118,
    ),
    FoodEntry(
        name="Pechuga de pollo (cocida)",
        aliases=("pechuga de pollo", "pollo", "chicken breast"),
        per_100g=NutrientProfile(kcal=165, protein_g=31.0, carbs_g=0.0, fat_g=3.6),
        unit_g=120,
    ),
    FoodEntry(
        name="Leche",
        aliases=("leche", "milk"),
        per_100g=NutrientProfile(kcal=42, protein_g=3.4, carbs_g=5.0, fat_g=1.0),
        cup_g=240,
    ),
    FoodEntry(
        name="Pan",
        aliases=("pan", "bread"),
        per_100g=NutrientProfile(kcal=265, protein_g=9.0, carbs_g=49.0, fat_g=3.2),
        unit_g=25,
    ),
)


def default_catalog() -> FoodCatalog:
    """Return the built-in catalog of common foods."""
    return FoodCatalog(entries=DEFAULT_FOODS)
