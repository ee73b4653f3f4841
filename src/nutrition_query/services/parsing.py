"""Splitting and parsing of free-form food queries."""

import re

from nutrition_query.domain.analysis import ParsedMention
from nutrition_query.domain.nutrition import Unit

DEFAULT_QUANTITY = 100.0

_SEPARATOR_RE = re.compile(r"[,;]+")

# The quantity never ends inside a number ("200" is a bare term, not 20 of "0"),
# and a unit word is never followed by a letter ("gramos" is not "g" + "ramos").
_MENTION_RE = re.compile(
    r"^(?P<qty>\d+(?:[.,]\d+)?)(?![\d.,])\s*"
    r"(?:(?P<unit>tazas?|cucharaditas?|cucharadas?|unidad(?:es)?|uds?|u"
    r"|gramos?|gr|g|mililitros?|ml)(?![^\W\d_]))?"
    r"\s*(?P<term>.+)$",
    re.IGNORECASE,
)

_TERM_REPLACEMENTS = {
    "huevos": "huevo",
    "manzanas": "manzana",
}


def split_mentions(query: str) -> list[str]:
    """Split a query on commas/semicolons into trimmed, non-empty mentions."""
    return [part.strip() for part in _SEPARATOR_RE.split(query) if part.strip()]


def normalize_term(raw: str) -> str:
    """Canonicalize a food term before catalog or external lookup."""
    term = raw.lower().strip()
    term = _TERM_REPLACEMENTS.get(term, term)
    if "arroz" in term:
        term = "arroz cocido"
    return term


def canonical_unit(word: str) -> Unit:
    """Map a Spanish unit word (singular or plural) to its canonical unit."""
    lowered = word.lower()
    if lowered in {"g", "gr"} or lowered.startswith("gramo"):
        return Unit.GRAM
    if lowered == "ml" or lowered.startswith("mililitro"):
        return Unit.MILLILITER
    if lowered.startswith("cucharadita"):
        return Unit.TEASPOON
    if lowered.startswith("cucharada"):
        return Unit.TABLESPOON
    if lowered.startswith("taza"):
        return Unit.CUP
    return Unit.COUNT


def parse_mention(raw: str) -> ParsedMention:
    """Extract quantity, unit and term from a single mention.

    A mention without a leading quantity means 100 grams of the whole text.
    """
    match = _MENTION_RE.match(raw)
    if match is None:
        return ParsedMention(
            raw=raw, term=normalize_term(raw), qty=DEFAULT_QUANTITY, unit=Unit.GRAM
        )
    qty = float(match.group("qty").replace(",", "."))
    unit_word = match.group("unit")
    unit = canonical_unit(unit_word) if unit_word else None
    return ParsedMention(
        raw=raw,
        term=normalize_term(match.group("term")),
        qty=qty,
        unit=unit,
    )


def parse_query(query: str) -> list[ParsedMention]:
    """Segment and parse a whole query, preserving mention order."""
    return [parse_mention(part) for part in split_mentions(query)]
