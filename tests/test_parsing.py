"""Tests for query segmentation and mention parsing."""

import pytest

from nutrition_query.domain.nutrition import Unit
from nutrition_query.services.parsing import (
    normalize_term,
    parse_mention,
    parse_query,
    split_mentions,
)


def test_split_mentions_trims_and_drops_empty_segments() -> None:
    assert split_mentions(" 2 huevos ,, 1 taza de arroz;; ;pan ") == [
        "2 huevos",
        "1 taza de arroz",
        "pan",
    ]


def test_split_mentions_without_delimiters_is_single_mention() -> None:
    assert split_mentions("pechuga de pollo") == ["pechuga de pollo"]


def test_parse_mention_count_without_unit() -> None:
    mention = parse_mention("2 huevos")

    assert mention.qty == 2
    assert mention.unit is None
    assert mention.term == "huevo"
    assert mention.raw == "2 huevos"


def test_parse_mention_without_quantity_means_100_grams() -> None:
    mention = parse_mention("Queso Fresco")

    assert mention.qty == 100
    assert mention.unit is Unit.GRAM
    assert mention.term == "queso fresco"


@pytest.mark.parametrize(
    ("raw", "unit"),
    [
        ("1 taza de leche", Unit.CUP),
        ("2 tazas de leche", Unit.CUP),
        ("1 cucharada de miel", Unit.TABLESPOON),
        ("3 cucharadas de miel", Unit.TABLESPOON),
        ("1 cucharadita de azúcar", Unit.TEASPOON),
        ("2 cucharaditas de azúcar", Unit.TEASPOON),
        ("1 unidad de pan", Unit.COUNT),
        ("2 unidades de pan", Unit.COUNT),
        ("2 u pan", Unit.COUNT),
        ("2 uds pan", Unit.COUNT),
        ("100g queso", Unit.GRAM),
        ("100 gr queso", Unit.GRAM),
        ("200 gramos de pollo", Unit.GRAM),
        ("250 ml leche", Unit.MILLILITER),
        ("250 mililitros de leche", Unit.MILLILITER),
        ("1 TAZA de leche", Unit.CUP),
    ],
)
def test_parse_mention_unit_words(raw: str, unit: Unit) -> None:
    assert parse_mention(raw).unit is unit


def test_parse_mention_keeps_multiword_term_after_unit() -> None:
    mention = parse_mention("200 gramos de pechuga de pollo")

    assert mention.qty == 200
    assert mention.unit is Unit.GRAM
    assert mention.term == "de pechuga de pollo"


def test_parse_mention_unit_prefix_of_food_word_is_not_a_unit() -> None:
    mention = parse_mention("3 uvas")

    assert mention.unit is None
    assert mention.term == "uvas"


def test_parse_mention_accepts_decimal_separators() -> None:
    assert parse_mention("1.5 tazas de leche").qty == 1.5
    assert parse_mention("0,5 taza de leche").qty == 0.5


def test_parse_mention_normalizes_rice_term() -> None:
    mention = parse_mention("1 taza de arroz blanco")

    assert mention.unit is Unit.CUP
    assert mention.term == "arroz cocido"


def test_normalize_term_fixed_table() -> None:
    assert normalize_term("  Huevos ") == "huevo"
    assert normalize_term("manzanas") == "manzana"
    assert normalize_term("arroz integral") == "arroz cocido"
    assert normalize_term("plátanos") == "plátanos"


def test_parse_query_preserves_order() -> None:
    mentions = parse_query("pan; 2 huevos, 1 manzana")

    assert [mention.term for mention in mentions] == ["pan", "huevo", "manzana"]


@pytest.mark.parametrize("raw", ["200", "1.5", "2,5"])
def test_parse_mention_bare_number_is_a_term(raw: str) -> None:
    mention = parse_mention(raw)

    assert mention.qty == 100
    assert mention.unit is Unit.GRAM
    assert mention.term == raw
