"""Tests for card entry order, metric computation and attribute selection."""

from supertrunfo.console.builder import (
    ALREADY_CHOSEN_MESSAGE,
    OUT_OF_RANGE_MESSAGE,
    build_card,
    choose_attribute,
)
from supertrunfo.console.reader import INVALID_VALUE_MESSAGE
from supertrunfo.core.attributes import Attribute

CARD_LINES = ["B", "B02", "Rio de Janeiro", "6700000", "1200.5", "300.75", "25"]


def test_build_card_reads_fields_in_order(reader_for) -> None:
    reader, out = reader_for(*CARD_LINES)
    card = build_card(reader, "Card 1 Registration")
    assert card.region_letter == "B"
    assert card.code == "B02"
    assert card.name == "Rio de Janeiro"
    assert card.population == 6_700_000
    assert card.area_km2 == 1200.5
    assert card.gdp_billions == 300.75
    assert card.landmark_count == 25
    assert card.density == 6_700_000 / 1200.5
    assert card.gdp_per_capita == 300.75 * 1e9 / 6_700_000

    text = out.getvalue()
    assert text.startswith("\n=== Card 1 Registration ===\n")
    prompts = ["State (A-H): ", "Card code (e.g. A01): ", "City name: ", "Population: ",
               "Area (km²): ", "GDP (in billions): ", "Number of tourist attractions: "]
    positions = [text.index(p) for p in prompts]
    assert positions == sorted(positions)


def test_build_card_keeps_permissive_values(reader_for) -> None:
    reader, _ = reader_for("z", "LONGCODE", "Nowhere", "0", "-5", "0", "-2")
    card = build_card(reader, "Card 2 Registration")
    assert card.region_letter == "z"
    assert card.code == "LONG"
    assert card.area_km2 == -5.0
    assert card.landmark_count == -2
    assert card.density == 0.0
    assert card.gdp_per_capita == 0.0


def test_build_card_retries_malformed_numbers(reader_for) -> None:
    reader, out = reader_for("A", "A01", "Recife", "many", "1000", "abc", "10", "2", "3")
    card = build_card(reader, "Card 1 Registration")
    assert card.population == 1000
    assert card.area_km2 == 10.0
    assert card.gdp_billions == 2.0
    assert card.landmark_count == 3
    assert out.getvalue().count(INVALID_VALUE_MESSAGE) == 2


def test_choose_attribute_rejects_out_of_range(reader_for) -> None:
    reader, out = reader_for("abc", "12xy", "7", "0", "5")
    assert choose_attribute(reader, "First: ") is Attribute.DENSITY
    text = out.getvalue()
    assert text.count(INVALID_VALUE_MESSAGE) == 2
    assert text.count(OUT_OF_RANGE_MESSAGE) == 2


def test_choose_attribute_rejects_repeat(reader_for) -> None:
    reader, out = reader_for("1", "1", "2")
    first = choose_attribute(reader, "First: ")
    second = choose_attribute(reader, "Second: ", first)
    assert first is Attribute.POPULATION
    assert second is Attribute.AREA
    text = out.getvalue()
    assert text.count(ALREADY_CHOSEN_MESSAGE) == 1
    assert OUT_OF_RANGE_MESSAGE not in text
