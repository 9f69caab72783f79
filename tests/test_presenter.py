"""Tests for transcript formatting: header, menu, values (2dp), scores (4dp), winner."""

from supertrunfo.console.presenter import (
    format_attribute_block,
    format_header,
    format_menu,
    format_report,
    format_result,
)
from supertrunfo.config import Config
from supertrunfo.core.attributes import Attribute
from supertrunfo.core.compare import compare
from supertrunfo.features.card import Card
from supertrunfo.features.metrics import compute_metrics


def _card(name: str, population: int, area: float, gdp: float) -> Card:
    return compute_metrics(Card(region_letter="A", code="A01", name=name, population=population,
                                area_km2=area, gdp_billions=gdp, landmark_count=4))


def test_header() -> None:
    assert format_header("Card 1 Registration") == "=== Card 1 Registration ==="


def test_menu_has_six_numbered_lines() -> None:
    lines = format_menu().splitlines()
    assert lines[0] == "Available attributes:"
    assert [line.split(" - ")[0] for line in lines[1:]] == ["1", "2", "3", "4", "5", "6"]
    assert lines[5].endswith("(lower is better)")


def test_attribute_block_two_decimals() -> None:
    a = _card("Alpha", 1_000, 3.0, 1.0)
    b = _card("Beta", 2_000, 3.0, 1.0)
    block = format_attribute_block(1, Attribute.DENSITY, a, b)
    assert block.splitlines() == [
        "Attribute 1: Population Density",
        "  Alpha: 333.33",
        "  Beta: 666.67",
    ]


def test_result_four_decimals_and_winner() -> None:
    a = _card("Alpha", 1_000, 3.0, 1.0)
    b = _card("Beta", 2_000, 3.0, 1.0)
    comp = compare(a, b, Attribute.DENSITY, Attribute.GDP)
    lines = format_result(a, b, comp).splitlines()
    assert lines[1] == "Alpha: 1.0030"
    assert lines[2] == "Beta: 1.0015"
    assert lines[3] == "Winner: Alpha"


def test_result_tie_label() -> None:
    a = _card("Alpha", 1_000_000, 500.0, 1.0)
    b = _card("Beta", 500_000, 250.0, 1.0)
    comp = compare(a, b, Attribute.DENSITY, Attribute.GDP)
    assert format_result(a, b, comp).splitlines()[-1] == "Winner: Tie!"
    custom = Config(tie_label="Draw")
    assert format_result(a, b, comp, custom).splitlines()[-1] == "Winner: Draw"


def test_report_order() -> None:
    a = _card("Alpha", 1_000, 3.0, 1.0)
    b = _card("Beta", 2_000, 3.0, 1.0)
    comp = compare(a, b, Attribute.POPULATION, Attribute.AREA)
    text = format_report(a, b, Attribute.POPULATION, Attribute.AREA, comp)
    assert text.startswith("Comparing Alpha and Beta\n")
    assert text.index("Attribute 1: Population") < text.index("Attribute 2: Area") < text.index("Winner: Beta")
