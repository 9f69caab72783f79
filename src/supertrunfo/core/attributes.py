"""
The six comparable card attributes and how each one is read and scored.

Higher score wins for every attribute. Density is the only lower-is-better
attribute, so its score is the inverse of its value; the other five score
their raw value unchanged.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, List

from supertrunfo.features.card import Card
from supertrunfo.utils.math import safe_inverse


class Attribute(IntEnum):
    """Menu numbering of the comparable attributes."""

    POPULATION = 1
    AREA = 2
    GDP = 3
    LANDMARKS = 4
    DENSITY = 5
    GDP_PER_CAPITA = 6


@dataclass(frozen=True)
class AttributeSpec:
    """Display name, value accessor and scoring direction for one attribute."""

    name: str
    accessor: Callable[[Card], float]
    lower_is_better: bool = False


ATTRIBUTES: Dict[Attribute, AttributeSpec] = {
    Attribute.POPULATION: AttributeSpec("Population", lambda c: float(c.population)),
    Attribute.AREA: AttributeSpec("Area", lambda c: c.area_km2),
    Attribute.GDP: AttributeSpec("GDP", lambda c: c.gdp_billions),
    Attribute.LANDMARKS: AttributeSpec("Tourist Attractions", lambda c: float(c.landmark_count)),
    Attribute.DENSITY: AttributeSpec("Population Density", lambda c: c.density, lower_is_better=True),
    Attribute.GDP_PER_CAPITA: AttributeSpec("GDP per Capita", lambda c: c.gdp_per_capita),
}

LOWER_IS_BETTER_NOTE = "lower is better"


def display_name(attr: Attribute) -> str:
    return ATTRIBUTES[attr].name


def base_value(card: Card, attr: Attribute) -> float:
    """Raw or derived value of attr on card, untransformed."""
    return ATTRIBUTES[attr].accessor(card)


def score_value(card: Card, attr: Attribute) -> float:
    """Value used for scoring: 1/x (0.0 when x <= 0) for lower-is-better attributes, else x."""
    value = base_value(card, attr)
    if ATTRIBUTES[attr].lower_is_better:
        return safe_inverse(value)
    return value


def menu_lines() -> List[str]:
    """One "<n> - <name>" line per attribute in menu order."""
    lines = []
    for attr in Attribute:
        spec = ATTRIBUTES[attr]
        line = f"{int(attr)} - {spec.name}"
        if spec.lower_is_better:
            line += f" ({LOWER_IS_BETTER_NOTE})"
        lines.append(line)
    return lines


def parse_attribute(value: int) -> Attribute:
    """Menu number to Attribute; ValueError outside 1-6."""
    try:
        return Attribute(value)
    except ValueError:
        raise ValueError(f"attribute must be between {int(min(Attribute))} and {int(max(Attribute))}, got {value}") from None
